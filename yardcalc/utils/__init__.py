"""
Utility modules for yardcalc.

This package contains configuration used throughout the calculator.
"""

from .settings import Settings, DEFAULT_SETTINGS

__all__ = [
    "Settings",
    "DEFAULT_SETTINGS",
]
