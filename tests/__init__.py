"""
Test suite for yardcalc.

This package contains tests for the calculator including:
- Unit tests for the lexer, shunting-yard and evaluator stages
- Tests for the Calculator pipeline
- Tests for the command-line driver
"""

__version__ = "0.1.0"
