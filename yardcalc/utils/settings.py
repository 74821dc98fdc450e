"""
Configuration settings for yardcalc.

This module contains default configuration values and settings used
by the lexer and the command-line driver.
"""

from dataclasses import dataclass
from typing import List


@dataclass
class Settings:
    """Calculator settings and configuration.

    Attributes:
        prompt: Prompt printed before each line in the interactive loop
        exit_command: Exact line that ends the interactive loop
        result_banner: Line printed before each result
        multiply_aliases: Letters accepted as synonyms for '*'
        verbose: Whether to print stage diagnostics
    """
    prompt: str = "Enter an mathematical expression ('exit' to stop): "
    exit_command: str = "exit"
    result_banner: str = "That evaluates out to:"
    multiply_aliases: List[str] = None
    verbose: bool = False

    def __post_init__(self):
        if self.multiply_aliases is None:
            self.multiply_aliases = ["x", "X"]


# Global default settings instance
DEFAULT_SETTINGS = Settings()
