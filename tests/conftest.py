"""
Pytest configuration and fixtures for yardcalc tests.
"""

import pytest


@pytest.fixture
def lexer():
    """Provide a Lexer instance."""
    from yardcalc.frontend import Lexer
    return Lexer()


@pytest.fixture
def shunting_yard():
    """Provide a ShuntingYard instance."""
    from yardcalc.frontend import ShuntingYard
    return ShuntingYard()


@pytest.fixture
def evaluator():
    """Provide an Evaluator instance."""
    from yardcalc.backend import Evaluator
    return Evaluator()


@pytest.fixture
def calculator():
    """Provide a Calculator instance."""
    from yardcalc import Calculator
    return Calculator()
