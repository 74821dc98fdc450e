"""
Unit tests for the Calculator pipeline.
"""

import math

import pytest
from yardcalc import Calculator, LexerError, ParenthesisError
from yardcalc.core import CalculationResult, format_postfix
from yardcalc.core.calculator import ERROR_EVALUATION, ERROR_LEXICAL, ERROR_STRUCTURAL
from yardcalc.utils.settings import Settings


class TestCalculatorBasic:
    """Tests for successful calculations."""

    def test_calculate(self, calculator):
        """Test a simple calculation."""
        result = calculator.calculate("(1 + 2) * 3")
        assert isinstance(result, CalculationResult)
        assert result.success
        assert result.value == 9.0
        assert result.error_message is None
        assert result.error_kind is None

    def test_result_carries_postfix(self, calculator):
        """Test that the evaluated postfix sequence is reported."""
        result = calculator.calculate("2 ^ 3 ^ 2")
        assert format_postfix(result.postfix) == "2 3 2 ^ ^"
        assert result.value == 512.0

    @pytest.mark.parametrize("source,expected", [
        ("1 + 2 * 3 - 4 / 2", 5.0),
        ("2 ^ 2 ^ 3", 256.0),
        ("-3 ^ 2", 9.0),
        ("2 * 3 % 4", 6.0),
        ("(2 * 3) % 4", 2.0),
        ("1 - -1", 2.0),
        ("2 x (3 + 1)", 8.0),
        ("1_000 + 0.5", 1000.5),
    ])
    def test_precedence_table(self, calculator, source, expected):
        """Test values under the calculator's precedence ranking."""
        assert calculator.calculate(source).value == pytest.approx(expected)

    def test_whitespace_idempotence(self, calculator):
        """Test that surrounding whitespace does not change the value."""
        assert calculator.calculate("1+2").value == calculator.calculate(" 1 + 2 ").value

    def test_division_by_zero_is_a_value(self, calculator):
        """Test that 1/0 succeeds with infinity."""
        result = calculator.calculate("1/0")
        assert result.success
        assert result.value == math.inf

    def test_long_run_of_zeros(self, calculator):
        """Test that a literal padded with thousands of zeros still evaluates."""
        result = calculator.calculate("0" * 5000 + " + 1")
        assert result.success
        assert result.value == 1.0

    def test_reuse(self, calculator):
        """Test that one calculator handles many expressions."""
        assert calculator.calculate("1 +").error_kind == ERROR_EVALUATION
        assert calculator.calculate("-2").value == -2.0
        assert calculator.calculate("3.1.4").error_kind == ERROR_LEXICAL
        assert calculator.calculate("4 - 1").value == 3.0

    def test_lexer_buffer_is_cleared(self, calculator):
        """Test that the shared lexer is emptied after each expression."""
        calculator.calculate("1 + 2")
        assert calculator.lexer.tokens == []
        calculator.calculate("1 $ 2")
        assert calculator.lexer.tokens == []

    def test_settings_reach_lexer(self):
        """Test that custom multiplication aliases are honoured."""
        calculator = Calculator(Settings(multiply_aliases=["x"]))
        assert calculator.calculate("2x3").value == 6.0
        assert calculator.calculate("2X3").error_kind == ERROR_LEXICAL


class TestCalculatorErrors:
    """Tests for each class of failure."""

    def test_lexical_error(self, calculator):
        """Test that a bad literal is a lexical failure."""
        result = calculator.calculate("3.1.4")
        assert not result.success
        assert result.value is None
        assert result.error_kind == ERROR_LEXICAL
        assert result.error_message.startswith("Lexical error:")

    def test_very_long_literal(self, calculator):
        """Test that an over-long literal is a lexical failure, not a crash."""
        result = calculator.calculate("9" * 5000)
        assert not result.success
        assert result.error_kind == ERROR_LEXICAL
        assert "out of range" in result.error_message

    @pytest.mark.parametrize("source", [")1+2", "(1+2", "1+2)*3"])
    def test_structural_error(self, calculator, source):
        """Test that unbalanced parentheses give an empty, failed result."""
        result = calculator.calculate(source)
        assert not result.success
        assert result.value is None
        assert result.postfix == []
        assert result.error_kind == ERROR_STRUCTURAL
        assert result.error_message.startswith("Structural error:")

    def test_evaluation_error(self, calculator):
        """Test that malformed postfix is an evaluation failure."""
        result = calculator.calculate("1 2")
        assert not result.success
        assert result.error_kind == ERROR_EVALUATION
        assert format_postfix(result.postfix) == "1 2"

    def test_empty_expression(self, calculator):
        """Test that blank input is an evaluation failure."""
        result = calculator.calculate("   ")
        assert result.error_kind == ERROR_EVALUATION

    def test_balanced_and_unbalanced_differ(self, calculator):
        """Test that dropping only the opening parenthesis is an error."""
        assert calculator.calculate("(1+2)*3").value == 9.0
        assert calculator.calculate("1+2)*3").error_kind == ERROR_STRUCTURAL


class TestCalculatorStages:
    """Tests for the intermediate stage helpers."""

    def test_tokenize(self, calculator):
        """Test the tokenize stage."""
        tokens = calculator.tokenize("1 + 2")
        assert [t.value for t in tokens] == ["1", "+", "2"]

    def test_tokenize_raises(self, calculator):
        """Test that tokenize propagates lexer errors."""
        with pytest.raises(LexerError):
            calculator.tokenize("1 ? 2")

    def test_to_postfix(self, calculator):
        """Test the reorder stage."""
        assert format_postfix(calculator.to_postfix("-3 ^ 2")) == "3 m 2 ^"

    def test_to_postfix_raises(self, calculator):
        """Test that to_postfix propagates parenthesis errors."""
        with pytest.raises(ParenthesisError):
            calculator.to_postfix("(1")

    def test_format_postfix_empty(self):
        """Test rendering an empty sequence."""
        assert format_postfix([]) == ""


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
