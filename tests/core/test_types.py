"""
Tests for ten_puzzle.core.types

Tests verdicts, Result, and shared constants.
"""

import pytest

from ten_puzzle.core.types import (
    ErrorKind,
    FormulaError,
    Result,
    Verdict,
    FORMULA_LENGTH,
    OPERAND_COUNT,
    OPERATOR_COUNT,
    PRECEDENCE,
    is_number,
    is_operator,
)


class TestConstants:
    """Tests for module constants."""

    def test_formula_length(self):
        """Four operands and three operators make seven tokens."""
        assert OPERAND_COUNT == 4
        assert OPERATOR_COUNT == 3
        assert FORMULA_LENGTH == 7

    def test_precedence_levels(self):
        """+ - bind looser than * /."""
        assert PRECEDENCE["+"] == PRECEDENCE["-"] == 1
        assert PRECEDENCE["*"] == PRECEDENCE["/"] == 2


class TestVerdict:
    """Verdict enum tests."""

    @pytest.mark.parametrize("verdict, text", [
        (Verdict.TEN, "10"),
        (Verdict.NOT_TEN, "Not 10"),
        (Verdict.NOT_INTEGER, "Not an integer"),
        (Verdict.INVALID, "Invalid input"),
    ])
    def test_text(self, verdict, text):
        """Verdicts render as the user-facing messages."""
        assert str(verdict) == text
        assert Verdict(text) is verdict


class TestResult:
    """Result value-or-error tests."""

    def test_success(self):
        """Success carries a value and no error."""
        r = Result.success(3.0)
        assert r.ok
        assert r.value == 3.0
        assert r.error is None

    def test_success_without_value(self):
        """Pure checks succeed with value None."""
        assert Result.success().ok
        assert Result.success().value is None

    def test_failure(self):
        """Failure carries a FormulaError."""
        r = Result.failure(ErrorKind.PARSE, "unbalanced '('")
        assert not r.ok
        assert r.value is None
        assert r.error == FormulaError(ErrorKind.PARSE, "unbalanced '('")

    def test_error_str(self):
        """Errors render with their kind."""
        err = FormulaError(ErrorKind.SHAPE, "illegal token shape ooxxxxo")
        assert str(err) == "shape error: illegal token shape ooxxxxo"


class TestTokenHelpers:
    """is_number / is_operator tests."""

    @pytest.mark.parametrize("token, expected", [
        ("7", True),
        ("12", True),
        ("0", True),
        ("", False),
        ("+", False),
        ("1.5", False),
        ("²", False),
    ])
    def test_is_number(self, token, expected):
        assert is_number(token) is expected

    @pytest.mark.parametrize("token", ["+", "-", "*", "/"])
    def test_is_operator(self, token):
        assert is_operator(token)

    @pytest.mark.parametrize("token", ["(", ")", "^", "1", ""])
    def test_not_operator(self, token):
        assert not is_operator(token)
