"""
Core types, constants, and data structures.

This module contains the fundamental types shared by the formula and board
layers:
- Verdict: the four user-facing outcomes of checking a formula
- FormulaError / ErrorKind: structural failures
- Result: discriminated value-or-error returned by every core function
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Dict, NamedTuple, Optional


# ╔═════════════════════════════════════════════════════════════════════════════╗
# ║                           PUZZLE CONSTANTS                                  ║
# ║                                                                             ║
# ║  A formula uses OPERAND_COUNT digits and OPERAND_COUNT - 1 binary           ║
# ║  operators, so its postfix surface form is 2 * OPERAND_COUNT - 1 long.      ║
# ╚═════════════════════════════════════════════════════════════════════════════╝

TARGET = 10
TOLERANCE = 1e-9

OPERAND_COUNT = 4
OPERATOR_COUNT = OPERAND_COUNT - 1
FORMULA_LENGTH = OPERAND_COUNT + OPERATOR_COUNT

DIGITS = "123456789"
OPERATORS = "+-*/"

# ─── Operator precedence ──────────────────────────────────────────────────────

PRECEDENCE: Dict[str, int] = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
}

# Token-shape markers
OPERAND_MARKER = "x"
OPERATOR_MARKER = "o"

# ──────────────────────────────────────────────────────────────────────────────


class Verdict(Enum):
    """Outcome of checking a formula against the target."""

    TEN = "10"
    NOT_TEN = "Not 10"
    NOT_INTEGER = "Not an integer"
    INVALID = "Invalid input"

    def __str__(self) -> str:
        return self.value


class ErrorKind(Enum):
    SHAPE = auto()  # wrong length / character / arity / token shape
    EVAL = auto()   # stack underflow or leftover operands
    PARSE = auto()  # unbalanced parentheses or invalid infix token


class FormulaError(NamedTuple):
    """A recoverable structural failure."""

    kind: ErrorKind
    reason: str

    def __str__(self) -> str:
        return f"{self.kind.name.lower()} error: {self.reason}"


class Result(NamedTuple):
    """
    Value-or-error returned by the core.

    Exactly one of `value` / `error` is meaningful: when `error` is None the
    call succeeded and `value` holds its output (None for pure checks).
    """

    value: Any = None
    error: Optional[FormulaError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Any = None) -> "Result":
        return cls(value, None)

    @classmethod
    def failure(cls, kind: ErrorKind, reason: str) -> "Result":
        return cls(None, FormulaError(kind, reason))


def is_operator(token: str) -> bool:
    return token in PRECEDENCE


def is_number(token: str) -> bool:
    """True for a non-empty run of ASCII digits."""
    return token.isascii() and token.isdigit()
