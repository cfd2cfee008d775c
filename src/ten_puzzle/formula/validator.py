"""
Structural validation of the postfix surface form.

Rules are checked in order and the first failure is reported:
    1. exactly FORMULA_LENGTH characters
    2. only digits 1-9 and + - * /
    3. exactly OPERAND_COUNT digits
    4. the token shape is one of valid_shapes()
"""

from __future__ import annotations

from ten_puzzle.core.types import (
    DIGITS,
    FORMULA_LENGTH,
    OPERAND_COUNT,
    OPERAND_MARKER,
    OPERATOR_MARKER,
    OPERATORS,
    ErrorKind,
    Result,
)
from ten_puzzle.formula.shapes import is_valid_shape

_ALLOWED = frozenset(DIGITS + OPERATORS)


def token_shape(formula: str) -> str:
    """Map digits to 'x' and operators to 'o'. Other characters map to '?'."""
    markers = []
    for ch in formula:
        if ch in DIGITS:
            markers.append(OPERAND_MARKER)
        elif ch in OPERATORS:
            markers.append(OPERATOR_MARKER)
        else:
            markers.append("?")
    return "".join(markers)


def validate_shape(formula: str) -> Result:
    """Check that `formula` is a legal 4-digit, 3-operator postfix formula."""
    if len(formula) != FORMULA_LENGTH:
        return Result.failure(
            ErrorKind.SHAPE,
            f"expected {FORMULA_LENGTH} characters, got {len(formula)}",
        )

    bad = sorted({ch for ch in formula if ch not in _ALLOWED})
    if bad:
        return Result.failure(
            ErrorKind.SHAPE, f"disallowed character(s): {''.join(bad)!r}"
        )

    digit_count = sum(1 for ch in formula if ch in DIGITS)
    if digit_count != OPERAND_COUNT:
        return Result.failure(
            ErrorKind.SHAPE,
            f"expected {OPERAND_COUNT} digits, got {digit_count}",
        )

    shape = token_shape(formula)
    if not is_valid_shape(shape):
        return Result.failure(ErrorKind.SHAPE, f"illegal token shape {shape}")

    return Result.success()
