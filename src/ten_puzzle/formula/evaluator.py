"""
Postfix stack machine and result classification.

Arithmetic runs in numpy float64 so that division by zero produces inf/nan
instead of raising; classify_result() then reports those as NOT_INTEGER.
"""

from __future__ import annotations

import math
from typing import Iterable, List

import numpy as np

from ten_puzzle.core.types import (
    TARGET,
    TOLERANCE,
    ErrorKind,
    Result,
    Verdict,
    is_number,
)
from ten_puzzle.formula.converter import to_postfix
from ten_puzzle.formula.validator import validate_shape


def _apply(op: str, first: np.float64, second: np.float64) -> np.float64:
    if op == "+":
        return first + second
    if op == "-":
        return first - second
    if op == "*":
        return first * second
    return first / second


def evaluate_postfix(tokens: Iterable[str]) -> Result:
    """
    Evaluate a postfix token sequence.

    `tokens` may be a list of tokens or a postfix string (one token per
    character). Operands are non-negative integer literals.

    Returns:
        Result whose value is a float, or an EVAL error on stack underflow,
        an unknown token, or leftover operands.
    """
    stack: List[np.float64] = []

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for position, token in enumerate(tokens):
            if is_number(token):
                stack.append(np.float64(int(token)))
                continue

            if token not in ("+", "-", "*", "/"):
                return Result.failure(
                    ErrorKind.EVAL, f"unknown token {token!r} at {position}"
                )

            if len(stack) < 2:
                return Result.failure(
                    ErrorKind.EVAL,
                    f"operator {token!r} at {position} needs two operands",
                )

            second = stack.pop()
            first = stack.pop()
            stack.append(_apply(token, first, second))

    if len(stack) != 1:
        return Result.failure(
            ErrorKind.EVAL, f"expected one value on the stack, found {len(stack)}"
        )

    return Result.success(float(stack[0]))


def classify_result(value: float) -> Verdict:
    """Classify an evaluated value as TEN, NOT_TEN or NOT_INTEGER."""
    if not math.isfinite(value):
        return Verdict.NOT_INTEGER

    rounded = round(value)
    if abs(value - rounded) > TOLERANCE:
        return Verdict.NOT_INTEGER

    return Verdict.TEN if rounded == TARGET else Verdict.NOT_TEN


def check_formula(formula: str) -> Verdict:
    """Validate and evaluate a postfix formula in one step."""
    if not validate_shape(formula).ok:
        return Verdict.INVALID

    result = evaluate_postfix(formula)
    if not result.ok:
        return Verdict.INVALID

    return classify_result(result.value)


def check_infix(formula: str) -> Verdict:
    """
    Check a human-typed infix formula.

    The formula is converted to postfix once and the derived postfix goes
    through the same shape validation as a postfix submission, so multi-digit
    literals and anything but four digits and three operators are rejected.
    """
    postfix = to_postfix(formula)
    if not postfix.ok:
        return Verdict.INVALID
    return check_formula(postfix.value)
