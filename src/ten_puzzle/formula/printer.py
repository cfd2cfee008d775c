"""
Postfix to infix pretty-printer.

Heuristic parenthesization: a subexpression is wrapped only when it contains
a + or - and would otherwise bind wrongly. This keeps common output tidy but
is not minimal or exact for every nesting; e.g. "12/3/" prints as "1 / 2 / 3",
which is correct, while "123//" also prints as "1 / 2 / 3", which is not.
Use the printer for display only, never as input to validation.
"""

from __future__ import annotations

from typing import List

_LOW = ("+", "-")


def _has_low(expr: str) -> bool:
    return any(op in expr for op in _LOW)


def to_infix(postfix: str) -> str:
    """Render single-character-operand postfix as spaced infix text."""
    stack: List[str] = []

    for ch in postfix:
        if ch.isdigit():
            stack.append(ch)
            continue

        right = stack.pop()
        left = stack.pop()

        if ch in ("*", "/") and _has_low(left):
            left = f"({left})"
        if ch in ("-", "*", "/") and _has_low(right):
            right = f"({right})"

        stack.append(f"{left} {ch} {right}")

    return stack[-1]
