"""
Legal postfix token shapes.

A postfix formula with n operands and n - 1 binary operators is well formed
iff, reading left to right, every operator finds at least two values on the
stack and the stack ends holding exactly one value. Abstracting each token to
a marker (x = operand, o = operator) leaves C(n-1) distinct shapes, the
Catalan numbers. For the 4-operand puzzle that is C3 = 5:

    xxxxooo  xxxoxoo  xxxooxo  xxoxxoo  xxoxoxo
"""

from __future__ import annotations

from functools import lru_cache
from typing import List, Tuple

from ten_puzzle.core.types import (
    OPERAND_COUNT,
    OPERAND_MARKER,
    OPERATOR_MARKER,
)


@lru_cache(maxsize=None)
def valid_shapes(operands: int = OPERAND_COUNT) -> Tuple[str, ...]:
    """
    Enumerate every legal marker string for `operands` operands.

    Depth-first, trying an operand before an operator at each position, so
    the shapes come out in the order listed in the module docstring.
    """
    if operands < 1:
        raise ValueError(f"operands must be >= 1, got {operands}")

    shapes: List[str] = []

    def extend(prefix: str, pushed: int, depth: int) -> None:
        if pushed == operands and depth == 1:
            shapes.append(prefix)
            return
        if pushed < operands:
            extend(prefix + OPERAND_MARKER, pushed + 1, depth + 1)
        if depth >= 2:
            extend(prefix + OPERATOR_MARKER, pushed, depth - 1)

    extend("", 0, 0)
    return tuple(shapes)


def is_valid_shape(shape: str, operands: int = OPERAND_COUNT) -> bool:
    return shape in valid_shapes(operands)
