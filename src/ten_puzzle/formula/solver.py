"""
Exhaustive make-10 solver.

Every candidate is a postfix formula built from:
    - a distinct ordering of the four digits
    - a choice of operator for each of the three operator slots
    - one of the legal token shapes

That is at most 24 * 64 * 5 = 7680 candidates per digit multiset, so brute
force is instant and the table of unsolvable combinations (495 multisets)
is cheap to derive once and cache.
"""

from __future__ import annotations

from functools import lru_cache
from itertools import combinations_with_replacement, permutations, product
from typing import Iterator, List, Sequence, Tuple

from ten_puzzle.core.types import (
    DIGITS,
    OPERAND_COUNT,
    OPERAND_MARKER,
    OPERATORS,
    Verdict,
)
from ten_puzzle.formula.evaluator import check_formula
from ten_puzzle.formula.shapes import valid_shapes


def combination_key(digits: Sequence[int]) -> str:
    """Sorted digit string, e.g. [4, 1, 3, 1] -> '1134'."""
    return "".join(str(d) for d in sorted(digits))


def _fill(shape: str, digits: Tuple[str, ...], ops: Tuple[str, ...]) -> str:
    digit_iter = iter(digits)
    op_iter = iter(ops)
    return "".join(
        next(digit_iter) if marker == OPERAND_MARKER else next(op_iter)
        for marker in shape
    )


def _all_digits(digits: Sequence[int]) -> bool:
    return all(len(str(d)) == 1 and str(d) in DIGITS for d in digits)


def _candidates(digits: Sequence[int]) -> Iterator[str]:
    if len(digits) != OPERAND_COUNT:
        raise ValueError(f"expected {OPERAND_COUNT} digits, got {len(digits)}")
    if not _all_digits(digits):
        raise ValueError(f"digits must be in 1-9: {list(digits)}")

    orderings = sorted(set(permutations(str(d) for d in digits)))
    for ordering in orderings:
        for ops in product(OPERATORS, repeat=OPERAND_COUNT - 1):
            for shape in valid_shapes():
                yield _fill(shape, ordering, ops)


def solve(digits: Sequence[int]) -> List[str]:
    """Return every postfix formula over `digits` that makes 10."""
    return [f for f in _candidates(digits) if check_formula(f) is Verdict.TEN]


def is_solvable(digits: Sequence[int]) -> bool:
    return any(check_formula(f) is Verdict.TEN for f in _candidates(digits))


@lru_cache(maxsize=None)
def _solvable_key(key: str) -> bool:
    return is_solvable([int(ch) for ch in key])


@lru_cache(maxsize=1)
def unsolvable_combinations() -> Tuple[str, ...]:
    """Sorted keys of every 4-digit multiset over 1-9 with no solution."""
    keys = (
        "".join(combo)
        for combo in combinations_with_replacement(DIGITS, OPERAND_COUNT)
    )
    return tuple(key for key in keys if not _solvable_key(key))


def is_impossible_combination(digits: Sequence[int]) -> bool:
    """True when no formula over `digits` makes 10."""
    if len(digits) != OPERAND_COUNT or not _all_digits(digits):
        return False
    return not _solvable_key(combination_key(digits))
