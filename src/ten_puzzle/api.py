"""
Public API for the make-10 engine.

Usage:
    from ten_puzzle import check_infix, apply_if_match, new_board

    board = new_board()
    if check_infix("(1 + 4) * (3 - 1)") is Verdict.TEN:
        result = apply_if_match(board, "(1 + 4) * (3 - 1)")
"""

from __future__ import annotations

from typing import List, Sequence

from ten_puzzle.board import (
    MatchResult,
    TenGame,
    apply_if_match,
    find_matching_area,
    new_board,
    random_digit_source,
    solvable_areas,
)
from ten_puzzle.core import Result, Verdict
from ten_puzzle.formula import (
    check_formula,
    check_infix,
    evaluate_postfix,
    is_solvable,
    solve,
    to_infix,
    to_postfix,
    validate_shape,
)


def solve_infix(digits: Sequence[int]) -> List[str]:
    """
    Solutions for `digits`, rendered as infix for display.

    The printer is heuristic, so a rendering is kept only when it still makes
    10 when read back as infix. Repeated renderings keep their first position.
    """
    seen = set()
    rendered = []
    for postfix in solve(digits):
        text = to_infix(postfix)
        if text in seen or check_infix(text) is not Verdict.TEN:
            continue
        seen.add(text)
        rendered.append(text)
    return rendered


__all__ = [
    "validate_shape",
    "evaluate_postfix",
    "to_postfix",
    "to_infix",
    "apply_if_match",
    "check_formula",
    "check_infix",
    "solve",
    "solve_infix",
    "is_solvable",
    "find_matching_area",
    "solvable_areas",
    "new_board",
    "random_digit_source",
    "TenGame",
    "MatchResult",
    "Result",
    "Verdict",
]
