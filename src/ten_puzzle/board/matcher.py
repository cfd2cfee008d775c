"""
Scoring-area matcher.

When a formula makes 10, the sorted multiset of its digits is compared with
the sorted values of every scoring area in scan order. The first area that
matches is regenerated in place; later matches are left alone.
"""

from __future__ import annotations

import logging
import re
from typing import List, MutableSequence, NamedTuple, Optional, Sequence

import numpy as np

from ten_puzzle.board.areas import AREA_INDEX, BOARD_SIZE, SCORING_AREAS, ScoringArea
from ten_puzzle.board.board_state import DigitSource, draw_digit, random_digit_source
from ten_puzzle.core.types import OPERAND_COUNT, Verdict
from ten_puzzle.formula.evaluator import check_infix
from ten_puzzle.formula.solver import is_solvable

logger = logging.getLogger(__name__)

_DIGIT = re.compile(r"[1-9]")


class MatchResult(NamedTuple):
    """
    Outcome of apply_if_match.

    input is "" when the formula was consumed, otherwise the original formula.
    area is the regenerated area, or None when nothing changed.
    """
    board: MutableSequence[int]
    input: str
    area: Optional[ScoringArea] = None


def formula_digits(formula: str) -> List[int]:
    """Digits 1-9 appearing in the formula text, sorted ascending."""
    return sorted(int(d) for d in _DIGIT.findall(formula))


def _area_values(board: Sequence[int]) -> np.ndarray:
    """(14, 4) array of each area's board values, sorted per area."""
    if len(board) != BOARD_SIZE:
        raise ValueError(f"Board must have {BOARD_SIZE} cells, got {len(board)}")
    return np.sort(np.asarray(board)[AREA_INDEX], axis=1)


def find_matching_area(
    board: Sequence[int], digits: Sequence[int]
) -> Optional[ScoringArea]:
    """First area (scan order) whose sorted values equal sorted `digits`."""
    values = _area_values(board)
    if len(digits) != OPERAND_COUNT:
        return None

    hits = np.flatnonzero(np.all(values == np.sort(digits), axis=1))
    if hits.size == 0:
        return None
    return SCORING_AREAS[int(hits[0])]


def regenerate_area(
    board: MutableSequence[int], area: ScoringArea, digit_source: DigitSource
) -> None:
    """
    Replace every cell in `area` with an independent fresh digit.

    All digits are drawn before any cell is written, so a failing source
    leaves the board untouched.
    """
    digits = [draw_digit(digit_source) for _ in area.indices]
    for index, digit in zip(area.indices, digits):
        board[index] = digit


def apply_if_match(
    board: MutableSequence[int],
    formula: str,
    digit_source: Optional[DigitSource] = None,
) -> MatchResult:
    """
    Consume a winning infix formula against the board.

    Args:
        board: 16 cells, mutated in place when an area matches.
        formula: Infix formula as typed by the player.
        digit_source: Zero-argument callable returning digits 1-9.
            Defaults to an unseeded NumPy generator.

    Returns:
        MatchResult(board, "", area) when an area was regenerated,
        otherwise MatchResult(board, formula, None) with board untouched.
    """
    if len(board) != BOARD_SIZE:
        raise ValueError(f"Board must have {BOARD_SIZE} cells, got {len(board)}")

    verdict = check_infix(formula)
    if verdict is not Verdict.TEN:
        logger.debug("Formula %r rejected: %s", formula, verdict)
        return MatchResult(board, formula)

    digits = formula_digits(formula)
    logger.debug("Numbers found in expression: %s", digits)

    area = find_matching_area(board, digits)
    if area is None:
        logger.debug("No scoring area matches %s", digits)
        return MatchResult(board, formula)

    regenerate_area(board, area, digit_source or random_digit_source())
    logger.debug("Regenerated %s", area.name)
    return MatchResult(board, "", area)


def solvable_areas(board: Sequence[int]) -> List[ScoringArea]:
    """Areas whose current digits can make 10."""
    values = _area_values(board)
    return [
        area
        for area, row in zip(SCORING_AREAS, values)
        if is_solvable([int(v) for v in row])
    ]
