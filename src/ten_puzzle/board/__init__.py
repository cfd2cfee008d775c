"""
Board module - the 4x4 board, its scoring areas, and the area matcher.
"""

from ten_puzzle.board.areas import (
    BOARD_SIDE,
    BOARD_SIZE,
    SCORING_AREAS,
    ScoringArea,
    get_rows,
    get_cols,
    get_diagonals,
    get_blocks,
)
from ten_puzzle.board.board_state import (
    BoardState,
    DigitSource,
    new_board,
    random_digit_source,
)
from ten_puzzle.board.matcher import (
    MatchResult,
    apply_if_match,
    find_matching_area,
    formula_digits,
    solvable_areas,
)
from ten_puzzle.board.game import TenGame, GAIN_SCORE

__all__ = [
    "BOARD_SIDE",
    "BOARD_SIZE",
    "SCORING_AREAS",
    "ScoringArea",
    "get_rows",
    "get_cols",
    "get_diagonals",
    "get_blocks",
    "BoardState",
    "DigitSource",
    "new_board",
    "random_digit_source",
    "MatchResult",
    "apply_if_match",
    "find_matching_area",
    "formula_digits",
    "solvable_areas",
    "TenGame",
    "GAIN_SCORE",
]
