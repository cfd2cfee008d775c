"""
TenGame - one make-10 board with its version and score.

Board layout (flat int8, row-major):
     0  1  2  3
     4  5  6  7
     8  9 10 11
    12 13 14 15
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from ten_puzzle.board.areas import BOARD_SIDE, BOARD_SIZE, ScoringArea
from ten_puzzle.board.board_state import (
    DIGIT_MAX,
    DIGIT_MIN,
    BoardState,
    DigitSource,
    new_board,
    random_digit_source,
)
from ten_puzzle.board.matcher import MatchResult, apply_if_match, solvable_areas

# Score awarded for each consumed formula
GAIN_SCORE = 10


class TenGame:
    """A single-board make-10 round."""

    __slots__ = ('state', 'score', 'digit_source', 'gain_score')

    def __init__(
        self,
        board: Optional[np.ndarray] = None,
        digit_source: Optional[DigitSource] = None,
        gain_score: int = GAIN_SCORE,
    ):
        self.digit_source = digit_source or random_digit_source()
        if board is None:
            board = new_board(self.digit_source)
        self.state = BoardState(np.asarray(board, dtype=np.int8).copy())
        if self.state.board.shape != (BOARD_SIZE,):
            raise ValueError(
                f"Board must have {BOARD_SIZE} cells, got shape {self.state.board.shape}"
            )
        cells = self.state.board
        if np.any((cells < DIGIT_MIN) | (cells > DIGIT_MAX)):
            raise ValueError(f"Board cells must be digits 1-9, got {cells.tolist()}")
        self.score = 0
        self.gain_score = gain_score

    def game_id(self) -> str:
        return "ten_puzzle"

    def deep_clone(self) -> "TenGame":
        g = TenGame.__new__(TenGame)
        g.state = self.state.copy()
        g.score = self.score
        g.digit_source = self.digit_source
        g.gain_score = self.gain_score
        return g

    def get_state(self) -> BoardState:
        return self.state

    def set_state(self, board_state: BoardState) -> None:
        self.state = board_state

    def apply_formula(self, formula: str) -> MatchResult:
        """
        Try a player's infix formula against the board.

        On success the matching area is regenerated, the board version is
        bumped and gain_score is added to the score.
        """
        result = apply_if_match(self.state.board, formula, self.digit_source)
        if result.area is not None:
            self.state.version += 1
            self.score += self.gain_score
        return result

    def solvable_areas(self) -> List[ScoringArea]:
        return solvable_areas(self.state.board)

    def is_stuck(self) -> bool:
        """True if no scoring area can currently make 10."""
        return not self.solvable_areas()

    def state_string(self) -> str:
        grid = self.state.board.reshape(BOARD_SIDE, BOARD_SIDE)
        lines = ["╭───┬───┬───┬───╮"]
        for i in range(BOARD_SIDE):
            row = "│ " + " │ ".join(str(int(v)) for v in grid[i]) + " │"
            lines.append(row)
            if i < BOARD_SIDE - 1:
                lines.append("├───┼───┼───┼───┤")
        lines.append("╰───┴───┴───┴───╯")
        return "\n".join(lines)
