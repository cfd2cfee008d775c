"""
BoardState - board container with a version counter.

Also holds the digit-source contract: every cell on a board is a digit in
[1, 9], whether drawn at creation or on regeneration.
"""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np

from ten_puzzle.board.areas import BOARD_SIZE

DIGIT_MIN = 1
DIGIT_MAX = 9

# Zero-argument callable returning a digit in [DIGIT_MIN, DIGIT_MAX]
DigitSource = Callable[[], int]


def random_digit_source(seed: Optional[int] = None) -> DigitSource:
    """Uniform digits in [1, 9] from a NumPy generator."""
    rng = np.random.default_rng(seed)

    def draw() -> int:
        return int(rng.integers(DIGIT_MIN, DIGIT_MAX + 1))

    return draw


def draw_digit(digit_source: DigitSource) -> int:
    """Draw one digit, rejecting sources that break the [1, 9] contract."""
    value = int(digit_source())
    if not DIGIT_MIN <= value <= DIGIT_MAX:
        raise ValueError(f"Digit source returned {value}, expected 1-9")
    return value


def new_board(digit_source: Optional[DigitSource] = None) -> np.ndarray:
    """Fresh flat int8 board of BOARD_SIZE random digits."""
    source = digit_source or random_digit_source()
    return np.array(
        [draw_digit(source) for _ in range(BOARD_SIZE)], dtype=np.int8
    )


class BoardState:
    """
    Lightweight board container.

    Uses a flat int8 board, row-major:
        index = row * 4 + col, each cell a digit 1-9
    `version` starts at 1 and increases each time an area is regenerated.
    """
    __slots__ = ('board', 'version')

    def __init__(self, board: np.ndarray, version: int = 1):
        self.board = board
        self.version = version

    def copy(self) -> "BoardState":
        """Independent copy; regenerating the copy leaves this board alone."""
        return BoardState(self.board.copy(), self.version)
