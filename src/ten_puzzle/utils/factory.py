"""
Factory functions for creating games and digit sources.
"""

from typing import Optional, Sequence

import numpy as np

from ten_puzzle.board.board_state import DigitSource, random_digit_source
from ten_puzzle.board.game import TenGame
from ten_puzzle.utils.config import Config, DEFAULT_CONFIG


def create_digit_source(config: Config = DEFAULT_CONFIG) -> DigitSource:
    """Digit source seeded from the config (unseeded when seed is None)."""
    return random_digit_source(config.seed)


def create_game(
    config: Config = DEFAULT_CONFIG,
    board: Optional[Sequence[int]] = None,
) -> TenGame:
    """
    Create a game from a config.

    Args:
        config: Seed and scoring settings
        board: Optional starting board of 16 digits; random when omitted

    Returns:
        Configured game instance
    """
    initial = None if board is None else np.asarray(board, dtype=np.int8)
    return TenGame(
        board=initial,
        digit_source=create_digit_source(config),
        gain_score=config.gain_score,
    )
