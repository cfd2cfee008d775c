"""
Configuration and defaults.
"""

from typing import Optional

from ten_puzzle.board.game import GAIN_SCORE


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

class Config:
    """Round configuration with sensible defaults."""

    def __init__(
        self,
        seed: Optional[int] = None,
        gain_score: int = GAIN_SCORE,
        show_hints: bool = False,
    ):
        if gain_score < 0:
            raise ValueError(f"gain_score must be >= 0, got {gain_score}")

        self.seed = seed
        self.gain_score = gain_score
        self.show_hints = show_hints


# Default configuration
DEFAULT_CONFIG = Config()
