"""
Shared test fixtures for ten_puzzle tests.

Design principles:
- Boards are written out cell by cell so matches are easy to audit
- Randomness is replaced by explicit digit sequences
- Minimal, focused fixtures
"""

from typing import Callable, Iterable

import numpy as np
import pytest


# =============================================================================
# Digit Source Fixtures
# =============================================================================

@pytest.fixture
def digit_sequence() -> Callable[[Iterable[int]], Callable[[], int]]:
    """Build a deterministic digit source from a fixed sequence."""
    def make(digits: Iterable[int]) -> Callable[[], int]:
        return iter(digits).__next__
    return make


@pytest.fixture
def eights(digit_sequence) -> Callable[[], int]:
    """Digit source yielding 64 eights."""
    return digit_sequence([8] * 64)


# =============================================================================
# Board Fixtures
# =============================================================================

@pytest.fixture
def sample_board() -> np.ndarray:
    """
    1 2 3 4
    9 9 9 9
    5 5 5 5
    7 7 7 7
    """
    return np.array([
        1, 2, 3, 4,
        9, 9, 9, 9,
        5, 5, 5, 5,
        7, 7, 7, 7,
    ], dtype=np.int8)


@pytest.fixture
def overlap_board() -> np.ndarray:
    """
    Row 0 and column 0 both hold {1, 2, 3, 4}.

    1 2 3 4
    2 6 6 6
    3 6 6 6
    4 6 6 6
    """
    return np.array([
        1, 2, 3, 4,
        2, 6, 6, 6,
        3, 6, 6, 6,
        4, 6, 6, 6,
    ], dtype=np.int8)


@pytest.fixture
def block_board() -> np.ndarray:
    """
    Only the top-right block holds {1, 2, 3, 4}.

    6 6 1 2
    6 6 3 4
    6 6 6 6
    6 6 6 6
    """
    return np.array([
        6, 6, 1, 2,
        6, 6, 3, 4,
        6, 6, 6, 6,
        6, 6, 6, 6,
    ], dtype=np.int8)


@pytest.fixture
def stuck_board() -> np.ndarray:
    """Every area is 1111, which cannot make 10."""
    return np.ones(16, dtype=np.int8)
