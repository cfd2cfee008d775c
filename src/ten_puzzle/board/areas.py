"""
Scoring areas of the 4x4 board.

Areas are index sets into the flattened (row-major) board, derived from a
4x4 grid of cell indices with NumPy slicing. Scan order is fixed:
rows, columns, diagonals, 2x2 blocks.
"""

from __future__ import annotations

from typing import List, NamedTuple, Tuple

import numpy as np

BOARD_SIDE = 4
BOARD_SIZE = BOARD_SIDE * BOARD_SIDE
BLOCK_SIDE = 2


class ScoringArea(NamedTuple):
    """A named set of four board indices."""

    name: str
    indices: Tuple[int, ...]


def in_bounds(grid: np.ndarray, r: int, c: int) -> bool:
    """Return True if (r, c) is inside the grid."""
    rows, cols = grid.shape
    return 0 <= r < rows and 0 <= c < cols


def get_rows(grid: np.ndarray) -> List[np.ndarray]:
    """Row extraction. Slices are copied to avoid shared memory issues."""
    return [row.copy() for row in grid]


def get_cols(grid: np.ndarray) -> List[np.ndarray]:
    """Column extraction using slicing on grid.T."""
    return [col.copy() for col in grid.T]


def get_diagonals(grid: np.ndarray) -> List[np.ndarray]:
    """
    Main and anti diagonal.
    grid.diagonal() is a *view* in most cases, so we explicitly copy it.
    """
    major = grid.diagonal().copy()
    minor = np.fliplr(grid).diagonal().copy()
    return [major, minor]


def get_blocks(grid: np.ndarray, side: int = BLOCK_SIDE) -> List[np.ndarray]:
    """Non-overlapping side x side blocks, row-major, each flattened."""
    rows, cols = grid.shape
    return [
        grid[r:r + side, c:c + side].ravel().copy()
        for r in range(0, rows, side)
        for c in range(0, cols, side)
        if in_bounds(grid, r + side - 1, c + side - 1)
    ]


def _build_areas() -> Tuple[ScoringArea, ...]:
    grid = np.arange(BOARD_SIZE, dtype=np.int8).reshape(BOARD_SIDE, BOARD_SIDE)

    named = (
        [(f"row {i}", line) for i, line in enumerate(get_rows(grid))]
        + [(f"column {i}", line) for i, line in enumerate(get_cols(grid))]
        + list(zip(("main diagonal", "anti diagonal"), get_diagonals(grid)))
        + list(zip(
            ("top-left block", "top-right block",
             "bottom-left block", "bottom-right block"),
            get_blocks(grid),
        ))
    )
    return tuple(
        ScoringArea(name, tuple(int(i) for i in line)) for name, line in named
    )


# Pre-computed areas (indices into the flattened 4x4 board)
SCORING_AREAS: Tuple[ScoringArea, ...] = _build_areas()

# Same areas as a (14, 4) index table for vectorized lookups
AREA_INDEX = np.array([area.indices for area in SCORING_AREAS], dtype=np.int8)
