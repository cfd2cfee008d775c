"""
Tests for ten_puzzle.api

Tests the infix rendering of solver output.
"""

import pytest

from ten_puzzle.api import check_infix, solve_infix
from ten_puzzle.core.types import Verdict


class TestSolveInfix:
    """solve_infix() tests."""

    @pytest.mark.parametrize("digits", [[1, 1, 2, 5], [5, 5, 5, 5], [1, 1, 5, 8]])
    def test_every_rendering_makes_ten(self, digits):
        """Misprinted nested divisions are filtered out."""
        rendered = solve_infix(digits)
        assert rendered
        assert [s for s in rendered if check_infix(s) is not Verdict.TEN] == []

    def test_no_duplicates(self):
        rendered = solve_infix([1, 1, 2, 5])
        assert len(rendered) == len(set(rendered))

    def test_nested_division_not_printed_flat(self):
        """1 / (1 / 2) * 5 would print as '1 / 1 / 2 * 5', which is 2.5."""
        assert "1 / 1 / 2 * 5" not in solve_infix([1, 1, 2, 5])

    def test_first_is_plain_sum(self):
        assert solve_infix([4, 3, 2, 1])[0] == "1 + 2 + 3 + 4"

    def test_unsolvable_is_empty(self):
        assert solve_infix([1, 1, 1, 1]) == []
