"""
Ten Puzzle - verification engine for the "make-10" number game.

A player picks four digits from a 4x4 board and combines them with
+ - * / so the result is exactly 10. This package checks such formulas,
converts between infix and postfix notation, and regenerates the board
area a winning formula used.

Quick Start:
    from ten_puzzle import check_formula, check_infix, TenGame

    check_formula("1234+++")           # Verdict.TEN
    check_infix("(9 - 1) + 8 / 4")     # Verdict.TEN

    game = TenGame()
    result = game.apply_formula("(9 - 1) + 8 / 4")

Modules:
    core     - Verdicts, error kinds, Result, shared constants
    formula  - Shape validation, postfix evaluation, notation conversion, solver
    board    - Scoring areas, area matcher, board state and game
    utils    - Configuration and factories
"""

from ten_puzzle.api import (
    validate_shape,
    evaluate_postfix,
    to_postfix,
    to_infix,
    apply_if_match,
    check_formula,
    check_infix,
    solve,
    solve_infix,
    is_solvable,
    find_matching_area,
    solvable_areas,
    new_board,
    random_digit_source,
    TenGame,
    MatchResult,
)

from ten_puzzle.core import Result, Verdict, ErrorKind, FormulaError

__version__ = "1.0.0"

__all__ = [
    # Main API
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
    # Types
    "Result",
    "Verdict",
    "ErrorKind",
    "FormulaError",
]
