"""
Formula module - validation, evaluation, and notation conversion.
"""

from ten_puzzle.formula.shapes import valid_shapes, is_valid_shape
from ten_puzzle.formula.validator import validate_shape, token_shape
from ten_puzzle.formula.evaluator import (
    evaluate_postfix,
    classify_result,
    check_formula,
    check_infix,
)
from ten_puzzle.formula.converter import tokenize_infix, to_postfix, to_postfix_tokens
from ten_puzzle.formula.printer import to_infix
from ten_puzzle.formula.solver import (
    solve,
    is_solvable,
    unsolvable_combinations,
    is_impossible_combination,
    combination_key,
)

__all__ = [
    "valid_shapes",
    "is_valid_shape",
    "validate_shape",
    "token_shape",
    "evaluate_postfix",
    "classify_result",
    "check_formula",
    "check_infix",
    "tokenize_infix",
    "to_postfix",
    "to_postfix_tokens",
    "to_infix",
    "solve",
    "is_solvable",
    "unsolvable_combinations",
    "is_impossible_combination",
    "combination_key",
]
