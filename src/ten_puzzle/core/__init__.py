"""
Core module - fundamental types and constants.

This module provides the building blocks used throughout the puzzle engine.
"""

from ten_puzzle.core.types import (
    Verdict,
    ErrorKind,
    FormulaError,
    Result,
    TARGET,
    TOLERANCE,
    OPERAND_COUNT,
    OPERATOR_COUNT,
    FORMULA_LENGTH,
    DIGITS,
    OPERATORS,
    PRECEDENCE,
    is_operator,
    is_number,
)

__all__ = [
    # Types
    "Verdict",
    "ErrorKind",
    "FormulaError",
    "Result",
    # Constants
    "TARGET",
    "TOLERANCE",
    "OPERAND_COUNT",
    "OPERATOR_COUNT",
    "FORMULA_LENGTH",
    "DIGITS",
    "OPERATORS",
    "PRECEDENCE",
    # Functions
    "is_operator",
    "is_number",
]
