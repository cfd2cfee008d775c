"""
Infix to postfix conversion (shunting-yard).

Unlike the postfix surface form, infix input may contain whitespace,
parentheses, and multi-digit integer literals.
"""

from __future__ import annotations

import re
from typing import List

from ten_puzzle.core.types import PRECEDENCE, ErrorKind, Result, is_operator

_WHITESPACE = re.compile(r"\s+")
_INFIX_CHARS = re.compile(r"[0-9+\-*/()]*")


def tokenize_infix(infix: str) -> Result:
    """
    Split an infix string into tokens.

    Whitespace is dropped and consecutive digits form one operand.

    Returns:
        Result holding a list of tokens, or a PARSE error for any character
        outside digits, + - * / and parentheses.
    """
    expr = _WHITESPACE.sub("", infix)
    if not _INFIX_CHARS.fullmatch(expr):
        bad = sorted({ch for ch in expr if not _INFIX_CHARS.fullmatch(ch)})
        return Result.failure(ErrorKind.PARSE, f"invalid token(s): {''.join(bad)!r}")

    tokens: List[str] = []
    i = 0
    while i < len(expr):
        j = i + 1
        if expr[i].isdigit():
            while j < len(expr) and expr[j].isdigit():
                j += 1
        tokens.append(expr[i:j])
        i = j

    return Result.success(tokens)


def to_postfix_tokens(infix: str) -> Result:
    """Convert infix to a list of postfix tokens."""
    tokenized = tokenize_infix(infix)
    if not tokenized.ok:
        return tokenized

    output: List[str] = []
    operators: List[str] = []

    for token in tokenized.value:
        if token[0].isdigit():
            output.append(token)
        elif token == "(":
            operators.append(token)
        elif token == ")":
            while operators and operators[-1] != "(":
                output.append(operators.pop())
            if not operators:
                return Result.failure(ErrorKind.PARSE, "unbalanced ')'")
            operators.pop()
        else:
            # Left-associative: equal precedence pops too.
            while (
                operators
                and is_operator(operators[-1])
                and PRECEDENCE[operators[-1]] >= PRECEDENCE[token]
            ):
                output.append(operators.pop())
            operators.append(token)

    while operators:
        op = operators.pop()
        if op == "(":
            return Result.failure(ErrorKind.PARSE, "unbalanced '('")
        output.append(op)

    return Result.success(output)


def to_postfix(infix: str) -> Result:
    """Convert infix to a postfix string (tokens concatenated)."""
    result = to_postfix_tokens(infix)
    if not result.ok:
        return result
    return Result.success("".join(result.value))
