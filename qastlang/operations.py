"""Shared definitions for AST operators.

The parser stores one of these members on every unary and binary node and
the interpreter dispatches on them. Each value is the operator's source text,
so ``Op(token.value)`` maps an ``OP`` token straight to its member.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of supported operators.
    """

    # Arithmetic
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"

    # Comparison
    EQ = "=="
    NE = "!="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="

    # Boolean
    NOT = "!"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


EQUALITY_OPS = (Op.EQ, Op.NE)
COMPARISON_OPS = (Op.GT, Op.LT, Op.GE, Op.LE)
ADDITIVE_OPS = (Op.ADD, Op.SUB)
MULTIPLICATIVE_OPS = (Op.MUL, Op.DIV, Op.MOD)
UNARY_OPS = (Op.NOT, Op.SUB)


__all__ = [
    "Op",
    "EQUALITY_OPS",
    "COMPARISON_OPS",
    "ADDITIVE_OPS",
    "MULTIPLICATIVE_OPS",
    "UNARY_OPS",
]
