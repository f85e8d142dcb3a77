"""
Expression parsing utilities for QasT.

These functions operate on a `qastlang.parser.parser.Parser` instance and
implement the recursive descent logic for expressions, maintaining
operator precedence and left associativity.

Precedence, lowest first:
    equality        == !=
    comparison      > < >= <=
    additive        + -
    multiplicative  * / %
    unary           ! -   (prefix, stackable)
    primary         number, string, identifier, ( expression )


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING, Callable

from qastlang.nodes import (
    BinaryExpression,
    Expression,
    Grouping,
    Identifier,
    NumberLiteral,
    StringLiteral,
    UnaryExpression,
)
from qastlang.operations import (
    ADDITIVE_OPS,
    COMPARISON_OPS,
    EQUALITY_OPS,
    MULTIPLICATIVE_OPS,
    UNARY_OPS,
    Op,
)

if TYPE_CHECKING:
    from qastlang.parser import Parser


def _match_op(parser: 'Parser', ops: tuple[Op, ...]) -> Op | None:
    """
    Consume the current token if it is one of ``ops`` and return its operator.
    """
    for op in ops:
        if parser.match('OP', op.value):
            return op
    return None


def _binary_level(
    parser: 'Parser',
    ops: tuple[Op, ...],
    operand: Callable[[], Expression],
) -> Expression:
    """
    Parse one left-associative level: ``operand (op operand)*``.
    """
    result = operand()
    while (op := _match_op(parser, ops)) is not None:
        right = operand()
        result = BinaryExpression(op, result, right, parser.span(result, right))
    return result


# ---- Highest precedence ----

def parse_primary(parser: 'Parser') -> Expression:
    """Parse a literal, variable, or parenthesized expression."""
    tok = parser.peek()

    if parser.match('NUMBER'):
        return NumberLiteral(tok.value, parser.span(tok))

    if parser.match('STRING'):
        return StringLiteral(tok.value, parser.span(tok))

    if parser.match('IDENT'):
        return Identifier(tok.value, parser.span(tok))

    if parser.match('OP', '('):
        node = parser.expr()
        close = parser.eat('OP', ')')
        return Grouping(node, parser.span(tok, close))

    raise parser.error(f"Unexpected token {tok.type}", tok)


def parse_unary(parser: 'Parser') -> Expression:
    """Parse prefix '!' and '-'."""
    tok = parser.peek()
    op = _match_op(parser, UNARY_OPS)
    if op is not None:
        operand = parser.unary()
        return UnaryExpression(op, operand, parser.span(tok, operand))
    return parser.primary()


def parse_multiplicative(parser: 'Parser') -> Expression:
    """Parse multiplication, division, and remainder expressions."""
    return _binary_level(parser, MULTIPLICATIVE_OPS, parser.unary)


def parse_additive(parser: 'Parser') -> Expression:
    """Parse addition and subtraction expressions."""
    return _binary_level(parser, ADDITIVE_OPS, parser.multiplicative)


def parse_comparison(parser: 'Parser') -> Expression:
    """Parse comparison expressions (<, >, <=, >=)."""
    return _binary_level(parser, COMPARISON_OPS, parser.additive)


def parse_equality(parser: 'Parser') -> Expression:
    """Parse equality expressions (==, !=)."""
    return _binary_level(parser, EQUALITY_OPS, parser.comparison)


# ---- Entry point ----

def parse_expr(parser: 'Parser') -> Expression:
    """Parse an expression starting from the lowest-precedence operator."""
    return parser.equality()
