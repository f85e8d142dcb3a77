"""Abstract syntax tree for QasT.

Nodes are frozen dataclasses and every sequence field is a tuple, so a
parsed :class:`Program` cannot change after the parser returns it and two
parses of the same source compare equal.

Control-flow statements (``if``, ``loop``, ``while``, ``fn``) carry their
header only. Their bodies are always empty.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from qastlang.operations import Op


@dataclass(frozen=True)
class Position:
    line: int
    column: int


@dataclass(frozen=True)
class Location:
    """Source span from the first consumed token to the last."""
    start: Position
    end: Position


# ---- Expressions ----

@dataclass(frozen=True)
class NumberLiteral:
    value: float
    loc: Location


@dataclass(frozen=True)
class StringLiteral:
    value: str
    loc: Location


@dataclass(frozen=True)
class Identifier:
    name: str
    loc: Location


@dataclass(frozen=True)
class UnaryExpression:
    operator: Op
    argument: Expression
    loc: Location


@dataclass(frozen=True)
class BinaryExpression:
    operator: Op
    left: Expression
    right: Expression
    loc: Location


@dataclass(frozen=True)
class Grouping:
    expression: Expression
    loc: Location


Expression = Union[
    NumberLiteral,
    StringLiteral,
    Identifier,
    UnaryExpression,
    BinaryExpression,
    Grouping,
]


# ---- Statements ----

@dataclass(frozen=True)
class PrintStatement:
    argument: Expression
    loc: Location


@dataclass(frozen=True)
class SetStatement:
    name: str
    value: Expression
    loc: Location


@dataclass(frozen=True)
class InputStatement:
    name: str
    prompt: Optional[str]
    loc: Location


@dataclass(frozen=True)
class ExprStatement:
    expr: Expression
    loc: Location


@dataclass(frozen=True)
class ReturnStatement:
    argument: Optional[Expression]
    loc: Location


@dataclass(frozen=True)
class IfTest:
    test: Expression
    consequent: tuple = ()


@dataclass(frozen=True)
class IfStatement:
    tests: tuple[IfTest, ...]
    loc: Location
    alternate: None = None


@dataclass(frozen=True)
class LoopStatement:
    count: Expression
    loc: Location
    body: tuple = ()


@dataclass(frozen=True)
class WhileStatement:
    test: Expression
    loc: Location
    body: tuple = ()


@dataclass(frozen=True)
class FunctionDef:
    name: str
    params: tuple[str, ...]
    loc: Location
    body: tuple = ()


Statement = Union[
    PrintStatement,
    SetStatement,
    InputStatement,
    ExprStatement,
    ReturnStatement,
    IfStatement,
    LoopStatement,
    WhileStatement,
    FunctionDef,
]


@dataclass(frozen=True)
class Program:
    body: tuple[Statement, ...] = field(default_factory=tuple)
