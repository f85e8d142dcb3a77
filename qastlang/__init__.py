"""QasT language package.

The pipeline is ``tokenize`` -> ``parse_program`` -> ``run``:

    tokens = tokenize(source, "hello.qast")
    program = parse_program(tokens, "hello.qast")
    result = run(program, create_evaluator(trace=False))


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from .exceptions import (
    HeaderError,
    InternalError,
    LexError,
    ParseError,
    PrefixError,
    QastError,
    QastRuntimeError,
    TypeMismatchError,
    UndefinedVariableError,
    UnknownOperationError,
)
from .interpreter import Interpreter, create_evaluator, run
from .lexer import Token, tokenize
from .parser import Parser, parse_program

__all__ = [
    "tokenize",
    "parse_program",
    "create_evaluator",
    "run",
    "Token",
    "Parser",
    "Interpreter",
    "QastError",
    "HeaderError",
    "PrefixError",
    "LexError",
    "ParseError",
    "QastRuntimeError",
    "UndefinedVariableError",
    "TypeMismatchError",
    "InternalError",
    "UnknownOperationError",
]
