"""Statement parsing utilities for QasT.

These functions operate on a `qastlang.parser.parser.Parser` instance and
handle the statement forms of the language. Each statement is selected by
its leading keyword; anything else is parsed as a bare expression.

The control-flow statements (``if``, ``loop``, ``while``, ``fn``) are parsed
as headers closed by ``end``. Their bodies are not parsed and stay empty.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from qastlang.nodes import (
    ExprStatement,
    FunctionDef,
    IfStatement,
    IfTest,
    InputStatement,
    LoopStatement,
    PrintStatement,
    ReturnStatement,
    SetStatement,
    Statement,
    WhileStatement,
)

if TYPE_CHECKING:
    from qastlang.parser import Parser


def parse_statement(parser: 'Parser') -> Statement:
    """
    Parse a single statement.

    Args:
        parser: The parser instance.

    Returns:
        Statement: the AST node.
    """
    match parser.peek().type:
        case 'PRINT':
            return parser.parse_print()
        case 'SET':
            return parser.parse_set()
        case 'INPUT':
            return parser.parse_input()
        case 'IF':
            return parser.parse_if()
        case 'LOOP':
            return parser.parse_loop()
        case 'WHILE':
            return parser.parse_while()
        case 'FN':
            return parser.parse_fn()
        case 'RETURN':
            return parser.parse_return()
        case _:
            expr_node = parser.expr()
            return ExprStatement(expr_node, expr_node.loc)


def parse_print(parser: 'Parser') -> PrintStatement:
    """
    Parse a 'print' statement.

    Syntax:
        print <expression>
    """
    start = parser.eat('PRINT')
    argument = parser.expr()
    return PrintStatement(argument, parser.span(start, argument))


def parse_set(parser: 'Parser') -> SetStatement:
    """
    Parse a 'set' statement.

    Syntax:
        set <identifier> = <expression>
    """
    start = parser.eat('SET')
    id_tok = parser.eat('IDENT')
    parser.eat('OP', '=')
    value = parser.expr()
    return SetStatement(id_tok.value, value, parser.span(start, value))


def parse_input(parser: 'Parser') -> InputStatement:
    """
    Parse an 'input' statement.

    Syntax:
        input <identifier> [<string>]
    """
    start = parser.eat('INPUT')
    id_tok = parser.eat('IDENT')
    prompt_tok = parser.match('STRING')
    if prompt_tok is None:
        return InputStatement(id_tok.value, None, parser.span(start, id_tok))
    return InputStatement(id_tok.value, prompt_tok.value, parser.span(start, prompt_tok))


def parse_if(parser: 'Parser') -> IfStatement:
    """
    Parse an 'if' header.

    Syntax:
        if <condition> end
    """
    start = parser.eat('IF')
    test = parser.expr()
    end = parser.eat('END')
    return IfStatement((IfTest(test),), parser.span(start, end))


def parse_loop(parser: 'Parser') -> LoopStatement:
    """
    Parse a 'loop' header.

    Syntax:
        loop <count> end
    """
    start = parser.eat('LOOP')
    count = parser.expr()
    end = parser.eat('END')
    return LoopStatement(count, parser.span(start, end))


def parse_while(parser: 'Parser') -> WhileStatement:
    """
    Parse a 'while' header.

    Syntax:
        while <condition> end
    """
    start = parser.eat('WHILE')
    test = parser.expr()
    end = parser.eat('END')
    return WhileStatement(test, parser.span(start, end))


def parse_fn(parser: 'Parser') -> FunctionDef:
    """
    Parse a function definition header.

    Syntax:
        fn <name> <param>* end

    Parameters are bare identifiers, collected until the first token that
    is not one.
    """
    start = parser.eat('FN')
    name_tok = parser.eat('IDENT')
    params = []
    while (param := parser.match('IDENT')) is not None:
        params.append(param.value)
    end = parser.eat('END')
    return FunctionDef(name_tok.value, tuple(params), parser.span(start, end))


def parse_return(parser: 'Parser') -> ReturnStatement:
    """
    Parse a 'return' statement.

    Syntax:
        return [<expression>]

    The expression is left out only when 'return' is the last token.
    """
    start = parser.eat('RETURN')
    if parser.check('EOF'):
        return ReturnStatement(None, parser.span(start))
    argument = parser.expr()
    return ReturnStatement(argument, parser.span(start, argument))
