"""
Main parser entry point for QasT.

This module defines the `Parser` class, which coordinates the recursive
descent parsing process. The actual parsing routines are split across
`qastlang.parser.expressions` and `qastlang.parser.statements`.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from qastlang.exceptions import ParseError
from qastlang.lexer import Token
from qastlang.nodes import Location, Position, Program

from . import expressions as _expr
from . import statements as _stmt


def _describe(tok: Token) -> str:
    """
    Token type and value as shown in parse errors, e.g. ``NUMBER 1``.
    """
    if tok.value is None:
        return tok.type
    value = tok.value
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return f"{tok.type} {value}"


class Parser:
    """QasT parser."""

    def __init__(self, tokens: list[Token], file: str = '<stdin>'):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances ending with ``EOF``.
            file (str): The name of the script.
        """
        self.tokens = tokens
        self.position = 0
        self.source_file = file

    @property
    def curr_token(self) -> Token:
        """
        The token under the cursor. Past the end this stays on ``EOF``.
        """
        if self.position < len(self.tokens):
            return self.tokens[self.position]
        return self.tokens[-1]

    def peek(self) -> Token:
        """
        Return the current token without advancing.
        """
        return self.curr_token

    def check(self, token_type: str, value=None) -> bool:
        """
        Whether the current token has the given type (and value, if given).
        """
        tok = self.curr_token
        return tok.type == token_type and (value is None or tok.value == value)

    def match(self, token_type: str, value=None) -> Token | None:
        """
        Consume and return the current token if it matches, else return None.
        """
        if self.check(token_type, value):
            tok = self.curr_token
            self.position += 1
            return tok
        return None

    def eat(self, token_type: str, value=None) -> Token:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (str): The expected token type.
            value (str): The expected token value, for ``OP`` tokens.

        Returns:
            Token: The consumed token.

        Raises:
            ParseError: If the token does not match.
        """
        tok = self.match(token_type, value)
        if tok is not None:
            return tok

        found = self.curr_token
        expected = f"{token_type}({value})" if value is not None else token_type
        raise ParseError(
            f"Expected {expected} but found {_describe(found)}",
            self.source_file,
            found.line,
            found.column,
        )

    def error(self, message: str, tok: Token) -> ParseError:
        """
        Build a parse error positioned at ``tok``.
        """
        return ParseError(message, self.source_file, tok.line, tok.column)

    @staticmethod
    def span(first, last=None) -> Location:
        """
        Location from the start of ``first`` to the end of ``last``.

        Both arguments may be tokens or nodes. Without ``last`` the span
        covers ``first`` alone.
        """
        last = first if last is None else last
        if isinstance(first, Token):
            start = Position(first.line, first.column)
        else:
            start = first.loc.start
        if isinstance(last, Token):
            end = Position(last.line, last.end_column)
        else:
            end = last.loc.end
        return Location(start, end)


    # Expression wrappers
    def primary(self):
        """
        Parse a literal, identifier or parenthesized group.
        """
        return _expr.parse_primary(self)

    def unary(self):
        """
        Parse a prefix ``!`` or ``-`` expression.
        """
        return _expr.parse_unary(self)

    def multiplicative(self):
        """
        Parse multiplication, division and remainder.
        """
        return _expr.parse_multiplicative(self)

    def additive(self):
        """
        Parse addition and subtraction.
        """
        return _expr.parse_additive(self)

    def comparison(self):
        """
        Parse a comparison expression using relational operators.
        """
        return _expr.parse_comparison(self)

    def equality(self):
        return _expr.parse_equality(self)

    def expr(self):
        """
        Parse a full expression.
        """
        return _expr.parse_expr(self)


    # Statement wrappers
    def statement(self):
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def parse_print(self):
        return _stmt.parse_print(self)

    def parse_set(self):
        return _stmt.parse_set(self)

    def parse_input(self):
        return _stmt.parse_input(self)

    def parse_if(self):
        """
        Parse an 'if' header.
        """
        return _stmt.parse_if(self)

    def parse_loop(self):
        """
        Parse a 'loop' header.
        """
        return _stmt.parse_loop(self)

    def parse_while(self):
        """
        Parse a 'while' header.
        """
        return _stmt.parse_while(self)

    def parse_fn(self):
        """
        Parse a function definition header.
        """
        return _stmt.parse_fn(self)

    def parse_return(self):
        """
        Parse a 'return' statement.
        """
        return _stmt.parse_return(self)


    def parse(self) -> Program:
        """
        Parse the full input into a program.
        """
        statements = []
        while self.curr_token.type != 'EOF':
            statements.append(self.statement())
        return Program(tuple(statements))


def parse_program(tokens: list[Token], file: str = '<stdin>') -> Program:
    """
    Parse a token list produced by `qastlang.lexer.tokenize`.
    """
    return Parser(tokens, file).parse()
