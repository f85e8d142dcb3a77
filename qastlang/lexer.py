"""Lexer for QasT.

QasT source is line oriented. Blank lines and lines whose trimmed text starts
with ``#`` are skipped wherever they appear. The first remaining line must be
the header ``new qas``; every line after it must start with the ``q.`` prefix.
The text following the prefix is scanned on its own with a combined regular
expression of named groups, and each match yields a :class:`Token` tagged
with its line and with a column counted from the start of that text.

A single ``EOF`` token, placed on the last physical line, ends the stream.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math
import re

from qastlang.exceptions import HeaderError, LexError, PrefixError

HEADER = "new qas"
PREFIX = "q."

KEYWORDS = frozenset({
    "print",
    "set",
    "input",
    "if",
    "elif",
    "else",
    "end",
    "loop",
    "while",
    "fn",
    "return",
})

ESCAPES = {"n": "\n", "t": "\t"}


class Token:
    """
    Represents a lexical token with a type, value and source position.
    """
    def __init__(self, type_, value, line, column, file, end_column=None):
        """
        Initialize a new token.

        Parameters:
            type_ (str): The token type.
            value (Any): The token value.
            line (int): 1-based source line.
            column (int): 1-based column of the first character.
            file (str): File identifier used in diagnostics.
            end_column (int): Column just past the last character.
        """
        self.type = type_
        self.value = value
        self.line = line
        self.column = column
        self.file = file
        self.end_column = end_column if end_column is not None else column

    def __eq__(self, other) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (
            self.type, self.value, self.line, self.column, self.file, self.end_column
        ) == (
            other.type, other.value, other.line, other.column, other.file, other.end_column
        )

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.value!r}, line={self.line}, column={self.column})"


statement_specification: list[tuple[str, str]] = [
    # Whitespace
    ('SKIP',          r'\s+'),

    # Literals
    ('STRING',        r'"(?:[^"\\]|\\.)*"|\'(?:[^\'\\]|\\.)*\''),
    ('UNTERMINATED',  r'["\']'),
    ('NUMBER',        r'[0-9][0-9.]*'),

    # Identifiers and keywords
    ('NAME',          r'[A-Za-z_][A-Za-z0-9_]*'),

    # Operators and punctuation, two-character forms first
    ('OP',            r'==|!=|>=|<=|&&|\|\||[+\-*/%><=(){}\[\],.]'),

    # Miscellaneous
    ('MISMATCH',      r'.'),
]

STATEMENT_REGEX = re.compile(
    '|'.join(f'(?P<{name}>{pattern})' for name, pattern in statement_specification),
    re.DOTALL,
)


def _unescape(body: str) -> str:
    """
    Decode ``\\n`` and ``\\t``; any other escaped character stands for itself.
    """
    return re.sub(
        r'\\(.)',
        lambda m: ESCAPES.get(m.group(1), m.group(1)),
        body,
        flags=re.DOTALL,
    )


def _to_float(text: str) -> float:
    """
    Value of a numeric literal. Text like ``1.2.3`` is not a number: NaN.
    """
    try:
        return float(text)
    except ValueError:
        return math.nan


def tokenize_statement(text: str, line: int, file: str) -> list[Token]:
    """
    Tokenize the text that follows the ``q.`` prefix of one line.

    Parameters:
        text (str): The post-prefix text.
        line (int): The physical line the text came from.
        file (str): File identifier used in diagnostics.

    Returns:
        list[Token]: Tokens whose columns are relative to ``text``.

    Raises:
        LexError: On an unexpected character or an unterminated string.
    """
    tokens = []
    for match_obj in STATEMENT_REGEX.finditer(text):
        kind = match_obj.lastgroup
        value = match_obj.group()
        column = match_obj.start() + 1
        end_column = match_obj.end() + 1

        if kind == 'SKIP':
            continue
        if kind == 'UNTERMINATED':
            raise LexError('Unterminated string literal', file, line, column)
        if kind == 'MISMATCH':
            raise LexError(f"Unexpected character '{value}'", file, line, column)

        if kind == 'STRING':
            tokens.append(Token('STRING', _unescape(value[1:-1]), line, column, file, end_column))
        elif kind == 'NUMBER':
            tokens.append(Token('NUMBER', _to_float(value), line, column, file, end_column))
        elif kind == 'NAME':
            type_ = value.upper() if value in KEYWORDS else 'IDENT'
            tokens.append(Token(type_, value, line, column, file, end_column))
        else:
            tokens.append(Token('OP', value, line, column, file, end_column))
    return tokens


def tokenize(code: str, file: str = '<stdin>') -> list[Token]:
    """
    Convert QasT source code into a list of tokens.

    Parameters:
        code (str): The source code to tokenize.
        file (str): File identifier used in diagnostics.

    Returns:
        list[Token]: The tokens of every executable line followed by ``EOF``.

    Raises:
        HeaderError: If the first effective line is not the header.
        PrefixError: If a later effective line lacks the ``q.`` prefix.
        LexError: If a statement cannot be tokenized.
    """
    lines = re.split(r'\r?\n', code)
    tokens: list[Token] = []
    header_found = False

    for line_num, raw in enumerate(lines, start=1):
        trimmed = raw.strip()
        if not trimmed or trimmed.startswith('#'):
            continue

        if not header_found:
            if trimmed != HEADER:
                raise HeaderError(
                    'Missing QasT header (new qas).',
                    file,
                    line_num,
                    1,
                    hint=f'First non-empty line must be: {HEADER}',
                )
            header_found = True
            continue

        if not trimmed.startswith(PREFIX):
            column = len(raw) - len(raw.lstrip()) + 1
            raise PrefixError("Executable lines must start with 'q.'.", file, line_num, column)

        statement = raw[raw.index(PREFIX) + len(PREFIX):]
        tokens.extend(tokenize_statement(statement, line_num, file))

    tokens.append(Token('EOF', None, len(lines), 1, file))
    return tokens
