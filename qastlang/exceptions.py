"""Errors.

Every failure the QasT pipeline reports to its caller is a :class:`QastError`.
Each subclass fixes the error ``kind`` and carries the file, line and column
where the problem was detected, plus an optional hint for the user.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class QastError(Exception):
    """
    Base error for the tokenizer, parser and interpreter.
    """
    kind = "QastError"

    def __init__(self, message, file=None, line=None, column=None, hint=None):
        self.message = message
        self.file = file
        self.line = line
        self.column = column
        self.hint = hint
        super().__init__(message)

    def __str__(self) -> str:
        """
        Return the message followed by the source position, when known.
        """
        if self.line is None:
            return self.message
        return f"{self.message} at {self.file}:{self.line}:{self.column}"

    def to_dict(self) -> dict:
        """
        Return the structured error surface consumed by the command line.
        """
        return {
            "kind": self.kind,
            "message": self.message,
            "file": self.file,
            "line": self.line,
            "column": self.column,
            "hint": self.hint,
        }


class HeaderError(QastError):
    """
    Error for a missing or mismatched ``new qas`` header line.
    """
    kind = "HeaderError"


class PrefixError(QastError):
    """
    Error for an executable line that does not start with ``q.``.
    """
    kind = "PrefixError"


class LexError(QastError):
    """
    Error for unexpected characters and malformed literals.
    """
    kind = "LexError"


class ParseError(QastError):
    """
    Error for an unexpected or missing token.
    """
    kind = "ParseError"


class QastRuntimeError(QastError):
    """
    Error raised while a program is being evaluated.
    """
    kind = "RuntimeError"


class UndefinedVariableError(QastRuntimeError):
    """
    Error for undefined variables.
    """
    def __init__(self, varname, file=None, line=None, column=None):
        self.varname = varname
        super().__init__(f"Undefined variable '{varname}'", file, line, column)


class TypeMismatchError(QastRuntimeError):
    """
    Error for a value used where a function is required, such as a rebound
    ``print``.
    """


class InternalError(QastError):
    """
    Parser/interpreter mismatch. Never caused by user input.
    """
    kind = "InternalError"


class UnknownOperationError(InternalError):
    """
    Error for unknown operations.
    """
    def __init__(self, op):
        self.op = op
        super().__init__(f"Unknown operation '{op}'")


class ReturnControlFlow(Exception):
    """
    Control flow handling for return statements.
    """
    def __init__(self, value):
        self.value = value
