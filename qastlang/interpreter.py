"""Interpreter.

This is a tree-walk interpreter for programs produced by the parser. It runs
the statements of a program once, in order, and returns the value of the
first ``return`` it reaches (or ``None``).

1. Execution Model
Statements are executed via `execute()` and `exec_statement()`, expressions
are evaluated by `eval_expr()`. Both dispatch on the node's dataclass with a
``match`` statement.

2. Environment
The interpreter owns an `Environment`: a stack of frames whose global frame
is seeded with the ``print`` builtin. ``set`` and ``input`` bind in the
innermost frame; identifiers are resolved innermost first.

3. Control Flow
``return`` ends the whole pass. ``if``, ``loop``, ``while`` and ``fn`` are
parsed as headers only and do nothing when executed. Statement kinds the
interpreter does not know are skipped.

4. Input
``input`` is the only statement that waits on the outside world. It calls
the interpreter's line reader, which blocks until a full line is available.

5. Error Handling
Undefined variables raise `UndefinedVariableError` positioned at the
identifier. Arithmetic never fails: operands are converted with `to_number`
and anything without a numeric value becomes NaN. An operator or expression
node the interpreter does not recognise means the parser and interpreter
disagree, and raises `InternalError`.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math
from typing import Callable, Optional

from qastlang.environment import Environment
from qastlang.exceptions import (
    InternalError,
    QastRuntimeError,
    ReturnControlFlow,
    TypeMismatchError,
    UnknownOperationError,
)
from qastlang.nodes import (
    BinaryExpression,
    ExprStatement,
    FunctionDef,
    Grouping,
    Identifier,
    IfStatement,
    InputStatement,
    LoopStatement,
    NumberLiteral,
    PrintStatement,
    Program,
    ReturnStatement,
    SetStatement,
    StringLiteral,
    UnaryExpression,
    WhileStatement,
)
from qastlang.operations import Op
from qastlang.values import is_truthy, same_kind, strict_equals, to_display, to_number, to_text


def builtin_print(*values) -> None:
    """
    The ``print`` builtin: write values separated by spaces to stdout.
    """
    print(*(to_display(value) for value in values))


builtin_print.__qast_name__ = "print"


class Interpreter:
    """Tree-walk interpreter for QasT."""

    def __init__(
        self,
        file: str = '<stdin>',
        trace: bool = False,
        read_line: Optional[Callable[[str], str]] = None,
    ):
        """
        Initialize the interpreter.

        Parameters:
            file (str): File identifier used in runtime errors.
            trace (bool): Print one ``[trace]`` line per executed statement.
            read_line (callable): Blocking reader for ``input``; takes the
                prompt and returns one line without its newline.
        """
        self.file = file
        self.trace = trace
        self.read_line = read_line if read_line is not None else input
        self.env = Environment({"print": builtin_print})

    @property
    def vars(self) -> dict:
        """
        The global frame.
        """
        return self.env.globals

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def execute(self, program: Program):
        """
        Execute every statement of ``program`` in order.

        Returns:
            The value of the first ``return`` statement reached, else None.
        """
        try:
            for stmt in program.body:
                self.exec_statement(stmt)
        except ReturnControlFlow as ret:
            return ret.value
        return None

    def exec_statement(self, stmt) -> None:
        """
        Execute a single statement.

        Raises:
            ReturnControlFlow: When a ``return`` statement is executed.
        """
        if self.trace:
            print(f"[trace] {type(stmt).__name__}")

        match stmt:
            case PrintStatement(argument=argument):
                value = self.eval_expr(argument)
                printer = self.env.globals.get("print")
                if not callable(printer):
                    raise self._mismatch(stmt, "The 'print' binding is not a function")
                printer(value)

            case SetStatement(name=name, value=value_node):
                self.env.set(name, self.eval_expr(value_node))

            case InputStatement(name=name, prompt=prompt):
                self.env.set(name, self.read_input(name, prompt, stmt))

            case ExprStatement(expr=expr_node):
                self.eval_expr(expr_node)

            case ReturnStatement(argument=argument):
                value = self.eval_expr(argument) if argument is not None else None
                raise ReturnControlFlow(value)

            case IfStatement() | LoopStatement() | WhileStatement() | FunctionDef():
                # Header-only statements: their bodies are always empty.
                pass

            case _:
                pass

    def read_input(self, name: str, prompt: Optional[str], stmt) -> str:
        """
        Block until the line reader returns one line of text.
        """
        try:
            return self.read_line(prompt or '')
        except EOFError as e:
            raise QastRuntimeError(
                f"Input closed while reading '{name}'",
                self.file,
                stmt.loc.start.line,
                stmt.loc.start.column,
            ) from e

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------

    def eval_expr(self, node):
        """
        Recursively evaluate an expression node and return its value.

        Raises:
            UndefinedVariableError: If an identifier is bound in no frame.
            InternalError: If the node or its operator is not recognised.
        """
        match node:
            case NumberLiteral(value=value) | StringLiteral(value=value):
                return value

            case Identifier(name=name, loc=loc):
                return self.env.get(name, loc, self.file)

            case Grouping(expression=inner):
                return self.eval_expr(inner)

            case UnaryExpression(operator=operator, argument=argument):
                operand = self.eval_expr(argument)
                return self.eval_unary(node, operator, operand)

            case BinaryExpression(operator=operator, left=left, right=right):
                lhs = self.eval_expr(left)
                rhs = self.eval_expr(right)
                return self.eval_binary(node, operator, lhs, rhs)

        raise InternalError(f"Invalid expression node: {node!r}")

    def eval_unary(self, node, operator, operand):
        match operator:
            case Op.SUB:
                return -to_number(operand)
            case Op.NOT:
                return not is_truthy(operand)
            case _:
                raise UnknownOperationError(operator)

    def eval_binary(self, node, operator, lhs, rhs):
        match operator:
            case Op.ADD:
                if isinstance(lhs, str) or isinstance(rhs, str):
                    return to_text(lhs) + to_text(rhs)
                return to_number(lhs) + to_number(rhs)
            case Op.SUB:
                return to_number(lhs) - to_number(rhs)
            case Op.MUL:
                return to_number(lhs) * to_number(rhs)
            case Op.DIV:
                return _divide(to_number(lhs), to_number(rhs))
            case Op.MOD:
                return _remainder(to_number(lhs), to_number(rhs))
            case Op.EQ:
                return strict_equals(lhs, rhs)
            case Op.NE:
                return not strict_equals(lhs, rhs)
            case Op.GT | Op.LT | Op.GE | Op.LE:
                # Values of different kinds are unordered.
                if not same_kind(lhs, rhs):
                    return False
                match operator:
                    case Op.GT:
                        return lhs > rhs
                    case Op.LT:
                        return lhs < rhs
                    case Op.GE:
                        return lhs >= rhs
                    case _:
                        return lhs <= rhs
            case _:
                raise UnknownOperationError(operator)

    def _mismatch(self, node, message: str) -> TypeMismatchError:
        return TypeMismatchError(message, self.file, node.loc.start.line, node.loc.start.column)


def _divide(lhs: float, rhs: float) -> float:
    """
    IEEE-754 division: a zero divisor gives an infinity or NaN.
    """
    if rhs == 0:
        if lhs == 0 or math.isnan(lhs):
            return math.nan
        return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)
    return lhs / rhs


def _remainder(lhs: float, rhs: float) -> float:
    """
    Truncating remainder: the result takes the sign of ``lhs``.
    """
    if rhs == 0 or math.isinf(lhs) or math.isnan(lhs) or math.isnan(rhs):
        return math.nan
    return math.fmod(lhs, rhs)


def create_evaluator(
    trace: bool = False,
    read_line: Optional[Callable[[str], str]] = None,
    file: str = '<stdin>',
) -> Interpreter:
    """
    Create a fresh interpreter with only ``print`` bound.
    """
    return Interpreter(file, trace=trace, read_line=read_line)


def run(program: Program, evaluator: Interpreter):
    """
    Run ``program`` on ``evaluator`` and return its final value, if any.
    """
    return evaluator.execute(program)
