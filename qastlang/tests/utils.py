"""
Utility functions shared across QasT tests.
"""
from qastlang.interpreter import Interpreter, create_evaluator, run
from qastlang.lexer import tokenize
from qastlang.nodes import Location, Position
from qastlang.parser import parse_program


def parse_source(source: str):
    """
    Tokenize and parse source code and return the program.
    """
    tokens = tokenize(source, "<test>")
    return parse_program(tokens, "<test>")


def run_source(source: str, **options) -> tuple[Interpreter, object]:
    """
    Run source code and return the interpreter and the program's result.
    """
    interpreter = create_evaluator(file="<test>", **options)
    result = run(parse_source(source), interpreter)
    return interpreter, result


def loc(start_line: int, start_col: int, end_line: int, end_col: int) -> Location:
    """
    Shorthand for building a node location.
    """
    return Location(Position(start_line, start_col), Position(end_line, end_col))
