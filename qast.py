"""
QasT Language Interpreter

This is the main entry point for the QasT interpreter.

Workflow:
1. The source script is read from the file given on the command line.
2. The Lexer checks the ``new qas`` header and the ``q.`` line prefixes and
   tokenizes every executable line.
3. The Parser processes tokens into an AST following the language grammar.
4. The Interpreter walks the AST, executing statements in order.

Set ``QASTDEBUG`` in the environment to dump the tokens and AST before the
program runs.
"""
import argparse
import os
import sys

from qastlang.exceptions import QastError
from qastlang.interpreter import create_evaluator, run
from qastlang.lexer import tokenize
from qastlang.parser import parse_program

USAGE = """\
Usage: qast [options] <file.qast>

Options:
  --repl          Start interactive REPL (not yet implemented)
  --check         Parse and statically check only
  --trace         Trace executed statements"""


def print_usage(file=None):
    """
    Print usage.
    """
    print(USAGE, file=file or sys.stdout)


def debug_print_tokens_ast(tokens, ast):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n")
    print(tokens)
    print("\nAST:\n")
    print(ast)
    print(" ")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="qast", add_help=False, allow_abbrev=False)
    parser.add_argument('--repl', action='store_true')
    parser.add_argument('--check', action='store_true')
    parser.add_argument('--trace', action='store_true')
    parser.add_argument('-h', '--help', action='store_true')
    parser.add_argument('files', nargs='*')
    return parser


def run_script(script_name: str, check: bool = False, trace: bool = False) -> int:
    """
    Run a QasT script and return the process exit status.
    """
    file_path = os.path.abspath(script_name)
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        print(f"Error: cannot read {file_path}: {e.strerror}", file=sys.stderr)
        return 1

    try:
        tokens = tokenize(code, file_path)
        ast = parse_program(tokens, file_path)

        if os.environ.get('QASTDEBUG'):
            debug_print_tokens_ast(tokens, ast)

        if check:
            print(f"OK: {file_path}")
            return 0

        evaluator = create_evaluator(trace=trace, file=file_path)
        run(ast, evaluator)
    except QastError as e:
        where = e.file or file_path
        if e.line is None:
            print(f"Error: {e.kind}: {e.message}", file=sys.stderr)
        else:
            print(f"Error: {e.message} at {where}:{e.line}:{e.column}", file=sys.stderr)
        if e.hint:
            print(f"Hint: {e.hint}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130
    return 0


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: print usage and return 1.
    - ``-h`` or ``--help``: print usage and return 0.
    - ``--repl``: report that the REPL is not implemented and return 1.
    - Unknown ``--`` options are ignored.
    - Otherwise run (or with ``--check`` only parse) the first file given.
    """
    args = argv[1:]
    if not args:
        print_usage()
        return 1

    options, unknown = build_arg_parser().parse_known_args(args)
    if options.help:
        print_usage()
        return 0
    # Unrecognised --flags are ignored; anything else names a file.
    files = options.files + [arg for arg in unknown if not arg.startswith('--')]
    if options.repl:
        print("REPL not implemented yet.", file=sys.stderr)
        return 1
    if not files:
        print("Error: no input file.", file=sys.stderr)
        print_usage(sys.stderr)
        return 1

    return run_script(files[0], check=options.check, trace=options.trace)
