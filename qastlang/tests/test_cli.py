"""Tests for the qast command line."""

import subprocess
import sys
from pathlib import Path

from qast import main

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def write_script(tmp_path, text, name="prog.qast"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_no_arguments_prints_usage(capsys):
    assert main(["qast"]) == 1
    assert "Usage: qast" in capsys.readouterr().out


def test_help(capsys):
    assert main(["qast", "--help"]) == 0
    assert "--trace" in capsys.readouterr().out


def test_repl_is_not_implemented(capsys):
    assert main(["qast", "--repl"]) == 1
    assert "REPL not implemented yet." in capsys.readouterr().err


def test_missing_file_argument(capsys):
    assert main(["qast", "--trace"]) == 1
    assert "Error: no input file." in capsys.readouterr().err


def test_run_script(tmp_path, capsys):
    path = write_script(tmp_path, "new qas\nq.set x = 2\nq.print x * 21\n")
    assert main(["qast", str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["42"]


def test_unknown_flags_are_ignored(tmp_path, capsys):
    path = write_script(tmp_path, "new qas\nq.print 'ran'\n")
    assert main(["qast", "--fast", str(path), "--verbose"]) == 0
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["ran"]
    assert captured.err == ""


def test_unknown_flag_alone_is_no_input(capsys):
    assert main(["qast", "--fast"]) == 1
    assert "Error: no input file." in capsys.readouterr().err


def test_check_only_parses(tmp_path, capsys):
    path = write_script(tmp_path, "new qas\nq.print undefined_name\n")
    assert main(["qast", "--check", str(path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("OK: ")
    assert str(path) in out


def test_trace_flag(tmp_path, capsys):
    path = write_script(tmp_path, "new qas\nq.print 1\n")
    assert main(["qast", "--trace", str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["[trace] PrintStatement", "1"]


def test_error_report_with_hint(tmp_path, capsys):
    path = write_script(tmp_path, "\nq.print 1\n")
    assert main(["qast", str(path)]) == 1
    err = capsys.readouterr().err.splitlines()
    assert err == [
        f"Error: Missing QasT header (new qas). at {path}:2:1",
        "Hint: First non-empty line must be: new qas",
    ]


def test_runtime_error_report(tmp_path, capsys):
    path = write_script(tmp_path, "new qas\nq.print 1\nq.print y\n")
    assert main(["qast", str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["1"]
    assert captured.err.strip() == f"Error: Undefined variable 'y' at {path}:3:7"


def test_unreadable_file(tmp_path, capsys):
    assert main(["qast", str(tmp_path / "missing.qast")]) == 1
    assert "cannot read" in capsys.readouterr().err


def test_debug_dump(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("QASTDEBUG", "1")
    path = write_script(tmp_path, "new qas\nq.print 1\n")
    assert main(["qast", str(path)]) == 0
    out = capsys.readouterr().out
    assert "Tokens:" in out
    assert "AST:" in out


def test_script_entry_point(tmp_path):
    path = write_script(tmp_path, "new qas\n# comment\nq.print (2 + 3) * 4\n")
    result = subprocess.run(
        [sys.executable, str(PROJECT_ROOT / "qast.py"), str(path)],
        capture_output=True,
        text=True,
        cwd=PROJECT_ROOT,
        check=False,
    )
    assert result.returncode == 0
    assert result.stdout.splitlines() == ["20"]
