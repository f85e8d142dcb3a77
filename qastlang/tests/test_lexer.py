"""Tests for the QasT lexer."""

import math

import pytest

from qastlang.exceptions import HeaderError, LexError, PrefixError
from qastlang.lexer import Token, tokenize


def types(tokens):
    return [tok.type for tok in tokens]


def test_header_after_blank_and_comment_lines():
    """Leading blank and comment lines are skipped before the header."""
    tokens = tokenize("\n# note\n\nnew qas\nq.print 1\n", "<test>")
    assert types(tokens) == ["PRINT", "NUMBER", "EOF"]
    assert (tokens[0].line, tokens[0].column) == (5, 1)
    assert (tokens[1].line, tokens[1].column) == (5, 7)
    assert tokens[1].value == 1.0


def test_eof_is_last_and_on_final_line():
    tokens = tokenize("new qas\nq.print 1\nq.print 2\n", "<test>")
    assert [tok.type for tok in tokens].count("EOF") == 1
    eof = tokens[-1]
    assert eof.type == "EOF"
    assert eof.value is None
    assert (eof.line, eof.column) == (4, 1)


def test_eof_line_without_trailing_newline():
    tokens = tokenize("new qas\nq.print 1", "<test>")
    assert tokens[-1].line == 2


def test_empty_source_yields_only_eof():
    tokens = tokenize("", "<test>")
    assert tokens == [Token("EOF", None, 1, 1, "<test>")]


def test_missing_header():
    with pytest.raises(HeaderError) as exc:
        tokenize("q.print 1\n", "<test>")
    err = exc.value
    assert err.kind == "HeaderError"
    assert (err.line, err.column) == (1, 1)
    assert err.file == "<test>"
    assert err.hint == "First non-empty line must be: new qas"


def test_header_must_match_exactly():
    with pytest.raises(HeaderError) as exc:
        tokenize("\n\nnew qas please\n", "<test>")
    assert exc.value.line == 3


def test_header_may_be_indented():
    tokens = tokenize("   new qas   \nq.print 1\n", "<test>")
    assert types(tokens) == ["PRINT", "NUMBER", "EOF"]


def test_line_without_prefix():
    with pytest.raises(PrefixError) as exc:
        tokenize("new qas\nprint 1\n", "<test>")
    assert exc.value.kind == "PrefixError"
    assert (exc.value.line, exc.value.column) == (2, 1)


def test_prefix_error_column_is_where_text_starts():
    with pytest.raises(PrefixError) as exc:
        tokenize("new qas\n    print 1\n", "<test>")
    assert (exc.value.line, exc.value.column) == (2, 5)


def test_comments_after_header_are_skipped():
    tokens = tokenize("new qas\n  # comment\nq.print 1\n\n# end\n", "<test>")
    assert types(tokens) == ["PRINT", "NUMBER", "EOF"]


def test_columns_are_relative_to_prefix():
    tokens = tokenize("new qas\n    q.set x = 10\n", "<test>")
    assert [(tok.type, tok.column) for tok in tokens[:-1]] == [
        ("SET", 1),
        ("IDENT", 5),
        ("OP", 7),
        ("NUMBER", 9),
    ]
    assert tokens[3].end_column == 11


def test_keywords_are_case_sensitive():
    tokens = tokenize("new qas\nq.print Print end fn return_value\n", "<test>")
    assert types(tokens) == ["PRINT", "IDENT", "END", "FN", "IDENT", "EOF"]
    assert tokens[1].value == "Print"


def test_all_keywords():
    source = "new qas\nq.print set input if elif else end loop while fn return\n"
    assert types(tokenize(source, "<test>"))[:-1] == [
        "PRINT", "SET", "INPUT", "IF", "ELIF", "ELSE", "END",
        "LOOP", "WHILE", "FN", "RETURN",
    ]


def test_operators_prefer_two_characters():
    tokens = tokenize("new qas\nq.a == b != c >= d <= e && f || g\n", "<test>")
    ops = [tok.value for tok in tokens if tok.type == "OP"]
    assert ops == ["==", "!=", ">=", "<=", "&&", "||"]


def test_single_character_operators():
    tokens = tokenize("new qas\nq.+ - * / % > < = ( ) { } [ ] , .\n", "<test>")
    ops = [tok.value for tok in tokens if tok.type == "OP"]
    assert ops == list("+-*/%><=(){}[],.")


def test_minus_is_a_separate_token():
    tokens = tokenize("new qas\nq.print -5\n", "<test>")
    assert [(tok.type, tok.value) for tok in tokens[:-1]] == [
        ("PRINT", "print"),
        ("OP", "-"),
        ("NUMBER", 5.0),
    ]


def test_decimal_numbers():
    tokens = tokenize("new qas\nq.print 3.25\n", "<test>")
    assert tokens[1].value == 3.25


def test_number_with_two_dots():
    """A malformed number is still one NUMBER token, valued NaN."""
    tokens = tokenize("new qas\nq.print 1.2.3\n", "<test>")
    assert types(tokens) == ["PRINT", "NUMBER", "EOF"]
    assert (tokens[1].line, tokens[1].column, tokens[1].end_column) == (2, 7, 12)
    assert math.isnan(tokens[1].value)


def test_string_escapes():
    tokens = tokenize('new qas\nq.print "a\\nb\\tc\\"d\\q"\n', "<test>")
    assert tokens[1].type == "STRING"
    assert tokens[1].value == 'a\nb\tc"dq'


def test_single_quoted_string():
    tokens = tokenize("new qas\nq.print 'it\\'s \"fine\"'\n", "<test>")
    assert tokens[1].value == 'it\'s "fine"'


def test_unterminated_string():
    with pytest.raises(LexError) as exc:
        tokenize('new qas\nq.print "abc\n', "<test>")
    assert exc.value.kind == "LexError"
    assert exc.value.message == "Unterminated string literal"
    assert (exc.value.line, exc.value.column) == (2, 7)


def test_trailing_backslash_is_unterminated():
    with pytest.raises(LexError):
        tokenize('new qas\nq.print "abc\\\n', "<test>")


def test_unexpected_character():
    with pytest.raises(LexError) as exc:
        tokenize("new qas\nq.print 1 @\n", "<test>")
    assert exc.value.message == "Unexpected character '@'"
    assert (exc.value.line, exc.value.column) == (2, 9)


def test_bang_alone_is_not_an_operator():
    with pytest.raises(LexError) as exc:
        tokenize("new qas\nq.print !1\n", "<test>")
    assert exc.value.column == 7


def test_crlf_line_endings():
    tokens = tokenize("new qas\r\nq.print 1\r\n", "<test>")
    assert types(tokens) == ["PRINT", "NUMBER", "EOF"]
    assert tokens[-1].line == 3


def test_tokenize_is_repeatable():
    source = "new qas\nq.set x = 'hi'\nq.print x + 1\n"
    assert tokenize(source, "a.qast") == tokenize(source, "a.qast")
