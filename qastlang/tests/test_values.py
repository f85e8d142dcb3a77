"""Tests for value display, truthiness and equality."""

import math

from qastlang.interpreter import builtin_print
from qastlang.values import (
    format_number,
    is_number,
    is_truthy,
    same_kind,
    strict_equals,
    to_display,
    to_number,
    to_text,
    type_name,
)


def test_display():
    assert to_display(14.0) == "14"
    assert to_display(-3.0) == "-3"
    assert to_display(0.1) == "0.1"
    assert to_display(math.inf) == "Infinity"
    assert to_display(-math.inf) == "-Infinity"
    assert to_display(math.nan) == "NaN"
    assert to_display(True) == "true"
    assert to_display(False) == "false"
    assert to_display(None) == "null"
    assert to_display("text") == "text"
    assert to_display(builtin_print) == "<builtin print>"


def test_truthiness():
    for value in (0.0, math.nan, "", None, False):
        assert not is_truthy(value)
    for value in (1.0, -0.5, "0", " ", True, builtin_print):
        assert is_truthy(value)


def test_booleans_are_not_numbers():
    assert is_number(1.0)
    assert not is_number(True)
    assert type_name(True) == "boolean"
    assert type_name(2.0) == "number"
    assert type_name(None) == "null"


def test_strict_equality():
    assert strict_equals(1.0, 1.0)
    assert not strict_equals(1.0, "1")
    assert not strict_equals(True, 1.0)
    assert not strict_equals(None, 0.0)
    assert strict_equals(None, None)
    assert not strict_equals(math.nan, math.nan)


def test_format_number_switches_to_exponent_form():
    assert format_number(1e20) == "100000000000000000000"
    assert format_number(1e21) == "1e+21"
    assert format_number(1.5e22) == "1.5e+22"
    assert format_number(0.000001) == "0.000001"
    assert format_number(1e-7) == "1e-7"
    assert format_number(1.5e-7) == "1.5e-7"
    assert format_number(-2.5e-8) == "-2.5e-8"
    assert format_number(123.456) == "123.456"


def test_negative_zero_display():
    assert to_display(-0.0) == "-0"
    assert to_display(0.0) == "0"
    assert to_text(-0.0) == "0"


def test_to_number():
    assert to_number(2.5) == 2.5
    assert to_number(True) == 1.0
    assert to_number(False) == 0.0
    assert to_number(None) == 0.0
    assert math.isnan(to_number("12"))
    assert math.isnan(to_number(builtin_print))


def test_same_kind():
    assert same_kind(1.0, 2.0)
    assert same_kind("a", "b")
    assert same_kind(True, False)
    assert not same_kind(1.0, "1")
    assert not same_kind(True, 1.0)
    assert not same_kind(None, None)
