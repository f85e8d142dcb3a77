"""Runtime value helpers.

QasT values are plain Python objects: ``float`` for numbers, ``str`` for
strings, ``bool`` for the result of comparisons and ``!``, ``None`` for an
absent value and callables for builtins. This module holds the rules the
interpreter applies to them: how they print, how they convert to numbers,
which are falsy and when two of them are equal or ordered.


File: values.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math
from decimal import Decimal


def is_number(value) -> bool:
    """
    Whether ``value`` is a QasT number. Booleans are not numbers.
    """
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def to_number(value) -> float:
    """
    Numeric value of an arithmetic operand.

    Booleans count as 0 and 1 and ``None`` as 0. Strings, builtins and
    anything else have no numeric value and become NaN.
    """
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if is_number(value):
        return value
    if value is None:
        return 0.0
    return math.nan


def is_truthy(value) -> bool:
    """
    Zero, NaN, the empty string, ``None`` and ``False`` are falsy.
    """
    if value is None or value is False:
        return False
    if is_number(value):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value != ""
    return True


def strict_equals(lhs, rhs) -> bool:
    """
    Equality without coercion: values of different kinds are never equal.
    """
    if is_number(lhs) and is_number(rhs):
        return lhs == rhs
    if type(lhs) is not type(rhs):
        return False
    return lhs == rhs


def same_kind(lhs, rhs) -> bool:
    """
    Whether ``<``, ``>``, ``<=`` and ``>=`` can order the two values: both
    numbers, both strings or both booleans.
    """
    if is_number(lhs) and is_number(rhs):
        return True
    return type(lhs) is type(rhs) and isinstance(lhs, (str, bool))


def type_name(value) -> str:
    """
    QasT name of a value's type, for error messages.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if callable(value):
        return "function"
    return type(value).__name__


def format_number(value: float) -> str:
    """
    Shortest round-trip rendering of a number, in exponent form below
    ``1e-6`` and from ``1e21`` up.

    Examples:
        >>> format_number(14.0)
        '14'
        >>> format_number(1e21)
        '1e+21'
        >>> format_number(1e-7)
        '1e-7'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digits, exponent = Decimal(repr(abs(float(value)))).normalize().as_tuple()
    digits = "".join(str(d) for d in digits)
    k = len(digits)
    # value == 0.<digits> * 10**n
    n = exponent + k

    if k <= n <= 21:
        return sign + digits + "0" * (n - k)
    if 0 < n <= 21:
        return sign + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return sign + "0." + "0" * -n + digits
    mantissa = digits[0] + ("." + digits[1:] if k > 1 else "")
    return f"{sign}{mantissa}e{'+' if n - 1 >= 0 else '-'}{abs(n - 1)}"


def to_text(value) -> str:
    """
    Render a value as it appears inside a string concatenation.
    """
    if is_number(value) and value == 0:
        return "0"
    return to_display(value)


def to_display(value) -> str:
    """
    Render a value the way ``print`` shows it.

    Examples:
        >>> to_display(14.0)
        '14'
        >>> to_display(-0.0)
        '-0'
        >>> to_display(True)
        'true'
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_number(value):
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        return format_number(value)
    if isinstance(value, str):
        return value
    if callable(value):
        return f"<builtin {getattr(value, '__qast_name__', 'function')}>"
    return str(value)
