"""Coerce runtime values to number, boolean and string.

Every coercion is total. Values that are not one of the three runtime
variants coerce to zero, true, or the empty string, the same as an
unrecognized host object.
"""

__all__ = [
    "to_number",
    "to_boolean",
    "to_string",
    "format_number",
    "convert",
]

import math
import re

import jsrt


def to_number(value):
    """Numeric projection of a value.

    Strings are never parsed, they always project to zero.

    Args:
        value: (Value) Value to coerce
    Returns:
        (float) Number
    """
    match value:
        case jsrt.Number():
            return value.data
        case jsrt.Boolean():
            return 1.0 if value.data else 0.0
        case jsrt.String():
            return 0.0
    return 0.0


def to_boolean(value):
    """Truthiness of a value.

    Any number other than zero is true, that includes nan.

    Args:
        value: (Value) Value to coerce
    Returns:
        (bool) Truthiness
    """
    match value:
        case jsrt.Number():
            return value.data != 0
        case jsrt.Boolean():
            return value.data
        case jsrt.String():
            return len(value.data) != 0
    return True


def to_string(value, fixed=False):
    """String form of a value.

    A String argument is returned as-is, not copied.

    Args:
        value: (Value) Value to coerce
        fixed: (bool) Render numbers with `format_number(fixed=True)`
    Returns:
        (String) String value
    """
    match value:
        case jsrt.String():
            return value
        case jsrt.Boolean():
            return jsrt.String("true" if value.data else "false")
        case jsrt.Number():
            return jsrt.String(format_number(value.data, fixed=fixed))
    return jsrt.String("")


def format_number(number, fixed=False):
    """Render a float as decimal text.

    Whole numbers are written as integers with no fraction. Everything
    else uses the shortest text that reads back as the same float, with
    the exponent written without padding (`1e-7`).

    With `fixed` every finite number gets six decimals, which is how
    the older runtime wrote all numbers (`42.000000`).

    Args:
        number: (float) Number to render, ints are converted to float
        fixed: (bool) Use fixed six decimal rendering
    Returns:
        (str) Decimal text
    Raises:
        OverflowError: If an int argument is outside the float range
    """
    number = float(number)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if fixed:
        return f"{number:f}"
    if number == math.trunc(number):
        # int() drops the sign on -0.0
        return str(int(number))
    return _exponent_padding.sub(r"e\1\2", repr(number))


_exponent_padding = re.compile(r"e([+-])0*(\d)")


_converters = {
    jsrt.Kind.NUMBER: lambda value: jsrt.Number(to_number(value)),
    jsrt.Kind.BOOLEAN: lambda value: jsrt.Boolean(to_boolean(value)),
    jsrt.Kind.STRING: to_string,
}


def convert(value, kind):
    """Coerce a value into a value of another kind.

    Args:
        value: (Value) Value to coerce
        kind: (Kind) Desired variant
    Returns:
        (Value) The argument itself if it already has that kind, or a new value
    """
    if isinstance(value, jsrt.Value) and value.kind is kind:
        return value
    return _converters[kind](value)
