"""Generic operators over runtime values.

These are the fallbacks generated code calls when it cannot prove the
operand types at compile time. None of them fail for any combination of
Number, Boolean and String operands.
"""

__all__ = [
    "generic_plus",
    "generic_minus",
    "generic_times",
    "string_plus",
    "generic_and",
    "strict_equals",
    "strict_not_equals",
    "equals",
    "not_equals",
    "less_than",
    "less_than_equals",
    "greater_than",
    "greater_than_equals",
    "binary",
    "BINARY_OPERATORS",
]

import math
import re

import jsrt


def generic_plus(left, right, fixed=False):
    """The `+` operator.

    If either operand is a String the result is their concatenated string
    forms. Otherwise both operands are added as numbers.

    Args:
        left: (Value) Left value
        right: (Value) Right value
        fixed: (bool) Fixed six decimal rendering for numbers being joined
    Returns:
        (Value) String or Number result
    """
    if isinstance(left, jsrt.String) or isinstance(right, jsrt.String):
        return jsrt.String(jsrt.to_string(left, fixed).data + jsrt.to_string(right, fixed).data)
    return jsrt.Number(jsrt.to_number(left) + jsrt.to_number(right))


def generic_minus(left, right):
    """The `-` operator, always numeric."""
    return jsrt.Number(jsrt.to_number(left) - jsrt.to_number(right))


def generic_times(left, right):
    """The `*` operator, always numeric."""
    return jsrt.Number(jsrt.to_number(left) * jsrt.to_number(right))


def string_plus(left, right):
    """Concatenate two values already known to be strings.

    Gives the same result as `generic_plus` for two String operands.

    Args:
        left: (String) Left value
        right: (String) Right value
    Returns:
        (String) Concatenation
    """
    return jsrt.String(left.data + right.data)


def generic_and(left, right):
    """The `&&` operator.

    Returns one of the operands unchanged, the left one when it is falsy.
    """
    if not jsrt.to_boolean(left):
        return left
    return right


def strict_equals(left, right):
    """The `===` operator.

    Operands must be the same variant with the same payload. A nan is
    never equal to anything, and the two zeros are equal.
    """
    if type(left) is not type(right):
        return jsrt.Boolean(False)
    if not isinstance(left, jsrt.Value):
        return jsrt.Boolean(left is right)
    return jsrt.Boolean(left.data == right.data)


def strict_not_equals(left, right):
    """The `!==` operator."""
    return jsrt.Boolean(not strict_equals(left, right).data)


def equals(left, right):
    """The `==` operator.

    Two strings compare as text. A string compared with anything else is
    read as a numeric literal first, so `1 == "1"` holds. All other
    pairings compare the numeric projections.
    """
    left_string = isinstance(left, jsrt.String)
    right_string = isinstance(right, jsrt.String)
    if left_string and right_string:
        return jsrt.Boolean(left.data == right.data)
    lval = _string_number(left.data) if left_string else jsrt.to_number(left)
    rval = _string_number(right.data) if right_string else jsrt.to_number(right)
    return jsrt.Boolean(lval == rval)


def not_equals(left, right):
    """The `!=` operator."""
    return jsrt.Boolean(not equals(left, right).data)


def less_than(left, right):
    """The `<` operator on numeric projections."""
    return jsrt.Boolean(jsrt.to_number(left) < jsrt.to_number(right))


def less_than_equals(left, right):
    """The `<=` operator on numeric projections."""
    return jsrt.Boolean(jsrt.to_number(left) <= jsrt.to_number(right))


def greater_than(left, right):
    """The `>` operator on numeric projections."""
    return jsrt.Boolean(jsrt.to_number(left) > jsrt.to_number(right))


def greater_than_equals(left, right):
    """The `>=` operator on numeric projections."""
    return jsrt.Boolean(jsrt.to_number(left) >= jsrt.to_number(right))


BINARY_OPERATORS = {
    "+": generic_plus,
    "-": generic_minus,
    "*": generic_times,
    "&&": generic_and,
    "===": strict_equals,
    "!==": strict_not_equals,
    "==": equals,
    "!=": not_equals,
    "<": less_than,
    "<=": less_than_equals,
    ">": greater_than,
    ">=": greater_than_equals,
}


def binary(op, left, right):
    """Apply a binary operator by its symbol.

    Args:
        op: (str) Operator like "+" "-" "*" "==" "<"
        left: (Value) Left value
        right: (Value) Right value

    Returns:
        (Value) Result of operation

    Raises:
        ValueError: If the operator is unknown
    """
    func = BINARY_OPERATORS.get(op)
    if func is None:
        raise ValueError(f"Unknown binary operator: {op}")
    return func(left, right)


_decimal_literal = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)
_radix_literal = re.compile(r"0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def _string_number(text):
    """Numeric value of string text, as loose equality reads it.

    Surrounding whitespace is ignored and blank text is zero. Decimal,
    hex, octal and binary literals and signed Infinity are recognized,
    anything else is nan. Only `equals` uses this, `to_number` never
    parses strings.

    Args:
        text: (str) String payload
    Returns:
        (float) Number
    """
    text = text.strip()
    if not text:
        return 0.0
    if text in ("Infinity", "+Infinity"):
        return math.inf
    if text == "-Infinity":
        return -math.inf
    if _decimal_literal.fullmatch(text):
        return float(text)
    if _radix_literal.fullmatch(text):
        try:
            return float(int(text, 0))
        except OverflowError:
            return math.inf
    return math.nan
