"""Tests for classifying literal text into runtime values."""

import math

import pytest

import jsrt


@pytest.mark.parametrize("text,expected", [
    ("42", jsrt.Number(42)),
    ("-17", jsrt.Number(-17)),
    ("+3", jsrt.Number(3)),
    ("3.14", jsrt.Number(3.14)),
    (".5", jsrt.Number(0.5)),
    ("1e3", jsrt.Number(1000)),
    ("2.5E-1", jsrt.Number(0.25)),
    ("Infinity", jsrt.Number(math.inf)),
    ("-Infinity", jsrt.Number(-math.inf)),
    ("true", jsrt.Boolean(True)),
    ("false", jsrt.Boolean(False)),
    ('"hello"', jsrt.String("hello")),
    ("'single'", jsrt.String("single")),
    ('""', jsrt.String("")),
    ('"5"', jsrt.String("5")),
    ('"say \\"hi\\""', jsrt.String('say "hi"')),
    ("'it\\'s'", jsrt.String("it's")),
    ('"a\\nb\\tc"', jsrt.String("a\nb\tc")),
    ('"back\\\\slash"', jsrt.String("back\\slash")),
    ("  7  ", jsrt.Number(7)),
])
def test_parse_literal(text, expected):
    value = jsrt.parse_literal(text)
    assert value == expected
    assert type(value) is type(expected)


def test_parse_nan():
    value = jsrt.parse_literal("NaN")
    assert isinstance(value, jsrt.Number)
    assert math.isnan(value.data)


@pytest.mark.parametrize("text", [
    "",
    "abc",
    "True",
    "1 2",
    "1.2.3",
    '"unterminated',
    "'mixed\"",
    "true false",
], ids=["empty", "word", "capitalized", "two-numbers", "two-dots",
        "unterminated", "mixed-quotes", "two-booleans"])
def test_parse_literal_invalid(text):
    with pytest.raises(jsrt.ParseError) as exc_info:
        jsrt.parse_literal(text)
    assert exc_info.value.message.startswith("Invalid literal")


def test_parse_error_position():
    with pytest.raises(jsrt.ParseError) as exc_info:
        jsrt.parse_literal("12 x")
    assert exc_info.value.position == 3
