"""Tests for the runtime value variants."""

import math

import pytest

import jsrt


def test_payload_normalized():
    """Constructors store the canonical Python payload type"""
    assert jsrt.Number(3).data == 3.0
    assert type(jsrt.Number(3).data) is float
    assert jsrt.Boolean(1).data is True
    assert jsrt.Boolean(0).data is False
    assert jsrt.String("hi").data == "hi"


def test_kind():
    assert jsrt.Number(1).kind is jsrt.Kind.NUMBER
    assert jsrt.Boolean(True).kind is jsrt.Kind.BOOLEAN
    assert jsrt.String("").kind is jsrt.Kind.STRING


def test_bad_construction():
    """Wrapping values or using the abstract base is caller misuse"""
    with pytest.raises(TypeError):
        jsrt.Value(1)
    with pytest.raises(TypeError):
        jsrt.Number(jsrt.Number(1))
    with pytest.raises(TypeError):
        jsrt.String(5)
    with pytest.raises(TypeError):
        jsrt.Number("not a number")


def test_number_rejects_text():
    """Text payloads are never read as numbers"""
    with pytest.raises(TypeError):
        jsrt.Number("5")
    with pytest.raises(TypeError):
        jsrt.Number(b"5")
    assert jsrt.Number(True).data == 1.0


def test_immutable():
    value = jsrt.String("abc")
    with pytest.raises(AttributeError):
        value.data = "xyz"
    with pytest.raises(AttributeError):
        del value.data
    assert value.data == "abc"


def test_equality():
    """Values are equal only with the same variant and payload"""
    assert jsrt.Number(1) == jsrt.Number(1.0)
    assert jsrt.Number(1) != jsrt.Boolean(True)
    assert jsrt.String("") != jsrt.Boolean(False)
    assert jsrt.Number(math.nan) != jsrt.Number(math.nan)
    assert jsrt.Number(0.0) == jsrt.Number(-0.0)
    assert jsrt.String("a") != "a"


def test_equality_with_foreign_objects():
    """Comparisons against non-values defer to the other operand"""
    assert jsrt.Number(1).__eq__(1.0) is NotImplemented
    assert jsrt.String("a").__eq__("a") is NotImplemented
    assert jsrt.Number(1) != 1.0
    assert not (jsrt.Boolean(True) == True)


def test_hashable():
    values = {jsrt.String("a"), jsrt.String("a"), jsrt.Number(1), jsrt.Boolean(True)}
    assert len(values) == 3


@pytest.mark.parametrize("python,expected", [
    (True, jsrt.Boolean(True)),
    (False, jsrt.Boolean(False)),
    (0, jsrt.Number(0)),
    (2.5, jsrt.Number(2.5)),
    ("text", jsrt.String("text")),
], ids=["true", "false", "int", "float", "str"])
def test_from_python(python, expected):
    value = jsrt.Value.from_python(python)
    assert value == expected
    assert type(value) is type(expected)


@pytest.mark.parametrize("python", [None, [1], {}, b"bytes", jsrt.Number(1)],
                         ids=["none", "list", "dict", "bytes", "value"])
def test_from_python_rejects(python):
    with pytest.raises(TypeError):
        jsrt.Value.from_python(python)


def test_to_python():
    assert jsrt.Number(4).to_python() == 4.0
    assert jsrt.Boolean(False).to_python() is False
    assert jsrt.String("x").to_python() == "x"


def test_format():
    """Literal rendering used in diagnostics"""
    assert jsrt.Number(42).format() == "42"
    assert jsrt.Number(0.5).format() == "0.5"
    assert jsrt.Boolean(True).format() == "true"
    assert jsrt.String('say "hi"').format() == '"say \\"hi\\""'
    assert repr(jsrt.String("a")) == 'String("a")'
    assert repr(jsrt.Number(-3)) == "Number(-3)"


def test_validate():
    for value in (jsrt.Number(1), jsrt.Boolean(False), jsrt.String("")):
        jsrt.validate(value)

    with pytest.raises(TypeError):
        jsrt.validate(1.0)

    broken = jsrt.Number.__new__(jsrt.Number)
    object.__setattr__(broken, "data", "oops")
    with pytest.raises(TypeError):
        jsrt.validate(broken)
