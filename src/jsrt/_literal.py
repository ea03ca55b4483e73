"""Classify literal text as a runtime value.

This is the small front door used by the command line and by tests. It
accepts exactly one literal: a number (including NaN and Infinity), true,
false, or a quoted string.
"""

__all__ = ["parse_literal"]

import re

import lark

import jsrt


_parsers = {}

_escapes = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
}


def parse_literal(text):
    """Parse literal text into a runtime value.

    Args:
        text: (str) Literal like `42`, `-1.5e3`, `true` or `"hi"`
    Returns:
        (Value) Number, Boolean or String
    Raises:
        ParseError: If the text is not a single literal
    """
    parser = _lark_parser("literal")
    try:
        tree = parser.parse(text)
    except lark.exceptions.UnexpectedInput as e:
        position = getattr(e, "pos_in_stream", None)
        if position is not None and position < 0:
            position = len(text)
        raise jsrt.ParseError(f"Invalid literal {text!r}", position) from e
    return _LiteralTransformer().transform(tree)


def _unescape(body):
    """Resolve backslash escapes in a quoted string body."""
    return re.sub(r"\\(.)", lambda m: _escapes.get(m.group(1), m.group(1)), body, flags=re.S)


class _LiteralTransformer(lark.Transformer):
    """Turn the lark tree into a runtime value."""

    def start(self, children):
        return children[0]

    def number(self, children):
        return jsrt.Number(float(children[0]))

    def true(self, children):
        return jsrt.Boolean(True)

    def false(self, children):
        return jsrt.Boolean(False)

    def string(self, children):
        token = str(children[0])
        return jsrt.String(_unescape(token[1:-1]))


def _lark_parser(name):
    """Get globally shared lark parser.

    Args:
        name: (str) name of the grammar file (without .lark)

    Returns:
        (lark.Lark) Parser instance
    """
    parser = _parsers.get(name)
    if parser is not None:
        return parser

    path = f"lark/{name}.lark"
    parser = lark.Lark.open(path, rel_to=__file__, parser="lalr")
    _parsers[name] = parser
    return parser
