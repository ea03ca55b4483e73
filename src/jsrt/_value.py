"""Runtime values handed to the coercion engine."""

__all__ = ["Value", "Number", "Boolean", "String", "Kind", "validate"]

import enum

import jsrt


class Kind(enum.Enum):
    """Variant tag for a runtime value."""
    NUMBER = "number"
    BOOLEAN = "boolean"
    STRING = "string"


class Value:
    """Runtime scalar value.

    A value is always exactly one of the three concrete subclasses,
    `Number`, `Boolean` or `String`. Code that switches on values should
    `match` against those classes, there are no other variants.

    Values are immutable. Operations always build new values and never
    modify their arguments.

    Args:
        data: The underlying Python payload
    Attributes:
        data: (float | bool | str) The payload
        kind: (Kind) Variant tag
    """
    __slots__ = ("data",)
    kind = None

    def __init__(self, data):
        if isinstance(data, Value):
            # Values are shared by reference, never rewrapped
            raise TypeError(f"Value init called with existing Value {data!r}")
        if type(self) is Value:
            raise TypeError("Value is abstract, use Number, Boolean or String")
        object.__setattr__(self, "data", self._convert(data))

    @staticmethod
    def _convert(data):
        return data

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} values are immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} values are immutable")

    def format(self):
        """Convert value to a literal expression.

        Returns:
            (str) String representation suitable for display
        """
        match self:
            case Number():
                return jsrt.format_number(self.data)
            case Boolean():
                return "true" if self.data else "false"
            case String():
                escaped = self.data.replace("\\", "\\\\").replace('"', '\\"')
                return f'"{escaped}"'
        return repr(self.data)

    def to_python(self):
        """Return the payload as a plain Python float, bool or str."""
        return self.data

    @classmethod
    def from_python(cls, value):
        """Classify a Python object as one of the runtime variants.

        Args:
            value: Python value to convert
        Returns:
            (Value) Number, Boolean or String
        Raises:
            TypeError: If value is already a Value or cannot be converted
        """
        if isinstance(value, Value):
            raise TypeError("from_python called with existing Value")

        # bool is an int subclass, check it first
        if isinstance(value, bool):
            return Boolean(value)
        if isinstance(value, (int, float)):
            return Number(value)
        if isinstance(value, str):
            return String(value)

        raise TypeError(f"Cannot convert Python type {type(value).__name__} to runtime Value")

    def __repr__(self):
        return f"{type(self).__name__}({self.format()})"

    def __eq__(self, other):
        if not isinstance(other, Value):
            return NotImplemented
        if type(self) is not type(other):
            return False
        return self.data == other.data

    def __hash__(self):
        return hash((type(self).__name__, self.data))


class Number(Value):
    """IEEE-754 double value. Any float is allowed, including nan and inf."""
    __slots__ = ()
    kind = Kind.NUMBER

    @staticmethod
    def _convert(data):
        # Text is never parsed into a number
        if isinstance(data, (str, bytes)):
            raise TypeError(f"Number requires numeric data, got {type(data).__name__}")
        return float(data)


class Boolean(Value):
    """Boolean value."""
    __slots__ = ()
    kind = Kind.BOOLEAN

    @staticmethod
    def _convert(data):
        return bool(data)


class String(Value):
    """Text value."""
    __slots__ = ()
    kind = Kind.STRING

    @staticmethod
    def _convert(data):
        if not isinstance(data, str):
            raise TypeError(f"String requires str data, got {type(data).__name__}")
        return str(data)


_payloads = {
    Number: float,
    Boolean: bool,
    String: str,
}


def validate(value):
    """Validate that a Value is in a proper state.

    The engine never calls this. It can be used by tests or by the code that
    classifies host values before calling into the engine.

    Args:
        value: (Value) object to check
    Raises:
        TypeError: if value is not one of the runtime variants
    """
    if not isinstance(value, Value):
        raise TypeError(f"Expected Value, got {type(value).__name__}")

    payload = _payloads.get(type(value))
    if payload is None:
        raise TypeError(f"Unknown runtime variant: {type(value).__name__}")
    if type(value.data) is not payload:
        raise TypeError(
            f"Invalid payload for {type(value).__name__}: {type(value.data).__name__}")
