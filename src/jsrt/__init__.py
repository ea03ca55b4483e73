"""
jsrt runtime support

Value coercion and generic operators used by code compiled from a
JavaScript-like language. Operands arrive already classified as Number,
Boolean or String values.
"""

__version__ = "0.1.0"


from ._error import *
from ._value import *
from ._coerce import *
from ._ops import *
from ._literal import *
