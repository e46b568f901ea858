"""Runtime values for Bella.

Numbers are Python floats and Booleans are Python bools. Arrays and
function descriptors get their own classes. Note that `bool` is not a
subclass of `float`, so `isinstance` checks on the two never overlap.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Tuple, Union
import math

from .ast import Expression


@dataclass
class ArrayVal:
    """Represents a Bella array value.

    Arrays have reference semantics: binding an array to a second name or
    reading a nested array through a subscript shares the same list.
    """
    items: List[Any]

    def __repr__(self) -> str:
        return f"Array({self.items!r})"


@dataclass(frozen=True)
class FunctionVal:
    """A declared function. Only reachable through the namespace, never as a value."""
    name: str
    params: Tuple[str, ...]
    body: Expression

    @property
    def arity(self) -> int:
        return len(self.params)

    def __repr__(self) -> str:
        return f"<function {self.name}>"


Value = Union[float, bool, ArrayVal]


def is_number(value: Any) -> bool:
    return isinstance(value, float)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def type_name(value: Any) -> str:
    """Return the Bella type name of a runtime value."""
    if isinstance(value, bool):
        return 'Boolean'
    if isinstance(value, float):
        return 'Number'
    if isinstance(value, ArrayVal):
        return 'Array'
    if isinstance(value, FunctionVal):
        return 'Function'
    return type(value).__name__


def format_number(value: float) -> str:
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    # Integral values print without a fractional part; huge ones keep exponent form
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def to_string(value: Any) -> str:
    """Convert a Bella value to the text written by a print statement."""
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, ArrayVal):
        return '[' + ', '.join(to_string(item) for item in value.items) + ']'
    if isinstance(value, FunctionVal):
        return repr(value)
    return str(value)
