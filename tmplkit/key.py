"""Keys of map values and the conversions that produce them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Optional, Union

from .errors import Error, ErrorKind

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_U64_MAX = 2**64 - 1


class KeyKind(Enum):
    """Kinds of keys, in their sort order."""

    BOOL = 0
    I64 = 1
    CHAR = 2
    STRING = 3


_ESCAPES = {"\t": "\\t", "\r": "\\r", "\n": "\\n", "\\": "\\\\", "\0": "\\0"}


def _debug_text(text: str, quote: str) -> str:
    parts = []
    for ch in text:
        if ch == quote:
            parts.append("\\" + ch)
        elif ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            parts.append(f"\\u{{{ord(ch):x}}}")
        else:
            parts.append(ch)
    return quote + "".join(parts) + quote


@total_ordering
@dataclass(frozen=True, eq=False)
class Key:
    """A key in a map value: a bool, a 64 bit integer, a char or a string."""

    kind: KeyKind
    value: Union[bool, int, str]

    def _sort_key(self) -> tuple:
        return (self.kind.value, self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Key):
            return NotImplemented
        return self._sort_key() == other._sort_key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Key):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __hash__(self) -> int:
        return hash(self._sort_key())

    def as_str(self) -> Optional[str]:
        """Return the text of a string key, or None for other kinds."""
        if self.kind is KeyKind.STRING:
            return self.value
        return None

    def __str__(self) -> str:
        if self.kind is KeyKind.BOOL:
            return "true" if self.value else "false"
        return str(self.value)

    def __repr__(self) -> str:
        if self.kind is KeyKind.BOOL:
            return "true" if self.value else "false"
        if self.kind is KeyKind.I64:
            return str(self.value)
        if self.kind is KeyKind.CHAR:
            return _debug_text(self.value, "'")
        return _debug_text(self.value, '"')


def make_string_key(s: str) -> Key:
    """Build a string key."""
    return Key(KeyKind.STRING, s)


def _non_key() -> Error:
    return Error(ErrorKind.NON_KEY)


def key_from_value(value: object) -> Key:
    """Convert a runtime value into a key for indexing.

    Floats that hold a whole number are accepted, since division always
    yields floats (``4 / 2 == 2.0``).  Raises Error with kind NON_KEY for
    values that cannot serve as keys.
    """
    if isinstance(value, Key):
        return value
    if isinstance(value, bool):
        return Key(KeyKind.BOOL, value)
    if isinstance(value, int):
        if _I64_MIN <= value <= _I64_MAX:
            return Key(KeyKind.I64, value)
        raise _non_key()
    if isinstance(value, float):
        if math.isnan(value):
            raise _non_key()
        if math.isinf(value):
            raise _non_key()
        intval = max(_I64_MIN, min(_I64_MAX, int(value)))
        if float(intval) == value:
            return Key(KeyKind.I64, intval)
        raise _non_key()
    if isinstance(value, str):
        return make_string_key(value)
    raise _non_key()


def _unsupported(message: str) -> Error:
    return Error(ErrorKind.INVALID_OPERATION, message)


def to_key(value: object) -> Key:
    """Convert an arbitrary host value into a key.

    Enum members become string keys of their name.  Raises Error with
    kind INVALID_OPERATION for values that have no key form.
    """
    if isinstance(value, Key):
        return value
    if isinstance(value, Enum):
        return make_string_key(value.name)
    if isinstance(value, bool):
        return Key(KeyKind.BOOL, value)
    if isinstance(value, int):
        if _I64_MIN <= value <= _I64_MAX:
            return Key(KeyKind.I64, value)
        if value < 0:
            raise _unsupported("unsupported key type i128")
        if value <= _U64_MAX:
            raise _unsupported("out of bounds for i64")
        raise _unsupported("unsupported key type u128")
    if isinstance(value, float):
        raise _unsupported("unsupported key type f64")
    if isinstance(value, str):
        return make_string_key(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        raise _unsupported("unsupported key type bytes")
    if value is None:
        raise _unsupported("unsupported key type unit")
    if isinstance(value, tuple):
        raise _unsupported("tuples as keys are not supported")
    if isinstance(value, (list, set, frozenset)):
        raise _unsupported("sequences as keys are not supported")
    if isinstance(value, dict):
        raise _unsupported("maps as keys are not supported")
    raise _unsupported("structs as keys are not supported")