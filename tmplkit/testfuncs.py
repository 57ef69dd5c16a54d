"""Built-in test functions used by ``is`` expressions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Callable, Dict

from .errors import Error, ErrorKind


class Undefined:
    """The value of a name or attribute that does not exist."""

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return ""

    def __repr__(self) -> str:
        return "Undefined"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Undefined)

    def __hash__(self) -> int:
        return hash(Undefined)


def _as_integer(value: object):
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _as_string(value: object) -> str:
    if isinstance(value, str):
        return value
    raise Error(ErrorKind.INVALID_ARGUMENTS, f"expected a string, got {value!r}")


def is_odd(value: object) -> bool:
    """Check if a value is an odd integer."""
    number = _as_integer(value)
    return number is not None and number % 2 != 0


def is_even(value: object) -> bool:
    """Check if a value is an even integer."""
    number = _as_integer(value)
    return number is not None and number % 2 == 0


def is_undefined(value: object) -> bool:
    """Check if a value is undefined."""
    return isinstance(value, Undefined)


def is_defined(value: object) -> bool:
    """Check if a value is defined."""
    return not isinstance(value, Undefined)


def is_number(value: object) -> bool:
    """Check if a value is a number."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_string(value: object) -> bool:
    """Check if a value is a string."""
    return isinstance(value, str)


def is_sequence(value: object) -> bool:
    """Check if a value is a sequence."""
    return isinstance(value, (list, tuple))


def is_mapping(value: object) -> bool:
    """Check if a value is a mapping."""
    return isinstance(value, Mapping)


def is_startingwith(value: object, other: object) -> bool:
    """Check if a string starts with another string."""
    return _as_string(value).startswith(_as_string(other))


def is_endingwith(value: object, other: object) -> bool:
    """Check if a string ends with another string."""
    return _as_string(value).endswith(_as_string(other))


def get_builtin_tests() -> Dict[str, Callable[..., bool]]:
    """Return the built-in tests keyed by name, in name order."""
    tests = {
        "odd": is_odd,
        "even": is_even,
        "undefined": is_undefined,
        "defined": is_defined,
        "number": is_number,
        "string": is_string,
        "sequence": is_sequence,
        "mapping": is_mapping,
        "startingwith": is_startingwith,
        "endingwith": is_endingwith,
    }
    return dict(sorted(tests.items()))