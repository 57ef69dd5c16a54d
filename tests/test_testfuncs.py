import pytest

from tmplkit.errors import Error, ErrorKind
from tmplkit.testfuncs import (
    Undefined,
    get_builtin_tests,
    is_defined,
    is_endingwith,
    is_even,
    is_mapping,
    is_number,
    is_odd,
    is_sequence,
    is_startingwith,
    is_string,
    is_undefined,
)


def test_odd_even():
    assert is_odd(23) is True
    assert is_even(23) is False
    assert is_even(42) is True
    assert is_odd(-3) is True


def test_odd_even_non_integers():
    assert is_odd("3") is False
    assert is_even("4") is False
    assert is_even(Undefined()) is False
    assert is_odd(True) is False


def test_defined_undefined():
    assert is_undefined(Undefined()) is True
    assert is_defined(Undefined()) is False
    assert is_defined(None) is True
    assert is_undefined(0) is False


def test_number():
    assert is_number(1) is True
    assert is_number(1.5) is True
    assert is_number(True) is False
    assert is_number("1") is False


def test_string():
    assert is_string("a") is True
    assert is_string(1) is False


def test_sequence_and_mapping():
    assert is_sequence([1, 2]) is True
    assert is_sequence((1,)) is True
    assert is_sequence({"a": 1}) is False
    assert is_mapping({"a": 1}) is True
    assert is_mapping([1]) is False


def test_starting_and_ending_with():
    assert is_startingwith("foobar", "foo") is True
    assert is_startingwith("foobar", "bar") is False
    assert is_endingwith("foobar", "bar") is True
    assert is_endingwith("foobar", "foo") is False


def test_string_tests_reject_non_strings():
    with pytest.raises(Error) as info:
        is_startingwith(42, "4")
    assert info.value.kind is ErrorKind.INVALID_ARGUMENTS


def test_builtin_tests_registry():
    tests = get_builtin_tests()
    assert list(tests) == sorted(
        [
            "odd",
            "even",
            "undefined",
            "defined",
            "number",
            "string",
            "sequence",
            "mapping",
            "startingwith",
            "endingwith",
        ]
    )
    assert tests["odd"](23) is True
    assert tests["startingwith"]("foobar", "foo") is True


def test_undefined_behaviour():
    value = Undefined()
    assert bool(value) is False
    assert str(value) == ""
    assert value == Undefined()