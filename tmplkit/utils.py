"""Escaping helpers shared by the engine."""

from __future__ import annotations

import re
from enum import Enum
from itertools import chain, islice, repeat
from typing import Iterator

from .errors import Error, ErrorKind


class AutoEscape(Enum):
    """Controls the autoescaping behaviour."""

    NONE = "none"
    HTML = "html"


_HTML_TABLE = str.maketrans(
    {
        "<": "&lt;",
        ">": "&gt;",
        "&": "&amp;",
        '"': "&quot;",
        "'": "&#x27;",
        "/": "&#x2f;",
    }
)


def html_escape(text: str) -> str:
    """Escape a string for safe inclusion in HTML."""
    return text.translate(_HTML_TABLE)


_SIMPLE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\x08",
    "f": "\x0c",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_HEX4 = re.compile(r"\+?[0-9a-fA-F]+")


def _bad_escape() -> Error:
    return Error(ErrorKind.BAD_ESCAPE)


class _Unescaper:
    def __init__(self) -> None:
        self.out: list[str] = []
        self.pending_surrogate = 0

    def run(self, text: str) -> str:
        chars = iter(text)
        for ch in chars:
            if ch != "\\":
                self._push_char(ch)
                continue
            escape = next(chars, None)
            if escape is None:
                raise _bad_escape()
            if escape in _SIMPLE_ESCAPES:
                self._push_char(_SIMPLE_ESCAPES[escape])
            elif escape == "u":
                self._push_u16(self._parse_u16(chars))
            else:
                raise _bad_escape()
        if self.pending_surrogate:
            raise _bad_escape()
        return "".join(self.out)

    @staticmethod
    def _parse_u16(chars: Iterator[str]) -> int:
        digits = "".join(islice(chain(chars, repeat("\0")), 4))
        if not _HEX4.fullmatch(digits):
            raise _bad_escape()
        return int(digits, 16)

    def _push_u16(self, code: int) -> None:
        is_surrogate = 0xD800 <= code <= 0xDFFF
        if not is_surrogate:
            if self.pending_surrogate:
                raise _bad_escape()
            self.out.append(chr(code))
        elif not self.pending_surrogate:
            self.pending_surrogate = code
        else:
            high = self.pending_surrogate
            if not (0xD800 <= high <= 0xDBFF and 0xDC00 <= code <= 0xDFFF):
                raise _bad_escape()
            self.out.append(chr(0x10000 + ((high - 0xD800) << 10) + (code - 0xDC00)))
            self.pending_surrogate = 0

    def _push_char(self, ch: str) -> None:
        if self.pending_surrogate:
            raise _bad_escape()
        self.out.append(ch)


def unescape(text: str) -> str:
    """Unescape a string following JSON rules.

    Raises Error with kind BAD_ESCAPE on malformed escapes.
    """
    return _Unescaper().run(text)