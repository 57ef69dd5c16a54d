"""Tokens and source spans produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class TokenKind(Enum):
    """Kinds of tokens, valued by their human readable description."""

    TEMPLATE_DATA = "template-data"
    VARIABLE_START = "start of variable block"
    VARIABLE_END = "end of variable block"
    BLOCK_START = "start of block"
    BLOCK_END = "end of block"
    IDENT = "identifier"
    STR = "string"
    INT = "integer"
    FLOAT = "float"
    PLUS = "`+`"
    MINUS = "`-`"
    MUL = "`*`"
    DIV = "`/`"
    FLOORDIV = "`//`"
    POW = "`**`"
    MOD = "`%`"
    BANG = "`!`"
    DOT = "`.`"
    COMMA = "`,`"
    COLON = "`:`"
    TILDE = "`~`"
    ASSIGN = "`=`"
    PIPE = "`|`"
    EQ = "`==`"
    NE = "`!=`"
    GT = "`>`"
    GTE = "`>=`"
    LT = "`<`"
    LTE = "`<=`"
    BRACKET_OPEN = "`[`"
    BRACKET_CLOSE = "`]`"
    PAREN_OPEN = "`(`"
    PAREN_CLOSE = "`)`"
    BRACE_OPEN = "`{`"
    BRACE_CLOSE = "`}`"


_FLAG_KINDS = frozenset(
    {
        TokenKind.VARIABLE_START,
        TokenKind.VARIABLE_END,
        TokenKind.BLOCK_START,
        TokenKind.BLOCK_END,
    }
)

_ESCAPES = {"\t": "\\t", "\r": "\\r", "\n": "\\n", "\\": "\\\\", '"': '\\"', "\0": "\\0"}


def _debug_str(text: str) -> str:
    parts = []
    for ch in text:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            parts.append(f"\\u{{{ord(ch):x}}}")
        else:
            parts.append(ch)
    return '"' + "".join(parts) + '"'


def _debug_value(kind: TokenKind, value: object) -> str:
    if kind in _FLAG_KINDS:
        return "true" if value else "false"
    if kind is TokenKind.IDENT:
        return str(value)
    if kind in (TokenKind.TEMPLATE_DATA, TokenKind.STR):
        return _debug_str(str(value))
    return repr(value)


@dataclass(frozen=True)
class Token:
    """A token: a kind plus its payload where the kind carries one.

    Start and end markers carry a bool telling whether surrounding
    whitespace is trimmed; data, identifiers and strings carry text;
    numbers carry an int or a float.
    """

    kind: TokenKind
    value: Union[str, int, float, bool, None] = None

    def __str__(self) -> str:
        return self.kind.value

    def __repr__(self) -> str:
        if self.value is None and self.kind not in _FLAG_KINDS:
            return self.kind.name
        return f"{self.kind.name}({_debug_value(self.kind, self.value)})"


@dataclass(frozen=True)
class Span:
    """Line and column range of a token in the source."""

    start_line: int = 0
    start_col: int = 0
    end_line: int = 0
    end_col: int = 0

    def __repr__(self) -> str:
        return f" @ {self.start_line}:{self.start_col}-{self.end_line}:{self.end_col}"