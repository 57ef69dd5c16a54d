"""Turns template source into a stream of tokens with their spans."""

from __future__ import annotations

import re
from enum import Enum
from typing import Iterable, Iterator, Optional, Tuple, Union

from .errors import Error, ErrorKind
from .tokens import Span, Token, TokenKind
from .utils import unescape

SpannedToken = Tuple[Token, Span]

# Whitespace skipped between tokens inside blocks and variables.
_ASCII_WHITESPACE = " \t\n\x0c\r"

# Characters with the Unicode White_Space property, used when trimming data.
_UNICODE_WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

_MARKERS = ("{{", "{%", "{#")

_TWO_CHAR_OPS = {
    "//": TokenKind.FLOORDIV,
    "**": TokenKind.POW,
    "==": TokenKind.EQ,
    "!=": TokenKind.NE,
    ">=": TokenKind.GTE,
    "<=": TokenKind.LTE,
}

_ONE_CHAR_OPS = {
    "+": TokenKind.PLUS,
    "*": TokenKind.MUL,
    "/": TokenKind.DIV,
    "%": TokenKind.MOD,
    "!": TokenKind.BANG,
    ".": TokenKind.DOT,
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
    "~": TokenKind.TILDE,
    "|": TokenKind.PIPE,
    "=": TokenKind.ASSIGN,
    ">": TokenKind.GT,
    "<": TokenKind.LT,
    "(": TokenKind.PAREN_OPEN,
    ")": TokenKind.PAREN_CLOSE,
    "[": TokenKind.BRACKET_OPEN,
    "]": TokenKind.BRACKET_CLOSE,
    "{": TokenKind.BRACE_OPEN,
    "}": TokenKind.BRACE_CLOSE,
}

_IDENT = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_NUMBER = re.compile(r"[0-9]+(?:\.[0-9]*)?")
_I64_MAX = 2**63 - 1


class _State(Enum):
    TEMPLATE = "template"
    IN_VARIABLE = "variable"
    IN_BLOCK = "block"


def _syntax_error(message: str) -> Error:
    return Error(ErrorKind.SYNTAX_ERROR, message)


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _find_marker_from(text: str, start: int) -> Optional[int]:
    offset = start
    while True:
        idx = text.find("{", offset)
        if idx < 0:
            return None
        if text.startswith(_MARKERS, idx):
            return idx
        offset = idx + 1


def find_marker(text: str) -> Optional[int]:
    """Return the offset of the first ``{{``, ``{%`` or ``{#`` in text, or None."""
    return _find_marker_from(text, 0)


class _Lexer:
    """Raw tokenizer without whitespace handling."""

    def __init__(self, source: str, in_expr: bool) -> None:
        self.source = source
        self.pos = 0
        self.line = 1
        self.col = 0
        self.stack = [_State.IN_VARIABLE if in_expr else _State.TEMPLATE]

    def _loc(self) -> Tuple[int, int]:
        return self.line, self.col

    def _span(self, start: Tuple[int, int]) -> Span:
        return Span(start[0], start[1], self.line, self.col)

    def _advance(self, count: int) -> str:
        skipped = self.source[self.pos:self.pos + count]
        newlines = skipped.count("\n")
        if newlines:
            self.line += newlines
            self.col = len(skipped) - skipped.rfind("\n") - 1
        else:
            self.col += len(skipped)
        self.pos += count
        return skipped

    def tokens(self) -> Iterator[SpannedToken]:
        while self.pos < len(self.source):
            if not self.stack:
                raise RuntimeError("empty lexer state")
            start = self._loc()
            if self.stack[-1] is _State.TEMPLATE:
                yield self._template_token(start)
            else:
                token = self._expr_token(start)
                if token is not None:
                    yield token

    def _template_token(self, start: Tuple[int, int]) -> SpannedToken:
        src, pos = self.source, self.pos
        for opener, kind, state in (
            ("{{", TokenKind.VARIABLE_START, _State.IN_VARIABLE),
            ("{%", TokenKind.BLOCK_START, _State.IN_BLOCK),
        ):
            if src.startswith(opener, pos):
                trim = src.startswith("-", pos + 2)
                self._advance(3 if trim else 2)
                self.stack.append(state)
                return Token(kind, trim), self._span(start)
        if src.startswith("{#", pos):
            end = src.find("#}", pos)
            if end < 0:
                raise _syntax_error("unexpected end of comment")
            self._advance(end - pos + 2)

        marker = _find_marker_from(src, self.pos)
        length = (marker if marker is not None else len(src)) - self.pos
        data = self._advance(length)
        return Token(TokenKind.TEMPLATE_DATA, data), self._span(start)

    def _expr_token(self, start: Tuple[int, int]) -> Optional[SpannedToken]:
        src, pos = self.source, self.pos

        ws_end = pos
        while ws_end < len(src) and src[ws_end] in _ASCII_WHITESPACE:
            ws_end += 1
        if ws_end > pos:
            self._advance(ws_end - pos)
            return None

        if self.stack[-1] is _State.IN_BLOCK:
            closers = (("-%}", True), ("%}", False))
            end_kind = TokenKind.BLOCK_END
        else:
            closers = (("-}}", True), ("}}", False))
            end_kind = TokenKind.VARIABLE_END
        for closer, trim in closers:
            if src.startswith(closer, pos):
                self.stack.pop()
                self._advance(len(closer))
                return Token(end_kind, trim), self._span(start)

        kind = _TWO_CHAR_OPS.get(src[pos:pos + 2])
        if kind is not None:
            self._advance(2)
            return Token(kind), self._span(start)

        ch = src[pos]
        if ch == "-":
            if pos + 1 < len(src) and _is_digit(src[pos + 1]):
                self._advance(1)
                return self._number(negative=True)
            self._advance(1)
            return Token(TokenKind.MINUS), self._span(start)
        if ch in ("'", '"'):
            return self._string(ch)
        if _is_digit(ch):
            return self._number(negative=False)
        kind = _ONE_CHAR_OPS.get(ch)
        if kind is not None:
            self._advance(1)
            return Token(kind), self._span(start)

        match = _IDENT.match(src, pos)
        if match:
            ident = self._advance(match.end() - pos)
            return Token(TokenKind.IDENT, ident), self._span(start)

        raise _syntax_error("unexpected character")

    def _string(self, delim: str) -> SpannedToken:
        start = self._loc()
        src, pos = self.source, self.pos
        idx = pos + 1
        escaped = False
        has_escapes = False
        while idx < len(src):
            ch = src[idx]
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
                has_escapes = True
            elif ch in (delim, "\r", "\n"):
                break
            idx += 1
        if escaped or idx >= len(src) or src[idx] != delim:
            raise _syntax_error("unexpected end of string")
        body = self._advance(idx - pos + 1)[1:-1]
        if has_escapes:
            body = unescape(body)
        return Token(TokenKind.STR, body), self._span(start)

    def _number(self, negative: bool) -> SpannedToken:
        start = self._loc()
        match = _NUMBER.match(self.source, self.pos)
        text = self._advance(match.end() - self.pos)
        if "." in text:
            value = float(text)
            if negative:
                value *= -1.0
            return Token(TokenKind.FLOAT, value), self._span(start)
        number = int(text)
        if number > _I64_MAX:
            raise _syntax_error("invalid integer")
        return Token(TokenKind.INT, -number if negative else number), self._span(start)


def _with_deferred_errors(
    items: Iterable[SpannedToken],
) -> Iterator[Union[SpannedToken, Error]]:
    """Yield items, turning a raised engine error into a final yielded value.

    This lets the whitespace filter look ahead without raising before the
    current token has been handed out.
    """
    iterator = iter(items)
    while True:
        try:
            item = next(iterator)
        except StopIteration:
            return
        except Error as exc:
            yield exc
            return
        yield item


def _is_trimming_start(item: Union[SpannedToken, Error, None]) -> bool:
    if item is None or isinstance(item, Error):
        return False
    token = item[0]
    return (
        token.kind in (TokenKind.VARIABLE_START, TokenKind.BLOCK_START)
        and token.value is True
    )


def _whitespace_filter(items: Iterable[SpannedToken]) -> Iterator[SpannedToken]:
    """Remove whitespace around markers that request it."""
    stream = _with_deferred_errors(items)
    pending = next(stream, None)
    remove_leading_ws = False
    while pending is not None:
        item = pending
        pending = next(stream, None)
        if isinstance(item, Error):
            raise item
        token, span = item
        if token.kind is TokenKind.TEMPLATE_DATA:
            data = token.value
            if remove_leading_ws:
                remove_leading_ws = False
                data = data.lstrip(_UNICODE_WHITESPACE)
            if _is_trimming_start(pending):
                data = data.rstrip(_UNICODE_WHITESPACE)
            yield Token(TokenKind.TEMPLATE_DATA, data), span
        elif token.value is True and token.kind in (
            TokenKind.VARIABLE_END,
            TokenKind.BLOCK_START,
        ):
            remove_leading_ws = True
            yield item
        else:
            remove_leading_ws = False
            yield item


def tokenize(source: str, in_expr: bool = False) -> Iterator[SpannedToken]:
    """Tokenize template source into ``(Token, Span)`` pairs.

    With ``in_expr`` the source is read as a bare expression rather than
    as template data.  Raises Error on syntax errors.
    """
    return _whitespace_filter(_Lexer(source, in_expr).tokens())