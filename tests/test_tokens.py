import pytest

from tmplkit.tokens import Span, Token, TokenKind


def test_repr_of_template_data_quotes_text():
    assert repr(Token(TokenKind.TEMPLATE_DATA, "foo")) == 'TEMPLATE_DATA("foo")'


def test_repr_of_template_data_keeps_spaces():
    assert repr(Token(TokenKind.TEMPLATE_DATA, " blub")) == 'TEMPLATE_DATA(" blub")'


def test_repr_of_ident_is_unquoted():
    assert repr(Token(TokenKind.IDENT, "bar")) == "IDENT(bar)"


@pytest.mark.parametrize(
    "kind,flag,expected",
    [
        (TokenKind.VARIABLE_START, True, "VARIABLE_START(true)"),
        (TokenKind.VARIABLE_END, True, "VARIABLE_END(true)"),
        (TokenKind.VARIABLE_START, False, "VARIABLE_START(false)"),
        (TokenKind.VARIABLE_END, False, "VARIABLE_END(false)"),
    ],
)
def test_repr_of_markers(kind, flag, expected):
    assert repr(Token(kind, flag)) == expected


def test_repr_of_string_escapes_quotes_and_newlines():
    text = 'a"b\nc'
    rendered = repr(Token(TokenKind.STR, text))
    assert rendered.startswith("STR(")
    assert "\\n" in rendered
    assert '\\"' in rendered


def test_repr_of_numbers_contains_value():
    assert repr(Token(TokenKind.INT, 42)) == f"INT({42!r})"
    assert repr(Token(TokenKind.FLOAT, 0.5)) == f"FLOAT({0.5!r})"


def test_repr_of_plain_operator_is_its_name():
    for kind in (TokenKind.PLUS, TokenKind.PIPE, TokenKind.BRACE_CLOSE):
        assert repr(Token(kind)) == kind.name


@pytest.mark.parametrize(
    "kind,expected",
    [
        (TokenKind.PLUS, "`+`"),
        (TokenKind.FLOORDIV, "`//`"),
        (TokenKind.IDENT, "identifier"),
        (TokenKind.TEMPLATE_DATA, "template-data"),
        (TokenKind.VARIABLE_END, "end of variable block"),
        (TokenKind.BRACE_OPEN, "`{`"),
        (TokenKind.BRACE_CLOSE, "`}`"),
    ],
)
def test_str_is_description(kind, expected):
    assert str(Token(kind)) == expected


def test_str_ignores_payload():
    assert str(Token(TokenKind.STR, "anything")) == str(Token(TokenKind.STR, "other"))


def test_tokens_compare_by_kind_and_value():
    assert Token(TokenKind.INT, 1) == Token(TokenKind.INT, 1)
    assert Token(TokenKind.INT, 1) != Token(TokenKind.INT, 2)
    assert Token(TokenKind.BLOCK_END, True) != Token(TokenKind.VARIABLE_END, True)


def test_span_repr_format():
    span = Span(start_line=1, start_col=0, end_line=1, end_col=3)
    assert repr(span) == " @ 1:0-1:3"


def test_span_default_is_zero():
    assert Span() == Span(0, 0, 0, 0)