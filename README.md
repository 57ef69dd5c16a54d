# tmplkit

The core pieces of a small Jinja-style template engine, in plain Python with
no dependencies beyond the standard library.

- `tmplkit.lexer`: turns template source into a stream of `(Token, Span)`
  pairs. It honours `{{- ... -}}` and `{%- ... -%}` whitespace control and
  skips `{# ... #}` comments.
- `tmplkit.tokens`: the `Token`, `TokenKind` and `Span` types that the lexer
  yields.
- `tmplkit.utils`: HTML escaping (`html_escape`), JSON-style string
  unescaping (`unescape`) and the `AutoEscape` setting (`NONE`, `HTML`).
- `tmplkit.key`: `Key` and `KeyKind`, the hashable and ordered map key, built
  with `make_string_key`, `key_from_value` and `to_key`.
- `tmplkit.testfuncs`: the built-in test functions (`is_odd`, `is_even`,
  `is_defined`, `is_undefined`, `is_number`, `is_string`, `is_sequence`,
  `is_mapping`, `is_startingwith`, `is_endingwith`), the `Undefined` marker
  value, and `get_builtin_tests()`.
- `tmplkit.errors`: `Error` and `ErrorKind`. These are raised for syntax
  errors, bad escapes, values that cannot be keys and invalid arguments.

## Installation

```
pip install tmplkit
```

## Tokenizing a template

```python
from tmplkit.lexer import tokenize

for token, span in tokenize("foo {{- bar -}} baz", False):
    print(repr(token), repr(span))
```

A `-` marker trims whitespace from the template data next to it. The example
therefore yields:

- `TEMPLATE_DATA("foo")`
- `VARIABLE_START(true)`
- `IDENT(bar)`
- `VARIABLE_END(true)`
- `TEMPLATE_DATA("baz")`

If the second argument is `True`, the source is read as a bare expression
rather than as a template. Tokens are produced lazily.

Malformed input raises `tmplkit.errors.Error` with kind
`ErrorKind.SYNTAX_ERROR`, for example for an unterminated string or comment,
or for an unexpected character. An integer literal that does not fit in a
signed 64-bit value raises the same error.

Each `Span` records a start and an end position as `line:column`. Lines count
from 1 and columns count from 0.

`find_marker(text)` returns the offset of the first `{{`, `{%` or `{#` in a
string. It returns `None` if there is none.

## Escaping

```python
from tmplkit.utils import html_escape, unescape

html_escape("<a href='/'>")   # '&lt;a href=&#x27;&#x2f;&#x27;&gt;'
unescape(r"foo\u2603bar")     # 'foo☃bar'
unescape(r"\ud83d\udca9")     # '💩'
```

`unescape` raises `Error` with kind `ErrorKind.BAD_ESCAPE` on a malformed
escape or an unpaired surrogate.

## Keys

```python
from tmplkit.key import key_from_value, make_string_key

key_from_value(2.0)          # integer key 2, since 4 / 2 yields a float
key_from_value(2.5)          # raises Error (ErrorKind.NON_KEY)
make_string_key("a").as_str()  # 'a'
```

Keys compare and sort in this order:

1. booleans
2. integers
3. characters
4. strings

`to_key` converts host values. Enum members become string keys of their
name. Floats, bytes, `None`, sequences, maps and other objects raise `Error`
with kind `ErrorKind.INVALID_OPERATION`.

## Test functions

```python
from tmplkit.testfuncs import Undefined, get_builtin_tests

tests = get_builtin_tests()
tests["odd"](3)                         # True
tests["defined"](Undefined())           # False
tests["startingwith"]("foobar", "foo")  # True
```

`is_startingwith` and `is_endingwith` raise `Error` with kind
`ErrorKind.INVALID_ARGUMENTS` when given something other than strings.

## What this package does not do

tmplkit provides only the pieces listed above. It has the following gaps:

- It has no parser.
- It has no compiler.
- It has no template environment.
- It does not render templates.
- It does not evaluate expressions.
- It does not load templates from disk.
- It has no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```