"""Pieces of a small Jinja-style template engine: lexer, tokens, keys, escaping, tests, errors."""

__version__ = "0.1.0"

__all__ = ["errors", "tokens", "utils", "lexer", "key", "testfuncs"]