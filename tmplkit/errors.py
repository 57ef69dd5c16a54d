"""Error type raised by the template engine."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """The category of an engine error, valued by its description."""

    NON_KEY = "not a key type"
    INVALID_OPERATION = "invalid operation"
    IMPOSSIBLE_OPERATION = "impossible operation"
    INVALID_ARGUMENTS = "invalid arguments"
    SYNTAX_ERROR = "syntax error"
    TEMPLATE_NOT_FOUND = "template not found"
    BAD_ESCAPE = "bad string escape"

    @property
    def description(self) -> str:
        return self.value


class Error(Exception):
    """An engine error with a kind and an optional detail message."""

    def __init__(self, kind: ErrorKind, detail: str | None = None) -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(str(self))

    @classmethod
    def not_found(cls, name: str) -> "Error":
        """Build the error for a template that cannot be found."""
        return cls(ErrorKind.TEMPLATE_NOT_FOUND, f"template {name!r} does not exist")

    def __str__(self) -> str:
        if self.detail:
            return f"{self.kind.description}: {self.detail}"
        return self.kind.description