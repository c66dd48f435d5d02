"""Exceptions raised by docnorm."""

from __future__ import annotations


class DocnormError(Exception):
    """Base exception for docnorm operations."""

    pass


class TagSyntaxError(DocnormError):
    """Raised when a documentation comment contains malformed tag syntax."""

    def __init__(self, message: str, line: int | None = None, text: str | None = None):
        if line is not None:
            message = f"{message} (line {line})"
        super().__init__(message)
        self.line = line
        self.text = text


class ExampleLoadError(DocnormError):
    """Raised when an external example reference cannot be loaded."""

    pass
