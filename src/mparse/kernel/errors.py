"""Error types for hard failures in the parser core.

Ordinary parse failure is an empty result list, never an exception.
"""

from __future__ import annotations


class ParserError(Exception):
    """Base class for errors raised by the parser core."""


class TextError(ParserError):
    """Error raised when an input view is built or moved out of bounds."""

    def __init__(self, message: str, source: str, offset: int) -> None:
        self.source = source
        self.offset = offset
        super().__init__(message)

    def __repr__(self) -> str:
        return f"TextError({super().__repr__()}, source={self.source!r}, offset={self.offset!r})"


class InvariantError(ParserError):
    """Error raised when a parser reports a remaining input that is not a
    suffix of the input it was given.

    This preserves the parser name and both inputs for debugging.
    """

    def __init__(self, message: str, name: str, input: object, remaining: object) -> None:
        self.name = name
        self.input = input
        self.remaining = remaining
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"InvariantError({super().__repr__()}, name={self.name!r}, "
            f"input={self.input!r}, remaining={self.remaining!r})"
        )
