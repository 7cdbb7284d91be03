"""Kernel layer - the parser abstraction and its primitives."""

from mparse.kernel.errors import InvariantError, ParserError, TextError
from mparse.kernel.parser import Parser, item, result, zero
from mparse.kernel.text import Text
from mparse.kernel.trace import Evidence, Trace

__all__ = [
    "Parser",
    "Text",
    # Primitives
    "result",
    "zero",
    "item",
    # Errors
    "ParserError",
    "TextError",
    "InvariantError",
    # Tracing
    "Evidence",
    "Trace",
]
