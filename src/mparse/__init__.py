from .combinators import bind, sequence
from .kernel import (
    Evidence,
    InvariantError,
    Parser,
    ParserError,
    Text,
    TextError,
    Trace,
    item,
    result,
    zero,
)

__all__ = [
    # Core
    "Parser",
    "Text",
    # Primitives
    "result",
    "zero",
    "item",
    # Combinators
    "sequence",
    "bind",
    # Errors
    "ParserError",
    "TextError",
    "InvariantError",
    # Tracing
    "Trace",
    "Evidence",
]
