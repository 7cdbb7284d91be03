"""Combinators - building larger parsers from smaller ones."""

from .laws import (
    associativity_holds,
    expand_bind,
    is_deterministic,
    left_identity_holds,
    right_identity_holds,
    sequence_via_bind,
)
from .ops import bind, sequence

__all__ = [
    "sequence",
    "bind",
    # Laws
    "expand_bind",
    "sequence_via_bind",
    "left_identity_holds",
    "right_identity_holds",
    "associativity_holds",
    "is_deterministic",
]
