"""Combinator laws as executable checks.

Parsers satisfy the monad laws:

1. Left identity: bind(result(v), f) == f(v)
2. Right identity: bind(p, result) == p
3. Associativity: bind(bind(p, f), g) == bind(p, lambda x: bind(f(x), g))

and sequence is derived from bind:

    sequence(p, q) == bind(p, lambda v: bind(q, lambda w: result((v, w))))

Two parsers are equal here when they return the same ordered results on
the same input.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from mparse.kernel import Parser, Text, result

from .ops import bind

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")


def expand_bind(p: Parser[T], func: Callable[[T], Parser[U]], inp: str | Text) -> list[tuple[U, Text]]:
    """Concatenate, in order, ``func(v).parse(rest)`` for each (v, rest) of ``p``."""
    expanded: list[tuple[U, Text]] = []
    for value, rest in p.parse(inp):
        expanded.extend(func(value).parse(rest))
    return expanded


def sequence_via_bind(p: Parser[T], q: Parser[U]) -> Parser[tuple[T, U]]:
    return bind(p, lambda v: bind(q, lambda w: result((v, w))))


def left_identity_holds(value: T, func: Callable[[T], Parser[U]], inp: str | Text) -> bool:
    return bind(result(value), func).parse(inp) == func(value).parse(inp)


def right_identity_holds(p: Parser[Any], inp: str | Text) -> bool:
    return bind(p, result).parse(inp) == p.parse(inp)


def associativity_holds(
    p: Parser[T],
    f: Callable[[T], Parser[U]],
    g: Callable[[U], Parser[R]],
    inp: str | Text,
) -> bool:
    left = bind(bind(p, f), g)
    right = bind(p, lambda x: bind(f(x), g))
    return left.parse(inp) == right.parse(inp)


def is_deterministic(p: Parser[Any], inp: str | Text) -> bool:
    return p.parse(inp) == p.parse(inp)
