"""Combinator primitives: sequence, bind."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from mparse.kernel import Parser

T = TypeVar("T")
U = TypeVar("U")


def sequence(p: Parser[T], q: Parser[U]) -> Parser[tuple[T, U]]:
    """Run ``q`` after ``p`` and pair up their values.

    Semantics:
        - Outer loop over p's results, inner loop over q's results
        - Every combination is emitted as ((v, w), rest)
        - q is never run if p fails

    Args:
        p: The first parser
        q: The parser run on each remaining input of p

    Returns:
        Parser[tuple[T, U]]: The cross-product parser.
    """
    return p.sequence(q)


def bind(p: Parser[T], func: Callable[[T], Parser[U]]) -> Parser[U]:
    """Run ``p``, then the parser ``func`` picks from each of its values.

    Semantics:
        - For every (v, rest) of p, run func(v) on rest
        - Emit every result of every sub-parse, in order

    Args:
        p: The first parser
        func: Function from a parsed value to the next parser

    Returns:
        Parser[U]: The chained parser.
    """
    return p.bind(func)
