from __future__ import annotations

import logging
from collections.abc import Callable

from mparse import Parser, bind, item, result, sequence, zero


def sat(predicate: Callable[[str], bool]) -> Parser[str]:
    """Consume one character if it satisfies ``predicate``."""
    return bind(item(), lambda c: result(c) if predicate(c) else zero()).named("sat")


def digit() -> Parser[int]:
    return bind(sat(str.isdecimal), lambda c: result(int(c))).named("digit")


def two_digit_number() -> Parser[int]:
    return bind(sequence(digit(), digit()), lambda pair: result(pair[0] * 10 + pair[1]))


def char_then_same() -> Parser[str]:
    # The second parser depends on the first value: "aa" parses, "ab" does not.
    return bind(item(), lambda c: sat(lambda d: d == c))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    for text in ["42 apples", "4 apples", "↓1"]:
        print(f"{text!r}: {two_digit_number().parse(text)}")

    for text in ["aab", "abb"]:
        print(f"{text!r}: {char_then_same().parse(text)}")
