"""Parser monad - core parsing primitive."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from mparse.kernel.errors import InvariantError
from mparse.kernel.text import Text
from mparse.kernel.trace import Trace

T = TypeVar("T")
U = TypeVar("U")

logger = logging.getLogger(__name__)


Run = Callable[[Text, Trace | None], list[tuple[T, Text]]]


@dataclass(frozen=True)
class Parser(Generic[T]):
    """Parser monad - a wrapper around a function from an input view to every
    way of consuming a prefix of it.

    Each result pairs a value with the remaining input. An empty list is
    failure; more than one result is ambiguity. Parsers are immutable and
    may be run any number of times on any input.
    """

    _run: Run[T]
    name: str = "parser"

    def parse(self, inp: str | Text, trace: Trace | None = None) -> list[tuple[T, Text]]:
        """Parse a string and return every (value, remaining input) pair.

        Args:
            inp: The input, as a plain string or an existing view
            trace: Optional trace that records every parser run

        Returns:
            Ordered list of results; empty if the parser fails
        """
        return self.run(Text.of(inp), trace)

    def run(self, inp: Text, trace: Trace | None = None) -> list[tuple[T, Text]]:
        """Run the parser on a view and check the suffix invariant.

        Raises:
            InvariantError: If a remaining input is not a suffix of ``inp``
        """
        event_id: int | None = None

        try:
            if trace is not None:
                event_id = trace.record(
                    "parse_begin",
                    info={"parser": self.name, "offset": inp.offset},
                )
                if event_id is not None:
                    trace.push(event_id)

            start_time = time.perf_counter()
            try:
                results = list(self._run(inp, trace))
                for _, rest in results:
                    if not isinstance(rest, Text) or not rest.is_suffix_of(inp):
                        logger.error(
                            "%s returned %r which is not a suffix of %r",
                            self.name, rest, inp,
                        )
                        raise InvariantError(
                            f"Parser '{self.name}' returned a remaining input that is not a suffix of its input",
                            self.name,
                            inp,
                            rest,
                        )
            except Exception as exc:
                if trace is not None:
                    trace.record(
                        "parse_error",
                        info={"parser": self.name, "error": str(exc)},
                        parent_id=event_id,
                    )
                raise
            duration_ms = (time.perf_counter() - start_time) * 1000

            logger.debug("%s at offset %d: %d result(s)", self.name, inp.offset, len(results))
            if trace is not None:
                trace.record(
                    "parse_end",
                    info={"parser": self.name, "results": len(results)},
                    parent_id=event_id,
                    duration_ms=duration_ms,
                )

            return results
        finally:
            if trace is not None and event_id is not None:
                trace.pop()

    def _create(self, run_func: Run[U], name: str) -> Parser[U]:
        """Create a new parser instance."""
        return Parser(_run=run_func, name=name)

    def named(self, name: str) -> Parser[T]:
        """Return the same parser under another name for traces and logs."""
        return self._create(self._run, name)

    def bind(self, func: Callable[[T], Parser[U]]) -> Parser[U]:
        """Chain a parser chosen from the value produced by this one.

        For every (value, rest) of this parser, ``func(value)`` is run on
        ``rest`` and all of its results are emitted, in order.

        Args:
            func: Function that takes a parsed value and returns the next parser

        Returns:
            New parser with the chained step
        """
        def new_run(inp: Text, trace: Trace | None) -> list[tuple[U, Text]]:
            results: list[tuple[U, Text]] = []
            for value, rest in self.run(inp, trace):
                results.extend(func(value).run(rest, trace))
            return results

        return self._create(new_run, f"bind({self.name})")

    def sequence(self, other: Parser[U]) -> Parser[tuple[T, U]]:
        """Run ``other`` after this parser and pair up their values.

        The results are the full cross-product: outer loop over this
        parser's results, inner loop over ``other``'s. ``other`` is not
        run at all if this parser fails.
        """
        def new_run(inp: Text, trace: Trace | None) -> list[tuple[tuple[T, U], Text]]:
            results: list[tuple[tuple[T, U], Text]] = []
            for first, rest1 in self.run(inp, trace):
                for second, rest2 in other.run(rest1, trace):
                    results.append(((first, second), rest2))
            return results

        return self._create(new_run, f"sequence({self.name}, {other.name})")


def result(value: T) -> Parser[T]:
    """Succeed with ``value`` without consuming any input."""
    def run_func(inp: Text, _: Trace | None) -> list[tuple[T, Text]]:
        return [(value, inp)]

    return Parser(_run=run_func, name="result")


def zero() -> Parser[Any]:
    """Always fail."""
    def run_func(inp: Text, _: Trace | None) -> list[tuple[Any, Text]]:
        return []

    return Parser(_run=run_func, name="zero")


def item() -> Parser[str]:
    """Consume exactly one character, failing on empty input."""
    def run_func(inp: Text, _: Trace | None) -> list[tuple[str, Text]]:
        char = inp.first()
        if char is None:
            return []
        return [(char, inp.advance())]

    return Parser(_run=run_func, name="item")
