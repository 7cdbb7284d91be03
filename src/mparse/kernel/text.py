"""Input views - a shared immutable string plus an offset."""

from __future__ import annotations

from dataclasses import dataclass

from mparse.kernel.errors import TextError


@dataclass(frozen=True, eq=False)
class Text:
    """The unconsumed suffix ``source[offset:]`` of some input.

    Views never copy ``source``: advancing returns a new view over the
    same string. Positions count code points, so a multi-byte character
    is always consumed as one unit.

    Attributes:
        source: The full original input
        offset: Index of the first unconsumed code point
    """

    source: str
    offset: int = 0

    def __post_init__(self) -> None:
        if self.offset < 0 or self.offset > len(self.source):
            raise TextError(
                f"Offset {self.offset} is outside of input of length {len(self.source)}",
                self.source,
                self.offset,
            )

    @staticmethod
    def of(value: str | Text) -> Text:
        """Wrap a plain string at offset 0. Existing views are returned as-is."""
        if isinstance(value, Text):
            return value
        return Text(value)

    def first(self) -> str | None:
        if self.offset < len(self.source):
            return self.source[self.offset]
        return None

    def advance(self, count: int = 1) -> Text:
        """Return the view ``count`` code points further along the same source."""
        if count < 0:
            raise TextError(f"Cannot advance by {count}", self.source, self.offset)
        return Text(self.source, self.offset + count)

    def is_suffix_of(self, other: Text) -> bool:
        same_source = self.source is other.source or self.source == other.source
        return same_source and self.offset >= other.offset

    def consumed_from(self, other: Text) -> str:
        """The prefix of ``other`` that was consumed to reach this view."""
        if not self.is_suffix_of(other):
            raise TextError("View is not a suffix of the given input", self.source, self.offset)
        return self.source[other.offset:self.offset]

    def __str__(self) -> str:
        return self.source[self.offset:]

    def __len__(self) -> int:
        return len(self.source) - self.offset

    def __bool__(self) -> bool:
        return self.offset < len(self.source)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Text):
            return str(self) == str(other)
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))

    def __repr__(self) -> str:
        return f"Text({str(self)!r}, offset={self.offset})"
