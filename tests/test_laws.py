"""Property-based checks of the monad laws and of bind's definition."""

from __future__ import annotations

from typing import Any

from hypothesis import given
from hypothesis import strategies as st

from mparse import Parser, bind, item, result, sequence, zero
from mparse.combinators import (
    associativity_holds,
    expand_bind,
    is_deterministic,
    left_identity_holds,
    right_identity_holds,
    sequence_via_bind,
)
from fakes import alternatives

# ============================================================================
# Strategies
# ============================================================================

_INPUTS = st.text(alphabet="ab↓é", max_size=6)

_LEAVES: st.SearchStrategy[Parser[Any]] = st.one_of(
    st.just(item()),
    st.just(zero()),
    st.integers(min_value=-3, max_value=3).map(result),
)


def _branch(children: st.SearchStrategy[Parser[Any]]) -> st.SearchStrategy[Parser[Any]]:
    return st.one_of(
        st.tuples(children, children).map(lambda pq: sequence(pq[0], pq[1])),
        st.tuples(children, children).map(lambda pq: alternatives(pq[0], pq[1])),
        children.map(lambda p: bind(item(), lambda _: p)),
    )


_PARSERS = st.recursive(_LEAVES, _branch, max_leaves=5)


def _constant(q: Parser[Any]):
    return lambda _v: q


def _pair_with_itself(v: Any) -> Parser[Any]:
    return result((v, v))


def _item_if_truthy(v: Any) -> Parser[Any]:
    return item() if v else zero()


_BINDERS = st.one_of(
    _PARSERS.map(_constant),
    st.just(_pair_with_itself),
    st.just(_item_if_truthy),
)

# ============================================================================
# Laws
# ============================================================================


@given(p=_PARSERS, f=_BINDERS, s=_INPUTS)
def test_bind_is_flattened_concatenation(p, f, s) -> None:
    assert bind(p, f).parse(s) == expand_bind(p, f, s)


@given(v=st.integers(), f=_BINDERS, s=_INPUTS)
def test_left_identity(v, f, s) -> None:
    assert left_identity_holds(v, f, s)


@given(p=_PARSERS, s=_INPUTS)
def test_right_identity(p, s) -> None:
    assert right_identity_holds(p, s)


@given(p=_PARSERS, f=_BINDERS, g=_BINDERS, s=_INPUTS)
def test_associativity(p, f, g, s) -> None:
    assert associativity_holds(p, f, g, s)


@given(p=_PARSERS, q=_PARSERS, s=_INPUTS)
def test_sequence_is_expressible_with_bind(p, q, s) -> None:
    assert sequence(p, q).parse(s) == sequence_via_bind(p, q).parse(s)


@given(p=_PARSERS, s=_INPUTS)
def test_parsers_are_deterministic(p, s) -> None:
    assert is_deterministic(p, s)


@given(p=_PARSERS, s=_INPUTS)
def test_every_remainder_is_a_suffix(p, s) -> None:
    for _, rest in p.parse(s):
        assert rest.source is s or rest.source == s
        assert s[: rest.offset] + str(rest) == s


@given(v=st.integers(), s=_INPUTS)
def test_result_returns_input_unchanged(v, s) -> None:
    assert result(v).parse(s) == [(v, s)]


@given(s=_INPUTS)
def test_zero_fails_everywhere(s) -> None:
    assert zero().parse(s) == []


def test_bind_with_item_example() -> None:
    assert expand_bind(item(), lambda _: item(), "brol") == [("r", "ol")]
