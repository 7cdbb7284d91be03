from mparse import Text, item, result, zero


def test_result_succeeds_without_consuming_input() -> None:
    assert result(42).parse("brol") == [(42, "brol")]
    assert result("x").parse("") == [("x", "")]


def test_result_keeps_the_same_view() -> None:
    text = Text("brol", 1)
    [(value, rest)] = result(None).parse(text)
    assert value is None
    assert rest is text


def test_zero_always_fails() -> None:
    assert zero().parse("brol") == []
    assert zero().parse("") == []


def test_item_consumes_the_first_char() -> None:
    assert item().parse("") == []
    assert item().parse("a") == [("a", "")]
    assert item().parse("↓") == [("↓", "")]
    assert item().parse("brol") == [("b", "rol")]
    assert item().parse("↓brol") == [("↓", "brol")]


def test_item_remainder_is_a_view_of_the_input() -> None:
    source = "brol"
    [(_, rest)] = item().parse(source)
    assert isinstance(rest, Text)
    assert rest.source is source
    assert rest.offset == 1


def test_item_continues_from_a_view() -> None:
    assert item().parse(Text("brol", 3)) == [("l", "")]
    assert item().parse(Text("brol", 4)) == []


def test_parsers_are_reusable() -> None:
    p = item()
    assert p.parse("ab") == [("a", "b")]
    assert p.parse("ab") == [("a", "b")]
    assert p.parse("cd") == [("c", "d")]


def test_primitive_names() -> None:
    assert result(1).name == "result"
    assert zero().name == "zero"
    assert item().name == "item"
    assert item().named("char").name == "char"
    assert item().named("char").parse("ab") == [("a", "b")]
