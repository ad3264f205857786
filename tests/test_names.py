from texmath.expr import Identifier, Literal, call
from texmath.names import call_heads, free_identifiers


def test_leaves() -> None:
    assert free_identifiers(Literal(1)) == ()
    assert call_heads(Literal(1)) == ()
    assert free_identifiers(Identifier("x")) == ("x",)
    assert call_heads(Identifier("x")) == ()


def test_call_head_is_not_a_free_identifier() -> None:
    tree = call("f", Identifier("g"))
    assert free_identifiers(tree) == ("g",)
    assert call_heads(tree) == ("f",)


def test_names_are_deduplicated_in_first_encountered_order() -> None:
    tree = call(
        "+",
        Identifier("y"),
        call("f", Identifier("x"), Identifier("y"), call("g", Literal(2))),
        call("f", Identifier("x")),
    )
    assert free_identifiers(tree) == ("y", "x")
    assert call_heads(tree) == ("+", "f", "g")


def test_name_used_as_value_and_head() -> None:
    tree = call("f", Identifier("f"))
    assert free_identifiers(tree) == ("f",)
    assert call_heads(tree) == ("f",)
