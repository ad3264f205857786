"""End-to-end translation tests over hand-built trees."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from texmath.errors import ArityError, ClassificationError
from texmath.expr import Call, Identifier, Literal, call
from texmath.notation import NotationTable
from texmath.safe_string import SafeString, escape
from texmath.translator import Translator, render_literal, translate


def test_known_symbol() -> None:
    assert translate(Identifier("pi")).to_text() == "\\pi"


def test_unknown_identifier_renders_as_itself() -> None:
    assert translate(Identifier("x")).to_text() == "x"


def test_known_unary_function() -> None:
    assert translate(call("sqrt", Identifier("x"))).to_text() == "\\sqrt{x}"


def test_unknown_call_uses_opaque_rendering() -> None:
    tree = call("+", Identifier("pi"), call("foo", Identifier("a")))
    assert translate(tree).to_text() == "\\pi + \\mathrm{foo}(a)"


def test_arity_mismatch_is_fatal() -> None:
    tree = call("sqrt", Identifier("x"), Identifier("y"))
    with pytest.raises(ArityError) as excinfo:
        translate(tree)
    assert excinfo.value.name == "sqrt"
    assert excinfo.value.expected == 1
    assert excinfo.value.actual == 2


def test_result_is_marked_markup() -> None:
    result = translate(call("/", Identifier("a"), Literal(2)))
    assert isinstance(result, SafeString)
    assert result.to_text() == "\\frac{a}{2}"
    assert escape(result) is result


def test_fallback_totality_for_unknown_names() -> None:
    tree = call("f", Identifier("f"), call("g", Identifier("h"), call("f")))
    assert translate(tree).to_text() == "\\mathrm{f}(f, \\mathrm{g}(h, \\mathrm{f}()))"


def test_function_name_used_as_value_renders_as_itself() -> None:
    assert translate(call("+", Identifier("sqrt"), Literal(1))).to_text() == "sqrt + 1"


def test_literals_are_escaped() -> None:
    assert render_literal(3) == "3"
    assert render_literal(2.5) == "2.5"
    assert translate(Literal("50%")).to_text() == "50\\%"
    assert translate(Literal("x^2~y")).to_text() == "x\\hat{}2\\sim y"
    assert translate(Literal(SafeString("\\alpha_1"))).to_text() == "\\alpha_1"


def test_nested_templates() -> None:
    tree = call("**", call("paren", call("-", Identifier("x"), Identifier("mu"))), Literal(2))
    assert translate(tree).to_text() == "{\\left(x - \\mu\\right)}^{2}"


def test_unclassifiable_node_fails_without_output() -> None:
    with pytest.raises(ClassificationError):
        translate(Call("+", (Identifier("x"), "y")))


def test_custom_notation() -> None:
    notation = NotationTable.from_specs(
        {"x": "\\xi"},
        {"f": {"kind": "wrap", "prefix": "F(", "suffix": ")"}},
    )
    translator = Translator(notation)
    assert translator.translate(call("f", Identifier("x"))).to_text() == "F(\\xi)"
    assert translator.translate(call("+", Identifier("pi"))).to_text() == "\\mathrm{+}(pi)"


def test_debug_logging_reports_fallbacks(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="texmath.translator"):
        translate(call("foo", Identifier("x")))
    assert "fallback functions=['foo']" in caplog.text
    assert "fallback symbols=['x']" in caplog.text


def test_concurrent_translations_are_independent() -> None:
    trees = [call("+", Identifier(f"x{index}"), call(f"f{index}", Identifier("pi"))) for index in range(40)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda tree: translate(tree).to_text(), trees))
    assert results == [f"x{index} + \\mathrm{{f{index}}}(\\pi)" for index in range(40)]
