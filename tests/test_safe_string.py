import pytest

from texmath.safe_string import SafeString, escape, unescape, wrap


SAMPLES = [
    "",
    "plain text",
    "a_b",
    "50% & $5 #1",
    "x^2~y",
    "{braces}",
    "\\",
    "\\{",
    "\\^{}",
    "\\hat{}",
    "\\sim x",
    "^~",
    "\\backslash ",
    "backslash",
    "\\\\}{_^~",
]


def test_escape_rewrites_reserved_characters() -> None:
    assert escape("a_b").to_text() == "a\\_b"
    assert escape("50% & $5").to_text() == "50\\% \\& \\$5"
    assert escape("#{x}").to_text() == "\\#\\{x\\}"
    assert escape("x^2~").to_text() == "x\\hat{}2\\sim "


def test_escape_handles_backslash_before_other_characters() -> None:
    # the backslash introduced for "{" must not be escaped again
    assert escape("\\{").to_text() == "\\backslash \\{"
    assert escape("^").to_text() == "\\hat{}"


def test_escape_is_idempotent() -> None:
    for sample in SAMPLES:
        once = escape(sample)
        assert escape(once) is once
        assert escape(escape(sample)) == once


def test_unescape_reverses_escape() -> None:
    for sample in SAMPLES:
        assert unescape(escape(sample)) == sample
        assert unescape(escape(sample).to_text()) == sample


def test_wrap_marks_text_without_inspection() -> None:
    markup = wrap("\\frac{1}{2}")
    assert markup.to_text() == "\\frac{1}{2}"
    assert escape(markup) is markup
    assert wrap(markup) is markup


def test_safe_string_display_forms() -> None:
    markup = SafeString("\\pi")
    assert str(markup) == "\\pi"
    assert repr(markup) == "tex'\\\\pi'"
    assert len(markup) == 3
    assert markup == wrap("\\pi")
    assert markup != "\\pi"


def test_escape_rejects_non_strings() -> None:
    with pytest.raises(TypeError):
        escape(5)
    with pytest.raises(TypeError):
        wrap(None)


def test_escape_uses_math_mode_commands() -> None:
    escaped = escape("x^2~y").to_text()
    assert escaped == "x\\hat{}2\\sim y"
    # text-mode accents do not compile inside math mode
    assert "\\^" not in escaped
    assert "\\~" not in escaped
