from codevault.utils.ansi import strip_ansi
from codevault.utils.highlighter import Highlighter


def test_highlight_adds_color_without_changing_text():
    highlighter = Highlighter()
    code = "def add(a, b):\n    return a + b"

    rendered = highlighter.highlight(code, "Python")

    assert "\x1b[" in rendered
    assert strip_ansi(rendered) == code


def test_unknown_language_falls_back_to_plain_text():
    highlighter = Highlighter()
    code = "just some words\nacross lines"

    rendered = highlighter.highlight(code, "no-such-language")

    assert strip_ansi(rendered) == code


def test_lexer_resolved_by_display_name_and_cached():
    highlighter = Highlighter()

    first = highlighter.lexer_for("JavaScript")
    second = highlighter.lexer_for("javascript")

    assert first is second
    assert first.name == "JavaScript"


def test_unknown_style_falls_back_to_default():
    highlighter = Highlighter(style="definitely-not-a-style")

    assert highlighter.style == Highlighter.DEFAULT_STYLE


def test_supported_languages_lists_display_names():
    languages = Highlighter().supported_languages()

    assert "Python" in languages
    assert len(languages) == len(set(languages))
