import pytest

from codevault.render import BoxRenderer
from codevault.snippet import Snippet
from codevault.utils.ansi import strip_ansi, visible_width


class _FakeHighlighter:
    """Wraps every token in several escapes to stress the width math."""

    def __init__(self):
        self.calls = []

    def highlight(self, code, language):
        self.calls.append(language)
        return "\n".join(
            f"\x1b[1m\x1b[38;2;10;20;30m{line}\x1b[0m\x1b[0m" for line in code.splitlines()
        )


def _snippet(**overrides):
    fields = {
        "id": 12,
        "tag": "http",
        "description": "fetch a page",
        "code": "import requests\nresponse = requests.get(url, timeout=10)\n",
        "language": "Python",
        "timestamp": "2024-01-01 10:00:00",
    }
    fields.update(overrides)
    return Snippet(**fields)


def test_full_render_lines_share_one_visible_width():
    lines = BoxRenderer(_FakeHighlighter()).render(_snippet(), "full")

    widths = {visible_width(line) for line in lines}
    assert len(widths) == 1


def test_width_is_longest_line_plus_four():
    snippet = _snippet()
    lines = BoxRenderer().render(snippet, "full")

    longest = len("  response = requests.get(url, timeout=10)")
    top = strip_ansi(lines[0])
    assert top == "╔" + "═" * (longest + 4) + "╗"


def test_full_render_structure():
    lines = [strip_ansi(line) for line in BoxRenderer().render(_snippet(), "full")]

    assert lines[0].startswith("╔") and lines[-1].startswith("╚")
    assert lines[1].startswith("║  ID: 12")
    assert lines[2].startswith("║  Snippet's Tag: http")
    assert lines[3].startswith("║  Created: 2024-01-01 10:00:00")
    assert lines[4].startswith("║  Description: fetch a page")
    assert lines[5].startswith("╟─")
    assert lines[6].startswith("║  Code:")
    assert lines[7].startswith("║  import requests")
    assert all(line.endswith(("║", "╗", "╢", "╝")) for line in lines)


def test_summary_render_omits_code_and_separator():
    lines = [strip_ansi(line) for line in BoxRenderer().render(_snippet(), "summary")]

    assert len(lines) == 6
    assert lines[2].startswith("║  Tag: http")
    assert not any("import requests" in line for line in lines)
    assert not any(line.startswith("╟") for line in lines)


def test_missing_description_line_is_skipped():
    lines = [strip_ansi(line) for line in BoxRenderer().render(_snippet(description=None), "summary")]

    assert len(lines) == 5
    assert not any("Description" in line for line in lines)


def test_multiline_description_wraps_inside_the_box():
    snippet = _snippet(description="first line\nsecond, much longer line\r\nthird")
    lines = BoxRenderer().render(snippet, "summary")

    assert not any("\n" in line or "\r" in line for line in lines)
    assert len({visible_width(line) for line in lines}) == 1

    plain = [strip_ansi(line) for line in lines]
    assert len(plain) == 8
    assert plain[4].startswith("║  Description: first line")
    assert plain[5].startswith("║               second, much longer line")
    assert plain[6].startswith("║               third")


def test_multiline_tag_keeps_full_box_aligned():
    lines = BoxRenderer(_FakeHighlighter()).render(_snippet(tag="web\nhttp"), "full")

    assert len({visible_width(line) for line in lines}) == 1
    assert strip_ansi(lines[3]).startswith("║                 http")


def test_empty_description_still_gets_a_row():
    plain = [strip_ansi(line) for line in BoxRenderer().render(_snippet(description=""), "summary")]

    assert len(plain) == 6
    assert plain[4].startswith("║  Description: ")


def test_highlighter_only_used_when_language_present():
    highlighter = _FakeHighlighter()
    renderer = BoxRenderer(highlighter)

    renderer.render(_snippet(language=None), "full")
    renderer.render(_snippet(), "full")

    assert highlighter.calls == ["Python"]


def test_empty_code_renders_header_only():
    lines = [strip_ansi(line) for line in BoxRenderer().render(_snippet(code=""), "full")]

    assert lines[-2].startswith("║  Code:")


def test_unknown_mode_rejected():
    with pytest.raises(ValueError):
        BoxRenderer().render(_snippet(), "compact")


def test_render_many_separates_blocks():
    lines = BoxRenderer().render_many([_snippet(), _snippet(id=13)], "summary")

    assert lines.count("") == 2
    assert len(lines) == 14
