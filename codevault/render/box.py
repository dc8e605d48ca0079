"""Bordered terminal blocks for snippets."""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..snippet.model import Snippet
from ..utils.ansi import pad_visible, visible_width
from ..utils.highlighter import Highlighter

RESET = "\x1b[0m"
BLUE = "\x1b[34m"
LABEL = "\x1b[33;1m"
VALUE = "\x1b[35;1m"

MODE_FULL = "full"
MODE_SUMMARY = "summary"


class BoxRenderer:
    """Lay out snippets as fixed-width boxes whose borders line up in colour."""

    def __init__(self, highlighter: Optional[Highlighter] = None, *, border_color: str = BLUE) -> None:
        self.highlighter = highlighter
        self.border_color = border_color

    def render(self, snippet: Snippet, mode: str = MODE_FULL) -> List[str]:
        if mode not in (MODE_FULL, MODE_SUMMARY):
            raise ValueError(f"Unknown render mode: {mode}")
        full = mode == MODE_FULL

        labels: List[str] = []
        labels.extend(_field("ID", str(snippet.id)))
        labels.extend(_field("Snippet's Tag" if full else "Tag", snippet.tag))
        labels.extend(_field("Created", snippet.timestamp))
        if snippet.description is not None:
            labels.extend(_field("Description", snippet.description))

        code_lines: List[str] = []
        if full:
            code_lines.append(f"  {LABEL}Code:{RESET}")
            code_lines.extend(f"  {line}" for line in self._code_lines(snippet))

        width = max(visible_width(line) for line in labels + code_lines) + 4

        lines = [self._rule("╔", "═", "╗", width)]
        lines.extend(self._row(line, width) for line in labels)
        if full:
            lines.append(self._rule("╟", "─", "╢", width))
            lines.extend(self._row(line, width) for line in code_lines)
        lines.append(self._rule("╚", "═", "╝", width))
        return lines

    def render_many(self, snippets: Iterable[Snippet], mode: str = MODE_FULL) -> List[str]:
        lines: List[str] = []
        for snippet in snippets:
            lines.extend(self.render(snippet, mode))
            lines.append("")
        return lines

    def _code_lines(self, snippet: Snippet) -> List[str]:
        code = snippet.code
        if self.highlighter is not None and snippet.language:
            code = self.highlighter.highlight(code, snippet.language)
        return code.splitlines()

    def _rule(self, left: str, fill: str, right: str, width: int) -> str:
        return f"{self.border_color}{left}{fill * width}{right}{RESET}"

    def _row(self, content: str, width: int) -> str:
        edge = f"{self.border_color}║{RESET}"
        return f"{edge}{pad_visible(content, width)}{edge}"


def _field(label: str, value: str) -> List[str]:
    """One row per line of ``value``; continuation rows line up under the first."""
    first, *rest = value.splitlines() or [""]
    indent = " " * (len(label) + 2)
    rows = [f"  {LABEL}{label}:{RESET} {VALUE}{first}{RESET}"]
    rows.extend(f"  {indent}{VALUE}{line}{RESET}" for line in rest)
    return rows


__all__ = ["BLUE", "BoxRenderer", "MODE_FULL", "MODE_SUMMARY"]
