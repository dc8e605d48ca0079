"""Terminal syntax highlighting backed by Pygments."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from pygments import highlight as pygments_highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexer import Lexer
from pygments.lexers import TextLexer, get_all_lexers, get_lexer_by_name
from pygments.util import ClassNotFound

logger = logging.getLogger("codevault")


class Highlighter:
    """Shared highlighter: build once, pass to every renderer that needs colour."""

    DEFAULT_STYLE = "default"

    def __init__(self, style: str = "monokai") -> None:
        try:
            self.formatter = Terminal256Formatter(style=style)
            self.style = style
        except ClassNotFound:
            logger.warning("Unknown highlight style %s; using %s", style, self.DEFAULT_STYLE)
            self.formatter = Terminal256Formatter(style=self.DEFAULT_STYLE)
            self.style = self.DEFAULT_STYLE
        self._names: Dict[str, str] = {}
        for name, aliases, _filenames, _mimetypes in get_all_lexers():
            if aliases:
                self._names.setdefault(name.casefold(), aliases[0])
        self._lexers: Dict[str, Lexer] = {}

    def highlight(self, code: str, language: Optional[str]) -> str:
        """Colour ``code`` for a terminal; unknown hints render as plain text."""
        if not code:
            return code
        lexer = self.lexer_for(language)
        rendered = pygments_highlight(code, lexer, self.formatter)
        if not code.endswith("\n") and rendered.endswith("\n"):
            rendered = rendered[:-1]
        return rendered

    def lexer_for(self, language: Optional[str]) -> Lexer:
        key = (language or "").strip().casefold()
        lexer = self._lexers.get(key)
        if lexer is None:
            lexer = self._resolve_lexer(key)
            self._lexers[key] = lexer
        return lexer

    def supported_languages(self) -> List[str]:
        """Return the display names of every language Pygments can colour."""
        return sorted({name for name, aliases, _f, _m in get_all_lexers() if aliases}, key=str.casefold)

    def _resolve_lexer(self, key: str) -> Lexer:
        options = {"stripnl": False, "ensurenl": False}
        if not key:
            return TextLexer(**options)
        for candidate in (key, self._names.get(key)):
            if not candidate:
                continue
            try:
                return get_lexer_by_name(candidate, **options)
            except ClassNotFound:
                continue
        logger.debug("No lexer for %r; falling back to plain text", key)
        return TextLexer(**options)


__all__ = ["Highlighter"]
