"""Shared utility modules for codevault."""

from .ansi import pad_visible, strip_ansi, visible_width
from .highlighter import Highlighter
from .languages import DEFAULT_EXTENSION, LANGUAGE_EXTENSIONS, extension_for

__all__ = [
    "DEFAULT_EXTENSION",
    "Highlighter",
    "LANGUAGE_EXTENSIONS",
    "extension_for",
    "pad_visible",
    "strip_ansi",
    "visible_width",
]
