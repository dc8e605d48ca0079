"""Core package for the codevault snippet manager."""

from .config import VaultConfig
from .errors import ErrorKind, VaultError
from .export import ExportReport, export_snippets
from .query import filter_snippets, resolve_for_edit
from .render import BoxRenderer
from .service import EditUpdate, VaultService
from .snippet import Snippet, SnippetStore, next_id
from .utils import Highlighter, visible_width

__all__ = [
    "BoxRenderer",
    "EditUpdate",
    "ErrorKind",
    "ExportReport",
    "Highlighter",
    "Snippet",
    "SnippetStore",
    "VaultConfig",
    "VaultError",
    "VaultService",
    "export_snippets",
    "filter_snippets",
    "next_id",
    "resolve_for_edit",
    "visible_width",
]
