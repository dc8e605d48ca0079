"""Filtering and selector resolution over snippet collections."""

from .edit_resolver import resolve_for_edit
from .filter import filter_snippets, parse_terms

__all__ = ["filter_snippets", "parse_terms", "resolve_for_edit"]
