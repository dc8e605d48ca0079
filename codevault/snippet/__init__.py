"""Snippet data model, ID allocation and persistence."""

from .ids import next_id
from .model import Snippet, creation_timestamp
from .snippet_storage import SnippetStore

__all__ = ["Snippet", "SnippetStore", "creation_timestamp", "next_id"]
