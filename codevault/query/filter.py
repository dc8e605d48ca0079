"""Multi-dimension snippet filtering."""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..errors import SnippetNotFoundError
from ..snippet.model import Snippet


def parse_terms(raw: Optional[str]) -> List[str]:
    """Split a comma-separated filter value into trimmed, non-empty terms."""
    if raw is None:
        return []
    return [term.strip() for term in raw.split(",") if term.strip()]


def _contains_any(value: Optional[str], terms: List[str]) -> bool:
    if value is None:
        return False
    haystack = value.casefold()
    return any(term.casefold() in haystack for term in terms)


def matches_tag(snippet: Snippet, terms: List[str]) -> bool:
    return not terms or _contains_any(snippet.tag, terms)


def matches_language(snippet: Snippet, terms: List[str]) -> bool:
    return not terms or _contains_any(snippet.language, terms)


def matches_keyword(snippet: Snippet, terms: List[str]) -> bool:
    if not terms:
        return True
    return any(
        _contains_any(field, terms)
        for field in (snippet.tag, snippet.description, snippet.code)
    )


def filter_snippets(
    collection: Iterable[Snippet],
    *,
    tag: Optional[str] = None,
    language: Optional[str] = None,
    keyword: Optional[str] = None,
    id: Optional[int] = None,
) -> List[Snippet]:
    """Return the snippets passing every supplied dimension, in collection order.

    Each dimension ORs its comma-separated terms with case-insensitive
    substring matching; dimensions are ANDed. ``id`` narrows the result
    afterwards and raises :class:`SnippetNotFoundError` when it is not among
    the survivors.
    """
    tag_terms = parse_terms(tag)
    language_terms = parse_terms(language)
    keyword_terms = parse_terms(keyword)

    selected = [
        snippet
        for snippet in collection
        if matches_tag(snippet, tag_terms)
        and matches_language(snippet, language_terms)
        and matches_keyword(snippet, keyword_terms)
    ]

    if id is not None:
        selected = [snippet for snippet in selected if snippet.id == id]
        if not selected:
            raise SnippetNotFoundError([id])

    return selected


__all__ = [
    "filter_snippets",
    "matches_keyword",
    "matches_language",
    "matches_tag",
    "parse_terms",
]
