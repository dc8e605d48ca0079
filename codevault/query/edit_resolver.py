"""Locate the snippet an edit should replace."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, Tuple, Union

from ..errors import (
    AmbiguousSelectorError,
    InvalidInputError,
    MissingSelectorError,
    SnippetNotFoundError,
    TagNotFoundError,
)
from ..snippet.model import Snippet
from .filter import matches_tag

logger = logging.getLogger("codevault")

ChooseId = Callable[[Sequence[int]], Union[int, str, None]]


def resolve_for_edit(
    collection: Sequence[Snippet],
    *,
    id: Optional[int] = None,
    tag: Optional[str] = None,
    choose_id: Optional[ChooseId] = None,
) -> Tuple[Snippet, List[Snippet]]:
    """Return the edit target and the collection without it.

    ``id`` wins over ``tag``. A tag matching several snippets is handed to
    ``choose_id`` with the candidate IDs; without a chooser the
    :class:`AmbiguousSelectorError` propagates.
    """
    if id is not None:
        return _take(collection, id)

    if tag is None or not tag.strip():
        raise MissingSelectorError("to edit a snippet, provide its ID or tag")

    query = tag.strip()
    candidates = [snippet for snippet in collection if matches_tag(snippet, [query])]
    if not candidates:
        raise TagNotFoundError(query)
    if len(candidates) == 1:
        return _take(collection, candidates[0].id)

    ambiguity = AmbiguousSelectorError(query, [snippet.id for snippet in candidates])
    if choose_id is None:
        raise ambiguity

    logger.debug("Tag %r matched %d snippets; asking for a choice", query, len(candidates))
    chosen = _parse_choice(choose_id(ambiguity.candidates))
    if chosen not in ambiguity.candidates:
        raise InvalidInputError(f"ID '{chosen}' is not in the list of matching snippets")
    return _take(collection, chosen)


def _parse_choice(raw: Union[int, str, None]) -> int:
    if isinstance(raw, bool):
        raise InvalidInputError("please enter a valid numeric ID from the list")
    if isinstance(raw, int):
        return raw
    try:
        return int(str(raw).strip())
    except ValueError:
        raise InvalidInputError("please enter a valid numeric ID from the list") from None


def _take(collection: Sequence[Snippet], snippet_id: int) -> Tuple[Snippet, List[Snippet]]:
    for index, snippet in enumerate(collection):
        if snippet.id == snippet_id:
            remaining = list(collection[:index]) + list(collection[index + 1:])
            return snippet, remaining
    raise SnippetNotFoundError([snippet_id])


__all__ = ["ChooseId", "resolve_for_edit"]
