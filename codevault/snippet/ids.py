from __future__ import annotations

from typing import Iterable

from .model import Snippet


def next_id(collection: Iterable[Snippet]) -> int:
    """Return one past the largest ID in use, or 1 for an empty collection.

    Allocation follows the current maximum only, so IDs freed by deletion
    are never handed out again while a larger ID is still stored.
    """
    return max((snippet.id for snippet in collection), default=0) + 1


__all__ = ["next_id"]
