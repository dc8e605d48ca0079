"""JSON-file backed persistence for the snippet collection."""

from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from collections import Counter
from pathlib import Path
from typing import Callable, Iterable, List, Union

from pydantic import TypeAdapter, ValidationError

from ..errors import (
    DuplicateIdError,
    OperationCancelled,
    SnippetNotFoundError,
    StoreMissingError,
    StoreUnreadableError,
)
from .ids import next_id
from .model import Snippet

logger = logging.getLogger("codevault")

_COLLECTION_ADAPTER = TypeAdapter(List[Snippet])


class SnippetStore:
    """Owns the persisted collection; every mutation rewrites the whole file."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> List[Snippet]:
        """Read the whole collection.

        Raises:
            StoreMissingError: If no store file exists yet.
            StoreUnreadableError: If the file exists but is not a valid collection.
        """
        if not self.exists():
            raise StoreMissingError(self.path)
        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StoreUnreadableError(self.path, str(exc)) from exc

        try:
            snippets = _COLLECTION_ADAPTER.validate_json(raw)
        except ValidationError as exc:
            raise StoreUnreadableError(self.path, _summarize(exc)) from exc

        repeated = _repeated_ids(snippets)
        if repeated:
            joined = ", ".join(str(snippet_id) for snippet_id in repeated)
            raise StoreUnreadableError(self.path, f"duplicate snippet IDs: {joined}")

        logger.debug("Loaded %d snippets from %s", len(snippets), self.path)
        return snippets

    def load_or_empty(self) -> List[Snippet]:
        if not self.exists():
            return []
        return self.load()

    def allocate_id(self) -> int:
        """Return the next free ID; missing or unreadable stores start at 1."""
        try:
            collection = self.load()
        except StoreMissingError:
            return 1
        except StoreUnreadableError as exc:
            logger.warning("Allocating ID 1 because the store is unreadable: %s", exc.reason)
            return 1
        return next_id(collection)

    def append(self, snippet: Snippet) -> None:
        collection = self.load_or_empty()
        if any(existing.id == snippet.id for existing in collection):
            raise DuplicateIdError([snippet.id])
        collection.append(snippet)
        self._write(collection)
        logger.info("Stored snippet %d (%s)", snippet.id, snippet.tag)

    def replace_all(self, collection: Iterable[Snippet]) -> None:
        """Persist ``collection`` as the complete new state of the store."""
        snippets = list(collection)
        duplicates = _repeated_ids(snippets)
        if duplicates:
            raise DuplicateIdError(duplicates)
        self._write(snippets)

    def delete_by_ids(
        self,
        ids: Iterable[int],
        *,
        confirm: Callable[[str], bool],
    ) -> int:
        """Delete every requested ID, or nothing at all.

        All IDs are validated before the store is touched, then ``confirm`` must
        approve the deletion. A negative answer raises
        :class:`OperationCancelled` and leaves the store as it was.
        """
        requested = list(dict.fromkeys(ids))
        collection = self.load()
        present = {snippet.id for snippet in collection}
        missing = [snippet_id for snippet_id in requested if snippet_id not in present]
        if missing:
            raise SnippetNotFoundError(missing)
        if not requested:
            return 0

        noun = "snippets" if len(requested) > 1 else "snippet"
        joined = ", ".join(str(snippet_id) for snippet_id in requested)
        if not confirm(f"Are you sure you want to permanently delete {noun} {joined}?"):
            raise OperationCancelled("snippet deletion")

        doomed = set(requested)
        remaining = [snippet for snippet in collection if snippet.id not in doomed]
        deleted = len(collection) - len(remaining)
        self._write(remaining)
        logger.info("Deleted %d snippets from %s", deleted, self.path)
        return deleted

    def _write(self, collection: List[Snippet]) -> None:
        payload = json.dumps(
            [snippet.model_dump(mode="json") for snippet in collection],
            indent=2,
            ensure_ascii=False,
        )
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
                handle.write(payload)
                handle.write("\n")
                handle.flush()
                os.fsync(handle.fileno())
            os.chmod(tmp_name, self._file_mode())
            os.replace(tmp_name, self.path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise
        logger.debug("Wrote %d snippets to %s", len(collection), self.path)

    def _file_mode(self) -> int:
        # mkstemp creates 0600 files; keep the mode an existing store already has.
        try:
            return stat.S_IMODE(os.stat(self.path).st_mode)
        except FileNotFoundError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask


def _repeated_ids(snippets: List[Snippet]) -> List[int]:
    counts = Counter(snippet.id for snippet in snippets)
    return sorted(snippet_id for snippet_id, count in counts.items() if count > 1)


def _summarize(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "document"
    extra = exc.error_count() - 1
    suffix = f" (+{extra} more)" if extra > 0 else ""
    return f"{location}: {first.get('msg', 'invalid value')}{suffix}"


__all__ = ["SnippetStore"]
