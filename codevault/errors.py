"""Error kinds raised by the snippet store and query engine.

Errors carry structured data and a plain message. Colouring and usage hints
are added by the command-line layer, never here.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Iterable, List, Sequence


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    AMBIGUOUS_SELECTOR = "ambiguous_selector"
    INVALID_INPUT = "invalid_input"
    STORE_UNREADABLE = "store_unreadable"
    STORE_MISSING = "store_missing"
    CANCELLED = "cancelled"


class VaultError(Exception):
    """Base class for every recoverable codevault failure."""

    kind: ErrorKind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class SnippetNotFoundError(VaultError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, ids: Iterable[int]) -> None:
        self.ids: List[int] = sorted(set(ids))
        joined = ", ".join(str(snippet_id) for snippet_id in self.ids)
        noun = "IDs" if len(self.ids) > 1 else "ID"
        super().__init__(f"snippet {noun} '{joined}' does not exist in the collection")


class TagNotFoundError(VaultError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"tag '{tag}' doesn't match any snippets")


class CriteriaNotFoundError(VaultError):
    """No snippet satisfies a combined tag/language selection."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, *, tags: Sequence[str] = (), languages: Sequence[str] = ()) -> None:
        self.tags = list(tags)
        self.languages = list(languages)
        parts = []
        if self.tags:
            parts.append(f"'{', '.join(self.tags)}' tags")
        if self.languages:
            parts.append(f"'{', '.join(self.languages)}' language")
        criteria = " and ".join(parts) or "the given criteria"
        super().__init__(f"no snippets match {criteria}")


class AmbiguousSelectorError(VaultError):
    kind = ErrorKind.AMBIGUOUS_SELECTOR

    def __init__(self, tag: str, candidates: Sequence[int]) -> None:
        self.tag = tag
        self.candidates = list(candidates)
        super().__init__(
            f"tag '{tag}' matches {len(self.candidates)} snippets: "
            + ", ".join(str(candidate) for candidate in self.candidates)
        )


class InvalidInputError(VaultError):
    kind = ErrorKind.INVALID_INPUT


class MissingSelectorError(InvalidInputError):
    def __init__(self, message: str = "missing selector: provide a snippet ID or tag") -> None:
        super().__init__(message)


class DuplicateIdError(InvalidInputError):
    def __init__(self, ids: Iterable[int]) -> None:
        self.ids = sorted(set(ids))
        super().__init__(
            "duplicate snippet IDs: " + ", ".join(str(snippet_id) for snippet_id in self.ids)
        )


class ExportDirectoryError(InvalidInputError):
    def __init__(self, directory: Path, reason: str) -> None:
        self.directory = Path(directory)
        self.reason = reason
        super().__init__(f"creating directory {self.directory}: {reason}")


class StoreMissingError(VaultError):
    kind = ErrorKind.STORE_MISSING

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__(f"snippet store not found at {self.path}; capture a snippet first")


class StoreUnreadableError(VaultError):
    kind = ErrorKind.STORE_UNREADABLE

    def __init__(self, path: Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"unable to read snippets from {self.path}: {reason}")


class OperationCancelled(VaultError):
    kind = ErrorKind.CANCELLED

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} cancelled")


__all__ = [
    "AmbiguousSelectorError",
    "CriteriaNotFoundError",
    "DuplicateIdError",
    "ErrorKind",
    "ExportDirectoryError",
    "InvalidInputError",
    "MissingSelectorError",
    "OperationCancelled",
    "SnippetNotFoundError",
    "StoreMissingError",
    "StoreUnreadableError",
    "TagNotFoundError",
    "VaultError",
]
