"""Command-level operations composed from the store and query engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Union

from .errors import (
    CriteriaNotFoundError,
    InvalidInputError,
    MissingSelectorError,
    SnippetNotFoundError,
)
from .export import ExportReport, export_snippets
from .query.edit_resolver import ChooseId, resolve_for_edit
from .query.filter import filter_snippets, parse_terms
from .render.box import BoxRenderer
from .snippet.ids import next_id
from .snippet.model import Snippet, creation_timestamp
from .snippet.snippet_storage import SnippetStore
from .utils.highlighter import Highlighter

logger = logging.getLogger("codevault")

Confirm = Callable[[str], bool]


@dataclass
class EditUpdate:
    """Replacement values for an edit; ``None`` keeps the current value."""

    tag: Optional[str] = None
    description: Optional[str] = None
    language: Optional[str] = None
    code: Optional[str] = None

    def apply(self, snippet: Snippet, *, new_id: int) -> Snippet:
        changes: dict = {"id": new_id}
        for name in ("tag", "description", "language"):
            value = getattr(self, name)
            if value is not None and value.strip():
                changes[name] = value.strip()
        if self.code is not None:
            changes["code"] = self.code
        # Creation time survives edits.
        return Snippet.model_validate({**snippet.model_dump(), **changes})


def parse_id_list(raw: Optional[str]) -> List[int]:
    """Parse ``"3, 7"`` into ``[3, 7]``."""
    if raw is None or not raw.strip():
        raise MissingSelectorError("missing snippet ID")
    ids: List[int] = []
    for part in raw.split(","):
        token = part.strip()
        if not (token.isascii() and token.isdigit()):
            raise InvalidInputError(f"invalid ID format: '{token}'")
        ids.append(int(token))
    return ids


class VaultService:
    """Glue between the command line and the snippet core."""

    def __init__(
        self,
        store: SnippetStore,
        highlighter: Optional[Highlighter] = None,
        renderer: Optional[BoxRenderer] = None,
    ) -> None:
        self.store = store
        self.highlighter = highlighter
        self.renderer = renderer or BoxRenderer(highlighter)

    def capture(
        self,
        tag: str,
        code: str,
        *,
        description: Optional[str] = None,
        language: Optional[str] = None,
    ) -> Snippet:
        if not tag or not tag.strip():
            raise InvalidInputError("a snippet needs a non-empty tag")
        snippet = Snippet(
            id=self.store.allocate_id(),
            tag=tag.strip(),
            description=description,
            code=code,
            language=language,
            timestamp=creation_timestamp(),
        )
        self.store.append(snippet)
        return snippet

    def view(
        self,
        *,
        id: Optional[int] = None,
        tag: Optional[str] = None,
        language: Optional[str] = None,
        keyword: Optional[str] = None,
    ) -> List[Snippet]:
        collection = self.store.load()
        return filter_snippets(collection, tag=tag, language=language, keyword=keyword, id=id)

    def copy(self, id: Optional[int]) -> Snippet:
        if id is None:
            raise MissingSelectorError("missing snippet ID")
        for snippet in self.store.load():
            if snippet.id == id:
                return snippet
        raise SnippetNotFoundError([id])

    def find_edit_target(
        self,
        *,
        id: Optional[int] = None,
        tag: Optional[str] = None,
        choose_id: Optional[ChooseId] = None,
    ) -> Snippet:
        snippet, _remaining = resolve_for_edit(
            self.store.load(), id=id, tag=tag, choose_id=choose_id
        )
        return snippet

    def edit(
        self,
        *,
        id: Optional[int] = None,
        tag: Optional[str] = None,
        choose_id: Optional[ChooseId] = None,
        updates: Optional[EditUpdate] = None,
        prompt_updates: Optional[Callable[[Snippet], EditUpdate]] = None,
    ) -> Snippet:
        """Replace a snippet with an edited copy carrying a fresh ID."""
        collection = self.store.load()
        target, remaining = resolve_for_edit(collection, id=id, tag=tag, choose_id=choose_id)
        if updates is None:
            updates = prompt_updates(target) if prompt_updates is not None else EditUpdate()
        edited = updates.apply(target, new_id=next_id(collection))
        remaining.append(edited)
        self.store.replace_all(remaining)
        logger.info("Snippet %d replaced by %d", target.id, edited.id)
        return edited

    def delete(self, ids: List[int], *, confirm: Confirm) -> int:
        return self.store.delete_by_ids(ids, confirm=confirm)

    def export(
        self,
        *,
        directory: Union[str, Path],
        confirm: Confirm,
        id: Optional[int] = None,
        tag: Optional[str] = None,
        language: Optional[str] = None,
        show_progress: bool = True,
    ) -> ExportReport:
        collection = self.store.load()
        selected = filter_snippets(collection, tag=tag, language=language, id=id)
        if not selected:
            raise CriteriaNotFoundError(tags=parse_terms(tag), languages=parse_terms(language))
        return export_snippets(
            selected, directory, confirm=confirm, show_progress=show_progress
        )

    def render(self, snippets: List[Snippet], *, summary: bool = False) -> List[str]:
        return self.renderer.render_many(snippets, "summary" if summary else "full")

    def supported_languages(self) -> List[str]:
        highlighter = self.highlighter or Highlighter()
        return highlighter.supported_languages()


__all__ = ["EditUpdate", "VaultService", "parse_id_list"]
