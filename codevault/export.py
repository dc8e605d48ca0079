"""Write snippet bodies out as standalone source files."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Sequence, Tuple, Union

from tqdm import tqdm

from .errors import ExportDirectoryError, OperationCancelled
from .snippet.model import Snippet
from .utils.languages import extension_for

logger = logging.getLogger("codevault")


@dataclass
class ExportReport:
    """Outcome of one export batch."""

    directory: Path
    written: List[Path] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)
    failed: List[Tuple[Path, str]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.written) + len(self.skipped) + len(self.failed)


def export_path(snippet: Snippet, directory: Union[str, Path]) -> Path:
    return Path(directory) / f"{snippet.id}.{extension_for(snippet.language)}"


def export_snippets(
    snippets: Sequence[Snippet],
    directory: Union[str, Path],
    *,
    confirm: Callable[[str], bool],
    show_progress: bool = True,
) -> ExportReport:
    """Export each snippet's code to ``<directory>/<id>.<ext>``.

    Existing files are skipped, never overwritten. A failed write is recorded
    and the rest of the batch still runs.
    """
    directory = Path(directory)
    if len(snippets) > 1:
        prompt = (
            f"Exporting {len(snippets)} snippets in language-specific formats. "
            "Are you sure you want to continue?"
        )
        if not confirm(prompt):
            raise OperationCancelled("snippet export")

    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ExportDirectoryError(directory, str(exc)) from exc
    report = ExportReport(directory=directory)

    progress = tqdm(
        snippets,
        desc="Exporting",
        unit="snippet",
        disable=not show_progress or len(snippets) < 2,
    )
    for snippet in progress:
        target = export_path(snippet, directory)
        if target.exists():
            logger.info("Skipping %s: already exported", target)
            report.skipped.append(target)
            continue
        try:
            with open(target, "x", encoding="utf-8", newline="") as handle:
                handle.write(snippet.code)
        except FileExistsError:
            report.skipped.append(target)
            continue
        except OSError as exc:
            logger.warning("Failed to export snippet %d to %s: %s", snippet.id, target, exc)
            report.failed.append((target, str(exc)))
            continue
        logger.debug("Exported snippet %d to %s", snippet.id, target)
        report.written.append(target)

    return report


__all__ = ["ExportReport", "export_path", "export_snippets"]
