import os

import pytest

from codevault.errors import ErrorKind, ExportDirectoryError, OperationCancelled
from codevault.export import export_path, export_snippets
from codevault.prompts import assume_yes
from codevault.snippet import Snippet


def _snippet(snippet_id, language="Python", code="print('hi')\n"):
    return Snippet(id=snippet_id, tag="t", code=code, language=language, timestamp="t")


def test_export_writes_code_verbatim(tmp_path):
    snippet = _snippet(7, code="x = 1\r\n\ty = 2  ")

    report = export_snippets([snippet], tmp_path / "out", confirm=assume_yes)

    target = tmp_path / "out" / "7.py"
    assert report.written == [target]
    assert target.read_bytes() == "x = 1\r\n\ty = 2  ".encode("utf-8")


def test_reexport_skips_existing_file(tmp_path):
    snippet = _snippet(7)
    export_snippets([snippet], tmp_path, confirm=assume_yes)
    target = tmp_path / "7.py"
    target.write_text("local edits", encoding="utf-8")

    report = export_snippets([snippet], tmp_path, confirm=assume_yes)

    assert report.skipped == [target]
    assert report.written == []
    assert target.read_text(encoding="utf-8") == "local edits"


@pytest.mark.parametrize(
    "language, name",
    [(None, "3.txt"), ("Klingon", "3.txt"), ("Rust", "3.rs"), ("javascript", "3.js")],
)
def test_export_path_uses_extension_table(tmp_path, language, name):
    assert export_path(_snippet(3, language=language), tmp_path) == tmp_path / name


def test_batch_confirmation_declined_writes_nothing(tmp_path):
    with pytest.raises(OperationCancelled):
        export_snippets([_snippet(1), _snippet(2)], tmp_path / "out", confirm=lambda _p: False)

    assert not (tmp_path / "out").exists()


def test_single_snippet_does_not_ask(tmp_path):
    def confirm(_prompt):
        raise AssertionError("should not ask for a single snippet")

    report = export_snippets([_snippet(1)], tmp_path, confirm=confirm)

    assert report.total == 1


def test_batch_asks_once_before_writing(tmp_path):
    asked = []

    def confirm(prompt):
        asked.append(prompt)
        return True

    report = export_snippets([_snippet(1), _snippet(2)], tmp_path, confirm=confirm, show_progress=False)

    assert len(asked) == 1 and "2 snippets" in asked[0]
    assert report.total == 2


def test_unusable_directory_raises_export_directory_error(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(ExportDirectoryError) as excinfo:
        export_snippets([_snippet(1)], blocker / "out", confirm=assume_yes)

    assert excinfo.value.kind is ErrorKind.INVALID_INPUT
    assert excinfo.value.directory == blocker / "out"
    assert str(blocker / "out") in excinfo.value.message


def test_failed_write_does_not_abort_batch(tmp_path, monkeypatch):
    real_open = open

    def flaky_open(path, *args, **kwargs):
        if os.fspath(path).endswith("1.py"):
            raise PermissionError("denied")
        return real_open(path, *args, **kwargs)

    monkeypatch.setattr("builtins.open", flaky_open)

    report = export_snippets([_snippet(1), _snippet(2)], tmp_path, confirm=assume_yes, show_progress=False)

    assert [path.name for path, _reason in report.failed] == ["1.py"]
    assert [path.name for path in report.written] == ["2.py"]
