import pytest

from codevault.errors import (
    AmbiguousSelectorError,
    ErrorKind,
    InvalidInputError,
    MissingSelectorError,
    SnippetNotFoundError,
    TagNotFoundError,
)
from codevault.query import resolve_for_edit
from codevault.snippet import Snippet


def _snippet(snippet_id, tag):
    return Snippet(id=snippet_id, tag=tag, code=f"code {snippet_id}", timestamp="t")


@pytest.fixture
def collection():
    return [_snippet(1, "git-alias"), _snippet(2, "docker"), _snippet(3, "GIT-hooks")]


class _Chooser:
    def __init__(self, answer):
        self.answer = answer
        self.calls = []

    def __call__(self, candidates):
        self.calls.append(list(candidates))
        return self.answer


def test_resolve_by_id_removes_target(collection):
    snippet, remaining = resolve_for_edit(collection, id=2)

    assert snippet.id == 2
    assert [s.id for s in remaining] == [1, 3]
    assert len(collection) == 3


def test_resolve_by_unknown_id_fails(collection):
    with pytest.raises(SnippetNotFoundError):
        resolve_for_edit(collection, id=9, tag="docker")


def test_resolve_by_unique_tag(collection):
    snippet, remaining = resolve_for_edit(collection, tag="DOCK")

    assert snippet.id == 2
    assert [s.id for s in remaining] == [1, 3]


def test_resolve_by_unmatched_tag_fails(collection):
    with pytest.raises(TagNotFoundError) as excinfo:
        resolve_for_edit(collection, tag="kubernetes")

    assert excinfo.value.kind is ErrorKind.NOT_FOUND


def test_ambiguous_tag_without_chooser_propagates(collection):
    with pytest.raises(AmbiguousSelectorError) as excinfo:
        resolve_for_edit(collection, tag="git")

    assert excinfo.value.candidates == [1, 3]
    assert excinfo.value.kind is ErrorKind.AMBIGUOUS_SELECTOR


@pytest.mark.parametrize("answer", [3, "3", " 3\n"])
def test_ambiguous_tag_resolved_by_choice(collection, answer):
    chooser = _Chooser(answer)

    snippet, remaining = resolve_for_edit(collection, tag="git", choose_id=chooser)

    assert chooser.calls == [[1, 3]]
    assert snippet.id == 3
    assert [s.id for s in remaining] == [1, 2]


@pytest.mark.parametrize("answer", ["abc", "", None, 2])
def test_invalid_choice_fails(collection, answer):
    with pytest.raises(InvalidInputError):
        resolve_for_edit(collection, tag="git", choose_id=_Chooser(answer))


def test_missing_selector(collection):
    with pytest.raises(MissingSelectorError) as excinfo:
        resolve_for_edit(collection)

    assert excinfo.value.kind is ErrorKind.INVALID_INPUT
