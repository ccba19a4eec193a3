"""Tests for tag_locator (select_current_tag, find_current_tag)."""

from unittest.mock import MagicMock

import pytest

from release_tag_tools.errors import CollaboratorError, ToleratedEmptyResult
from release_tag_tools.git import Git
from release_tag_tools.tag_locator import find_current_tag, select_current_tag


def _git(tags: list[str] | None = None, list_error: Exception | None = None) -> MagicMock:
    git = MagicMock(spec=Git)
    if list_error is not None:
        git.tags_containing.side_effect = list_error
    else:
        git.tags_containing.return_value = tags or []
    return git


def test_select_current_tag_picks_last_in_order() -> None:
    assert select_current_tag(["v2", "v2.0", "v2.1", "v2.2"], "v2") == "v2.2"


def test_select_current_tag_ignores_listing_order() -> None:
    """Out-of-order listings (git sorts by name: v2.10 before v2.9) still yield the max."""
    assert select_current_tag(["v2.10", "v2.9", "v2", "v2.1"], "v2") == "v2.10"
    assert select_current_tag(["v2.3", "v2.1", "v2.2"], "v2") == "v2.3"


def test_select_current_tag_never_returns_major_tag() -> None:
    assert select_current_tag(["v2"], "v2") is None


def test_select_current_tag_empty() -> None:
    assert select_current_tag([], "v2") is None


def test_select_current_tag_skips_unrelated_tags() -> None:
    tags = ["v2", "v2.3", "v3.0", "v3", "latest", "v2.4-rc", "v2.4.1"]
    assert select_current_tag(tags, "v2") == "v2.3"


def test_find_current_tag_fetches_before_listing() -> None:
    git = _git(["v1", "v1.0", "v1.1"])
    calls: list[str] = []
    git.fetch_tags.side_effect = lambda: calls.append("fetch")
    git.tags_containing.side_effect = lambda ref: calls.append("list") or ["v1", "v1.0", "v1.1"]
    assert find_current_tag(git, "v1") == "v1.1"
    assert calls == ["fetch", "list"]
    git.tags_containing.assert_called_once_with("v1")


def test_find_current_tag_tolerates_listing_failure() -> None:
    git = _git(list_error=ToleratedEmptyResult("git tag --list --contains v5", 129, "malformed object name v5"))
    assert find_current_tag(git, "v5") is None


def test_find_current_tag_propagates_fetch_failure() -> None:
    git = _git(["v1.0"])
    git.fetch_tags.side_effect = CollaboratorError("git fetch --tags --prune-tags --prune", 128, "no remote")
    with pytest.raises(CollaboratorError, match="fetch"):
        find_current_tag(git, "v1")
    git.tags_containing.assert_not_called()


def test_find_current_tag_propagates_other_listing_errors() -> None:
    git = _git(list_error=CollaboratorError("git tag", 1, "boom"))
    with pytest.raises(CollaboratorError):
        find_current_tag(git, "v1")


def test_select_current_tag_returns_name_as_listed() -> None:
    """A zero-padded tag is returned under its own name, not a normalized one."""
    assert select_current_tag(["v2", "v2.05"], "v2") == "v2.05"
    assert select_current_tag(["v2.04", "v2.5", "v2"], "v2") == "v2.5"
