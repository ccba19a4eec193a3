"""Tests for change_detector.has_artifact_change."""

from unittest.mock import MagicMock

import pytest

from release_tag_tools.change_detector import has_artifact_change
from release_tag_tools.errors import CollaboratorError
from release_tag_tools.git import Git


def _git(returncode: int, stderr: str = "") -> MagicMock:
    git = MagicMock(spec=Git)
    git.diff.return_value = MagicMock(returncode=returncode, stdout="", stderr=stderr)
    return git


def test_identical_trees_mean_no_change() -> None:
    git = _git(0)
    assert has_artifact_change(git, "v3.4", "v3.5", "dist") is False
    git.diff.assert_called_once_with("v3.4", "v3.5", "dist")


def test_difference_found() -> None:
    assert has_artifact_change(_git(1), "v3.4", "v3.5", "dist") is True


def test_diff_error_is_not_read_as_no_change() -> None:
    with pytest.raises(CollaboratorError, match="unknown revision"):
        has_artifact_change(_git(128, "fatal: ambiguous argument 'v3.4': unknown revision"), "v3.4", "v3.5", "dist")
