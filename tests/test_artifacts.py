"""Tests for artifacts (ignore file rewrite, staging)."""

from pathlib import Path
from unittest.mock import MagicMock

from release_tag_tools.artifacts import stage_artifacts, unignore_artifacts
from release_tag_tools.git import Git
from release_tag_tools.run_config import ReleaseSettings


def test_unignore_artifacts_blanks_matching_lines() -> None:
    text = "node_modules/\n/dist\n/dist/**\n*.log\n"
    assert unignore_artifacts(text, "dist") == "node_modules/\n\n\n*.log\n"


def test_unignore_artifacts_only_anchored_rules() -> None:
    text = "dist\nsrc/dist\n# /dist comment\n"
    assert unignore_artifacts(text, "dist") == text


def test_unignore_artifacts_escapes_path() -> None:
    text = "/build.out\n/buildXout\n"
    assert unignore_artifacts(text, "build.out") == "\n/buildXout\n"


def _git(tmp_path: Path) -> MagicMock:
    git = MagicMock(spec=Git)
    git.cwd = tmp_path
    return git


def test_stage_artifacts_rewrites_and_adds(tmp_path: Path) -> None:
    (tmp_path / ".gitignore").write_text("/node_modules\n/dist\n")
    git = _git(tmp_path)
    stage_artifacts(git, ReleaseSettings())
    assert (tmp_path / ".gitignore").read_text() == "/node_modules\n\n"
    assert [c.args[0] for c in git.add.call_args_list] == [".gitignore", "dist"]


def test_stage_artifacts_without_ignore_file(tmp_path: Path) -> None:
    git = _git(tmp_path)
    stage_artifacts(git, ReleaseSettings(artifact_path="lib"))
    assert not (tmp_path / ".gitignore").exists()
    git.add.assert_called_once_with("lib")


def test_stage_artifacts_custom_ignore_file(tmp_path: Path) -> None:
    (tmp_path / ".ignore").write_text("/out/\n")
    git = _git(tmp_path)
    stage_artifacts(git, ReleaseSettings(artifact_path="out", ignore_file=".ignore"))
    assert (tmp_path / ".ignore").read_text() == "\n"
    assert [c.args[0] for c in git.add.call_args_list] == [".ignore", "out"]
