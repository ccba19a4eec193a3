"""Load .github/release-tag.yaml for per-repository release settings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path  # noqa: TC003
from typing import Any

import yaml

RUN_CONFIG_FILENAME = ".github/release-tag.yaml"

_DEFAULT_ARTIFACT_PATH = "dist"
_DEFAULT_IGNORE_FILE = ".gitignore"
_DEFAULT_REMOTE = "origin"
_DEFAULT_COMMITTER_NAME = "github-actions"
_DEFAULT_COMMITTER_EMAIL = "github-actions@github.com"


@dataclass(frozen=True)
class ReleaseSettings:
    artifact_path: str = _DEFAULT_ARTIFACT_PATH
    ignore_file: str = _DEFAULT_IGNORE_FILE
    remote: str = _DEFAULT_REMOTE
    committer_name: str = _DEFAULT_COMMITTER_NAME
    committer_email: str = _DEFAULT_COMMITTER_EMAIL


def load_run_config(cwd: Path) -> dict[str, Any]:
    """
    Load .github/release-tag.yaml from cwd. Keys (all optional):
      - artifact_path: directory of generated files to version (default "dist")
      - ignore_file: ignore file that excludes artifact_path (default ".gitignore")
      - remote: git remote to push tags to (default "origin")
      - committer: { name, email } for release commits
    Missing file or empty => empty dict. Invalid YAML => raise.
    """
    path = cwd / RUN_CONFIG_FILENAME
    if not path.exists():
        return {}
    raw = yaml.safe_load(path.read_text())
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"{RUN_CONFIG_FILENAME} must be a YAML object")
    return raw


def _str_or(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def get_release_settings(cwd: Path, *, config: dict[str, Any] | None = None) -> ReleaseSettings:
    """Merge .github/release-tag.yaml with defaults. Leading/trailing slashes are stripped from artifact_path."""
    if config is None:
        config = load_run_config(cwd)
    committer = config.get("committer")
    if not isinstance(committer, dict):
        committer = {}
    artifact_path = _str_or(config.get("artifact_path"), _DEFAULT_ARTIFACT_PATH).strip("/")
    return ReleaseSettings(
        artifact_path=artifact_path or _DEFAULT_ARTIFACT_PATH,
        ignore_file=_str_or(config.get("ignore_file"), _DEFAULT_IGNORE_FILE),
        remote=_str_or(config.get("remote"), _DEFAULT_REMOTE),
        committer_name=_str_or(committer.get("name"), _DEFAULT_COMMITTER_NAME),
        committer_email=_str_or(committer.get("email"), _DEFAULT_COMMITTER_EMAIL),
    )
