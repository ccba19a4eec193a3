"""Stage generated artifacts that the ignore file normally excludes."""

from __future__ import annotations

import re

from .git import Git
from .run_config import ReleaseSettings


def unignore_artifacts(ignore_text: str, artifact_path: str) -> str:
    """Blank every rule that starts with /<artifact_path> (rest of the line included)."""
    pattern = re.compile(rf"^/{re.escape(artifact_path)}.*$", re.MULTILINE)
    return pattern.sub("", ignore_text)


def stage_artifacts(git: Git, settings: ReleaseSettings) -> None:
    """Rewrite the ignore file so the artifact directory can be committed, then stage both."""
    ignore_path = git.cwd / settings.ignore_file
    if ignore_path.exists():
        text = ignore_path.read_text()
        rewritten = unignore_artifacts(text, settings.artifact_path)
        if rewritten != text:
            ignore_path.write_text(rewritten)
        git.add(settings.ignore_file)
    git.add(settings.artifact_path)
