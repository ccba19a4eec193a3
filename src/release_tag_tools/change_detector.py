"""Decide whether a release candidate changes the artifact tree."""

from __future__ import annotations

from .errors import CollaboratorError
from .git import Git

DIFF_IDENTICAL = 0
DIFF_FOUND = 1


def has_artifact_change(git: Git, from_tag: str, to_tag: str, artifact_path: str) -> bool:
    """
    True if the trees of from_tag and to_tag differ under artifact_path.

    Only an explicit "no difference" exit yields False; an exit other than
    identical/different raises CollaboratorError rather than being read as either.
    """
    result = git.diff(from_tag, to_tag, artifact_path)
    if result.returncode == DIFF_IDENTICAL:
        return False
    if result.returncode == DIFF_FOUND:
        return True
    raise CollaboratorError(
        f"git diff {from_tag} {to_tag} -- {artifact_path}",
        result.returncode,
        result.stderr or result.stdout or "",
    )
