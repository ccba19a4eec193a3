"""Error taxonomy for release-tag runs."""

from __future__ import annotations


class ReleaseTagError(Exception):
    """Base class for every error raised by release_tag_tools."""


class MalformedTagError(ReleaseTagError, ValueError):
    """A tag does not have the expected ``<major>.<minor>`` shape."""


class InvalidTagFormatError(ReleaseTagError, ValueError):
    """The triggering tag ref lacks the version prefix."""


class CollaboratorError(ReleaseTagError, RuntimeError):
    """A git command or GitHub API call failed.

    ``step`` names what was being done (the command line for git, the endpoint
    for the API); ``output`` carries the collaborator's own diagnostic.
    """

    def __init__(self, step: str, returncode: int | None = None, output: str = "") -> None:
        self.step = step
        self.returncode = returncode
        self.output = output.strip()
        message = f"{step} failed"
        if returncode is not None:
            message += f" (exit {returncode})"
        if self.output:
            message += f": {self.output}"
        super().__init__(message)


class ToleratedEmptyResult(CollaboratorError):
    """Tag listing failed; callers treat this as "no tags found"."""
