"""Immutable description of what triggered a run (ref + repository)."""

from __future__ import annotations

from dataclasses import dataclass

TAG_REF_PREFIXES = ("refs/tags/", "tags/")
BRANCH_REF_PREFIX = "refs/heads/"


@dataclass(frozen=True)
class RunContext:
    ref: str
    repository: str | None = None

    @property
    def is_tag_ref(self) -> bool:
        return self.ref.startswith(TAG_REF_PREFIXES)

    @property
    def tag_name(self) -> str | None:
        """Tag name for refs/tags/<tag> (or tags/<tag>); None for branch refs."""
        for prefix in TAG_REF_PREFIXES:
            if self.ref.startswith(prefix):
                return self.ref.removeprefix(prefix)
        return None

    @property
    def owner_and_name(self) -> tuple[str, str]:
        """Split owner/name; raise ValueError if repository is missing or malformed."""
        owner, _, name = (self.repository or "").partition("/")
        if not owner or not name or "/" in name:
            raise ValueError(f"Repository must be OWNER/NAME, got {self.repository!r}")
        return owner, name


def get_run_context(config: dict[str, str], ref: str | None = None, repository: str | None = None) -> RunContext:
    """GITHUB_REF / GITHUB_REPOSITORY from config unless given explicitly."""
    return RunContext(
        ref=ref or config.get("GITHUB_REF", ""),
        repository=repository or config.get("GITHUB_REPOSITORY"),
    )
