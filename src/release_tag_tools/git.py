"""Thin wrapper over the git binary (fetch, tag, commit, push, diff)."""

from __future__ import annotations

import subprocess
from pathlib import Path

import click

from .errors import CollaboratorError, ToleratedEmptyResult


class Git:
    """Runs git in a working tree. Every non-zero exit raises CollaboratorError unless noted."""

    def __init__(self, cwd: Path | None = None, remote: str = "origin", git_cmd: str = "git") -> None:
        self.cwd = cwd or Path.cwd()
        self.remote = remote
        self.git_cmd = git_cmd

    def _run(self, args: list[str], check: bool = True) -> subprocess.CompletedProcess:
        cmd = [self.git_cmd, *args]
        click.echo(f"$ {' '.join(cmd)}")
        try:
            result = subprocess.run(cmd, cwd=self.cwd, capture_output=True, text=True)
        except OSError as e:
            raise CollaboratorError(" ".join(cmd), None, str(e)) from e
        if check and result.returncode != 0:
            raise CollaboratorError(" ".join(cmd), result.returncode, result.stderr or result.stdout or "")
        return result

    def fetch_tags(self) -> None:
        """Fetch tags and drop local tags that no longer exist on the remote."""
        self._run(["fetch", "--tags", "--prune-tags", "--prune"])

    def tags_containing(self, ref: str) -> list[str]:
        """Tags whose commit contains ref, in git's listing order. Raises ToleratedEmptyResult on failure."""
        result = self._run(["tag", "--list", "--contains", ref], check=False)
        if result.returncode != 0:
            raise ToleratedEmptyResult(f"git tag --list --contains {ref}", result.returncode, result.stderr or "")
        return [line.strip() for line in (result.stdout or "").splitlines() if line.strip()]

    def status_porcelain(self) -> str:
        return (self._run(["status", "--porcelain"]).stdout or "").strip()

    def add(self, path: str) -> None:
        self._run(["add", path])

    def configure_identity(self, name: str, email: str) -> None:
        self._run(["config", "user.name", name])
        self._run(["config", "user.email", email])

    def commit(self, message: str, *, allow_empty: bool = False) -> None:
        args = ["commit", "-m", message]
        if allow_empty:
            args.append("--allow-empty")
        self._run(args)

    def tag(self, name: str, *, force: bool = False) -> None:
        self._run(["tag", "-f", name] if force else ["tag", name])

    def push(self, refs: list[str], *, force: bool = True) -> None:
        args = ["push", self.remote]
        if force:
            args.append("-f")
        self._run([*args, *refs])

    def diff(self, from_ref: str, to_ref: str, path: str) -> subprocess.CompletedProcess:
        """``git diff --exit-code from to -- path``; exit 0 identical, 1 different, anything else is an error."""
        return self._run(["diff", "--exit-code", from_ref, to_ref, "--", path], check=False)
