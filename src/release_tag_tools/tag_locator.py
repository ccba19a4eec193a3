"""Find the current release tag of a major line."""

from __future__ import annotations

from collections.abc import Iterable

import click

from .errors import ToleratedEmptyResult
from .git import Git
from .versioning import ReleaseVersion, try_parse_release_tag


def select_current_tag(tags: Iterable[str], major_tag: str) -> str | None:
    """
    Newest release tag of major_tag among tags, by (major, minor), as git named it.

    The major alias itself and names that are not ``<major_tag>.<integer>`` are
    ignored. Listing order is not trusted.
    """
    best: ReleaseVersion | None = None
    best_name: str | None = None
    for name in tags:
        if name == major_tag:
            continue
        version = try_parse_release_tag(name)
        if version is None or version.major_tag != major_tag:
            continue
        if best is None or version > best:
            best, best_name = version, name
    return best_name


def find_current_tag(git: Git, major_tag: str) -> str | None:
    """Refresh tags from the remote, then select the newest release reachable from major_tag."""
    git.fetch_tags()
    try:
        tags = git.tags_containing(major_tag)
    except ToleratedEmptyResult as e:
        # An unknown major tag (first release of the line) fails the listing; same as no tags.
        click.echo(f"::notice ::No tags found for {major_tag}: {e}")
        tags = []
    return select_current_tag(tags, major_tag)
