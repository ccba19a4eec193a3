"""Release tag parsing and sequencing.

Release tags look like ``v<major>.<minor>`` (e.g. ``v3.4``). Each major line has a
floating alias tag ``v<major>`` that always points at the newest release of that line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import MalformedTagError

VERSION_PREFIX = "v"

_RELEASE_TAG_RE = re.compile(r"^v(\d+)\.(\d+)$")
_MAJOR_TAG_RE = re.compile(r"^v(\d+)$")


@dataclass(frozen=True, order=True)
class ReleaseVersion:
    major: int
    minor: int

    @property
    def tag(self) -> str:
        return f"{VERSION_PREFIX}{self.major}.{self.minor}"

    @property
    def major_tag(self) -> str:
        return f"{VERSION_PREFIX}{self.major}"

    def next(self) -> ReleaseVersion:
        return ReleaseVersion(self.major, self.minor + 1)


def major_tag_for(major_version: int) -> str:
    """``3`` -> ``v3``."""
    if major_version < 0:
        raise ValueError(f"major version must be a non-negative integer, got {major_version}")
    return f"{VERSION_PREFIX}{major_version}"


def major_tag_of(tag: str) -> str:
    """First dot-separated component of a tag (``v2.5`` -> ``v2``)."""
    return tag.split(".", 1)[0]


def try_parse_release_tag(tag: str) -> ReleaseVersion | None:
    m = _RELEASE_TAG_RE.match(tag.strip())
    if m is None:
        return None
    return ReleaseVersion(int(m.group(1)), int(m.group(2)))


def parse_release_tag(tag: str, major_tag: str | None = None) -> ReleaseVersion:
    """Parse ``v<N>.<M>``; when major_tag is given, N must belong to it."""
    version = try_parse_release_tag(tag)
    if version is None:
        raise MalformedTagError(f"Tag {tag!r} is not of the form v<major>.<minor>")
    if major_tag is not None and version.major_tag != major_tag:
        raise MalformedTagError(f"Tag {tag!r} does not belong to major tag {major_tag}")
    return version


def compute_next_tag(current_tag: str | None, major_tag: str) -> str:
    """
    Next release tag in the major line.

    - No current tag: ``<major_tag>.0``.
    - Current tag ``<major_tag>.<M>``: ``<major_tag>.<M+1>``.

    Raises MalformedTagError if current_tag is not ``<major_tag>.<integer>``.
    """
    m = _MAJOR_TAG_RE.match(major_tag)
    if m is None:
        raise MalformedTagError(f"Major tag {major_tag!r} is not of the form v<major>")
    if current_tag is None:
        return ReleaseVersion(int(m.group(1)), 0).tag
    return parse_release_tag(current_tag, major_tag).next().tag
