"""
Release orchestration: update a pushed tag, or cut the next minor release.

Tag-ref runs (refs/tags/vN.M) commit the generated artifacts on top of the tag and
force-move vN.M and vN to that commit. Branch-ref runs compute the next vN.M for
the configured major line, commit and tag it, and push + publish a GitHub release
unless the artifacts are unchanged since the previous release.

Nothing here retries or rolls back: local commits and tags left by a failed run are
harmless until pushed.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

import click

from .artifacts import stage_artifacts
from .change_detector import has_artifact_change
from .context import RunContext
from .errors import InvalidTagFormatError
from .git import Git
from .github_api import GitHubReleases
from .run_config import ReleaseSettings
from .tag_locator import find_current_tag
from .versioning import VERSION_PREFIX, compute_next_tag, major_tag_for, major_tag_of


class ReleaseDecision(enum.Enum):
    CREATE_AND_PUBLISH = "create-and-publish"
    SKIPPED_NO_CHANGE = "skipped-no-change"
    SKIPPED_DRY_RUN = "skipped-dry-run"
    UPDATED_EXISTING_TAG = "updated-existing-tag"
    NO_CHANGE_NEEDED = "no-change-needed"


@dataclass(frozen=True)
class ReleaseOptions:
    major_version: int | None = None
    dry_run: bool = False


@dataclass(frozen=True)
class ReleaseOutcome:
    decision: ReleaseDecision
    tag: str
    major_tag: str
    previous_tag: str | None = None
    release_url: str | None = None


def run(
    options: ReleaseOptions,
    context: RunContext,
    *,
    git: Git,
    settings: ReleaseSettings | None = None,
    releases: GitHubReleases | None = None,
) -> ReleaseOutcome:
    """Entry point: tag refs update the pushed tag, anything else creates the next release."""
    settings = settings or ReleaseSettings()
    if context.is_tag_ref:
        click.echo("Updating the current tag if generated files are different")
        return update_current_tag(options, context, git=git, settings=settings)
    click.echo("Creating the next release")
    return create_next_release(options, git=git, settings=settings, releases=releases)


def _commit_release(git: Git, settings: ReleaseSettings, tag: str, *, allow_empty: bool = False) -> None:
    git.configure_identity(settings.committer_name, settings.committer_email)
    git.commit(f"Release {tag}", allow_empty=allow_empty)


def update_current_tag(
    options: ReleaseOptions,
    context: RunContext,
    *,
    git: Git,
    settings: ReleaseSettings,
) -> ReleaseOutcome:
    current_tag = context.tag_name or ""
    click.echo(f"Current tag is {current_tag}")
    if not current_tag.startswith(VERSION_PREFIX):
        raise InvalidTagFormatError(f"Tag name should start with {VERSION_PREFIX} but was {current_tag}")
    major_tag = major_tag_of(current_tag)
    click.echo(f"Major tag is {major_tag}")

    stage_artifacts(git, settings)
    if git.status_porcelain() == "":
        click.echo("Nothing to commit")
        return ReleaseOutcome(ReleaseDecision.NO_CHANGE_NEEDED, current_tag, major_tag)

    _commit_release(git, settings, current_tag)
    if options.dry_run:
        click.echo("Exit due to dry-run")
        return ReleaseOutcome(ReleaseDecision.SKIPPED_DRY_RUN, current_tag, major_tag)

    git.tag(current_tag, force=True)
    git.tag(major_tag, force=True)
    git.push([current_tag, major_tag], force=True)
    return ReleaseOutcome(ReleaseDecision.UPDATED_EXISTING_TAG, current_tag, major_tag)


def create_next_release(
    options: ReleaseOptions,
    *,
    git: Git,
    settings: ReleaseSettings,
    releases: GitHubReleases | None = None,
) -> ReleaseOutcome:
    if options.major_version is None:
        raise ValueError("major version is required to create the next release")
    if releases is None and not options.dry_run:
        raise ValueError("A GitHub token and repository are required to publish a release")
    major_tag = major_tag_for(options.major_version)
    click.echo(f"Major tag is {major_tag}")
    current_tag = find_current_tag(git, major_tag)
    click.echo(f"Current tag is {current_tag or 'not found'}")
    next_tag = compute_next_tag(current_tag, major_tag)
    click.echo(f"Next tag is {next_tag}")

    stage_artifacts(git, settings)
    # The commit and tag are created even when nothing changed; only push/publish is skipped.
    _commit_release(git, settings, next_tag, allow_empty=True)
    git.tag(next_tag)
    git.tag(major_tag, force=True)

    if current_tag is not None and not has_artifact_change(git, current_tag, next_tag, settings.artifact_path):
        click.echo("Nothing to release")
        return ReleaseOutcome(ReleaseDecision.SKIPPED_NO_CHANGE, next_tag, major_tag, current_tag)
    if options.dry_run:
        click.echo("Exit due to dry-run")
        return ReleaseOutcome(ReleaseDecision.SKIPPED_DRY_RUN, next_tag, major_tag, current_tag)
    if releases is None:
        raise ValueError("A GitHub token and repository are required to publish a release")
    git.push([next_tag, major_tag], force=True)
    click.echo(f"Creating a release for tag {next_tag}")
    notes = releases.generate_release_notes(next_tag, current_tag)
    release_url = releases.create_release(next_tag, notes["name"], notes["body"])
    click.echo(f"Created a release as {release_url}")
    return ReleaseOutcome(ReleaseDecision.CREATE_AND_PUBLISH, next_tag, major_tag, current_tag, release_url)
