"""CLI for release tags: run (update tag / create next release), plan, next-tag."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn

import click
import yaml

from .config import get_api_url, get_config, get_dry_run, get_major_version, get_token
from .context import get_run_context
from .errors import ReleaseTagError
from .git import Git
from .github_api import GitHubReleases
from .orchestrator import ReleaseOptions
from .orchestrator import run as run_release
from .run_config import RUN_CONFIG_FILENAME, ReleaseSettings, get_release_settings
from .tag_locator import find_current_tag
from .versioning import compute_next_tag, major_tag_for


def _config_callback(ctx: click.Context, _param: click.Parameter, value: str | None) -> str | None:
    if value:
        path = Path(value)
        if not path.exists():
            raise click.BadParameter(f"Properties file not found: {path}")
        ctx.ensure_object(dict)
        ctx.obj["properties_path"] = path
    return value


def _fail(message: str) -> NoReturn:
    click.echo(f"::error ::{message}", err=True)
    sys.exit(1)


def _load_settings(cwd: Path) -> ReleaseSettings:
    try:
        return get_release_settings(cwd)
    except (OSError, ValueError, yaml.YAMLError) as e:
        _fail(f"Failed to read {RUN_CONFIG_FILENAME}: {e}")


def _resolve_major_version(config: dict[str, str], major_version: int | None) -> int | None:
    if major_version is not None:
        return major_version
    try:
        return get_major_version(config)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--major-version") from None


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    envvar="RELEASE_TAG_PROPERTIES",
    help="Path to a properties file (env-style key=value). Env vars override.",
    callback=_config_callback,
)
@click.pass_context
def main(ctx: click.Context, config_path: Path | None) -> None:
    """Release tag tools: keep vN.M release tags and the floating vN tag in sync with generated artifacts."""
    ctx.ensure_object(dict)
    ctx.obj["config"] = get_config(ctx.obj.get("properties_path"))


@main.command(short_help="Update the pushed tag, or create and publish the next release.")
@click.option(
    "--major-version",
    type=click.IntRange(min=0),
    default=None,
    help="Major version line to release (default: MAJOR_VERSION or INPUT_MAJOR-VERSION).",
)
@click.option("--token", default=None, help="GitHub token (default: GITHUB_TOKEN or INPUT_TOKEN).")
@click.option(
    "--dry-run/--no-dry-run",
    default=None,
    help="Commit and tag locally but do not push or publish (default: DRY_RUN or INPUT_DRY-RUN).",
)
@click.option("--ref", default=None, help="Triggering ref, e.g. refs/heads/main or refs/tags/v1.2 (default: GITHUB_REF).")
@click.option("--repository", default=None, help="OWNER/NAME for the GitHub API (default: GITHUB_REPOSITORY).")
@click.option(
    "--repo-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Git working tree (default: cwd).",
)
@click.pass_context
def run(
    ctx: click.Context,
    major_version: int | None,
    token: str | None,
    dry_run: bool | None,
    ref: str | None,
    repository: str | None,
    repo_dir: Path | None,
) -> None:
    """Update the pushed tag, or create and publish the next release.

    On a tag ref (refs/tags/vN.M) the generated artifacts are committed and vN.M and vN
    are force-moved to that commit. On any other ref the next vN.M is computed from
    existing tags, committed, tagged, and pushed and published as a GitHub release,
    unless the artifacts did not change since the previous release.

    Artifact directory, ignore file, remote and committer come from
    .github/release-tag.yaml when present.
    """
    config = ctx.obj["config"]
    cwd = repo_dir or Path.cwd()
    settings = _load_settings(cwd)
    options = ReleaseOptions(
        major_version=_resolve_major_version(config, major_version),
        dry_run=get_dry_run(config) if dry_run is None else dry_run,
    )
    context = get_run_context(config, ref=ref, repository=repository)
    releases = None
    token = token or get_token(config)
    if token and context.repository:
        try:
            owner, name = context.owner_and_name
        except ValueError as e:
            _fail(str(e))
        releases = GitHubReleases(token, owner, name, api_url=get_api_url(config))
    git = Git(cwd, remote=settings.remote)
    try:
        outcome = run_release(options, context, git=git, settings=settings, releases=releases)
    except (ReleaseTagError, ValueError, OSError) as e:
        _fail(str(e))
    click.echo(f"Decision: {outcome.decision.value} ({outcome.tag})")


@main.command(short_help="Show the current and next release tag without changing anything.")
@click.option("--major-version", type=click.IntRange(min=0), default=None, help="Major version line.")
@click.option("--repo-dir", type=click.Path(path_type=Path, file_okay=False), default=None, help="Git working tree.")
@click.pass_context
def plan(ctx: click.Context, major_version: int | None, repo_dir: Path | None) -> None:
    """Fetch tags, locate the current release of the major line and print the next tag.

    Only `git fetch` and `git tag --list` are run: nothing is staged, committed or pushed.
    """
    config = ctx.obj["config"]
    major_version = _resolve_major_version(config, major_version)
    if major_version is None:
        _fail("No major version. Set --major-version or MAJOR_VERSION.")
    cwd = repo_dir or Path.cwd()
    settings = _load_settings(cwd)
    try:
        major_tag = major_tag_for(major_version)
        current_tag = find_current_tag(Git(cwd, remote=settings.remote), major_tag)
        next_tag = compute_next_tag(current_tag, major_tag)
    except (ReleaseTagError, ValueError) as e:
        _fail(str(e))
    click.echo(f"major={major_tag}")
    click.echo(f"current={current_tag or ''}")
    click.echo(f"next={next_tag}")


@main.command("next-tag", short_help="Print the tag that follows CURRENT_TAG in a major line.")
@click.argument("current_tag", required=False, default=None)
@click.option("--major-version", type=click.IntRange(min=0), required=True, help="Major version line.")
def next_tag_cmd(current_tag: str | None, major_version: int) -> None:
    """Print the tag that follows CURRENT_TAG (omit it, or pass "-", for the first release)."""
    if current_tag in (None, "", "-"):
        current_tag = None
    try:
        click.echo(compute_next_tag(current_tag, major_tag_for(major_version)))
    except ReleaseTagError as e:
        _fail(str(e))


if __name__ == "__main__":
    main()
