"""Load release config from environment and optional properties file."""

from __future__ import annotations

import os
from pathlib import Path

from .github_api import DEFAULT_API_URL

_TRUTHY = {"1", "true", "yes", "on"}


def load_properties_file(path: Path) -> dict[str, str]:
    """Load key=value from a .properties-like file (skip comments and empty lines)."""
    result: dict[str, str] = {}
    if not path.exists():
        return result
    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" in line:
            key, _, value = line.partition("=")
            result[key.strip()] = value.strip()
    return result


def get_config(properties_path: Path | None = None) -> dict[str, str]:
    """Merge env and optional properties file; env takes precedence."""
    config: dict[str, str] = {}
    if properties_path:
        config.update(load_properties_file(properties_path))
    for key, value in os.environ.items():
        if value is not None and value != "":
            config[key] = value
    return config


def get_major_version(config: dict[str, str]) -> int | None:
    """MAJOR_VERSION or INPUT_MAJOR-VERSION (GitHub Actions input). None if unset."""
    raw = config.get("MAJOR_VERSION") or config.get("INPUT_MAJOR-VERSION")
    if raw is None or raw.strip() == "":
        return None
    raw = raw.strip()
    if not raw.isdigit():
        raise ValueError(f"major version must be a non-negative integer, got {raw!r}")
    return int(raw)


def get_token(config: dict[str, str]) -> str | None:
    """GITHUB_TOKEN or INPUT_TOKEN."""
    return config.get("GITHUB_TOKEN") or config.get("INPUT_TOKEN")


def get_dry_run(config: dict[str, str]) -> bool:
    raw = config.get("DRY_RUN") or config.get("INPUT_DRY-RUN") or ""
    return raw.strip().lower() in _TRUTHY


def get_api_url(config: dict[str, str]) -> str:
    return config.get("GITHUB_API_URL") or DEFAULT_API_URL
