"""
GitHub REST calls for publishing a release.

Two endpoints are used:
  POST /repos/{owner}/{repo}/releases/generate-notes  -> {"name", "body"}
  POST /repos/{owner}/{repo}/releases                 -> {"html_url", ...}
"""

from __future__ import annotations

from typing import Any

import requests

from .errors import CollaboratorError

DEFAULT_API_URL = "https://api.github.com"
API_VERSION = "2022-11-28"


class GitHubReleases:
    def __init__(self, token: str, owner: str, repo: str, api_url: str = DEFAULT_API_URL) -> None:
        if not token:
            raise ValueError("A GitHub token is required to publish releases")
        self.token = token
        self.owner = owner
        self.repo = repo
        self.api_url = api_url.rstrip("/")

    def _headers(self) -> dict[str, str]:
        return {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {self.token}",
            "X-GitHub-Api-Version": API_VERSION,
        }

    def _request(self, method: str, path: str, *, expected_status: set[int], **kwargs: Any) -> dict[str, Any]:
        url = f"{self.api_url}/repos/{self.owner}/{self.repo}{path}"
        headers = kwargs.pop("headers", {})
        headers.update(self._headers())
        try:
            response = requests.request(method, url, headers=headers, **kwargs)
        except requests.RequestException as e:
            raise CollaboratorError(f"{method.upper()} {url}", None, str(e)) from e
        if response.status_code not in expected_status:
            raise CollaboratorError(f"{method.upper()} {url}", response.status_code, response.text)
        data = response.json()
        if not isinstance(data, dict):
            raise CollaboratorError(f"{method.upper()} {url}", response.status_code, "response was not a JSON object")
        return data

    def generate_release_notes(self, tag: str, previous_tag: str | None = None) -> dict[str, str]:
        """Generated release name and body for tag (since previous_tag when given)."""
        payload: dict[str, str] = {"tag_name": tag}
        if previous_tag:
            payload["previous_tag_name"] = previous_tag
        data = self._request("post", "/releases/generate-notes", expected_status={200}, json=payload)
        return {"name": str(data.get("name") or tag), "body": str(data.get("body") or "")}

    def create_release(self, tag: str, name: str, body: str) -> str:
        """Create a published release for an existing tag; return its html_url."""
        data = self._request(
            "post",
            "/releases",
            expected_status={201},
            json={"tag_name": tag, "name": name, "body": body},
        )
        return str(data.get("html_url", ""))
