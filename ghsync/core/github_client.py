"""Read-only GitHub REST API operations: user lookup and repository listing."""

from __future__ import annotations

import json
import logging
import urllib.error
import urllib.request
from typing import Any
from urllib.parse import quote

from pydantic import ValidationError

from .constants import APP_NAME, DEFAULT_GITHUB_HOST, HTTP_TIMEOUT_SEC, USER_AGENT, api_accept, api_base
from .types import Repository

logger = logging.getLogger(APP_NAME)

NOT_FOUND_MESSAGE = "Not Found"


class GitHubError(RuntimeError):
    pass


class GitHubClient:
    def __init__(self, host: str = DEFAULT_GITHUB_HOST, token: str | None = None) -> None:
        self.host = host
        self.token = token

    # ---------- low-level HTTP ----------
    def _request(self, url: str) -> urllib.request.Request:
        req = urllib.request.Request(url)
        req.add_header("Accept", api_accept(self.host))
        req.add_header("User-Agent", USER_AGENT)
        if self.token:
            req.add_header("Authorization", f"Bearer {self.token}")
        return req

    def _request_json(self, url: str, accept_error_body: bool = False) -> Any:
        """GET url and decode the JSON body.

        With accept_error_body, an HTTP error status still yields its decoded
        body instead of raising.
        """
        logger.debug(f"GET {url}")
        try:
            with urllib.request.urlopen(self._request(url), timeout=HTTP_TIMEOUT_SEC) as resp:
                raw = resp.read()
        except urllib.error.HTTPError as e:
            if not accept_error_body:
                raise GitHubError(f"GET {url} failed: HTTP {e.code}") from e
            logger.debug(f"GET {url} returned HTTP {e.code}")
            raw = e.read()
        except urllib.error.URLError as e:
            raise GitHubError(f"GET {url} failed: {e.reason}") from e
        try:
            return json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise GitHubError(f"GET {url} returned a non-JSON body") from e

    # ---------- public API ----------
    def user_exists(self, username: str) -> bool:
        data = self._request_json(f"{api_base(self.host)}/users/{quote(username, safe='')}", accept_error_body=True)
        return not (isinstance(data, dict) and data.get("message") == NOT_FOUND_MESSAGE)

    def list_repos(self, username: str) -> list[Repository]:
        """Single page of the user's repositories; no pagination."""
        data = self._request_json(f"{api_base(self.host)}/users/{quote(username, safe='')}/repos")
        if not isinstance(data, list):
            raise GitHubError(f"Unexpected repository list for {username}: {data!r}")
        try:
            return [Repository.model_validate(r) for r in data]
        except ValidationError as e:
            raise GitHubError(f"Unexpected repository record for {username}: {e}") from e
