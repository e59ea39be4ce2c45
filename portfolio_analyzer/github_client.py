"""
GitHub REST API client for GitHub Portfolio Analyzer.

Fetches the three resources an analysis needs (profile, repositories,
recent events) and maps HTTP failures onto the typed errors in
portfolio_analyzer.errors.
"""

from typing import Any, Callable

import httpx
from dotenv import load_dotenv

from portfolio_analyzer.config import get_api_base_url, get_github_token
from portfolio_analyzer.errors import (
    NotFoundError,
    RateLimitedError,
    TransportFailureError,
)
from portfolio_analyzer.http_client import _get_http_client
from portfolio_analyzer.models import (
    Event,
    Profile,
    ProfileSnapshot,
    Repository,
    parse_event,
    parse_profile,
    parse_repository,
)

# Load environment variables
load_dotenv()

# Page size limits (GitHub caps per_page at 100)
REST_PAGE_LIMITS = {
    "repositories": 100,
    "events": 100,
}


class GitHubClient:
    """Read-only client for the public user endpoints of the GitHub REST API."""

    def __init__(self, token: str | None = None, base_url: str | None = None):
        """
        Initialize the client.

        Args:
            token: GitHub Personal Access Token. If not provided, reads from
                   GITHUB_TOKEN. Optional: anonymous requests work with a
                   lower rate limit.
            base_url: REST API root. Defaults to the configured API URL.
        """
        self.token = token or get_github_token()
        self.base_url = (base_url or get_api_base_url()).rstrip("/")

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/vnd.github.v3+json"}
        if self.token:
            headers["Authorization"] = f"token {self.token}"
        return headers

    def _get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """
        Perform a GET request and decode the JSON body.

        Raises:
            NotFoundError: On HTTP 404
            RateLimitedError: On HTTP 403 or 429
            TransportFailureError: On any other failure
        """
        client = _get_http_client()
        try:
            response = client.get(
                f"{self.base_url}{path}", params=params, headers=self._headers()
            )
        except httpx.RequestError as e:
            raise TransportFailureError(
                f"Failed to fetch data from GitHub: {e}"
            ) from e

        if response.status_code == 404:
            raise NotFoundError("GitHub user not found")
        if response.status_code in (403, 429):
            raise RateLimitedError("API rate limit exceeded. Please try again later.")
        if not response.is_success:
            raise TransportFailureError(
                f"Failed to fetch data from GitHub (HTTP {response.status_code})"
            )

        try:
            return response.json()
        except ValueError as e:
            raise TransportFailureError(
                "Failed to fetch data from GitHub: response was not valid JSON"
            ) from e

    def fetch_profile(self, username: str) -> Profile:
        """Fetch and normalize GET /users/{username}."""
        data = self._get_json(f"/users/{username}")
        if not isinstance(data, dict):
            raise TransportFailureError("Unexpected profile payload from GitHub")
        return parse_profile(data)

    def fetch_repositories(self, username: str) -> list[Repository]:
        """Fetch the most recently updated repositories (up to 100)."""
        data = self._get_json(
            f"/users/{username}/repos",
            params={"per_page": REST_PAGE_LIMITS["repositories"], "sort": "updated"},
        )
        if not isinstance(data, list):
            raise TransportFailureError("Unexpected repository payload from GitHub")
        return [parse_repository(item) for item in data if isinstance(item, dict)]

    def fetch_events(self, username: str) -> list[Event]:
        """Fetch the most recent public events (up to 100)."""
        data = self._get_json(
            f"/users/{username}/events",
            params={"per_page": REST_PAGE_LIMITS["events"]},
        )
        if not isinstance(data, list):
            raise TransportFailureError("Unexpected event payload from GitHub")
        return [parse_event(item) for item in data if isinstance(item, dict)]

    def fetch_all(
        self, username: str, on_step: Callable[[str], None] | None = None
    ) -> ProfileSnapshot:
        """
        Fetch profile, repositories and events, in that order.

        The first failure propagates; nothing is returned for a partial fetch.

        Args:
            username: GitHub login
            on_step: Called with a short progress message before each request
        """
        report = on_step or (lambda _message: None)

        report("Fetching profile data...")
        profile = self.fetch_profile(username)
        report("Analyzing repositories...")
        repositories = self.fetch_repositories(username)
        report("Analyzing commit activity...")
        events = self.fetch_events(username)
        return ProfileSnapshot(profile, repositories, events)
