"""
Normalized GitHub records used by the scoring engine.

The REST API returns loosely-typed JSON. These helpers convert it into
immutable records so that every scorer sees the same shape, with absent
or empty optional fields collapsed to None.
"""

from datetime import datetime, timezone
from typing import Any, NamedTuple


class Profile(NamedTuple):
    """A GitHub user profile."""

    login: str
    name: str | None = None
    bio: str | None = None
    location: str | None = None
    blog: str | None = None
    company: str | None = None
    avatar_url: str | None = None
    html_url: str | None = None
    public_repos: int = 0
    followers: int = 0
    following: int = 0
    created_at: datetime | None = None

    @property
    def display_name(self) -> str:
        return self.name or self.login


class Repository(NamedTuple):
    """A repository owned by the analyzed account."""

    name: str
    full_name: str | None = None
    html_url: str | None = None
    fork: bool = False
    private: bool = False
    description: str | None = None
    size: int = 0
    homepage: str | None = None
    topics: tuple[str, ...] = ()
    language: str | None = None
    stargazers_count: int = 0
    forks_count: int = 0
    watchers_count: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Event(NamedTuple):
    """A public activity event. Only its timestamp is used for scoring."""

    type: str | None = None
    repo_name: str | None = None
    created_at: datetime | None = None


class ProfileSnapshot(NamedTuple):
    """Everything fetched for one account in a single analysis run."""

    profile: Profile
    repositories: list[Repository]
    events: list[Event]


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp as returned by GitHub ("...Z").

    Returns None for missing or malformed values; naive values are taken as UTC.
    """
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    return ensure_utc(parsed)


def ensure_utc(moment: datetime) -> datetime:
    """Treat a naive datetime as UTC; aware values are returned unchanged."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def _text(value: Any) -> str | None:
    # GitHub reports unset text fields as either null or ""
    if value is None:
        return None
    text = str(value)
    return text if text else None


def _count(value: Any) -> int:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return int(value)
    return 0


def parse_profile(data: dict[str, Any]) -> Profile:
    """Build a Profile from a GET /users/{username} payload."""
    return Profile(
        login=str(data.get("login") or ""),
        name=_text(data.get("name")),
        bio=_text(data.get("bio")),
        location=_text(data.get("location")),
        blog=_text(data.get("blog")),
        company=_text(data.get("company")),
        avatar_url=_text(data.get("avatar_url")),
        html_url=_text(data.get("html_url")),
        public_repos=_count(data.get("public_repos")),
        followers=_count(data.get("followers")),
        following=_count(data.get("following")),
        created_at=parse_timestamp(data.get("created_at")),
    )


def parse_repository(data: dict[str, Any]) -> Repository:
    """Build a Repository from one entry of GET /users/{username}/repos."""
    topics_raw = data.get("topics") or []
    topics = tuple(str(topic) for topic in topics_raw if topic)
    return Repository(
        name=str(data.get("name") or ""),
        full_name=_text(data.get("full_name")),
        html_url=_text(data.get("html_url")),
        fork=bool(data.get("fork", False)),
        private=bool(data.get("private", False)),
        description=_text(data.get("description")),
        size=_count(data.get("size")),
        homepage=_text(data.get("homepage")),
        topics=topics,
        language=_text(data.get("language")),
        stargazers_count=_count(data.get("stargazers_count")),
        forks_count=_count(data.get("forks_count")),
        watchers_count=_count(data.get("watchers_count")),
        created_at=parse_timestamp(data.get("created_at")),
        updated_at=parse_timestamp(data.get("updated_at")),
    )


def parse_event(data: dict[str, Any]) -> Event:
    """Build an Event from one entry of GET /users/{username}/events."""
    repo = data.get("repo")
    repo_name = repo.get("name") if isinstance(repo, dict) else None
    return Event(
        type=_text(data.get("type")),
        repo_name=_text(repo_name),
        created_at=parse_timestamp(data.get("created_at")),
    )


def original_repositories(repositories: list[Repository]) -> list[Repository]:
    """Return the repositories that are not forks, preserving order."""
    return [repo for repo in repositories if not repo.fork]
