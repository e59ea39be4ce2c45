"""
Tests for GitHub payload normalization.
"""

from datetime import datetime, timedelta, timezone

from portfolio_analyzer.models import (
    Profile,
    Repository,
    ensure_utc,
    original_repositories,
    parse_event,
    parse_profile,
    parse_repository,
    parse_timestamp,
)


def test_parse_timestamp_variants():
    assert parse_timestamp("2024-06-15T12:00:00Z") == datetime(
        2024, 6, 15, 12, 0, tzinfo=timezone.utc
    )
    assert parse_timestamp("2024-06-15T12:00:00") == datetime(
        2024, 6, 15, 12, 0, tzinfo=timezone.utc
    )
    offset = parse_timestamp("2024-06-15T12:00:00+02:00")
    assert offset.utcoffset() == timedelta(hours=2)
    assert parse_timestamp(None) is None
    assert parse_timestamp("") is None
    assert parse_timestamp("not a date") is None
    assert parse_timestamp(12345) is None


def test_parse_profile_collapses_empty_fields():
    profile = parse_profile(
        {
            "login": "octocat",
            "name": "The Octocat",
            "bio": "",
            "location": "San Francisco",
            "blog": "",
            "company": None,
            "public_repos": 8,
            "followers": 9000,
            "created_at": "2011-01-25T18:44:36Z",
        }
    )
    assert profile.login == "octocat"
    assert profile.display_name == "The Octocat"
    assert profile.bio is None
    assert profile.blog is None
    assert profile.company is None
    assert profile.location == "San Francisco"
    assert profile.public_repos == 8
    assert profile.followers == 9000
    assert profile.following == 0
    assert profile.created_at.year == 2011


def test_display_name_falls_back_to_login():
    assert Profile(login="octocat").display_name == "octocat"


def test_parse_repository():
    repo = parse_repository(
        {
            "name": "hello-world",
            "full_name": "octocat/hello-world",
            "fork": False,
            "description": "My first repository on GitHub!",
            "size": 108,
            "homepage": "",
            "topics": ["demo", "", "tutorial"],
            "language": None,
            "stargazers_count": 80,
            "forks_count": 9,
            "watchers_count": 80,
            "created_at": "2011-01-26T19:01:12Z",
            "updated_at": "2024-01-01T00:00:00Z",
        }
    )
    assert repo.name == "hello-world"
    assert repo.full_name == "octocat/hello-world"
    assert repo.homepage is None
    assert repo.language is None
    assert repo.topics == ("demo", "tutorial")
    assert repo.size == 108
    assert repo.stargazers_count == 80
    assert repo.created_at == datetime(2011, 1, 26, 19, 1, 12, tzinfo=timezone.utc)


def test_parse_repository_tolerates_missing_fields():
    repo = parse_repository({"name": "bare", "topics": None, "size": "big"})
    assert repo == Repository(name="bare")


def test_parse_event():
    event = parse_event(
        {
            "type": "PushEvent",
            "repo": {"name": "octocat/hello-world"},
            "created_at": "2024-06-01T10:00:00Z",
        }
    )
    assert event.type == "PushEvent"
    assert event.repo_name == "octocat/hello-world"
    assert event.created_at == datetime(2024, 6, 1, 10, 0, tzinfo=timezone.utc)

    bare = parse_event({"created_at": "garbage"})
    assert bare.repo_name is None
    assert bare.created_at is None


def test_original_repositories_preserves_order():
    repos = [
        Repository(name="b"),
        Repository(name="fork", fork=True),
        Repository(name="a"),
    ]
    assert [repo.name for repo in original_repositories(repos)] == ["b", "a"]


def test_ensure_utc():
    naive = datetime(2024, 6, 15, 12, 0)
    assert ensure_utc(naive) == datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)

    aware = datetime(2024, 6, 15, 12, 0, tzinfo=timezone(timedelta(hours=2)))
    assert ensure_utc(aware) is aware
