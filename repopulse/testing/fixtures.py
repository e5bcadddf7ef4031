"""
Pytest fixtures for RepoPulse SDK testing.

Provides factories for raw GitHub API payloads, ready-made records and
mock clients.
"""

from datetime import datetime, timezone
from typing import Any, Generator

import pytest

from repopulse.testing.mock import MockSearchClient, MockStatsClient
from repopulse.types.repos import RepositoryOwner, RepositorySummary

# ============================================================================
# Raw payload factories
# ============================================================================


def make_search_item(
    id: int = 1,
    owner: str = "octocat",
    name: str = "hello-world",
    stars: int = 1500,
    forks: int = 100,
    language: str | None = "Python",
    description: str | None = "A test repository",
    created_at: str = "2024-01-01T00:00:00Z",
    updated_at: str = "2024-01-02T00:00:00Z",
) -> dict[str, Any]:
    """Build one item of a /search/repositories response."""
    return {
        "id": id,
        "name": name,
        "full_name": f"{owner}/{name}",
        "description": description,
        "html_url": f"https://github.com/{owner}/{name}",
        "stargazers_count": stars,
        "forks_count": forks,
        "language": language,
        "owner": {
            "login": owner,
            "avatar_url": f"https://avatars.githubusercontent.com/{owner}",
        },
        "created_at": created_at,
        "updated_at": updated_at,
    }


def make_search_response(items: list[dict[str, Any]]) -> dict[str, Any]:
    return {"total_count": len(items), "incomplete_results": False, "items": items}


def make_participation(
    all_counts: list[int] | None = None,
    owner_counts: list[int] | None = None,
) -> dict[str, Any]:
    """Build a /stats/participation response (52 weekly counts by default)."""
    return {
        "all": list(all_counts) if all_counts is not None else [1] * 52,
        "owner": list(owner_counts) if owner_counts is not None else [0] * 52,
    }


def make_code_frequency(weeks: int = 52, additions: int = 10, deletions: int = -5) -> list[list[int]]:
    """Build a /stats/code_frequency response of [timestamp, additions, deletions]."""
    start = 1_700_000_000
    return [[start + i * 604_800, additions, deletions] for i in range(weeks)]


def make_contributor(
    login: str | None = "octocat",
    total: int = 10,
    weeks: int = 2,
) -> dict[str, Any]:
    """Build one /stats/contributors entry; login=None gives a null author."""
    author = None
    if login is not None:
        author = {"login": login, "avatar_url": f"https://avatars.githubusercontent.com/{login}"}
    start = 1_700_000_000
    return {
        "author": author,
        "total": total,
        "weeks": [
            {"w": start + i * 604_800, "a": 3, "d": 1, "c": 1} for i in range(weeks)
        ],
    }


# ============================================================================
# Record factories
# ============================================================================


def create_mock_repository(
    id: int = 1,
    owner: str = "octocat",
    name: str = "hello-world",
    stars: int = 1500,
    forks: int = 100,
    language: str | None = "Python",
) -> RepositorySummary:
    """Create a RepositorySummary with sensible defaults."""
    now = datetime.now(timezone.utc)
    return RepositorySummary(
        id=id,
        name=name,
        full_name=f"{owner}/{name}",
        description="A test repository",
        url=f"https://github.com/{owner}/{name}",
        stars=stars,
        forks=forks,
        language=language,
        owner=RepositoryOwner(
            login=owner,
            avatar_url=f"https://avatars.githubusercontent.com/{owner}",
        ),
        created_at=now,
        updated_at=now,
    )


def create_mock_page(start_id: int, count: int = 10) -> list[RepositorySummary]:
    """Create ``count`` repositories with consecutive ids."""
    return [
        create_mock_repository(id=start_id + i, name=f"repo-{start_id + i}")
        for i in range(count)
    ]


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def mock_search_client() -> Generator[MockSearchClient, None, None]:
    """Provide a MockSearchClient for testing."""
    client = MockSearchClient()
    yield client
    client.reset()


@pytest.fixture
def mock_stats_client() -> Generator[MockStatsClient, None, None]:
    """Provide a MockStatsClient for testing."""
    client = MockStatsClient()
    yield client
    client.reset()


@pytest.fixture
def sample_repository() -> RepositorySummary:
    """Provide a sample repository."""
    return create_mock_repository()


@pytest.fixture
def sample_search_item() -> dict[str, Any]:
    """Provide a raw search result item."""
    return make_search_item()
