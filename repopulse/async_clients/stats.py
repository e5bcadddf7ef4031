"""Async repository statistics client.

Fetches the participation, code frequency and contributor statistics of a
repository concurrently and normalizes them into fixed-length weekly series.
The aggregate call never raises for a well-formed owner/repository: every
failure is folded into ``RepositoryStatsResult.error``.
"""

import asyncio
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from repopulse.exceptions import (
    STATS_NOT_READY_MESSAGE,
    InvalidArgumentError,
    RepoPulseError,
    UnprocessableError,
)
from repopulse.logging import get_logger
from repopulse.types.repos import RepositorySummary
from repopulse.types.stats import (
    WEEKS_PER_YEAR,
    ContributorStat,
    ContributorWeek,
    RepositoryStatsResult,
    TimeSeriesPoint,
    placeholder_series,
)

if TYPE_CHECKING:
    from repopulse.async_transport import AsyncHTTPTransport

logger = get_logger()

STATS_ENDPOINTS = ("participation", "code_frequency", "contributors")


def fit_weeks(values: Sequence[int], weeks: int = WEEKS_PER_YEAR) -> list[TimeSeriesPoint]:
    """
    Turn raw weekly values into a series of exactly ``weeks`` points.

    Longer input keeps the most recent weeks; shorter non-empty input is
    padded with zeros at the start. Empty input gives the placeholder.
    """
    if not values:
        return placeholder_series(weeks)
    recent = list(values)[-weeks:]
    padded = [0] * (weeks - len(recent)) + recent
    return [TimeSeriesPoint(x=i, y=value) for i, value in enumerate(padded)]


def select_commit_counts(participation: Any) -> list[int]:
    """
    Pick the weekly commit counts from a participation payload.

    "all" is used when any week is non-zero. Otherwise "owner" is used when
    present, since "all" sometimes comes back zero-filled while "owner" has data.
    """
    if not isinstance(participation, dict):
        return []

    all_counts = list(participation.get("all") or [])
    if any(all_counts):
        return all_counts

    owner_counts = list(participation.get("owner") or [])
    if owner_counts:
        return owner_counts
    return all_counts


def normalize_commits(participation: Any) -> list[TimeSeriesPoint]:
    return fit_weeks([count or 0 for count in select_commit_counts(participation)])


def normalize_code_frequency(
    code_frequency: Any,
) -> tuple[list[TimeSeriesPoint], list[TimeSeriesPoint]]:
    """Split [timestamp, additions, deletions] triples into two series.

    Deletions arrive negative and are reported as magnitudes.
    """
    if not isinstance(code_frequency, list):
        return placeholder_series(), placeholder_series()

    additions = []
    deletions = []
    for week in code_frequency:
        additions.append((week[1] if len(week) > 1 else 0) or 0)
        deletions.append(abs((week[2] if len(week) > 2 else 0) or 0))
    return fit_weeks(additions), fit_weeks(deletions)


def normalize_contributors(contributors: Any) -> list[ContributorStat]:
    # Anonymous and deleted accounts come back with author=null
    if not isinstance(contributors, list):
        return []

    return [
        ContributorStat(
            author=entry["author"].get("login", ""),
            avatar_url=entry["author"].get("avatar_url", ""),
            total_commits=entry.get("total") or 0,
            weeks=tuple(
                ContributorWeek(
                    week_timestamp=week.get("w", 0),
                    additions=week.get("a", 0),
                    deletions=week.get("d", 0),
                    commits=week.get("c", 0),
                )
                for week in entry.get("weeks") or []
            ),
        )
        for entry in contributors
        if entry.get("author") is not None
    ]


_NORMALIZERS: dict[str, tuple[Callable[[Any], Any], Callable[[], Any]]] = {
    "participation": (normalize_commits, placeholder_series),
    "code_frequency": (normalize_code_frequency, lambda: (placeholder_series(), placeholder_series())),
    "contributors": (normalize_contributors, list),
}


def _failure_message(error: BaseException) -> str:
    if isinstance(error, RepoPulseError):
        return error.message
    return str(error) or type(error).__name__


class AsyncStatsClient:
    """Async client for per-repository activity statistics."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async statistics client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def fetch_repository_stats(
        self, owner: str, repo_name: str
    ) -> RepositoryStatsResult:
        """
        Get normalized commit, code frequency and contributor statistics.

        The three statistics requests run concurrently and fail independently.
        Whatever succeeds is normalized, whatever fails becomes a zero-filled
        52-week placeholder, and ``error`` describes the first failure.

        Args:
            owner: Repository owner login
            repo_name: Repository name

        Returns:
            RepositoryStatsResult with 52-point commit/addition/deletion series

        Raises:
            InvalidArgumentError: If owner or repo_name is empty
        """
        if not owner or not owner.strip() or not repo_name or not repo_name.strip():
            raise InvalidArgumentError("Repository owner and name are required")

        try:
            return await self._fetch_and_normalize(owner.strip(), repo_name.strip())
        except Exception as e:
            logger.error("Error fetching statistics for %s/%s: %s", owner, repo_name, e)
            return RepositoryStatsResult.placeholder(
                _failure_message(e) or "Failed to load repository statistics"
            )

    async def fetch_stats_for(self, repository: RepositorySummary) -> RepositoryStatsResult:
        """Get statistics for a repository from the search results."""
        return await self.fetch_repository_stats(repository.owner_login, repository.repo_name)

    async def _fetch_and_normalize(self, owner: str, repo_name: str) -> RepositoryStatsResult:
        base = f"/repos/{owner}/{repo_name}/stats"
        outcomes = await asyncio.gather(
            *(self.transport.request(f"{base}/{endpoint}") for endpoint in STATS_ENDPOINTS),
            return_exceptions=True,
        )

        failures: list[BaseException] = []
        for endpoint, outcome in zip(STATS_ENDPOINTS, outcomes):
            if isinstance(outcome, BaseException):
                # Cancellation must not be folded into the result
                if isinstance(outcome, asyncio.CancelledError):
                    raise outcome
                logger.warning("%s/%s %s failed: %s", owner, repo_name, endpoint, outcome)
                failures.append(outcome)

        if len(failures) == len(STATS_ENDPOINTS) and all(
            isinstance(failure, UnprocessableError) for failure in failures
        ):
            return RepositoryStatsResult.placeholder(STATS_NOT_READY_MESSAGE)

        # Each source is normalized on its own; a malformed payload only
        # replaces its own series
        errors: list[str] = []
        normalized = []
        for endpoint, outcome in zip(STATS_ENDPOINTS, outcomes):
            normalizer, fallback = _NORMALIZERS[endpoint]
            if isinstance(outcome, BaseException):
                errors.append(_failure_message(outcome))
                normalized.append(fallback())
                continue
            try:
                normalized.append(normalizer(outcome))
            except (AttributeError, IndexError, KeyError, TypeError, ValueError) as e:
                logger.warning(
                    "%s/%s %s payload could not be normalized: %s", owner, repo_name, endpoint, e
                )
                errors.append(f"Malformed {endpoint.replace('_', ' ')} statistics: {e}")
                normalized.append(fallback())

        commits, (additions, deletions), contributors = normalized
        return RepositoryStatsResult(
            commits=commits,
            additions=additions,
            deletions=deletions,
            contributors=contributors,
            error=errors[0] if errors else None,
        )
