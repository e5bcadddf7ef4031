"""RepoPulse SDK data models."""

from repopulse.types.feed import FeedState, FeedStatus, FetchIntent, StatsTab, TimeFilter
from repopulse.types.repos import RepositoryOwner, RepositorySummary
from repopulse.types.stats import (
    WEEKS_PER_YEAR,
    ContributorStat,
    ContributorWeek,
    RepositoryStatsResult,
    TimeSeriesPoint,
    placeholder_series,
    top_contributors,
)

__all__ = [
    # Repositories
    "RepositoryOwner",
    "RepositorySummary",
    # Statistics
    "WEEKS_PER_YEAR",
    "TimeSeriesPoint",
    "ContributorWeek",
    "ContributorStat",
    "RepositoryStatsResult",
    "placeholder_series",
    "top_contributors",
    # Feed
    "TimeFilter",
    "FetchIntent",
    "FeedStatus",
    "StatsTab",
    "FeedState",
]
