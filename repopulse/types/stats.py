"""Repository statistics data models.

Every weekly series handed to chart consumers has exactly ``WEEKS_PER_YEAR``
points with ``x`` equal to the point's index.
"""

from dataclasses import dataclass, field

WEEKS_PER_YEAR = 52


@dataclass(frozen=True)
class TimeSeriesPoint:
    """A weekly value; ``x`` is the week index, oldest first."""

    x: int
    y: int


@dataclass(frozen=True)
class ContributorWeek:
    """One week of a contributor's activity."""

    week_timestamp: int  # Unix timestamp of the start of the week
    additions: int
    deletions: int
    commits: int


@dataclass(frozen=True)
class ContributorStat:
    """A contributor and their weekly breakdown, oldest week first."""

    author: str
    avatar_url: str
    total_commits: int
    weeks: tuple[ContributorWeek, ...] = ()


def placeholder_series(weeks: int = WEEKS_PER_YEAR) -> list[TimeSeriesPoint]:
    """Return an all-zero weekly series."""
    return [TimeSeriesPoint(x=i, y=0) for i in range(weeks)]


def top_contributors(
    contributors: list[ContributorStat], limit: int = 10
) -> list[ContributorStat]:
    """
    Build the contributor leaderboard.

    Contributors without commits are dropped; the rest are ordered by total
    commits, highest first. Ties keep their upstream order.
    """
    active = [c for c in contributors if c.total_commits > 0]
    active.sort(key=lambda c: c.total_commits, reverse=True)
    return active[:limit]


@dataclass
class RepositoryStatsResult:
    """Normalized statistics for one repository.

    ``error`` being set means the series are placeholders (fully or
    partially), not a complete measurement.
    """

    commits: list[TimeSeriesPoint] = field(default_factory=placeholder_series)
    additions: list[TimeSeriesPoint] = field(default_factory=placeholder_series)
    deletions: list[TimeSeriesPoint] = field(default_factory=placeholder_series)
    contributors: list[ContributorStat] = field(default_factory=list)
    error: str | None = None

    @property
    def is_placeholder(self) -> bool:
        return self.error is not None

    def top_contributors(self, limit: int = 10) -> list[ContributorStat]:
        return top_contributors(self.contributors, limit)

    @classmethod
    def placeholder(cls, error: str) -> "RepositoryStatsResult":
        """All-zero result carrying an error message."""
        return cls(error=error)
