"""Feed (pagination) state models."""

from dataclasses import dataclass
from enum import Enum

from repopulse.types.repos import RepositorySummary


class TimeFilter(str, Enum):
    """Creation window for the trending search."""

    WEEK = "week"
    MONTH = "month"
    OVERALL = "overall"


class FetchIntent(str, Enum):
    """Why a search is dispatched."""

    FRESH_SEARCH = "fresh_search"
    LOAD_MORE = "load_more"


class FeedStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"


class StatsTab(str, Enum):
    """Chart shown for the expanded repository."""

    COMMITS = "commits"
    ADDITIONS = "additions"
    DELETIONS = "deletions"
    CONTRIBUTORS = "contributors"


@dataclass(frozen=True)
class FeedState:
    """Snapshot of the accumulated search results.

    Replaced wholesale on every transition; never mutated in place.
    """

    items: tuple[RepositorySummary, ...] = ()
    page: int = 1
    has_more: bool = True
    loading: bool = False
    error: str | None = None
    time_filter: TimeFilter = TimeFilter.OVERALL
    expanded: RepositorySummary | None = None
    selected_tab: StatsTab = StatsTab.COMMITS

    @property
    def status(self) -> FeedStatus:
        if self.loading:
            return FeedStatus.LOADING
        if self.error is not None:
            return FeedStatus.ERROR
        return FeedStatus.IDLE

    @property
    def ids(self) -> set[int]:
        return {item.id for item in self.items}
