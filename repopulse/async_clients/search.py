"""Async repository search client.

Fetches one page of popular repositories, optionally bounded by creation date.
"""

import calendar
from datetime import date, datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any

from repopulse.exceptions import InvalidArgumentError
from repopulse.logging import get_logger
from repopulse.types.feed import TimeFilter
from repopulse.types.repos import RepositoryOwner, RepositorySummary

if TYPE_CHECKING:
    from repopulse.async_transport import AsyncHTTPTransport

logger = get_logger()

PER_PAGE = 10
MIN_STARS = 1000
SEARCH_PATH = "/search/repositories"


def _one_month_before(day: date) -> date:
    year, month = (day.year, day.month - 1) if day.month > 1 else (day.year - 1, 12)
    last_day = calendar.monthrange(year, month)[1]
    return day.replace(year=year, month=month, day=min(day.day, last_day))


def created_since(time_filter: TimeFilter, today: date | None = None) -> date | None:
    """
    Lower bound on the creation date for a time filter.

    Returns:
        today - 7 days for WEEK, today - 1 calendar month for MONTH, None for OVERALL
    """
    time_filter = TimeFilter(time_filter)
    today = today or datetime.now(timezone.utc).date()

    if time_filter is TimeFilter.WEEK:
        return today - timedelta(days=7)
    if time_filter is TimeFilter.MONTH:
        return _one_month_before(today)
    return None


def build_query(time_filter: TimeFilter, today: date | None = None) -> str:
    """
    Build the search query string for a time filter.

    Args:
        time_filter: Creation window
        today: Reference date (default: current UTC date)

    Returns:
        Query such as "stars:>1000 created:>2024-01-08 sort:stars"
    """
    parts = [f"stars:>{MIN_STARS}"]

    since = created_since(time_filter, today)
    if since is not None:
        parts.append(f"created:>{since.isoformat()}")

    parts.append("sort:stars")
    return " ".join(parts)


def _parse_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    # fromisoformat only accepts a trailing "Z" from Python 3.11 on
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)


def map_repository(item: dict[str, Any]) -> RepositorySummary:
    """Map a raw search result item to a RepositorySummary."""
    owner = item.get("owner") or {}
    return RepositorySummary(
        id=item["id"],
        name=item["name"],
        full_name=item["full_name"],
        description=item.get("description"),
        url=item["html_url"],
        stars=item.get("stargazers_count") or 0,
        forks=item.get("forks_count") or 0,
        language=item.get("language"),
        owner=RepositoryOwner(
            login=owner.get("login", ""),
            avatar_url=owner.get("avatar_url", ""),
        ),
        created_at=_parse_timestamp(item.get("created_at")),
        updated_at=_parse_timestamp(item.get("updated_at")),
    )


class AsyncSearchClient:
    """Async client for the repository search endpoint."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async search client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def search(
        self,
        time_filter: TimeFilter = TimeFilter.OVERALL,
        page: int = 1,
    ) -> list[RepositorySummary]:
        """
        Get one page of repositories sorted by stars, most starred first.

        Errors from the transport are not caught here.

        Args:
            time_filter: Creation window ("week", "month", "overall")
            page: 1-based page number

        Returns:
            Up to PER_PAGE repositories; an empty list means the feed is exhausted

        Raises:
            InvalidArgumentError: If page is less than 1
        """
        if page < 1:
            raise InvalidArgumentError(f"page must be >= 1, got {page}")

        params: dict[str, str | int] = {
            "q": build_query(time_filter),
            "per_page": PER_PAGE,
            "page": page,
            "sort": "stars",
            "order": "desc",
        }

        response = await self.transport.request(SEARCH_PATH, params=params)

        items = (response or {}).get("items") or []
        repositories = [map_repository(item) for item in items]
        logger.debug(
            "Search page %d (%s) returned %d repositories",
            page,
            TimeFilter(time_filter).value,
            len(repositories),
        )
        return repositories
