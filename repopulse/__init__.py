"""RepoPulse SDK - async client for trending repositories and their activity."""

from repopulse.async_client import AsyncRepoPulseClient
from repopulse.async_clients import AsyncSearchClient, AsyncStatsClient
from repopulse.async_transport import AsyncHTTPTransport
from repopulse.config import TOKEN_PLACEHOLDER, ApiConfig
from repopulse.exceptions import (
    ConfigurationError,
    HttpError,
    InvalidArgumentError,
    NetworkError,
    RateLimitError,
    RepoPulseError,
    UnprocessableError,
)
from repopulse.feed import RepositoryFeed
from repopulse.logging import configure_logging, get_logger
from repopulse.types import (
    ContributorStat,
    ContributorWeek,
    FeedState,
    FeedStatus,
    FetchIntent,
    RepositoryOwner,
    RepositoryStatsResult,
    RepositorySummary,
    StatsTab,
    TimeFilter,
    TimeSeriesPoint,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main Client
    "AsyncRepoPulseClient",
    # Resource clients
    "AsyncSearchClient",
    "AsyncStatsClient",
    "RepositoryFeed",
    # Configuration
    "ApiConfig",
    "TOKEN_PLACEHOLDER",
    # Exceptions
    "RepoPulseError",
    "ConfigurationError",
    "InvalidArgumentError",
    "NetworkError",
    "HttpError",
    "RateLimitError",
    "UnprocessableError",
    # Types
    "RepositoryOwner",
    "RepositorySummary",
    "TimeSeriesPoint",
    "ContributorWeek",
    "ContributorStat",
    "RepositoryStatsResult",
    "TimeFilter",
    "FetchIntent",
    "FeedStatus",
    "StatsTab",
    "FeedState",
    # Transport
    "AsyncHTTPTransport",
    # Logging
    "configure_logging",
    "get_logger",
]
