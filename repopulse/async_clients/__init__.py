"""RepoPulse SDK async resource clients."""

from repopulse.async_clients.search import AsyncSearchClient
from repopulse.async_clients.stats import AsyncStatsClient

__all__ = [
    "AsyncSearchClient",
    "AsyncStatsClient",
]
