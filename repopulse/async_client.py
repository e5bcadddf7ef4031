"""
RepoPulse SDK async client.

Provides the async interface behind the trending repositories dashboard.
"""

from typing import Any

import httpx

from repopulse.async_clients import AsyncSearchClient, AsyncStatsClient
from repopulse.async_transport import AsyncHTTPTransport
from repopulse.config import ApiConfig
from repopulse.feed import RepositoryFeed
from repopulse.types.feed import TimeFilter
from repopulse.types.stats import RepositoryStatsResult


class AsyncRepoPulseClient:
    """
    Async client for trending repositories and their activity statistics.

    Aggregates the resource clients and the paginated feed over one
    shared transport.

    Example:
        ```python
        import asyncio
        from repopulse import AsyncRepoPulseClient, TimeFilter

        async def main():
            async with AsyncRepoPulseClient.from_env() as client:
                state = await client.feed.search(TimeFilter.WEEK)
                top = state.items[0]
                stats = await client.get_stats(top.owner_login, top.repo_name)

        asyncio.run(main())
        ```
    """

    def __init__(
        self,
        config: ApiConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        time_filter: TimeFilter = TimeFilter.OVERALL,
    ) -> None:
        """
        Initialize the async RepoPulse client.

        Args:
            config: API settings (default: ApiConfig())
            transport: Optional httpx transport (for tests or custom networking)
            time_filter: Initial time filter of the feed
        """
        self.config = config or ApiConfig()

        self._transport = AsyncHTTPTransport(self.config, transport=transport)

        self.search = AsyncSearchClient(self._transport)
        self.stats = AsyncStatsClient(self._transport)
        self.feed = RepositoryFeed(self.search, time_filter=time_filter)

    @classmethod
    def from_env(
        cls,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "AsyncRepoPulseClient":
        """
        Create an async client from environment variables.

        See ApiConfig.from_env for the variables read.

        Raises:
            ConfigurationError: If a variable has an invalid value
        """
        return cls(config=ApiConfig.from_env(), transport=transport)

    @property
    def transport(self) -> AsyncHTTPTransport:
        """Get the underlying async HTTP transport (for advanced use cases)."""
        return self._transport

    async def get_stats(self, owner: str, repo_name: str) -> RepositoryStatsResult:
        """Get normalized statistics for one repository."""
        return await self.stats.fetch_repository_stats(owner, repo_name)

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._transport.close()

    async def __aenter__(self) -> "AsyncRepoPulseClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit - closes the client."""
        await self.close()
