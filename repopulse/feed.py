"""
Paginated trending feed.

``RepositoryFeed`` owns a single ``FeedState`` and is the only place it
changes. Transition methods are synchronous, so on one event loop no two
transitions interleave. Each dispatched fetch carries a generation number;
a result whose generation is no longer current is dropped (take latest).
"""

from collections.abc import Callable
from dataclasses import replace
from typing import TYPE_CHECKING

from repopulse.exceptions import RepoPulseError
from repopulse.logging import get_logger, log_feed_transition
from repopulse.types.feed import FeedState, FetchIntent, StatsTab, TimeFilter
from repopulse.types.repos import RepositorySummary

if TYPE_CHECKING:
    from repopulse.async_clients.search import AsyncSearchClient

logger = get_logger("feed")

FeedListener = Callable[[FeedState], None]


class RepositoryFeed:
    """
    Accumulates search result pages for the current time filter.

    Example:
        ```python
        feed = RepositoryFeed(client.search)
        await feed.search(TimeFilter.WEEK)
        while feed.state.has_more:
            await feed.load_more()
        ```
    """

    def __init__(
        self,
        search_client: "AsyncSearchClient",
        time_filter: TimeFilter = TimeFilter.OVERALL,
    ) -> None:
        self.search_client = search_client
        self._state = FeedState(time_filter=TimeFilter(time_filter))
        self._generation = 0
        self._listeners: list[FeedListener] = []

    @property
    def state(self) -> FeedState:
        """Current immutable snapshot."""
        return self._state

    @property
    def generation(self) -> int:
        return self._generation

    def subscribe(self, listener: FeedListener) -> Callable[[], None]:
        """
        Call ``listener`` with the new state after every applied transition.

        Returns:
            A function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, state: FeedState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener(state)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _set_filter(self, time_filter: TimeFilter) -> bool:
        """
        Record a time filter. Returns True if it changed.

        A change invalidates every fetch in flight; callers follow it with a
        fresh search.
        """
        time_filter = TimeFilter(time_filter)
        if time_filter == self._state.time_filter:
            return False
        self._generation += 1
        log_feed_transition("filter", filter=time_filter.value, generation=self._generation)
        self._commit(replace(self._state, time_filter=time_filter))
        return True

    def request(self, intent: FetchIntent) -> int | None:
        """
        Start a fetch.

        FRESH_SEARCH always starts over at page 1 with no items. LOAD_MORE
        only starts when more results may exist and nothing is loading.

        Returns:
            Generation of the dispatched fetch, or None if nothing was dispatched
        """
        intent = FetchIntent(intent)
        state = self._state

        if intent is FetchIntent.FRESH_SEARCH:
            new_state = replace(
                state, items=(), page=1, has_more=True, loading=True, error=None
            )
        else:
            if not state.has_more or state.loading:
                log_feed_transition(
                    "load_more_ignored", has_more=state.has_more, loading=state.loading
                )
                return None
            new_state = replace(state, page=state.page + 1, loading=True, error=None)

        self._generation += 1
        log_feed_transition(
            "request",
            intent=intent.value,
            page=new_state.page,
            filter=new_state.time_filter.value,
            generation=self._generation,
        )
        self._commit(new_state)
        return self._generation

    def apply_success(self, generation: int, items: list[RepositorySummary]) -> bool:
        """
        Merge a fetched page.

        Page 1 replaces the items; later pages are appended after existing
        items. Ids already present, or repeated within the page, are skipped.

        Returns:
            False if the result was stale and discarded
        """
        if generation != self._generation:
            log_feed_transition("stale_success", generation=generation, current=self._generation)
            return False

        state = self._state
        kept = state.items if state.page > 1 else ()
        seen = {item.id for item in kept}
        fresh = []
        for item in items:
            if item.id not in seen:
                seen.add(item.id)
                fresh.append(item)
        if len(fresh) != len(items):
            logger.debug("Dropped %d duplicate repositories", len(items) - len(fresh))
        merged = kept + tuple(fresh)

        log_feed_transition("success", page=state.page, received=len(items), total=len(merged))
        self._commit(
            replace(state, items=merged, has_more=len(items) > 0, loading=False, error=None)
        )
        return True

    def apply_failure(self, generation: int, message: str) -> bool:
        """
        Record a failed fetch and stop paginating.

        Returns:
            False if the result was stale and discarded
        """
        if generation != self._generation:
            log_feed_transition("stale_failure", generation=generation, current=self._generation)
            return False

        logger.warning("Search page %d failed: %s", self._state.page, message)
        self._commit(replace(self._state, has_more=False, loading=False, error=message))
        return True

    def toggle_expanded(self, repository: RepositorySummary) -> None:
        """Expand a repository; expanding the already expanded one collapses it."""
        expanded = self._state.expanded
        if expanded is not None and expanded.id == repository.id:
            self._commit(replace(self._state, expanded=None))
        else:
            self._commit(replace(self._state, expanded=repository))

    def select_tab(self, tab: StatsTab) -> None:
        self._commit(replace(self._state, selected_tab=StatsTab(tab)))

    # ------------------------------------------------------------------
    # Async operations
    # ------------------------------------------------------------------

    async def search(
        self,
        time_filter: TimeFilter | None = None,
        intent: FetchIntent = FetchIntent.FRESH_SEARCH,
    ) -> FeedState:
        """
        Dispatch a fetch and apply its outcome unless a newer fetch superseded it.

        A new time filter is recorded first, and a changed filter always
        forces a fresh search. Errors are stored on the state, not raised.

        Args:
            time_filter: New time filter (default: keep the current one)
            intent: FRESH_SEARCH or LOAD_MORE

        Returns:
            The state after this call
        """
        intent = FetchIntent(intent)
        if time_filter is not None and self._set_filter(time_filter):
            intent = FetchIntent.FRESH_SEARCH

        generation = self.request(intent)
        if generation is None:
            return self._state

        state = self._state
        try:
            items = await self.search_client.search(state.time_filter, state.page)
        except RepoPulseError as e:
            self.apply_failure(generation, e.message)
        except Exception as e:
            logger.exception("Unexpected error while searching page %d", state.page)
            self.apply_failure(generation, str(e) or type(e).__name__)
        else:
            self.apply_success(generation, items)
        return self._state

    async def load_more(self) -> FeedState:
        return await self.search(intent=FetchIntent.LOAD_MORE)

    async def refresh(self) -> FeedState:
        """Start over with the current filter; the recovery path after an error."""
        return await self.search(intent=FetchIntent.FRESH_SEARCH)

    async def set_time_filter(self, time_filter: TimeFilter) -> FeedState:
        """Record a new filter and start a fresh search with it."""
        self._set_filter(time_filter)
        return await self.search(intent=FetchIntent.FRESH_SEARCH)
