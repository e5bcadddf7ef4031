"""RepoPulse SDK testing utilities.

Provides mock clients and payload factories for testing applications that
use the RepoPulse SDK.
"""

from repopulse.testing.fixtures import (
    create_mock_page,
    create_mock_repository,
    make_code_frequency,
    make_contributor,
    make_participation,
    make_search_item,
    make_search_response,
)
from repopulse.testing.mock import MockCall, MockResponse, MockSearchClient, MockStatsClient

__all__ = [
    # Mock clients
    "MockSearchClient",
    "MockStatsClient",
    "MockCall",
    "MockResponse",
    # Helper functions
    "create_mock_repository",
    "create_mock_page",
    "make_search_item",
    "make_search_response",
    "make_participation",
    "make_code_frequency",
    "make_contributor",
]
