"""
Pytest plugin for RepoPulse SDK testing fixtures.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["repopulse.testing.conftest"]
"""

# Re-export all fixtures for pytest auto-discovery
from repopulse.testing.fixtures import (
    mock_search_client,
    mock_stats_client,
    sample_repository,
    sample_search_item,
)

__all__ = [
    "mock_search_client",
    "mock_stats_client",
    "sample_repository",
    "sample_search_item",
]
