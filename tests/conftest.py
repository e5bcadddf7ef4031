"""Shared fixtures for the RepoPulse test suite."""

from repopulse.testing.fixtures import (  # noqa: F401
    mock_search_client,
    mock_stats_client,
    sample_repository,
    sample_search_item,
)
