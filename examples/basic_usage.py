#!/usr/bin/env python3
"""
Basic RepoPulse SDK usage example.

Lists this week's most starred new repositories and prints activity
statistics for the top one.
Run with: GITHUB_TOKEN=... python examples/basic_usage.py
"""

import asyncio
import logging

from repopulse import AsyncRepoPulseClient, RepoPulseError, TimeFilter, configure_logging


async def main() -> None:
    configure_logging(level=logging.INFO)

    async with AsyncRepoPulseClient.from_env() as client:
        if client.config.needs_token:
            print("No GITHUB_TOKEN set: requests are unauthenticated and rate limited.\n")

        print("=== Trending this week ===\n")
        state = await client.feed.search(TimeFilter.WEEK)
        if state.error:
            print(f"Search failed: {state.error}")
            return

        state = await client.feed.load_more()
        for repo in state.items:
            print(f"{repo.stars:>8}  {repo.full_name:<40} {repo.language or '-'}")
        if state.error:
            print(f"\nStopped paginating: {state.error}")

        if not state.items:
            return

        top = state.items[0]
        print(f"\n=== Activity for {top.full_name} ===\n")
        try:
            stats = await client.stats.fetch_stats_for(top)
        except RepoPulseError as e:
            print(f"Cannot load statistics: {e.message}")
            return

        if stats.error:
            print(f"Note: {stats.error}\n")

        print(f"Commits (last 52 weeks): {sum(point.y for point in stats.commits)}")
        print(f"Additions:               {sum(point.y for point in stats.additions)}")
        print(f"Deletions:               {sum(point.y for point in stats.deletions)}")
        print("\nTop contributors:")
        for contributor in stats.top_contributors(limit=5):
            print(f"  {contributor.author:<25} {contributor.total_commits} commits")


if __name__ == "__main__":
    asyncio.run(main())
