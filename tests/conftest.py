"""Pytest configuration and fixtures for integration tests."""

from fixtures.mock_servers import (
    mock_list_server,
    mock_unreachable_url,
)

from fixtures.sample_data import (
    sample_blacklist_content,
    sample_second_blacklist_content,
    sample_whitelist_content,
    sample_user_hosts,
    expected_blocked_domains,
)

__all__ = [
    # Mock server fixtures
    "mock_list_server",
    "mock_unreachable_url",
    # Sample data fixtures
    "sample_blacklist_content",
    "sample_second_blacklist_content",
    "sample_whitelist_content",
    "sample_user_hosts",
    "expected_blocked_domains",
]
