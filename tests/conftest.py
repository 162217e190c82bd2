"""Shared fixtures for the Jampp MCP test suite."""

from datetime import UTC, datetime

import pytest
from fakes import FakeClock

from jampp_mcp.config import JamppConfig


@pytest.fixture
def config() -> JamppConfig:
    """Configuration with the example client credentials."""
    return JamppConfig(client_id="abc", client_secret="xyz")


@pytest.fixture
def clock() -> FakeClock:
    """Fake clock starting at t=0."""
    return FakeClock(datetime(2024, 1, 1, tzinfo=UTC))
