"""HTTP client setup shared by the token and GraphQL requests.

Provides the async context manager that creates an ``httpx.AsyncClient`` with
the configured timeout and TLS settings.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx

from ..config import JamppConfig


@asynccontextmanager
async def create_http_client(
    config: JamppConfig,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[httpx.AsyncClient]:
    """Create a configured HTTP client.

    No retry policy is attached: every request is attempted exactly once.

    Args:
        config: The configuration containing timeouts and TLS verification.
        transport: Optional transport override, used by tests to stub the network.

    Yields:
        Configured ``httpx.AsyncClient`` instance.

    """
    timeout = httpx.Timeout(config.timeout_ms / 1000)
    async with httpx.AsyncClient(verify=config.verify_ssl, timeout=timeout, transport=transport) as client:
        yield client


def describe_status(response: httpx.Response) -> str:
    """Return a short ``"<code> <reason>"`` description of a response status."""
    reason = response.reason_phrase or "Unknown Status"
    return f"{response.status_code} {reason}"


__all__ = ["create_http_client", "describe_status"]
