"""Token management utilities for the Jampp reporting API."""

import asyncio
import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from types import TracebackType
from typing import Self, TypeAlias

import httpx

from ..config import JamppConfig
from ..models.auth import AccessToken, TokenResponse
from .errors import AuthenticationError
from .http import create_http_client, describe_status

logger = logging.getLogger("jampp_mcp.token_manager")

# Cached tokens stop being served this long before the server-reported expiry.
TOKEN_EXPIRY_MARGIN = timedelta(seconds=300)

Clock: TypeAlias = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class TokenManager:
    """Manage the bearer token for the Jampp API, refreshing when necessary."""

    def __init__(
        self,
        config: JamppConfig,
        *,
        clock: Clock | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the token manager.

        Args:
            config: The resolved Jampp configuration holding the client credentials.
            clock: Callable returning the current UTC time; defaults to the system clock.
            transport: Optional HTTP transport override for the token request.

        """
        self._config = config
        self._clock = clock or _utcnow
        self._transport = transport
        self._credential: AccessToken | None = None
        self._lock: asyncio.Lock | None = None
        self._lock_loop: asyncio.AbstractEventLoop | None = None

    def __enter__(self) -> Self:
        """Return the token manager for context manager usage."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Close resources when leaving a context manager block."""
        self.close()

    def close(self) -> None:
        """Clean up resources (no-op; the manager holds no open connections)."""

    @property
    def credential(self) -> AccessToken | None:
        """Return the currently cached credential, valid or not."""
        return self._credential

    def invalidate(self) -> None:
        """Drop the cached credential so the next call fetches a new token."""
        self._credential = None

    def _ensure_lock(self) -> asyncio.Lock:
        """Return an asyncio lock bound to the current event loop.

        Creates a new lock if one does not exist or if the event loop has changed.
        """
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
        return self._lock

    def _cached_token(self) -> str | None:
        credential = self._credential
        if credential is not None and credential.is_valid(self._clock()):
            return credential.token
        return None

    async def get_token(self) -> str:
        """Return a bearer token valid for immediate use, fetching one if needed.

        Raises:
            AuthenticationError: If the token endpoint is unreachable, rejects the
                credentials, or answers with an empty token.

        """
        token = self._cached_token()
        if token is not None:
            return token

        async with self._ensure_lock():
            # Another caller may have refreshed while we waited for the lock
            token = self._cached_token()
            if token is not None:
                return token
            return await self._fetch_and_cache_token()

    async def _fetch_and_cache_token(self) -> str:
        """Exchange the client credentials for a token and cache it.

        Returns:
            The newly fetched bearer token.

        Raises:
            AuthenticationError: If authentication fails or returns an empty token.

        """
        payload = await self._request_token()
        if not payload.access_token:
            msg = "Jampp authentication succeeded but returned an empty token."
            raise AuthenticationError(msg)

        expires_at = self._clock() + timedelta(seconds=payload.expires_in) - TOKEN_EXPIRY_MARGIN
        self._credential = AccessToken(token=payload.access_token, expires_at=expires_at)

        logger.debug("Fetched new access token from Jampp; cached until %s.", expires_at.isoformat())
        return payload.access_token

    async def _request_token(self) -> TokenResponse:
        """Request a token using the client-credentials grant.

        Returns:
            The parsed token endpoint response.

        """
        form = {
            "grant_type": "client_credentials",
            "client_id": self._config.client_id,
            "client_secret": self._config.client_secret,
        }
        try:
            async with create_http_client(self._config, transport=self._transport) as http_client:
                response = await http_client.post(self._config.auth_url_str, data=form)
        except httpx.HTTPError as exc:
            msg = f"Network error while requesting a Jampp access token: {exc}"
            raise AuthenticationError(msg) from exc

        if not response.is_success:
            msg = f"Jampp authentication failed: {describe_status(response)}"
            raise AuthenticationError(msg, status_code=response.status_code)

        try:
            return TokenResponse.model_validate(response.json())
        except ValueError as exc:
            msg = f"Invalid response from the Jampp token endpoint: {exc}"
            raise AuthenticationError(msg, status_code=response.status_code) from exc


__all__ = ["TOKEN_EXPIRY_MARGIN", "TokenManager"]
