"""Authenticated GraphQL execution against the Jampp reporting API."""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from ..config import JamppConfig
from ..models.graphql import GraphQLRequest
from .errors import ApiRequestError
from .http import create_http_client, describe_status
from .token_manager import TokenManager

logger = logging.getLogger("jampp_mcp.graphql_client")


class GraphQLClient:
    """Execute GraphQL documents with a bearer token from the ``TokenManager``.

    The client is stateless between calls. It guarantees transport-level
    semantics only: a 2xx response is returned as parsed JSON even when the body
    carries a GraphQL ``errors`` array, so callers must inspect the payload.
    """

    def __init__(
        self,
        config: JamppConfig,
        token_manager: TokenManager,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: The resolved Jampp configuration.
            token_manager: Source of valid bearer tokens.
            transport: Optional HTTP transport override for the GraphQL request.

        """
        self._config = config
        self._token_manager = token_manager
        self._transport = transport

    @property
    def token_manager(self) -> TokenManager:
        """Return the token manager backing this client."""
        return self._token_manager

    async def execute(self, query: str, variables: Mapping[str, Any] | None = None) -> Any:
        """Run one GraphQL document and return the parsed response body.

        Args:
            query: The GraphQL document, passed through unvalidated.
            variables: Variables referenced by the document.

        Returns:
            The decoded JSON body, unchanged.

        Raises:
            AuthenticationError: If no token could be obtained; no request is sent.
            ApiRequestError: If the endpoint is unreachable, answers with a
                non-success status, or returns a body that is not JSON.

        """
        token = await self._token_manager.get_token()

        request = GraphQLRequest(query=query, variables=dict(variables or {}))
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {token}",
        }
        logger.debug("Executing GraphQL request against %s.", self._config.api_url_str)
        try:
            async with create_http_client(self._config, transport=self._transport) as http_client:
                response = await http_client.post(
                    self._config.api_url_str,
                    json=request.model_dump(mode="json"),
                    headers=headers,
                )
        except httpx.HTTPError as exc:
            msg = f"Network error while calling the Jampp reporting API: {exc}"
            raise ApiRequestError(msg) from exc

        if not response.is_success:
            msg = f"Jampp API request failed: {describe_status(response)}"
            raise ApiRequestError(msg, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            msg = f"Invalid JSON response from the Jampp reporting API: {exc}"
            raise ApiRequestError(msg, status_code=response.status_code) from exc


__all__ = ["GraphQLClient"]
