"""Unit tests for GraphQLClient in client.graphql_client.

Validates authentication headers, the request body, transport error handling,
and that GraphQL-level errors are passed through untouched.
"""

import json
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from fakes import FakeClock, RecordingTransport, json_response, token_response

from jampp_mcp.client.errors import ApiRequestError, AuthenticationError
from jampp_mcp.client.graphql_client import GraphQLClient
from jampp_mcp.client.token_manager import TokenManager
from jampp_mcp.config import JamppConfig


def _client(config: JamppConfig, clock: FakeClock, transport: RecordingTransport) -> GraphQLClient:
    return GraphQLClient(
        config,
        TokenManager(config, clock=clock, transport=transport),
        transport=transport,
    )


@pytest.mark.asyncio
async def test_execute_sends_authenticated_json(config: JamppConfig, clock: FakeClock) -> None:
    """The request should carry the bearer token and the query with its variables."""
    transport = RecordingTransport(graphql=json_response({"data": {"ok": True}}))
    client = _client(config, clock, transport)

    body = await client.execute("query q($id: ID!) { report(id: $id) { id } }", {"id": "r1"})

    assert body == {"data": {"ok": True}}
    (request,) = transport.graphql_requests
    assert request.method == "POST"
    assert request.headers["authorization"] == "Bearer T1"
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content) == {
        "query": "query q($id: ID!) { report(id: $id) { id } }",
        "variables": {"id": "r1"},
    }


@pytest.mark.asyncio
async def test_execute_defaults_to_empty_variables(config: JamppConfig, clock: FakeClock) -> None:
    """Omitted variables should be sent as an empty object."""
    transport = RecordingTransport()
    await _client(config, clock, transport).execute("{ ping }")

    assert json.loads(transport.graphql_requests[0].content)["variables"] == {}


@pytest.mark.asyncio
async def test_graphql_errors_pass_through(config: JamppConfig, clock: FakeClock) -> None:
    """A transport-success body with GraphQL errors is returned unchanged."""
    payload = {"errors": [{"message": "bad field"}]}
    transport = RecordingTransport(graphql=json_response(payload))

    body = await _client(config, clock, transport).execute("{ nope }", {})

    assert body == payload


@pytest.mark.asyncio
async def test_non_success_status_raises_once(config: JamppConfig, clock: FakeClock) -> None:
    """A failed call should raise ApiRequestError without retrying."""
    transport = RecordingTransport(graphql=json_response({"message": "boom"}, status_code=500))

    with pytest.raises(ApiRequestError, match="500 Internal Server Error") as exc_info:
        await _client(config, clock, transport).execute("{ ping }", {})

    assert exc_info.value.status_code == 500
    assert len(transport.graphql_requests) == 1


@pytest.mark.asyncio
async def test_auth_failure_skips_graphql_call(config: JamppConfig, clock: FakeClock) -> None:
    """If the token fetch fails, the same error propagates and no query is sent."""
    transport = RecordingTransport(token=json_response({}, status_code=403))

    with pytest.raises(AuthenticationError, match="403 Forbidden"):
        await _client(config, clock, transport).execute("{ ping }", {})

    assert transport.graphql_requests == []


@pytest.mark.asyncio
async def test_auth_error_is_not_wrapped() -> None:
    """The executor should re-raise the token manager's exception object itself."""
    error = AuthenticationError("Jampp authentication failed: 401 Unauthorized", status_code=401)
    token_manager = MagicMock(spec=TokenManager)
    token_manager.get_token = AsyncMock(side_effect=error)
    client = GraphQLClient(JamppConfig(client_id="abc", client_secret="xyz"), token_manager)

    with pytest.raises(AuthenticationError) as exc_info:
        await client.execute("{ ping }")

    assert exc_info.value is error


@pytest.mark.asyncio
async def test_network_error_raises(config: JamppConfig, clock: FakeClock) -> None:
    """Transport failures on the GraphQL call should raise ApiRequestError."""

    def _fail(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    token_manager = TokenManager(config, clock=clock, transport=RecordingTransport())
    client = GraphQLClient(config, token_manager, transport=httpx.MockTransport(_fail))

    with pytest.raises(ApiRequestError, match="Network error"):
        await client.execute("{ ping }")


@pytest.mark.asyncio
async def test_invalid_json_raises(config: JamppConfig, clock: FakeClock) -> None:
    """A non-JSON success body should raise ApiRequestError."""
    transport = RecordingTransport(graphql=lambda request: httpx.Response(200, text="oops"))  # noqa: ARG005

    with pytest.raises(ApiRequestError, match="Invalid JSON"):
        await _client(config, clock, transport).execute("{ ping }")


@pytest.mark.asyncio
async def test_token_reused_across_calls(clock: FakeClock) -> None:
    """Two executions within the token lifetime should fetch the token once."""
    config = JamppConfig(client_id="abc", client_secret="xyz")
    transport = RecordingTransport(
        token=token_response("T1", 3600),
        graphql=json_response({"data": {"ping": "pong"}}),
    )
    client = _client(config, clock, transport)

    clock.at(100)
    first = await client.execute("{ ping }", {})
    assert first == {"data": {"ping": "pong"}}
    assert len(transport.token_requests) == 1
    assert len(transport.graphql_requests) == 1

    clock.at(200)
    await client.execute("{ ping }", {})
    assert len(transport.token_requests) == 1
    assert len(transport.graphql_requests) == 2
    assert all(r.headers["authorization"] == "Bearer T1" for r in transport.graphql_requests)
