"""Common utilities for MCP tool registration.

Provides the shared runner that every Jampp tool goes through: it logs the
request to the MCP client, resolves the GraphQL client from the dependency
namespace, and converts Jampp failures into error-flagged tool results.
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from types import SimpleNamespace
from typing import Annotated, TypeAlias, TypeVar

from fastmcp import Context
from fastmcp.exceptions import ToolError
from pydantic import Field

from ..client.graphql_client import GraphQLClient

logger = logging.getLogger("jampp_mcp.tools.common")

T = TypeVar("T")

Operation: TypeAlias = Callable[[GraphQLClient], Awaitable[T]]

FromDate = Annotated[str, Field(description="Start date, formatted as YYYY-MM-DD.")]
ToDate = Annotated[str, Field(description="End date, formatted as YYYY-MM-DD.")]
ReportId = Annotated[str, Field(description="Report ID returned by create_async_report.")]


@dataclass(frozen=True, slots=True)
class ToolConfig:
    """Per-tool settings used by ``run_tool``."""

    action: str
    """Describes the tool's work in error messages, e.g. "fetching campaign spend"."""

    log_message: str


async def run_tool(
    ctx: Context,
    deps: SimpleNamespace,
    tool_config: ToolConfig,
    operation: Operation[T],
) -> T:
    """Run an operation against the reporting API on behalf of a tool.

    Args:
        ctx: FastMCP context.
        deps: Dependencies namespace exposing ``get_client``.
        tool_config: Settings for the tool being run.
        operation: Async callable receiving the GraphQL client.

    Returns:
        Whatever the operation returns.

    Raises:
        ToolError: If the client cannot be built from the configuration, or the
            operation fails with a ``JamppError``.

    """
    await ctx.info(tool_config.log_message)
    try:
        client: GraphQLClient = deps.get_client()
        return await operation(client)
    except RuntimeError as exc:
        # JamppError and configuration failures both derive from RuntimeError
        message = f"Error {tool_config.action}: {exc}"
        logger.warning(message)
        await ctx.error(message)
        raise ToolError(message) from exc


__all__ = [
    "FromDate",
    "Operation",
    "ReportId",
    "ToDate",
    "ToolConfig",
    "run_tool",
]
