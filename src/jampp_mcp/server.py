"""Entry point for the Jampp MCP server.

This module wires together the FastMCP app and registers tools, resources, and
prompts. The authenticated GraphQL client is built lazily from the environment
and shared by every tool for the lifetime of the process.

Registered tools:
- ``get_campaign_spend``: spend per campaign for a date range
- ``get_campaign_daily_spend``: one campaign's spend per day
- ``get_campaign_performance``: spend, delivery, and conversion metrics per campaign
- ``create_async_report``: submit an asynchronous report
- ``get_async_report_status``: poll an asynchronous report
- ``get_async_report_results``: fetch a completed asynchronous report
- ``get_available_metrics_and_dimensions``: list reportable fields
"""

import logging
import os
import signal
import sys
from functools import cache
from types import SimpleNamespace

from fastmcp import FastMCP

from . import prompts, resources
from .client.graphql_client import GraphQLClient
from .client.token_manager import TokenManager
from .config import JamppConfig
from .operations.campaigns import (
    fetch_campaign_daily_spend,
    fetch_campaign_performance,
    fetch_campaign_spend,
)
from .operations.metadata import fetch_available_metrics_and_dimensions
from .operations.reports import create_report, fetch_report_results, fetch_report_status
from .tools.campaigns import register as register_campaign_tools
from .tools.metadata import register as register_metadata_tools
from .tools.reports import register as register_report_tools

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
# stdout carries the MCP protocol, so logs go to stderr
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(name)s [%(levelname)s] %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger("jampp_mcp.server")

app = FastMCP(
    name="jampp-mcp",
    instructions=("Expose tools that query the Jampp reporting API for campaign spend, performance, and reports."),
)


@cache
def get_client() -> GraphQLClient:
    """Return the process-wide GraphQL client, building it on first use.

    Raises:
        RuntimeError: If the Jampp configuration is missing or invalid.

    """
    config = JamppConfig.from_env()
    return GraphQLClient(config, TokenManager(config))


def _register_capabilities() -> None:
    """Register tool, resource, and prompt modules with the app instance."""
    deps = SimpleNamespace(
        get_client=get_client,
        fetch_campaign_spend=fetch_campaign_spend,
        fetch_campaign_daily_spend=fetch_campaign_daily_spend,
        fetch_campaign_performance=fetch_campaign_performance,
        create_report=create_report,
        fetch_report_status=fetch_report_status,
        fetch_report_results=fetch_report_results,
        fetch_available_metrics_and_dimensions=fetch_available_metrics_and_dimensions,
    )
    register_campaign_tools(app, deps=deps)
    register_report_tools(app, deps=deps)
    register_metadata_tools(app, deps=deps)
    resources.register(app, deps=deps)
    prompts.register(app)


# Register all capabilities with the app instance (after function is defined)
_register_capabilities()


def handle_interrupt(signum: int, frame: object) -> None:  # noqa: ARG001
    """Handle keyboard interrupt gracefully."""
    logger.info("Received interrupt signal, shutting down...")
    sys.exit(0)


def main() -> None:
    """Entry point for the jampp-mcp console script."""
    signal.signal(signal.SIGINT, handle_interrupt)
    signal.signal(signal.SIGTERM, handle_interrupt)
    try:
        get_client()
    except RuntimeError as exc:
        logger.error("Failed to start the Jampp MCP server: %s", exc)  # noqa: TRY400
        sys.exit(1)
    logger.info("Jampp MCP server starting on stdio.")
    app.run()


__all__ = [
    "JamppConfig",
    "TokenManager",
    "app",
    "get_client",
    "handle_interrupt",
    "main",
]


if __name__ == "__main__":
    main()
