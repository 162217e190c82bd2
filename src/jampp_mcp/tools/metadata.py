"""MCP tool: get_available_metrics_and_dimensions."""

# pyright: reportUnusedFunction=false

from types import SimpleNamespace
from typing import Any

from fastmcp import Context, FastMCP

from .common import ToolConfig, run_tool


def register(app: FastMCP, *, deps: SimpleNamespace) -> None:
    """Register the metadata tool on the provided app instance.

    Args:
        app: The FastMCP application instance to add the tool to.
        deps: Dependencies namespace with ``get_client`` and
              ``fetch_available_metrics_and_dimensions``.

    """
    tool_config = ToolConfig(
        action="fetching available metrics and dimensions",
        log_message="Fetching the metrics and dimensions supported by the Jampp reporting API.",
    )

    @app.tool(
        name="get_available_metrics_and_dimensions",
        description="Return the metrics and dimensions that can be used in Jampp reports.",
        annotations={"title": "List available metrics and dimensions", "readOnlyHint": True},
    )
    async def get_available_metrics_and_dimensions(ctx: Context) -> dict[str, Any]:
        return await run_tool(ctx, deps, tool_config, deps.fetch_available_metrics_and_dimensions)


__all__ = ["register"]
