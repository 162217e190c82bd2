"""MCP tools: asynchronous reports.

Registers ``create_async_report``, ``get_async_report_status``, and
``get_async_report_results``. Large reports are built server-side; clients
create one, poll its status, and fetch the results once it has completed.
"""

# pyright: reportUnusedFunction=false

from types import SimpleNamespace
from typing import Annotated, Any

from fastmcp import Context, FastMCP
from pydantic import Field

from .common import FromDate, ReportId, ToDate, ToolConfig, run_tool

Metrics = Annotated[list[str], Field(description="Metrics to include in the report.")]
Dimensions = Annotated[list[str], Field(description="Dimensions to include in the report.")]
Filters = Annotated[dict[str, Any] | None, Field(description="Optional filter conditions.")]


def register(app: FastMCP, *, deps: SimpleNamespace) -> None:
    """Register the report tools on the provided app instance.

    Args:
        app: The FastMCP application instance to add the tools to.
        deps: Dependencies namespace with ``get_client``, ``create_report``,
              ``fetch_report_status``, and ``fetch_report_results``.

    """
    create_config = ToolConfig(
        action="creating async report",
        log_message="Creating a Jampp asynchronous report.",
    )
    status_config = ToolConfig(
        action="fetching async report status",
        log_message="Fetching Jampp report status.",
    )
    results_config = ToolConfig(
        action="fetching async report results",
        log_message="Fetching Jampp report results.",
    )

    @app.tool(
        name="create_async_report",
        description="Create an asynchronous report for a date range and return its ID and status.",
        annotations={"title": "Create async report", "readOnlyHint": False},
    )
    async def create_async_report(  # noqa: PLR0913 (tool parameters are the report input)
        ctx: Context,
        from_date: FromDate,
        to_date: ToDate,
        metrics: Metrics,
        dimensions: Dimensions,
        filters: Filters = None,
    ) -> dict[str, Any]:
        return await run_tool(
            ctx,
            deps,
            create_config,
            lambda client: deps.create_report(
                client,
                from_date=from_date,
                to_date=to_date,
                metrics=metrics,
                dimensions=dimensions,
                filters=filters,
            ),
        )

    @app.tool(
        name="get_async_report_status",
        description="Return the status, creation time, and completion time of an asynchronous report.",
        annotations={"title": "Get async report status", "readOnlyHint": True},
    )
    async def get_async_report_status(ctx: Context, report_id: ReportId) -> dict[str, Any]:
        return await run_tool(
            ctx,
            deps,
            status_config,
            lambda client: deps.fetch_report_status(client, report_id=report_id),
        )

    @app.tool(
        name="get_async_report_results",
        description=(
            "Return the results of a completed asynchronous report. If the report has not completed, "
            "returns its current status instead."
        ),
        annotations={"title": "Get async report results", "readOnlyHint": True},
    )
    async def get_async_report_results(ctx: Context, report_id: ReportId) -> dict[str, Any]:
        result: dict[str, Any] = await run_tool(
            ctx,
            deps,
            results_config,
            lambda client: deps.fetch_report_results(client, report_id=report_id),
        )
        if not result.get("completed"):
            await ctx.warning(result.get("message", "Report is not completed yet."))
        return result


__all__ = ["register"]
