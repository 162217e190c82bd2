"""MCP tools: campaign spend and performance.

Registers ``get_campaign_spend``, ``get_campaign_daily_spend``, and
``get_campaign_performance``. Each tool returns the ``results`` rows of a
``pivot`` query over the requested date range.
"""

# pyright: reportUnusedFunction=false

from types import SimpleNamespace
from typing import Annotated, Any

from fastmcp import Context, FastMCP
from pydantic import Field

from .common import FromDate, ToDate, ToolConfig, run_tool

OptionalCampaignId = Annotated[int | None, Field(description="Optional campaign ID to restrict the results to.")]
CampaignId = Annotated[int, Field(description="Campaign ID.")]


def register(app: FastMCP, *, deps: SimpleNamespace) -> None:
    """Register the campaign tools on the provided app instance.

    Args:
        app: The FastMCP application instance to add the tools to.
        deps: Dependencies namespace with ``get_client`` and the campaign
              operations (``fetch_campaign_spend``, ``fetch_campaign_daily_spend``,
              ``fetch_campaign_performance``).

    """
    spend_config = ToolConfig(
        action="fetching campaign spend",
        log_message="Fetching Jampp spend per campaign.",
    )
    daily_config = ToolConfig(
        action="fetching campaign daily spend",
        log_message="Fetching Jampp daily spend for a campaign.",
    )
    performance_config = ToolConfig(
        action="fetching campaign performance",
        log_message="Fetching Jampp campaign performance metrics.",
    )

    @app.tool(
        name="get_campaign_spend",
        description="Return spend per campaign for a date range, optionally restricted to one campaign.",
        annotations={"title": "Get campaign spend", "readOnlyHint": True},
    )
    async def get_campaign_spend(
        ctx: Context,
        from_date: FromDate,
        to_date: ToDate,
        campaign_id: OptionalCampaignId = None,
    ) -> list[dict[str, Any]]:
        return await run_tool(
            ctx,
            deps,
            spend_config,
            lambda client: deps.fetch_campaign_spend(
                client,
                from_date=from_date,
                to_date=to_date,
                campaign_id=campaign_id,
            ),
        )

    @app.tool(
        name="get_campaign_daily_spend",
        description="Return one campaign's spend for each day in a date range.",
        annotations={"title": "Get campaign daily spend", "readOnlyHint": True},
    )
    async def get_campaign_daily_spend(
        ctx: Context,
        campaign_id: CampaignId,
        from_date: FromDate,
        to_date: ToDate,
    ) -> list[dict[str, Any]]:
        return await run_tool(
            ctx,
            deps,
            daily_config,
            lambda client: deps.fetch_campaign_daily_spend(
                client,
                campaign_id=campaign_id,
                from_date=from_date,
                to_date=to_date,
            ),
        )

    @app.tool(
        name="get_campaign_performance",
        description=(
            "Return performance metrics per campaign for a date range: spend, impressions, clicks, "
            "installs, CTR, CPI, and CVR."
        ),
        annotations={"title": "Get campaign performance", "readOnlyHint": True},
    )
    async def get_campaign_performance(
        ctx: Context,
        from_date: FromDate,
        to_date: ToDate,
        campaign_id: OptionalCampaignId = None,
    ) -> list[dict[str, Any]]:
        return await run_tool(
            ctx,
            deps,
            performance_config,
            lambda client: deps.fetch_campaign_performance(
                client,
                from_date=from_date,
                to_date=to_date,
                campaign_id=campaign_id,
            ),
        )


__all__ = ["register"]
