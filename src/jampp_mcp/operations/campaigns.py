"""Helpers for querying campaign spend and performance."""

import logging
from typing import Any

from ..client.graphql_client import GraphQLClient
from .common import build_pivot_query, date_range_variables, extract_data

logger = logging.getLogger("jampp_mcp.operations.campaigns")

SPEND_FIELDS: tuple[str, ...] = ("campaignId", "campaign", "spend")
DAILY_SPEND_FIELDS: tuple[str, ...] = ("date", "spend")
PERFORMANCE_FIELDS: tuple[str, ...] = (
    "campaignId",
    "campaign",
    "spend",
    "impressions",
    "clicks",
    "installs",
    "ctr",
    "cpi",
    "cvr",
)


async def fetch_campaign_spend(
    client: GraphQLClient,
    *,
    from_date: str,
    to_date: str,
    campaign_id: int | None = None,
) -> list[dict[str, Any]]:
    """Return spend per campaign over a date range.

    Args:
        client: The authenticated GraphQL client.
        from_date: Start date (YYYY-MM-DD).
        to_date: End date (YYYY-MM-DD).
        campaign_id: Restrict the results to one campaign when given.

    Returns:
        Result rows with ``campaignId``, ``campaign``, and ``spend``.

    """
    query = build_pivot_query(
        operation="spendPerCampaign",
        alias="spendPerCampaign",
        fields=SPEND_FIELDS,
        campaign_filter=campaign_id is not None,
    )
    variables = date_range_variables(from_date, to_date, campaign_id=campaign_id)
    body = await client.execute(query, variables)
    return extract_data(body, "spendPerCampaign", "results")


async def fetch_campaign_daily_spend(
    client: GraphQLClient,
    *,
    campaign_id: int,
    from_date: str,
    to_date: str,
) -> list[dict[str, Any]]:
    """Return one campaign's spend grouped by day."""
    query = build_pivot_query(
        operation="dailySpend",
        alias="dailySpend",
        fields=DAILY_SPEND_FIELDS,
        campaign_filter=True,
        group_by=("date",),
    )
    variables = date_range_variables(from_date, to_date, campaign_id=campaign_id)
    body = await client.execute(query, variables)
    return extract_data(body, "dailySpend", "results")


async def fetch_campaign_performance(
    client: GraphQLClient,
    *,
    from_date: str,
    to_date: str,
    campaign_id: int | None = None,
) -> list[dict[str, Any]]:
    """Return delivery and conversion metrics per campaign.

    Rows carry spend, impressions, clicks, installs, and the derived CTR, CPI,
    and CVR rates as computed by the reporting API.
    """
    query = build_pivot_query(
        operation="campaignPerformance",
        alias="performance",
        fields=PERFORMANCE_FIELDS,
        campaign_filter=campaign_id is not None,
    )
    variables = date_range_variables(from_date, to_date, campaign_id=campaign_id)
    body = await client.execute(query, variables)
    results = extract_data(body, "performance", "results")
    logger.debug("Fetched performance for %d campaign rows.", len(results or []))
    return results


__all__ = [
    "DAILY_SPEND_FIELDS",
    "PERFORMANCE_FIELDS",
    "SPEND_FIELDS",
    "fetch_campaign_daily_spend",
    "fetch_campaign_performance",
    "fetch_campaign_spend",
]
