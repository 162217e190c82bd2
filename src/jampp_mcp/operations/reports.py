"""Helpers for creating and polling asynchronous reports."""

import logging
from collections.abc import Sequence
from typing import Any

from ..client.graphql_client import GraphQLClient
from .common import extract_data

logger = logging.getLogger("jampp_mcp.operations.reports")

REPORT_COMPLETED = "COMPLETED"

CREATE_REPORT_MUTATION = """
mutation createReport($input: CreateReportInput!) {
  createReport(input: $input) {
    id
    status
  }
}
"""

REPORT_STATUS_QUERY = """
query reportStatus($id: ID!) {
  report(id: $id) {
    id
    status
    createdAt
    completedAt
  }
}
"""

REPORT_RESULTS_QUERY = """
query reportResults($id: ID!) {
  report(id: $id) {
    id
    status
    results
  }
}
"""


async def create_report(  # noqa: PLR0913 (mirrors the report input fields)
    client: GraphQLClient,
    *,
    from_date: str,
    to_date: str,
    metrics: Sequence[str],
    dimensions: Sequence[str],
    filters: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Submit an asynchronous report and return its ``id`` and ``status``.

    Args:
        client: The authenticated GraphQL client.
        from_date: Start date (YYYY-MM-DD).
        to_date: End date (YYYY-MM-DD).
        metrics: Metrics to include in the report.
        dimensions: Dimensions to break the metrics down by.
        filters: Optional filter expression; an empty object when omitted.

    Returns:
        The ``createReport`` payload.

    """
    variables = {
        "input": {
            "from": from_date,
            "to": to_date,
            "metrics": list(metrics),
            "dimensions": list(dimensions),
            "filters": filters or {},
        },
    }
    body = await client.execute(CREATE_REPORT_MUTATION, variables)
    report = extract_data(body, "createReport")
    logger.info("Created Jampp report %s.", report.get("id"))
    return report


async def fetch_report_status(client: GraphQLClient, *, report_id: str) -> dict[str, Any]:
    """Return the status and timestamps of a report."""
    body = await client.execute(REPORT_STATUS_QUERY, {"id": report_id})
    return extract_data(body, "report")


async def fetch_report_results(client: GraphQLClient, *, report_id: str) -> dict[str, Any]:
    """Return a report's results, or its pending status if it has not completed.

    Returns:
        ``{"id", "status", "completed": True, "results"}`` once the report is
        ``COMPLETED``; otherwise ``{"id", "status", "completed": False, "message"}``.

    """
    body = await client.execute(REPORT_RESULTS_QUERY, {"id": report_id})
    report = extract_data(body, "report")
    status = report.get("status")
    if status != REPORT_COMPLETED:
        return {
            "id": report.get("id", report_id),
            "status": status,
            "completed": False,
            "message": f"Report is not completed yet; current status: {status}",
        }
    return {
        "id": report.get("id", report_id),
        "status": status,
        "completed": True,
        "results": report.get("results"),
    }


__all__ = [
    "CREATE_REPORT_MUTATION",
    "REPORT_COMPLETED",
    "REPORT_RESULTS_QUERY",
    "REPORT_STATUS_QUERY",
    "create_report",
    "fetch_report_results",
    "fetch_report_status",
]
