"""Helpers for discovering the metrics and dimensions the reporting API supports."""

from typing import Any

from ..client.graphql_client import GraphQLClient
from .common import extract_data

AVAILABLE_FIELDS_QUERY = """
query {
  availableMetrics
  availableDimensions
}
"""


async def fetch_available_metrics_and_dimensions(client: GraphQLClient) -> dict[str, Any]:
    """Return ``{"metrics": [...], "dimensions": [...]}`` as reported by the API."""
    body = await client.execute(AVAILABLE_FIELDS_QUERY)
    return {
        "metrics": extract_data(body, "availableMetrics"),
        "dimensions": extract_data(body, "availableDimensions"),
    }


__all__ = ["AVAILABLE_FIELDS_QUERY", "fetch_available_metrics_and_dimensions"]
