"""Unit tests for operations.common helpers."""

import pytest

from jampp_mcp.client.errors import GraphQLResponseError
from jampp_mcp.operations.common import (
    build_pivot_query,
    date_range_variables,
    extract_data,
    format_graphql_errors,
)


class TestExtractData:
    """Tests for unwrapping GraphQL response bodies."""

    def test_returns_nested_value(self) -> None:
        """The value at the end of the path should be returned."""
        body = {"data": {"spendPerCampaign": {"results": [{"spend": 1.5}]}}}
        assert extract_data(body, "spendPerCampaign", "results") == [{"spend": 1.5}]

    def test_null_leaf_raises(self) -> None:
        """A null value where data was expected is reported as missing."""
        with pytest.raises(GraphQLResponseError, match=r"missing 'data\.report'"):
            extract_data({"data": {"report": None}}, "report")
        with pytest.raises(GraphQLResponseError, match=r"missing 'data\.spendPerCampaign\.results'"):
            extract_data({"data": {"spendPerCampaign": {"results": None}}}, "spendPerCampaign", "results")

    def test_falsy_leaf_is_returned(self) -> None:
        """Empty lists and zero are values, not missing data."""
        assert extract_data({"data": {"performance": {"results": []}}}, "performance", "results") == []
        assert extract_data({"data": {"count": 0}}, "count") == 0

    def test_errors_raise(self) -> None:
        """A body carrying GraphQL errors should raise with their messages."""
        body = {"data": None, "errors": [{"message": "bad field"}, {"message": "other"}]}
        with pytest.raises(GraphQLResponseError, match="bad field; other") as exc_info:
            extract_data(body, "report")
        assert exc_info.value.errors == body["errors"]

    def test_missing_path_raises(self) -> None:
        """A missing key should name the path that was not found."""
        with pytest.raises(GraphQLResponseError, match=r"missing 'data\.performance\.results'"):
            extract_data({"data": {"performance": {}}}, "performance", "results")

    def test_missing_data_raises(self) -> None:
        """A body without data should raise."""
        with pytest.raises(GraphQLResponseError, match="missing 'data"):
            extract_data({}, "report")
        with pytest.raises(GraphQLResponseError, match="missing 'data'"):
            extract_data({"data": None})

    def test_non_object_body_raises(self) -> None:
        """Only JSON objects are valid GraphQL responses."""
        with pytest.raises(GraphQLResponseError, match="expected a JSON object, got list"):
            extract_data([], "report")


def test_format_graphql_errors_without_message() -> None:
    """Entries without a message should be stringified."""
    assert format_graphql_errors([{"message": "a"}, "b", {"code": 1}]) == "a; b; {'code': 1}"


class TestBuildPivotQuery:
    """Tests for pivot query generation."""

    def test_without_campaign_filter(self) -> None:
        """No campaign variable or filter should appear when not requested."""
        query = build_pivot_query(operation="spendPerCampaign", alias="spendPerCampaign", fields=("campaign", "spend"))
        assert query.startswith("query spendPerCampaign($from: DateTime!, $to: DateTime!) {")
        assert "spendPerCampaign: pivot(from: $from, to: $to) {" in query
        assert "campaignId" not in query
        assert "      campaign\n      spend\n" in query

    def test_with_campaign_filter_and_grouping(self) -> None:
        """The campaign variable, filter, and groupBy should all be present."""
        query = build_pivot_query(
            operation="dailySpend",
            alias="dailySpend",
            fields=("date", "spend"),
            campaign_filter=True,
            group_by=("date",),
        )
        assert "query dailySpend($from: DateTime!, $to: DateTime!, $campaignId: Int!)" in query
        assert "filter: { campaignId: { equals: $campaignId } }" in query
        assert "groupBy: [date]" in query


def test_date_range_variables() -> None:
    """The campaign ID should only be included when given, including zero."""
    assert date_range_variables("2024-01-01", "2024-01-31") == {"from": "2024-01-01", "to": "2024-01-31"}
    assert date_range_variables("2024-01-01", "2024-01-31", campaign_id=0)["campaignId"] == 0
