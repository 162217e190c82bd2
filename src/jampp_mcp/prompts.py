"""MCP prompts for Jampp reporting.

Exposes common campaign-analysis workflows as prompts.
"""

# pyright: reportUnusedFunction=false

from fastmcp import FastMCP


def register(app: FastMCP) -> None:
    """Register prompts on the provided app instance."""

    @app.prompt(
        name="Summarize Campaign Spend",
        description="Create a prompt to summarize spend across campaigns for a date range.",
        tags={"summary", "spend"},
    )
    def summarize_spend(from_date: str, to_date: str) -> str:
        return (
            f"Please summarize Jampp campaign spend between {from_date} and {to_date}. "
            "Use the get_campaign_spend tool, rank campaigns by spend, "
            "and point out any campaign whose spend looks unusually high or low."
        )

    @app.prompt(
        name="Analyze Campaign Performance",
        description="Analyze one campaign's delivery and conversion metrics.",
        tags={"analysis", "performance"},
    )
    def analyze_campaign(campaign_id: int, from_date: str, to_date: str) -> str:
        return (
            f"Please analyze the performance of campaign {campaign_id} between {from_date} and {to_date}. "
            "Use get_campaign_performance for CTR, CPI, and CVR, and get_campaign_daily_spend "
            "to spot days where spend changed sharply."
        )

    @app.prompt(
        name="Build Custom Report",
        description="Walk through creating and retrieving an asynchronous report.",
        tags={"reports"},
    )
    def build_custom_report(goal: str = "") -> str:
        prompt = "I want to build a custom Jampp report."
        if goal:
            prompt += f" The goal is: '{goal}'."
        prompt += (
            " First call get_available_metrics_and_dimensions to choose fields, "
            "then create_async_report, poll get_async_report_status until the report is COMPLETED, "
            "and finally fetch it with get_async_report_results."
        )
        return prompt


__all__ = ["register"]
