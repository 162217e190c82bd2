"""Common utilities for Jampp reporting operations.

This module contains the helpers shared by the campaign, report, and metadata
operations: building ``pivot`` queries and unwrapping GraphQL response bodies.

The GraphQL client returns transport-successful bodies verbatim, including ones
that carry an ``errors`` array, so every operation goes through
``extract_data`` before reshaping a response.
"""

from collections.abc import Sequence
from typing import Any, TypeAlias

from ..client.errors import GraphQLResponseError

Variables: TypeAlias = dict[str, Any]


def format_graphql_errors(errors: Sequence[object]) -> str:
    """Join the ``message`` fields of a GraphQL ``errors`` array.

    Args:
        errors: The ``errors`` array from a response body.

    Returns:
        Messages separated by semicolons; entries without a message are stringified.

    """
    messages: list[str] = []
    for error in errors:
        if isinstance(error, dict) and error.get("message"):
            messages.append(str(error["message"]))
        else:
            messages.append(str(error))
    return "; ".join(messages)


def extract_data(body: Any, *path: str) -> Any:
    """Return the value at ``data.<path>`` after checking for GraphQL errors.

    Args:
        body: Parsed response body returned by ``GraphQLClient.execute``.
        path: Keys to follow below the ``data`` object.

    Returns:
        The value found at the end of the path, never ``None``.

    Raises:
        GraphQLResponseError: If the body reports errors, or the path is missing
            or ends in a null value.

    """
    if not isinstance(body, dict):
        msg = f"Unexpected response from the Jampp API: expected a JSON object, got {type(body).__name__}."
        raise GraphQLResponseError(msg)

    errors = body.get("errors")
    if errors:
        error_list = errors if isinstance(errors, list) else [errors]
        msg = f"GraphQL query failed: {format_graphql_errors(error_list)}"
        raise GraphQLResponseError(msg, errors=[e for e in error_list if isinstance(e, dict)])

    node: Any = body.get("data")
    traversed = "data"
    for key in path:
        if not isinstance(node, dict) or node.get(key) is None:
            msg = f"Unexpected response from the Jampp API: missing '{traversed}.{key}'."
            raise GraphQLResponseError(msg)
        node = node[key]
        traversed = f"{traversed}.{key}"
    if node is None:
        msg = "Unexpected response from the Jampp API: missing 'data'."
        raise GraphQLResponseError(msg)
    return node


def build_pivot_query(
    *,
    operation: str,
    alias: str,
    fields: Sequence[str],
    campaign_filter: bool = False,
    group_by: Sequence[str] | None = None,
) -> str:
    """Build a ``pivot`` query over a date range.

    Args:
        operation: Name of the GraphQL operation.
        alias: Alias for the ``pivot`` field in the response.
        fields: Fields selected from each result row.
        campaign_filter: Whether to declare ``$campaignId`` and filter on it.
        group_by: Optional dimensions to group results by.

    Returns:
        The GraphQL document.

    """
    declarations = ["$from: DateTime!", "$to: DateTime!"]
    arguments = ["from: $from", "to: $to"]
    if campaign_filter:
        declarations.append("$campaignId: Int!")
        arguments.append("filter: { campaignId: { equals: $campaignId } }")
    if group_by:
        arguments.append(f"groupBy: [{', '.join(group_by)}]")

    selection = "\n".join(f"      {field}" for field in fields)
    return (
        f"query {operation}({', '.join(declarations)}) {{\n"
        f"  {alias}: pivot({', '.join(arguments)}) {{\n"
        "    results {\n"
        f"{selection}\n"
        "    }\n"
        "  }\n"
        "}\n"
    )


def date_range_variables(from_date: str, to_date: str, *, campaign_id: int | None = None) -> Variables:
    """Return the variables for a date-range pivot, with an optional campaign filter."""
    variables: Variables = {"from": from_date, "to": to_date}
    if campaign_id is not None:
        variables["campaignId"] = campaign_id
    return variables


__all__ = [
    "Variables",
    "build_pivot_query",
    "date_range_variables",
    "extract_data",
    "format_graphql_errors",
]
