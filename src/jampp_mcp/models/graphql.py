"""Models for GraphQL requests sent to the reporting API."""

from typing import Any

from pydantic import BaseModel, Field


class GraphQLRequest(BaseModel):
    """A query document and its variables, serialized as the POST body."""

    query: str
    variables: dict[str, Any] = Field(default_factory=dict)


__all__ = ["GraphQLRequest"]
