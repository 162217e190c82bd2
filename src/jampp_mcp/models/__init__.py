"""Models for Jampp API data structures.

This module provides the token-exchange models used by the credential cache and
the request model sent to the reporting GraphQL endpoint.
"""

from .auth import AccessToken, TokenResponse
from .graphql import GraphQLRequest

__all__ = [
    "AccessToken",
    "GraphQLRequest",
    "TokenResponse",
]
