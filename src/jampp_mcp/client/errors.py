"""Exceptions raised while talking to the Jampp APIs."""


class JamppError(RuntimeError):
    """Base class for Jampp API failures."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        """Initialize the error.

        Args:
            message: Human-readable description of the failure.
            status_code: HTTP status returned by the endpoint, if one was received.

        """
        super().__init__(message)
        self.status_code = status_code


class AuthenticationError(JamppError):
    """The token endpoint was unreachable, rejected the credentials, or returned no token."""


class ApiRequestError(JamppError):
    """The GraphQL endpoint could not be reached or answered with a non-success status."""


class GraphQLResponseError(JamppError):
    """A transport-level success whose body reports GraphQL errors or lacks expected data."""

    def __init__(self, message: str, *, errors: list[dict[str, object]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


__all__ = ["ApiRequestError", "AuthenticationError", "GraphQLResponseError", "JamppError"]
