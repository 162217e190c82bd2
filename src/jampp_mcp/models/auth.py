"""Models for the OAuth client-credentials exchange."""

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, ConfigDict


class TokenResponse(BaseModel):
    """Body returned by the token endpoint on success."""

    model_config = ConfigDict(extra="ignore")

    access_token: str | None = None
    expires_in: int = 0
    """Lifetime of the token in seconds, as reported by the server."""

    token_type: str | None = None


@dataclass(frozen=True, slots=True)
class AccessToken:
    """A bearer token together with the instant it stops being served from cache."""

    token: str
    expires_at: datetime

    def is_valid(self, now: datetime) -> bool:
        """Return True while ``now`` is strictly before the expiry threshold."""
        return bool(self.token) and now < self.expires_at


__all__ = ["AccessToken", "TokenResponse"]
