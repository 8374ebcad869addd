"""Value types for the OAuth domain.

These live in a separate module to avoid circular imports between
service implementations, protocol definitions and settings.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Optional


class SigningMode(str, Enum):
    """Which credentials take part in a signature.

    TOKEN signs on behalf of a user and needs the access token pair.
    APP_ONLY signs with the consumer pair alone: no oauth_token parameter and an
    empty token secret in the signing key.
    """

    TOKEN = "token"
    APP_ONLY = "app_only"


@dataclass(frozen=True)
class Credentials:
    """Consumer and (optional) access token credentials."""

    consumer_key: str
    consumer_secret: str = field(repr=False)
    token_key: Optional[str] = None
    token_secret: Optional[str] = field(default=None, repr=False)

    @property
    def has_token(self) -> bool:
        return bool(self.token_key) and bool(self.token_secret)

    def missing_token_fields(self) -> list[str]:
        """Names of the token fields that are unset."""
        missing = []
        if not self.token_key:
            missing.append("token_key")
        if not self.token_secret:
            missing.append("token_secret")
        return missing

    def with_token(self, token_key: str, token_secret: str) -> "Credentials":
        """Return a copy carrying the given access token pair."""
        return replace(self, token_key=token_key, token_secret=token_secret)


@dataclass(frozen=True, slots=True)
class SignedRequest:
    """Everything produced by one signing operation.

    ``oauth_parameters`` holds exactly what goes into the Authorization header,
    signature included.
    """

    method: str
    endpoint: str
    base_string: str
    signature: str
    oauth_parameters: Dict[str, str]
    authorization_header: str
