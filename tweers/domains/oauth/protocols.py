"""Protocols for OAuth domain dependencies."""

from typing import Iterable, Mapping, Optional, Protocol, Tuple, Union

from tweers.domains.oauth.types import Credentials, SignedRequest, SigningMode

RequestParameters = Union[Mapping[str, object], Iterable[Tuple[str, object]]]


class ClockProtocol(Protocol):
    """Wall-clock source for OAuth timestamps."""

    def now(self) -> float:
        """Return the current Unix time in seconds."""
        ...


class NonceGeneratorProtocol(Protocol):
    """Source of per-request nonces."""

    def new_nonce(self, timestamp: str) -> str:
        """Return a nonce for a request signed at ``timestamp``."""
        ...


class SignatureEngineProtocol(Protocol):
    """OAuth 1.0a request signing capability."""

    def sign(
        self,
        credentials: Credentials,
        method: str,
        endpoint_url: str,
        request_parameters: Optional[RequestParameters] = None,
        *,
        mode: SigningMode = SigningMode.TOKEN,
    ) -> str:
        """Return the Authorization header value for one request."""
        ...

    def sign_request(
        self,
        credentials: Credentials,
        method: str,
        endpoint_url: str,
        request_parameters: Optional[RequestParameters] = None,
        *,
        mode: SigningMode = SigningMode.TOKEN,
    ) -> SignedRequest:
        """Sign one request and return every intermediate value."""
        ...
