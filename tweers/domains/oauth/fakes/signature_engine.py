"""Fake signature engine for testing."""

from typing import Any, Optional

from tweers.domains.oauth.protocols import RequestParameters
from tweers.domains.oauth.types import Credentials, SignedRequest, SigningMode


class FakeSignatureEngine:
    """In-memory fake for SignatureEngineProtocol.

    Returns a fixed header and records every call so tests can assert which
    parameters a caller decided to sign.
    """

    def __init__(self, header: str = 'OAuth oauth_signature="fake"') -> None:
        self._header = header
        self._calls: list[dict[str, Any]] = []
        self._should_raise: Optional[Exception] = None

    def set_error(self, error: Exception) -> None:
        self._should_raise = error

    @property
    def calls(self) -> list[dict[str, Any]]:
        return list(self._calls)

    def sign_request(
        self,
        credentials: Credentials,
        method: str,
        endpoint_url: str,
        request_parameters: Optional[RequestParameters] = None,
        *,
        mode: SigningMode = SigningMode.TOKEN,
    ) -> SignedRequest:
        self._calls.append(
            {
                "credentials": credentials,
                "method": method,
                "endpoint_url": endpoint_url,
                "request_parameters": dict(request_parameters or {}),
                "mode": mode,
            }
        )
        if self._should_raise:
            raise self._should_raise
        return SignedRequest(
            method=method.upper(),
            endpoint=endpoint_url,
            base_string="",
            signature="fake",
            oauth_parameters={"oauth_signature": "fake"},
            authorization_header=self._header,
        )

    def sign(
        self,
        credentials: Credentials,
        method: str,
        endpoint_url: str,
        request_parameters: Optional[RequestParameters] = None,
        *,
        mode: SigningMode = SigningMode.TOKEN,
    ) -> str:
        return self.sign_request(
            credentials, method, endpoint_url, request_parameters, mode=mode
        ).authorization_header
