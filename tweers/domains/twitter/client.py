"""Async HTTP client for the Twitter API.

Each request is signed with OAuth 1.0a just before it is sent. Query and form
parameters take part in the signature; JSON bodies do not.
"""

from typing import Any, Mapping, Optional
from urllib.parse import quote

import httpx

from tweers.core.config import Settings, settings
from tweers.core.exceptions import ExternalServiceError, TwitterAPIError
from tweers.core.logging import ContextualLogger, logger
from tweers.domains.oauth.protocols import SignatureEngineProtocol
from tweers.domains.oauth.signature_engine import SignatureEngine
from tweers.domains.oauth.types import Credentials, SigningMode
from tweers.domains.twitter.types import JsonValue

SERVICE_NAME = "twitter"


def status_url(tweet_id: str, twitter_url: Optional[str] = None) -> str:
    """Return the public web link of a tweet."""
    base = (twitter_url or settings.TWITTER_URL).rstrip("/")
    return f"{base}/status/{quote(str(tweet_id), safe='')}"


class TwitterClient:
    """Signs and sends requests to the Twitter API."""

    def __init__(
        self,
        credentials: Credentials,
        *,
        engine: Optional[SignatureEngineProtocol] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        logger: ContextualLogger = logger,
    ) -> None:
        """Create a client.

        Args:
            credentials: Credentials used to sign every request.
            engine: Request signer. Defaults to a SignatureEngine on the system clock.
            base_url: API root that relative endpoints are joined to.
            timeout: Per-request timeout in seconds.
            transport: httpx transport override, used by tests.
            logger: Logger for request tracing.
        """
        self.credentials = credentials
        self.base_url = (base_url or settings.TWITTER_API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT_SECONDS
        self._engine = engine or SignatureEngine()
        self._transport = transport
        self._base_logger = logger
        self._logger = logger.with_prefix("[twitter] ")

    @classmethod
    def from_settings(cls, config: Settings = settings, **kwargs) -> "TwitterClient":
        """Build a client from configured credentials and endpoints.

        Raises:
            ConfigurationError: If the consumer credentials are not configured.
        """
        return cls(
            config.credentials(),
            base_url=config.TWITTER_API_BASE_URL,
            timeout=config.HTTP_TIMEOUT_SECONDS,
            **kwargs,
        )

    def with_access_token(self, token_key: str, token_secret: str) -> "TwitterClient":
        """Return a client that signs on behalf of the given access token."""
        return TwitterClient(
            self.credentials.with_token(token_key, token_secret),
            engine=self._engine,
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
            logger=self._base_logger,
        )

    def url_for(self, endpoint: str) -> str:
        if endpoint.startswith(("http://", "https://")):
            return endpoint
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        data: Optional[Mapping[str, Any]] = None,
        json: JsonValue = None,
        mode: SigningMode = SigningMode.TOKEN,
    ) -> JsonValue:
        """Send a signed request and return the decoded JSON body.

        Args:
            method: HTTP method.
            endpoint: Path relative to ``base_url`` or an absolute URL.
            params: Query parameters (signed as httpx renders them: True as "true",
                None as an empty value, lists as repeated names).
            data: Form parameters (signed, rendered the same way).
            json: JSON body (not signed).
            mode: Signing mode, TOKEN unless the endpoint accepts app-only auth.

        Returns:
            The parsed JSON body, or None for an empty body.

        Raises:
            ConfigurationError: If the credentials do not support ``mode``.
            EncodingError: If the URL is not absolute or a parameter is named like an
                OAuth protocol parameter.
            TwitterAPIError: If the API answers with a non-2xx status.
            ExternalServiceError: If the request fails or the body is not JSON.
        """
        method = method.upper()
        url = self.url_for(endpoint)
        signed_params = [
            *httpx.QueryParams(params or {}).multi_items(),
            *httpx.QueryParams(data or {}).multi_items(),
        ]
        auth_header = self._engine.sign(self.credentials, method, url, signed_params, mode=mode)

        self._logger.info(f"{method} {url}")

        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
                response = await client.request(
                    method,
                    url,
                    params=params,
                    data=data,
                    json=json,
                    headers={"Authorization": auth_header},
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            self._logger.error(
                f"HTTP error from {method} {url}: {e.response.status_code} - {e.response.text}"
            )
            raise TwitterAPIError(e.response.status_code, e.response.text) from e
        except httpx.HTTPError as e:
            self._logger.error(f"Request {method} {url} failed: {str(e)}")
            raise ExternalServiceError(SERVICE_NAME, f"Request failed: {str(e)}") from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ExternalServiceError(
                SERVICE_NAME, f"Invalid JSON response: {response.text}"
            ) from e

    async def get(self, endpoint: str, **kwargs) -> JsonValue:
        return await self.request("GET", endpoint, **kwargs)

    async def post(self, endpoint: str, **kwargs) -> JsonValue:
        return await self.request("POST", endpoint, **kwargs)

    async def put(self, endpoint: str, **kwargs) -> JsonValue:
        return await self.request("PUT", endpoint, **kwargs)

    async def delete(self, endpoint: str, **kwargs) -> JsonValue:
        return await self.request("DELETE", endpoint, **kwargs)
