"""OAuth 1.0a request signing.

Every outgoing request is signed with HMAC-SHA1 over the signature base string:

    METHOD&ENDPOINT&NORMALIZED_PARAMS

where each part is percent-encoded, NORMALIZED_PARAMS being the sorted
``name=value`` pairs of the protocol parameters plus the request's query and
form parameters. The resulting signature is added to the protocol parameters
and rendered as the Authorization header.

Reference: RFC 5849 - The OAuth 1.0 Protocol, section 3.4
"""

import base64
import hashlib
import hmac
from collections.abc import Mapping
from typing import Dict, List, Optional, Tuple
from urllib.parse import parse_qsl, urlsplit, urlunsplit

from tweers.core.config import settings
from tweers.core.exceptions import ConfigurationError, EncodingError, MissingTokenCredentialsError
from tweers.core.logging import ContextualLogger, logger
from tweers.domains.oauth.encoding import percent_encode
from tweers.domains.oauth.nonce import SystemClock, build_nonce_generator
from tweers.domains.oauth.protocols import (
    ClockProtocol,
    NonceGeneratorProtocol,
    RequestParameters,
    SignatureEngineProtocol,
)
from tweers.domains.oauth.types import Credentials, SignedRequest, SigningMode

SIGNATURE_METHOD = "HMAC-SHA1"
OAUTH_VERSION = "1.0"

PROTOCOL_KEYS = frozenset(
    {
        "oauth_consumer_key",
        "oauth_nonce",
        "oauth_signature_method",
        "oauth_timestamp",
        "oauth_token",
        "oauth_version",
    }
)
RESERVED_KEYS = PROTOCOL_KEYS | {"oauth_signature"}

_DEFAULT_PORTS = {"http": 80, "https": 443}

Pairs = List[Tuple[str, str]]


def _as_pairs(params: Optional[RequestParameters]) -> Pairs:
    if params is None:
        return []
    items = params.items() if isinstance(params, Mapping) else params
    return [(str(name), str(value)) for name, value in items]


def normalize_endpoint(url: str) -> Tuple[str, Pairs]:
    """Split ``url`` into its base string URI and its decoded query pairs.

    The base string URI has a lower-case scheme and host, no default port, no
    query and no fragment. An empty path becomes ``/``.

    Raises:
        EncodingError: If the URL has no scheme or host, or an invalid port.
    """
    parts = urlsplit(url)
    if not parts.scheme or not parts.hostname:
        raise EncodingError(f"Endpoint URL must be absolute: {url!r}")

    scheme = parts.scheme.lower()
    host = parts.hostname
    if ":" in host:
        host = f"[{host}]"
    try:
        port = parts.port
    except ValueError as e:
        raise EncodingError(f"Invalid port in endpoint URL: {url!r}") from e
    netloc = host if port is None or port == _DEFAULT_PORTS.get(scheme) else f"{host}:{port}"

    endpoint = urlunsplit((scheme, netloc, parts.path or "/", "", ""))
    return endpoint, parse_qsl(parts.query, keep_blank_values=True)


class SignatureEngine(SignatureEngineProtocol):
    """Signs requests for a credential set using HMAC-SHA1.

    The engine only holds its clock, nonce generator and logger, so one instance
    can sign for any number of credential sets from concurrent callers. A fresh
    timestamp and nonce are drawn for every signature.
    """

    def __init__(
        self,
        clock: Optional[ClockProtocol] = None,
        nonce_generator: Optional[NonceGeneratorProtocol] = None,
        logger: ContextualLogger = logger,
    ) -> None:
        """Create an engine.

        Args:
            clock: Timestamp source. Defaults to the system clock.
            nonce_generator: Nonce source. Defaults to the configured strategy.
            logger: Logger for debug output. Secrets are never logged.
        """
        self._clock = clock or SystemClock()
        self._nonce_generator = nonce_generator or build_nonce_generator(settings.NONCE_STRATEGY)
        self._logger = logger

    # ------------------------------------------------------------------
    # Pure building blocks
    # ------------------------------------------------------------------

    @staticmethod
    def canonicalize(params: RequestParameters) -> str:
        """Build the normalized parameter string.

        Names and values are encoded first, then sorted by encoded name with the
        encoded value as tie-breaker, so the result does not depend on the
        iteration order of ``params``.
        """
        encoded = sorted(
            (percent_encode(name), percent_encode(value)) for name, value in _as_pairs(params)
        )
        return "&".join(f"{name}={value}" for name, value in encoded)

    @staticmethod
    def build_signature_base_string(method: str, url: str, param_string: str) -> str:
        """Build the signature base string.

        Format: ENCODE(METHOD)&ENCODE(URL)&ENCODE(PARAM_STRING)
        """
        return "&".join(
            [
                percent_encode(method.upper()),
                percent_encode(url),
                percent_encode(param_string),
            ]
        )

    @staticmethod
    def build_signing_key(consumer_secret: str, token_secret: Optional[str] = None) -> str:
        """Build the HMAC key: ENCODE(consumer_secret)&ENCODE(token_secret).

        The separator is kept when there is no token secret.
        """
        return f"{percent_encode(consumer_secret)}&{percent_encode(token_secret or '')}"

    @staticmethod
    def sign_base_string(base_string: str, signing_key: str) -> str:
        """Return the base64 HMAC-SHA1 digest of ``base_string``."""
        digest = hmac.new(
            signing_key.encode("utf-8"), base_string.encode("utf-8"), hashlib.sha1
        ).digest()
        return base64.b64encode(digest).decode("ascii")

    @staticmethod
    def build_authorization_header(oauth_params: Mapping) -> str:
        """Build the OAuth Authorization header value.

        Format: OAuth oauth_consumer_key="...", oauth_nonce="...", ...
        """
        encoded = sorted(
            (percent_encode(name), percent_encode(value)) for name, value in oauth_params.items()
        )
        return "OAuth " + ", ".join(f'{name}="{value}"' for name, value in encoded)

    # ------------------------------------------------------------------
    # Signing
    # ------------------------------------------------------------------

    def build_protocol_parameters(
        self, credentials: Credentials, mode: SigningMode = SigningMode.TOKEN
    ) -> Dict[str, str]:
        """Return the oauth_* parameters for one request, with a fresh timestamp and nonce.

        Raises:
            ConfigurationError: If the consumer key or secret is empty.
            MissingTokenCredentialsError: If ``mode`` is TOKEN and the access token is unset.
        """
        self._check_credentials(credentials, mode)

        timestamp = str(int(self._clock.now()))
        params = {
            "oauth_consumer_key": credentials.consumer_key,
            "oauth_nonce": self._nonce_generator.new_nonce(timestamp),
            "oauth_signature_method": SIGNATURE_METHOD,
            "oauth_timestamp": timestamp,
            "oauth_version": OAUTH_VERSION,
        }
        if mode == SigningMode.TOKEN:
            params["oauth_token"] = credentials.token_key
        return params

    def sign_request(
        self,
        credentials: Credentials,
        method: str,
        endpoint_url: str,
        request_parameters: Optional[RequestParameters] = None,
        *,
        mode: SigningMode = SigningMode.TOKEN,
    ) -> SignedRequest:
        """Sign one request.

        Args:
            credentials: Consumer and access token credentials.
            method: HTTP method; upper-cased before signing.
            endpoint_url: Absolute request URL. Its query parameters are signed.
            request_parameters: Form or query parameters sent with the request.
                JSON bodies must not be passed here.
            mode: TOKEN for user-context requests, APP_ONLY for consumer-only.

        Returns:
            SignedRequest with the base string, signature and header value.

        Raises:
            ConfigurationError: If the credentials do not support ``mode``.
            EncodingError: If a request parameter is named like a protocol parameter
                or the URL is not absolute.
        """
        self._check_credentials(credentials, mode)

        method = method.upper()
        endpoint, query_pairs = normalize_endpoint(endpoint_url)
        request_pairs = query_pairs + _as_pairs(request_parameters)
        collisions = sorted({name for name, _ in request_pairs if name in RESERVED_KEYS})
        if collisions:
            raise EncodingError(
                "Request parameters collide with OAuth protocol parameters: "
                + ", ".join(collisions)
            )

        self._logger.debug(f"Signing {method} request for {endpoint} ({mode.value})")

        oauth_params = self.build_protocol_parameters(credentials, mode)
        param_string = self.canonicalize([*oauth_params.items(), *request_pairs])
        base_string = self.build_signature_base_string(method, endpoint, param_string)

        token_secret = credentials.token_secret if mode == SigningMode.TOKEN else None
        signing_key = self.build_signing_key(credentials.consumer_secret, token_secret)
        signature = self.sign_base_string(base_string, signing_key)

        oauth_params["oauth_signature"] = signature

        return SignedRequest(
            method=method,
            endpoint=endpoint,
            base_string=base_string,
            signature=signature,
            oauth_parameters=oauth_params,
            authorization_header=self.build_authorization_header(oauth_params),
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
        """Sign one request and return the Authorization header value."""
        return self.sign_request(
            credentials, method, endpoint_url, request_parameters, mode=mode
        ).authorization_header

    def _check_credentials(self, credentials: Credentials, mode: SigningMode) -> None:
        if not credentials.consumer_key or not credentials.consumer_secret:
            raise ConfigurationError("Consumer key and consumer secret are required for signing")
        if mode == SigningMode.TOKEN and not credentials.has_token:
            raise MissingTokenCredentialsError(credentials.missing_token_fields())
