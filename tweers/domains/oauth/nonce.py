"""Clock and nonce sources for request signing."""

import secrets
import time

from tweers.core.config import NonceStrategy
from tweers.core.logging import logger
from tweers.domains.oauth.protocols import NonceGeneratorProtocol

MIN_NONCE_BYTES = 16


class SystemClock:
    """Reads the wall clock."""

    def now(self) -> float:
        return time.time()


class RandomNonceGenerator:
    """Cryptographically random nonces, independent of the timestamp."""

    def __init__(self, nbytes: int = 32) -> None:
        """Create a generator drawing ``nbytes`` random bytes per nonce."""
        if nbytes < MIN_NONCE_BYTES:
            raise ValueError(f"Nonce must carry at least {MIN_NONCE_BYTES} random bytes")
        self._nbytes = nbytes

    def new_nonce(self, timestamp: str) -> str:
        return secrets.token_urlsafe(self._nbytes)


class TimestampNonceGenerator:
    """Legacy ``nonce<timestamp>`` nonces.

    Two requests signed within the same second share a nonce, which servers may
    reject as a replay. Use only to reproduce signatures made with that scheme.
    """

    PREFIX = "nonce"

    def __init__(self) -> None:
        logger.warning(
            "Using timestamp-derived OAuth nonces; requests in the same second will collide"
        )

    def new_nonce(self, timestamp: str) -> str:
        return f"{self.PREFIX}{timestamp}"


def build_nonce_generator(strategy: NonceStrategy) -> NonceGeneratorProtocol:
    """Return the nonce generator configured by ``strategy``."""
    if strategy == NonceStrategy.TIMESTAMP:
        return TimestampNonceGenerator()
    return RandomNonceGenerator()
