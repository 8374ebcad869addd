"""Deterministic clock and nonce sources for testing."""

from typing import Iterable, List, Optional


class FixedClock:
    """Clock stuck at a settable instant."""

    def __init__(self, now: float = 1_000_000_000) -> None:
        self._now = now

    def now(self) -> float:
        return self._now

    def set(self, now: float) -> None:
        self._now = now

    def advance(self, seconds: float) -> None:
        self._now += seconds


class FixedNonceGenerator:
    """Hands out seeded nonces in order and records the timestamps it saw.

    With a single seeded value that value is returned on every call.
    """

    def __init__(self, nonces: Optional[Iterable[str]] = None) -> None:
        self._nonces: List[str] = list(nonces or ["n1"])
        self._timestamps: List[str] = []

    def new_nonce(self, timestamp: str) -> str:
        self._timestamps.append(timestamp)
        if len(self._nonces) > 1:
            return self._nonces.pop(0)
        return self._nonces[0]

    @property
    def timestamps(self) -> List[str]:
        return list(self._timestamps)
