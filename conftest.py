"""Root conftest for pytest configuration and shared fixtures.

This conftest is loaded before both testpaths (tests/ and tweers/domains/),
making its fixtures available to centralized tests AND colocated domain tests.
"""

import os

import pytest

# Register pytest-asyncio plugin at the root level
pytest_plugins = ("pytest_asyncio",)

# ---------------------------------------------------------------------------
# Environment variables: must be set before any tweers module import
# Uses setdefault so real env vars (CI) are never overridden.
# ---------------------------------------------------------------------------
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("NONCE_STRATEGY", "random")


# ---------------------------------------------------------------------------
# Shared fake fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fixed_clock():
    """Clock frozen at 1000000000 (2001-09-09T01:46:40Z)."""
    from tweers.domains.oauth.fakes.clock import FixedClock

    return FixedClock(1_000_000_000)


@pytest.fixture
def fixed_nonce():
    """Nonce generator that always returns 'n1'."""
    from tweers.domains.oauth.fakes.clock import FixedNonceGenerator

    return FixedNonceGenerator(["n1"])


@pytest.fixture
def engine(fixed_clock, fixed_nonce):
    """SignatureEngine with a frozen clock and nonce."""
    from tweers.domains.oauth.signature_engine import SignatureEngine

    return SignatureEngine(clock=fixed_clock, nonce_generator=fixed_nonce)


@pytest.fixture
def fake_signature_engine():
    """Fake SignatureEngine that records what callers asked to sign."""
    from tweers.domains.oauth.fakes.signature_engine import FakeSignatureEngine

    return FakeSignatureEngine()


@pytest.fixture
def credentials():
    """Full credential set: consumer pair plus access token pair."""
    from tweers.domains.oauth.types import Credentials

    return Credentials(consumer_key="ck", consumer_secret="cs", token_key="tk", token_secret="ts")
