"""Configuration module for tweers.

Provides centralized configuration management with type-safe enums.

Usage:
    from tweers.core.config import settings, NonceStrategy

    credentials = settings.credentials()
    if settings.NONCE_STRATEGY == NonceStrategy.TIMESTAMP:
        ...
"""

from tweers.core.config.enums import Environment, NonceStrategy
from tweers.core.config.settings import Settings

__all__ = [
    "Settings",
    "NonceStrategy",
    "Environment",
    "settings",
]

# Singleton settings instance
settings = Settings()
