"""Configuration enums for type-safe settings.

These enums inherit from str so values compare equal to their env var spelling.
"""

from enum import Enum


class Environment(str, Enum):
    """Deployment environments.

    Selects the default log level when LOG_LEVEL is not set.
    """

    LOCAL = "local"
    TEST = "test"
    DEV = "dev"
    PRD = "prd"


class NonceStrategy(str, Enum):
    """How OAuth nonces are generated.

    RANDOM is the default. TIMESTAMP reproduces the legacy ``nonce<epoch>`` scheme
    and only exists for compatibility testing against that scheme.
    """

    RANDOM = "random"
    TIMESTAMP = "timestamp"
