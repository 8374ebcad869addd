"""Logging setup with contextual dimensions.

Usage:
    from tweers.core.logging import logger

    log = logger.with_context(request_id="abc").with_prefix("[v2] ")
    log.info("Creating tweet")
"""

import logging
import sys
from typing import Any, Dict, MutableMapping, Optional, Tuple

from tweers.core.config import settings

LOGGER_NAME = "tweers"


class ContextFormatter(logging.Formatter):
    """Formatter that appends the record's context dimensions as key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        dimensions: Dict[str, Any] = getattr(record, "dimensions", None) or {}
        if not dimensions:
            return message
        rendered = " ".join(f"{key}={value}" for key, value in sorted(dimensions.items()))
        return f"{message} [{rendered}]"


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter carrying a prefix and a set of context dimensions.

    ``with_context`` and ``with_prefix`` return new adapters; the receiver is
    never mutated, so a logger can be shared across concurrent requests.
    """

    def __init__(
        self,
        logger: logging.Logger,
        prefix: str = "",
        dimensions: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Wrap ``logger`` with an optional message prefix and dimensions."""
        super().__init__(logger, {})
        self.prefix = prefix
        self.dimensions: Dict[str, Any] = dict(dimensions or {})

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> Tuple[Any, MutableMapping[str, Any]]:
        extra = dict(kwargs.get("extra") or {})
        extra["dimensions"] = {**self.dimensions, **extra.get("dimensions", {})}
        kwargs["extra"] = extra
        return f"{self.prefix}{msg}", kwargs

    def with_context(self, **dimensions: Any) -> "ContextualLogger":
        """Return a logger that adds ``dimensions`` to every record."""
        return ContextualLogger(
            self.logger, prefix=self.prefix, dimensions={**self.dimensions, **dimensions}
        )

    def with_prefix(self, prefix: str) -> "ContextualLogger":
        """Return a logger that prepends ``prefix`` to every message."""
        return ContextualLogger(
            self.logger, prefix=f"{self.prefix}{prefix}", dimensions=self.dimensions
        )


def _configure_base_logger() -> logging.Logger:
    base = logging.getLogger(LOGGER_NAME)
    if not base.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            ContextFormatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        base.addHandler(handler)
    base.setLevel(settings.LOG_LEVEL)
    return base


logger = ContextualLogger(_configure_base_logger())
