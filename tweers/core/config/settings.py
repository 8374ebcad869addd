"""Application settings loaded from the environment and an optional .env file."""

import logging
from typing import Optional

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tweers.core.config.enums import Environment, NonceStrategy
from tweers.core.exceptions import ConfigurationError
from tweers.domains.oauth.types import Credentials

DEFAULT_LOG_LEVELS = {
    Environment.LOCAL: "DEBUG",
    Environment.TEST: "WARNING",
    Environment.DEV: "INFO",
    Environment.PRD: "INFO",
}


class Settings(BaseSettings):
    """Settings for the Twitter client and its request signer.

    Credential variables are also accepted under the short names used by the
    original demo scripts (CK, CS, AT, AS).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    ENVIRONMENT: Environment = Environment.LOCAL
    LOG_LEVEL: Optional[str] = None

    TWITTER_CONSUMER_KEY: Optional[str] = Field(
        None, validation_alias=AliasChoices("TWITTER_CONSUMER_KEY", "CK")
    )
    TWITTER_CONSUMER_SECRET: Optional[str] = Field(
        None, validation_alias=AliasChoices("TWITTER_CONSUMER_SECRET", "CS")
    )
    TWITTER_ACCESS_TOKEN_KEY: Optional[str] = Field(
        None, validation_alias=AliasChoices("TWITTER_ACCESS_TOKEN_KEY", "AT")
    )
    TWITTER_ACCESS_TOKEN_SECRET: Optional[str] = Field(
        None, validation_alias=AliasChoices("TWITTER_ACCESS_TOKEN_SECRET", "AS")
    )

    TWITTER_API_BASE_URL: str = "https://api.twitter.com"
    TWITTER_URL: str = "https://twitter.com"

    HTTP_TIMEOUT_SECONDS: float = Field(20.0, gt=0)
    NONCE_STRATEGY: NonceStrategy = NonceStrategy.RANDOM

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, value: Optional[str]) -> Optional[str]:
        """Upper-case the level name and reject names the logging module does not know."""
        if value is None:
            return None
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @model_validator(mode="after")
    def default_log_level(self) -> "Settings":
        """Derive LOG_LEVEL from ENVIRONMENT when it is not set explicitly."""
        if self.LOG_LEVEL is None:
            self.LOG_LEVEL = DEFAULT_LOG_LEVELS[self.ENVIRONMENT]
        return self

    @field_validator("TWITTER_API_BASE_URL", "TWITTER_URL")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Drop trailing slashes so paths can be appended with a single '/'."""
        return value.rstrip("/")

    def credentials(self) -> Credentials:
        """Build the credential set for request signing.

        Token fields are passed through unchanged; whether they are required
        depends on the signing mode the caller asks for.

        Raises:
            ConfigurationError: If the consumer key or secret is not configured.
        """
        missing = [
            name
            for name in ("TWITTER_CONSUMER_KEY", "TWITTER_CONSUMER_SECRET")
            if not getattr(self, name)
        ]
        if missing:
            raise ConfigurationError(f"Missing required settings: {', '.join(missing)}")

        return Credentials(
            consumer_key=self.TWITTER_CONSUMER_KEY,
            consumer_secret=self.TWITTER_CONSUMER_SECRET,
            token_key=self.TWITTER_ACCESS_TOKEN_KEY,
            token_secret=self.TWITTER_ACCESS_TOKEN_SECRET,
        )
