"""Shared exceptions module."""

from typing import Optional, Sequence


class TweersException(Exception):
    """Base exception for tweers."""

    pass


class ConfigurationError(TweersException):
    """Exception raised when required configuration is missing or invalid."""

    def __init__(self, message: Optional[str] = "Invalid configuration"):
        """Create a new ConfigurationError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class MissingTokenCredentialsError(ConfigurationError):
    """Raised when token-based signing is requested without an access token."""

    def __init__(self, missing_fields: Sequence[str]):
        """Create a new MissingTokenCredentialsError instance.

        Args:
        ----
            missing_fields (Sequence[str]): Names of the credential fields that are unset.

        """
        self.missing_fields = tuple(missing_fields)
        super().__init__(
            "Token-based signing requires an access token; missing: "
            + ", ".join(self.missing_fields)
        )


class EncodingError(TweersException):
    """Raised when request parameters violate the signing contract.

    Percent-encoding itself cannot fail, so this signals a programming error,
    for example a request parameter named like a protocol parameter.
    """

    def __init__(self, message: Optional[str] = "Invalid signing parameters"):
        """Create a new EncodingError instance.

        Args:
        ----
            message (str, optional): The error message. Has default message.

        """
        self.message = message
        super().__init__(self.message)


class ExternalServiceError(TweersException):
    """Exception raised when an external service fails."""

    def __init__(self, service_name: str, message: Optional[str] = "External service failed"):
        """Create a new ExternalServiceError instance.

        Args:
        ----
            service_name (str): The name of the external service.
            message (str, optional): The error message. Has default message.

        """
        self.service_name = service_name
        self.message = message
        super().__init__(f"{service_name}: {message}")


class TwitterAPIError(ExternalServiceError):
    """Raised when the Twitter API answers with a non-success status."""

    def __init__(self, status_code: int, body: str):
        """Create a new TwitterAPIError instance.

        Args:
        ----
            status_code (int): HTTP status code of the response.
            body (str): Raw response body.

        """
        self.status_code = status_code
        self.body = body
        super().__init__("twitter", f"HTTP {status_code} - {body}")
