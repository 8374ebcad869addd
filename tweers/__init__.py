"""tweers: Twitter API client with OAuth 1.0a request signing."""

__version__ = "0.3.0"
