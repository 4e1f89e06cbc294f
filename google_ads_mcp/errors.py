"""Exceptions raised by the Google Ads MCP server."""


class GoogleAdsMCPError(Exception):
    """Base class for all errors raised by this package."""
    pass


class InitializationError(GoogleAdsMCPError):
    """Credentials or customer id are missing or invalid."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Failed to initialize Google Ads client: {reason}")


class RemoteCallError(GoogleAdsMCPError):
    """A Google Ads API query or mutation failed."""

    def __init__(self, message: str, error_code: str = None):
        self.error_code = error_code
        super().__init__(message)


class ValidationError(GoogleAdsMCPError):
    """Custom exception for validation errors."""
    pass
