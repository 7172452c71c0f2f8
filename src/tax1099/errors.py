"""
Exception types raised by the Tax1099 client.

Every error derives from Tax1099Error so callers can catch the whole family.
Remote validation problems are NOT exceptions; they come back inside an
otherwise successful response (see Submit1098Response.validation_errors).
"""

from typing import Optional


class Tax1099Error(Exception):
    """Base class for all Tax1099 client errors."""
    pass


class Tax1099ValidationError(Tax1099Error):
    """Raised when a request fails local shape validation (no network call made)."""
    pass


class Tax1099AuthError(Tax1099Error):
    """Raised when Tax1099 authentication fails."""
    pass


class BadLoginError(Tax1099AuthError):
    """Login returned HTTP 200 but no session identifier."""

    def __init__(self, message: str = "bad login"):
        super().__init__(message)


class ReauthorizationError(Tax1099AuthError):
    """A transparent token refresh before a business call failed."""
    pass


class Tax1099ClientError(Tax1099Error):
    """Raised when a Tax1099 API request fails."""
    pass


class Tax1099TransportError(Tax1099ClientError):
    """Network-level failure (timeout, connection refused, ...)."""
    pass


class Tax1099StatusError(Tax1099ClientError):
    """
    Non-200 response from the Tax1099 API.

    Carries the status code, URL and raw body text for diagnosis.
    """

    def __init__(self, status_code: int, url: str, body: str):
        self.status_code = status_code
        self.url = url
        self.body = body
        super().__init__(
            f"status code {status_code} returned from {url} with body: {body}"
        )


class Tax1099DecodeError(Tax1099ClientError):
    """Response body did not match the expected shape."""

    def __init__(self, message: str, url: Optional[str] = None):
        self.url = url
        super().__init__(message)
