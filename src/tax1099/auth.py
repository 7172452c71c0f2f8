"""
Tax1099 session management.

Tax1099 issues a session id in exchange for login, password and app key.
The session is valid on the server for about an hour; the client holds it
for a shorter lease and logs in again once the lease runs out, so a request
is never built with a token that expires mid-flight.

Security notes:
- Never log session ids or passwords
- Credentials stay in memory for the lifetime of the client (needed to refresh)
"""

import time
import logging
import threading
from dataclasses import dataclass, field
from typing import Callable, Optional

from .config import DEFAULT_TOKEN_LEASE_SECONDS
from .errors import BadLoginError, ReauthorizationError

# Configure logger - NEVER log tokens or passwords
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credentials:
    """Login material for the Tax1099 account."""
    username: str
    password: str = field(repr=False)
    app_key: str = field(repr=False)


@dataclass
class SessionToken:
    """Represents a Tax1099 session token and its client-side expiry."""
    token: str
    expires_at: float  # Unix timestamp

    def is_expired(self, now: float) -> bool:
        return now > self.expires_at

    def __repr__(self) -> str:
        """Safe repr that doesn't expose token value."""
        return f"<SessionToken expires_at={self.expires_at:.0f}>"


LoginFunc = Callable[[Credentials], Optional[str]]


class SessionManager:
    """
    Owns the session token of one client instance.

    The login exchange itself is injected as a callable returning the
    session id (or None/empty for rejected credentials), so this class only
    decides when a login is needed and what to keep from it.

    Usage:
        manager = SessionManager(credentials, login=client_login)
        manager.authorize()
        manager.ensure_authorized()  # before each authenticated call
        headers["Authorization"] = f"Bearer {manager.bearer_token}"
    """

    def __init__(
        self,
        credentials: Credentials,
        login: LoginFunc,
        lease_seconds: float = DEFAULT_TOKEN_LEASE_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        """
        Initialize session manager.

        Args:
            credentials: Account credentials, reused for every refresh
            login: Performs the login exchange and returns the session id
            lease_seconds: How long a token is trusted after login
            clock: Source of the current Unix time
        """
        self.credentials = credentials
        self.lease_seconds = lease_seconds
        self._login = login
        self._clock = clock
        self._token: Optional[SessionToken] = None
        # Check-then-refresh must not interleave between threads
        self._lock = threading.RLock()

    @property
    def token(self) -> Optional[SessionToken]:
        return self._token

    @property
    def bearer_token(self) -> Optional[str]:
        """Current session id, or None before the first login."""
        return self._token.token if self._token else None

    def needs_refresh(self) -> bool:
        return self._token is None or self._token.is_expired(self._clock())

    def authorize(self) -> SessionToken:
        """
        Log in and store the new session token.

        Returns:
            SessionToken: The freshly issued token

        Raises:
            BadLoginError: If the login response carried no session id
            Tax1099ClientError: If the login request itself failed
        """
        with self._lock:
            logger.info("Authorizing...")
            session_id = self._login(self.credentials)
            if not session_id:
                logger.error("Login returned no session id")
                raise BadLoginError()

            self._token = SessionToken(
                token=session_id,
                expires_at=self._clock() + self.lease_seconds,
            )
            logger.info("...authorization complete")
            return self._token

    def ensure_authorized(self) -> SessionToken:
        """
        Get a valid session token, logging in again if the lease ran out.

        Returns:
            SessionToken: Valid token

        Raises:
            ReauthorizationError: If the refresh login fails
        """
        with self._lock:
            if not self.needs_refresh():
                logger.debug("Using cached session token")
                return self._token

            logger.info("Session lease expired, re-authorizing")
            try:
                return self.authorize()
            except Exception as e:
                raise ReauthorizationError(f"failed to re-authorize: {e}") from e

    def invalidate(self) -> None:
        """Drop the cached token so the next call logs in again."""
        with self._lock:
            self._token = None

    def __repr__(self) -> str:
        return f"<SessionManager user={self.credentials.username} token={self._token!r}>"
