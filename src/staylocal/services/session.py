"""Authenticated session lifecycle.

There is no process-wide "current user". An AuthSession is created by a
successful credential exchange with the identity collaborator, handed to
whichever service needs identity, and destroyed by logout().
"""

import datetime as dt
from typing import TYPE_CHECKING, Any, Optional, Protocol

from pydantic import ValidationError

from staylocal.models import BookingError, Credentials, ErrorCode, User
from staylocal.utils.logging import get_logger

from .data_service import decode_record

if TYPE_CHECKING:
    from .data_service import DataServiceClient

logger = get_logger(__name__)


class IdentityProvider(Protocol):
    """External identity collaborator."""

    def authenticate(self, credentials: Credentials) -> tuple[User, Optional[str]]:
        """Exchange credentials for the user and an optional session token.

        Raises:
            BookingError: INVALID_CREDENTIALS if rejected
        """
        ...

    def revoke(self, token: Optional[str]) -> None:
        """Invalidate the session token on the identity side."""
        ...


class AuthSession:
    """Identity of one logged-in user.

    Only AuthSession.login() creates a session. After logout() every
    identity accessor raises AUTH_REQUIRED.
    """

    def __init__(
        self,
        user: User,
        provider: IdentityProvider,
        token: Optional[str] = None,
        created_at: Optional[dt.datetime] = None,
    ) -> None:
        self._user: Optional[User] = user
        self._provider = provider
        self._token = token
        self.created_at = created_at or dt.datetime.now(dt.UTC)

    @classmethod
    def login(
        cls,
        provider: IdentityProvider,
        username: str,
        password: str,
    ) -> "AuthSession":
        """Authenticate and open a session.

        Args:
            provider: Identity collaborator
            username: Username
            password: Password

        Returns:
            Active AuthSession

        Raises:
            BookingError: INVALID_CREDENTIALS for blank or rejected credentials
        """
        try:
            credentials = Credentials(username=username, password=password)
        except ValidationError as e:
            raise BookingError(ErrorCode.INVALID_CREDENTIALS) from e

        user, token = provider.authenticate(credentials)
        logger.info("User %s logged in", user.id)
        return cls(user=user, provider=provider, token=token)

    @property
    def is_active(self) -> bool:
        return self._user is not None

    @property
    def token(self) -> Optional[str]:
        return self._token

    def require_user(self) -> User:
        """Return the session's user.

        Raises:
            BookingError: AUTH_REQUIRED if the session was logged out
        """
        if self._user is None:
            raise BookingError(ErrorCode.AUTH_REQUIRED)
        return self._user

    @property
    def user(self) -> User:
        return self.require_user()

    @property
    def is_host(self) -> bool:
        return self._user is not None and self._user.is_host

    def logout(self) -> None:
        """Destroy the session. Calling it again is a no-op."""
        if self._user is None:
            return

        user_id = self._user.id
        try:
            self._provider.revoke(self._token)
        finally:
            self._user = None
            self._token = None
            logger.info("User %s logged out", user_id)

    def __enter__(self) -> "AuthSession":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.logout()

    def __repr__(self) -> str:
        state = f"user={self._user.id}" if self._user else "logged out"
        return f"AuthSession({state})"


class HttpIdentityProvider:
    """Identity collaborator backed by the data service user endpoints."""

    def __init__(self, data_service: "DataServiceClient") -> None:
        """Initialize identity provider.

        Args:
            data_service: Data service client
        """
        self.data_service = data_service

    def authenticate(self, credentials: Credentials) -> tuple[User, Optional[str]]:
        payload = dict(self.data_service.login(credentials.username, credentials.password))
        token = payload.pop("token", None)
        # Either {"user": {...}, "token": "..."} or the bare user record
        user_data = payload.get("user", payload)
        return decode_record(User, user_data, "/api/users/login"), token

    def revoke(self, token: Optional[str]) -> None:
        self.data_service.logout(token)


def require_session(session: Optional[AuthSession]) -> User:
    """User of an optional session.

    Raises:
        BookingError: AUTH_REQUIRED if there is no active session
    """
    if session is None:
        raise BookingError(ErrorCode.AUTH_REQUIRED)
    return session.require_user()
