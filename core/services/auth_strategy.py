# =============================================================================
# core/services/auth_strategy.py - Pluggable Authentication Strategies
# =============================================================================
# The login handler calls strategy.authenticate(credentials) and gets back
# the identity to attach to the session, or an AuthenticationError.
# Swapping the strategy (e.g. in tests) needs no change to the handler.
# =============================================================================

from abc import ABC, abstractmethod

from core.models.user import AuthUser, Credentials
from core.services.user_service import UserService


class AuthStrategy(ABC):
    """Verifies credentials and returns the matching identity."""

    name = "abstract"

    @abstractmethod
    async def authenticate(self, credentials: Credentials) -> AuthUser:
        """
        Raises:
            AuthenticationError: If the credentials are rejected
        """


class LocalStrategy(AuthStrategy):
    """Username + password checked against the users collection."""

    name = "local"

    def __init__(self, users: UserService):
        self._users = users

    async def authenticate(self, credentials: Credentials) -> AuthUser:
        return await self._users.authenticate(credentials.username, credentials.password)
