"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

from typing import TYPE_CHECKING

from shared.config import get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import ISessionService
    from modules.auth.passwords import PasswordHasher
    from modules.auth.tokens import TokenIssuer
    from modules.media.interfaces import IMediaStorage
    from modules.subscriptions.interfaces import ISubscriptionService
    from modules.subscriptions.repository import SubscriptionRepository
    from modules.users.interfaces import IUserService
    from modules.users.repository import UserRepository


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Use reset() to clear all cached services for testing.
    """

    def __init__(self) -> None:
        self._user_repository: "UserRepository | None" = None
        self._subscription_repository: "SubscriptionRepository | None" = None
        self._media_storage: "IMediaStorage | None" = None
        self._token_issuer: "TokenIssuer | None" = None
        self._password_hasher: "PasswordHasher | None" = None
        self._session_service: "ISessionService | None" = None
        self._user_service: "IUserService | None" = None
        self._subscription_service: "ISubscriptionService | None" = None

    @property
    def user_repository(self) -> "UserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            from shared.database import get_supabase_client
            self._user_repository = UserRepository(get_supabase_client())
        return self._user_repository

    @property
    def subscription_repository(self) -> "SubscriptionRepository":
        """Get the subscription repository instance."""
        if self._subscription_repository is None:
            from modules.subscriptions.repository import SubscriptionRepository
            from shared.database import get_supabase_client
            self._subscription_repository = SubscriptionRepository(get_supabase_client())
        return self._subscription_repository

    @property
    def media(self) -> "IMediaStorage":
        """Get the media storage instance."""
        if self._media_storage is None:
            from modules.media.storage import SupabaseMediaStorage
            from shared.database import get_supabase_client
            self._media_storage = SupabaseMediaStorage(
                get_supabase_client(),
                get_settings().media_bucket,
            )
        return self._media_storage

    @property
    def token_issuer(self) -> "TokenIssuer":
        """Get the token issuer, configured from settings."""
        if self._token_issuer is None:
            from modules.auth.models import TokenConfig
            from modules.auth.tokens import TokenIssuer
            self._token_issuer = TokenIssuer(TokenConfig.from_settings(get_settings()))
        return self._token_issuer

    @property
    def password_hasher(self) -> "PasswordHasher":
        """Get the password hasher."""
        if self._password_hasher is None:
            from modules.auth.passwords import PasswordHasher
            self._password_hasher = PasswordHasher(rounds=get_settings().bcrypt_rounds)
        return self._password_hasher

    @property
    def sessions(self) -> "ISessionService":
        """Get the session service instance."""
        if self._session_service is None:
            from modules.auth.service import SessionService
            self._session_service = SessionService(
                users=self.user_repository,
                issuer=self.token_issuer,
                hasher=self.password_hasher,
            )
        return self._session_service

    @property
    def users(self) -> "IUserService":
        """Get the user service instance."""
        if self._user_service is None:
            from modules.users.service import UserService
            self._user_service = UserService(
                users=self.user_repository,
                subscriptions=self.subscription_repository,
                media=self.media,
                hasher=self.password_hasher,
            )
        return self._user_service

    @property
    def subscriptions(self) -> "ISubscriptionService":
        """Get the subscription service instance."""
        if self._subscription_service is None:
            from modules.subscriptions.service import SubscriptionService
            self._subscription_service = SubscriptionService(
                subscriptions=self.subscription_repository,
                users=self.user_repository,
            )
        return self._subscription_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._user_repository = None
        self._subscription_repository = None
        self._media_storage = None
        self._token_issuer = None
        self._password_hasher = None
        self._session_service = None
        self._user_service = None
        self._subscription_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_session_service() -> "ISessionService":
    """FastAPI dependency for the session service."""
    return get_container().sessions


def get_user_service() -> "IUserService":
    """FastAPI dependency for the user service."""
    return get_container().users


def get_subscription_service() -> "ISubscriptionService":
    """FastAPI dependency for the subscription service."""
    return get_container().subscriptions
