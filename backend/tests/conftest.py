"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from typing import Optional
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import (
    get_session_service,
    get_subscription_service,
    get_user_service,
    reset_container,
)
from shared.config import Settings, get_settings
from modules.auth.models import TokenConfig
from modules.auth.passwords import PasswordHasher
from modules.auth.service import SessionService
from modules.auth.tokens import TokenIssuer
from modules.subscriptions.service import SubscriptionService
from modules.users.models import Account
from modules.users.service import UserService

from fakes import FakeMediaStorage, FakeSubscriptionRepository, FakeUserRepository
from helpers import STRONG_PASSWORD, TEST_ACCESS_SECRET, TEST_REFRESH_SECRET


@pytest.fixture(autouse=True)
def reset_container_singleton():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def test_settings() -> Settings:
    """Settings for tests; cookies are not marked secure so the test client sends them back."""
    return Settings(
        _env_file=None,
        access_token_secret=TEST_ACCESS_SECRET,
        refresh_token_secret=TEST_REFRESH_SECRET,
        bcrypt_rounds=4,
        cookie_secure=False,
    )


@pytest.fixture
def token_config(test_settings: Settings) -> TokenConfig:
    return TokenConfig.from_settings(test_settings)


@pytest.fixture
def issuer(token_config: TokenConfig) -> TokenIssuer:
    return TokenIssuer(token_config)


@pytest.fixture
def hasher() -> PasswordHasher:
    """Password hasher with the cheapest bcrypt cost."""
    return PasswordHasher(rounds=4)


@pytest.fixture
def user_repo() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def subscription_repo() -> FakeSubscriptionRepository:
    return FakeSubscriptionRepository()


@pytest.fixture
def media() -> FakeMediaStorage:
    return FakeMediaStorage()


@pytest.fixture
def session_service(user_repo, issuer, hasher) -> SessionService:
    return SessionService(users=user_repo, issuer=issuer, hasher=hasher)


@pytest.fixture
def user_service(user_repo, subscription_repo, media, hasher) -> UserService:
    return UserService(
        users=user_repo,
        subscriptions=subscription_repo,
        media=media,
        hasher=hasher,
    )


@pytest.fixture
def subscription_service(user_repo, subscription_repo) -> SubscriptionService:
    return SubscriptionService(subscriptions=subscription_repo, users=user_repo)


@pytest.fixture
def make_account(user_repo, hasher):
    """Factory that stores an account with a real password digest."""

    def _make(
        username: str = "alice",
        email: Optional[str] = None,
        password: str = STRONG_PASSWORD,
        full_name: str = "Alice Liddell",
        cover_image: Optional[str] = None,
    ) -> Account:
        return user_repo.create({
            "username": username,
            "email": email or f"{username}@example.com",
            "full_name": full_name,
            "password": hasher.hash(password),
            "avatar": f"https://cdn.example.com/avatars/{username}.png",
            "cover_image": cover_image,
            "watch_history": [],
        })

    return _make


@pytest.fixture
def auth_headers(issuer):
    """Factory producing bearer headers for an account."""

    def _headers(account: Account) -> dict[str, str]:
        return {"Authorization": f"Bearer {issuer.issue_access_token(account)}"}

    return _headers


@pytest.fixture
def app(test_settings, session_service, user_service, subscription_service):
    """Application wired to the in-memory fakes."""
    application = create_app()
    application.dependency_overrides[get_settings] = lambda: test_settings
    application.dependency_overrides[get_session_service] = lambda: session_service
    application.dependency_overrides[get_user_service] = lambda: user_service
    application.dependency_overrides[get_subscription_service] = lambda: subscription_service
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    """Test client against the fake-backed application."""
    return TestClient(app)
