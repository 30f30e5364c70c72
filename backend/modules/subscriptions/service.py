"""
Subscriptions service implementation.
"""

import logging

from shared.models import UserSummary
from shared.repository import is_valid_id
from modules.users.exceptions import ChannelNotFoundError, UserNotFoundError
from modules.users.repository import UserRepository

from .interfaces import ISubscriptionService
from .models import Subscription
from .repository import SubscriptionRepository
from .exceptions import (
    AlreadySubscribedError,
    InvalidChannelIdError,
    SelfSubscriptionError,
)

logger = logging.getLogger(__name__)


class SubscriptionService(ISubscriptionService):
    """Subscription service backed by the subscriptions and users tables."""

    def __init__(
        self,
        subscriptions: SubscriptionRepository,
        users: UserRepository,
    ):
        self._subscriptions = subscriptions
        self._users = users

    async def subscribe(self, subscriber_id: str, channel_id: str) -> Subscription:
        """Create the subscription edge after validating it."""
        if not is_valid_id(channel_id):
            raise InvalidChannelIdError(channel_id)

        if self._users.get_by_id(channel_id) is None:
            raise ChannelNotFoundError(channel_id)

        if subscriber_id == channel_id:
            raise SelfSubscriptionError()

        if self._subscriptions.exists(subscriber_id, channel_id):
            raise AlreadySubscribedError(channel_id)

        subscription = self._subscriptions.create(subscriber_id, channel_id)
        logger.info(f"User {subscriber_id} subscribed to channel {channel_id}")
        return subscription

    async def list_subscribers(self, channel_id: str) -> list[UserSummary]:
        """List the accounts following a channel."""
        if not is_valid_id(channel_id):
            raise InvalidChannelIdError(channel_id)
        if self._users.get_by_id(channel_id) is None:
            raise ChannelNotFoundError(channel_id)

        ids = self._subscriptions.list_subscriber_ids(channel_id)
        return self._resolve(ids)

    async def list_subscribed_channels(self, subscriber_id: str) -> list[UserSummary]:
        """List the channels an account follows."""
        if self._users.get_by_id(subscriber_id) is None:
            raise UserNotFoundError(subscriber_id)

        ids = self._subscriptions.list_channel_ids(subscriber_id)
        return self._resolve(ids)

    def _resolve(self, ids: list[str]) -> list[UserSummary]:
        summaries = self._users.get_summaries(ids)
        return [summaries[user_id] for user_id in ids if user_id in summaries]
