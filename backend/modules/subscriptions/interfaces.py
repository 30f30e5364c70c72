"""
Subscriptions module interface.
"""

from typing import Protocol, runtime_checkable

from shared.models import UserSummary
from .models import Subscription


@runtime_checkable
class ISubscriptionService(Protocol):
    """
    Interface for subscription operations.

    There is deliberately no unsubscribe operation.
    """

    async def subscribe(self, subscriber_id: str, channel_id: str) -> Subscription:
        """
        Make ``subscriber_id`` follow ``channel_id``.

        Raises:
            InvalidChannelIdError: If channel_id is malformed
            ChannelNotFoundError: If the channel does not exist
            SelfSubscriptionError: If subscriber and channel are the same
            AlreadySubscribedError: If the edge already exists
        """
        ...

    async def list_subscribers(self, channel_id: str) -> list[UserSummary]:
        """Public summaries of the accounts following a channel."""
        ...

    async def list_subscribed_channels(self, subscriber_id: str) -> list[UserSummary]:
        """Public summaries of the channels an account follows."""
        ...
