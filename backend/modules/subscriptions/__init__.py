"""
Subscriptions module.

Directed follow relationships between accounts ("subscriber follows
channel") and the read-side counts derived from them.
"""

from .interfaces import ISubscriptionService
from .models import Subscription, ChannelStats
from .exceptions import (
    InvalidChannelIdError,
    SelfSubscriptionError,
    AlreadySubscribedError,
)

__all__ = [
    "ISubscriptionService",
    "Subscription",
    "ChannelStats",
    "InvalidChannelIdError",
    "SelfSubscriptionError",
    "AlreadySubscribedError",
]
