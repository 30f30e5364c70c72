"""
Subscriptions module data models.
"""

from datetime import datetime
from typing import Optional

from shared.models import ApiModel


class Subscription(ApiModel):
    """Directed edge: ``subscriber`` follows ``channel`` (both account IDs)."""

    id: str
    subscriber: str
    channel: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ChannelStats(ApiModel):
    """Read-time aggregation over subscription edges for one channel."""

    subscriber_count: int = 0
    subscribed_to_count: int = 0
    is_subscribed: bool = False
