"""
Subscription repository for database access.

Encapsulates all Supabase queries for the ``subscriptions`` table. The
table carries a unique constraint on (subscriber, channel).
"""

from typing import Optional, Any

from postgrest.exceptions import APIError

from shared.repository import BaseRepository, is_unique_violation, is_valid_id
from .exceptions import AlreadySubscribedError
from .models import ChannelStats, Subscription


class SubscriptionRepository(BaseRepository[Subscription]):
    """Repository for subscription edges and their read-side aggregates."""

    def exists(self, subscriber_id: str, channel_id: str) -> bool:
        """Return True if ``subscriber_id`` already follows ``channel_id``."""
        result = (
            self._db.table("subscriptions")
            .select("id")
            .eq("subscriber", subscriber_id)
            .eq("channel", channel_id)
            .limit(1)
            .execute()
        )
        return bool(result.data)

    def create(self, subscriber_id: str, channel_id: str) -> Subscription:
        """
        Insert a subscription edge.

        Raises:
            AlreadySubscribedError: If the edge already exists
        """
        try:
            result = (
                self._db.table("subscriptions")
                .insert({"subscriber": subscriber_id, "channel": channel_id})
                .execute()
            )
        except APIError as e:
            if is_unique_violation(e):
                raise AlreadySubscribedError(channel_id) from e
            raise
        return self._map_to_subscription(result.data[0])

    def count_subscribers(self, channel_id: str) -> int:
        """Number of accounts following the channel."""
        result = (
            self._db.table("subscriptions")
            .select("id", count="exact")
            .eq("channel", channel_id)
            .execute()
        )
        return result.count or 0

    def count_subscribed_to(self, subscriber_id: str) -> int:
        """Number of channels the account follows."""
        result = (
            self._db.table("subscriptions")
            .select("id", count="exact")
            .eq("subscriber", subscriber_id)
            .execute()
        )
        return result.count or 0

    def get_channel_stats(
        self,
        channel_id: str,
        viewer_id: Optional[str] = None,
    ) -> ChannelStats:
        """
        Aggregate subscription edges for a channel.

        Args:
            channel_id: The channel's account ID
            viewer_id: The requesting account, if any

        Returns:
            Subscriber count, subscribed-to count and whether the viewer
            follows the channel.
        """
        is_subscribed = False
        if viewer_id and is_valid_id(viewer_id):
            is_subscribed = self.exists(viewer_id, channel_id)

        return ChannelStats(
            subscriber_count=self.count_subscribers(channel_id),
            subscribed_to_count=self.count_subscribed_to(channel_id),
            is_subscribed=is_subscribed,
        )

    def list_subscriber_ids(self, channel_id: str) -> list[str]:
        """Account IDs following the channel, oldest edge first."""
        result = (
            self._db.table("subscriptions")
            .select("subscriber")
            .eq("channel", channel_id)
            .order("created_at")
            .execute()
        )
        return [str(row["subscriber"]) for row in result.data]

    def list_channel_ids(self, subscriber_id: str) -> list[str]:
        """Channel IDs the account follows, oldest edge first."""
        result = (
            self._db.table("subscriptions")
            .select("channel")
            .eq("subscriber", subscriber_id)
            .order("created_at")
            .execute()
        )
        return [str(row["channel"]) for row in result.data]

    def _map_to_subscription(self, data: dict[str, Any]) -> Subscription:
        return Subscription(
            id=str(data["id"]),
            subscriber=str(data["subscriber"]),
            channel=str(data["channel"]),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )
