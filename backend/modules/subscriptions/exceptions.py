"""
Subscriptions module exceptions.
"""

from shared.exceptions import ConflictError, ValidationError


class InvalidChannelIdError(ValidationError):
    """Raised when a channel ID is not a valid account ID."""

    def __init__(self, channel_id: str):
        super().__init__(
            "Invalid channel id",
            code="INVALID_CHANNEL_ID",
            details={"channel_id": channel_id},
        )


class SelfSubscriptionError(ValidationError):
    """Raised when a user tries to subscribe to their own channel."""

    def __init__(self):
        super().__init__(
            "You cannot subscribe to your own channel",
            code="SELF_SUBSCRIPTION",
        )


class AlreadySubscribedError(ConflictError):
    """Raised when the subscription edge already exists."""

    def __init__(self, channel_id: str):
        super().__init__(
            "Already subscribed to this channel",
            code="ALREADY_SUBSCRIBED",
            details={"channel_id": channel_id},
        )
