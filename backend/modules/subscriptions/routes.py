"""
Subscription API endpoints.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_subscription_service
from api.middleware.auth import get_current_user
from api.models.responses import ApiResponse
from shared.models import UserProfile, UserSummary

from .interfaces import ISubscriptionService
from .models import Subscription

router = APIRouter()


@router.post("/c/{channel_id}", response_model=ApiResponse[Subscription], status_code=201)
async def subscribe(
    channel_id: str,
    user: UserProfile = Depends(get_current_user),
    service: ISubscriptionService = Depends(get_subscription_service),
) -> ApiResponse[Subscription]:
    """Subscribe the current user to a channel."""
    subscription = await service.subscribe(user.id, channel_id)
    return ApiResponse(status_code=201, data=subscription, message="Subscribed successfully")


@router.get("/c/{channel_id}/subscribers", response_model=ApiResponse[list[UserSummary]])
async def list_subscribers(
    channel_id: str,
    user: UserProfile = Depends(get_current_user),
    service: ISubscriptionService = Depends(get_subscription_service),
) -> ApiResponse[list[UserSummary]]:
    """List the accounts subscribed to a channel."""
    subscribers = await service.list_subscribers(channel_id)
    return ApiResponse(data=subscribers, message="Subscribers fetched successfully")


@router.get("/u/{subscriber_id}/channels", response_model=ApiResponse[list[UserSummary]])
async def list_subscribed_channels(
    subscriber_id: str,
    user: UserProfile = Depends(get_current_user),
    service: ISubscriptionService = Depends(get_subscription_service),
) -> ApiResponse[list[UserSummary]]:
    """List the channels an account is subscribed to."""
    channels = await service.list_subscribed_channels(subscriber_id)
    return ApiResponse(data=channels, message="Subscribed channels fetched successfully")
