"""
Notification API router. Notifications are read-only for callers.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from campaign_manager.dependencies import get_notification_service
from campaign_manager.notifications.schemas import Notification
from campaign_manager.notifications.service import NotificationService
from campaign_manager.shared.schemas import NOT_FOUND_RESPONSE

router = APIRouter(prefix="/api", tags=["notifications"])


@router.get(
    "/campaigns/{campaign_id}/notifications",
    response_model=list[Notification],
    responses=NOT_FOUND_RESPONSE,
)
async def get_notifications_by_campaign_id(
    campaign_id: str,
    service: Annotated[NotificationService, Depends(get_notification_service)],
) -> list[Notification]:
    return service.list_by_campaign(campaign_id)
