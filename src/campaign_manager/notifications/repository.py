"""
Notification repository.
"""

from campaign_manager.notifications.schemas import Notification
from campaign_manager.shared.repository import CampaignScopedRepository


class NotificationRepository(CampaignScopedRepository[Notification]):
    """Repository for notification records."""

    namespace = "notifications"
    model = Notification
