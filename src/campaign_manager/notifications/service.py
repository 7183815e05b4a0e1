"""
Notification emitter.
"""

from campaign_manager.notifications.repository import NotificationRepository
from campaign_manager.notifications.schemas import Notification
from campaign_manager.shared.clock import Clock, IdFactory, new_id, utc_now_iso
from campaign_manager.shared.exceptions import NotFoundError
from campaign_manager.shared.logging import get_logger

logger = get_logger(__name__)

CAMPAIGN_CREATED = "New campaign created."
CAMPAIGN_UPDATED = "Campaign updated."
DONATION_RECEIVED = "New donation received."
EXPENSE_RECORDED = "New expense recorded."
OUTREACH_RECORDED = "New voter outreach recorded."
MESSAGE_SENT = "New message sent."


class NotificationService:
    """Writes and lists campaign notifications."""

    def __init__(
        self,
        repository: NotificationRepository,
        clock: Clock = utc_now_iso,
        id_factory: IdFactory = new_id,
    ) -> None:
        self._repository = repository
        self._clock = clock
        self._id_factory = id_factory

    def emit(self, campaign_id: str, message: str) -> Notification | None:
        """Record a notification for a campaign.

        Called after the primary write of a mutation has been stored. A
        failure here is logged and does not reach the caller; the primary
        write stays committed.

        Returns:
            The stored notification, or None if the write failed.
        """
        notification = Notification(
            id=self._id_factory(),
            campaign_id=campaign_id,
            message=message,
            created_at=self._clock(),
        )
        try:
            self._repository.insert(notification)
        except Exception:
            logger.exception(
                "Notification write failed",
                extra={"campaign_id": campaign_id, "notification_message": message},
            )
            return None

        logger.debug(
            "Notification emitted",
            extra={"campaign_id": campaign_id, "notification_id": notification.id},
        )
        return notification

    def list_by_campaign(self, campaign_id: str) -> list[Notification]:
        notifications = self._repository.list_by_campaign(campaign_id)
        if not notifications:
            raise NotFoundError("No notifications found for this campaign")
        return notifications
