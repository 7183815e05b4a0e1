"""
Secure message service.
"""

from campaign_manager.auth.rbac import AccessControl, RolePermissions
from campaign_manager.campaigns.repository import CampaignRepository
from campaign_manager.messaging.repository import MessageRepository
from campaign_manager.messaging.schemas import MessagePayload, SecureMessage
from campaign_manager.notifications.service import MESSAGE_SENT, NotificationService
from campaign_manager.shared.clock import Clock, IdFactory, new_id, utc_now_iso
from campaign_manager.shared.exceptions import InvalidPayloadError, NotFoundError
from campaign_manager.shared.logging import get_logger

logger = get_logger(__name__)


class MessageService:
    """Service for secure campaign messages."""

    def __init__(
        self,
        repository: MessageRepository,
        campaigns: CampaignRepository,
        access: AccessControl,
        notifications: NotificationService,
        clock: Clock = utc_now_iso,
        id_factory: IdFactory = new_id,
    ) -> None:
        self._repository = repository
        self._campaigns = campaigns
        self._access = access
        self._notifications = notifications
        self._clock = clock
        self._id_factory = id_factory

    def create_message(self, payload: MessagePayload, caller_username: str | None) -> SecureMessage:
        """Store a message from ``payload.sender`` to a campaign.

        The caller and the sender are resolved separately: the caller by
        username, the sender by user ID.
        """
        caller = self._access.resolve_caller(
            caller_username,
            operation="create_message",
            missing_message="Invalid credentials",
        )
        self._access.require(
            caller,
            RolePermissions.MESSAGE_CREATE,
            operation="create_message",
            message="Invalid credentials",
        )

        if not payload.sender or not payload.content:
            raise InvalidPayloadError("Ensure sender and content are provided")

        try:
            self._access.resolve_user_id(payload.sender)
        except NotFoundError:
            raise NotFoundError(f"Sender with ID {payload.sender} not found") from None

        if not self._campaigns.exists(payload.campaign_id):
            raise NotFoundError("Campaign not found")

        message = SecureMessage(
            id=self._id_factory(),
            campaign_id=payload.campaign_id,
            sender=payload.sender,
            content=payload.content,
            created_at=self._clock(),
        )
        self._repository.insert(message)
        self._notifications.emit(message.campaign_id, MESSAGE_SENT)

        logger.info(
            "Message stored",
            extra={
                "message_id": message.id,
                "campaign_id": message.campaign_id,
                "user_id": caller.id,
            },
        )
        return message

    def list_by_campaign(self, campaign_id: str) -> list[SecureMessage]:
        messages = self._repository.list_by_campaign(campaign_id)
        if not messages:
            raise NotFoundError("No messages found for this campaign")
        return messages
