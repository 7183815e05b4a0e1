"""
Campaign service for business logic.
"""

from campaign_manager.auth.rbac import AccessControl, RolePermissions
from campaign_manager.campaigns.repository import CampaignRepository
from campaign_manager.campaigns.schemas import Campaign, CampaignPayload
from campaign_manager.notifications.service import (
    CAMPAIGN_CREATED,
    CAMPAIGN_UPDATED,
    NotificationService,
)
from campaign_manager.shared.clock import Clock, IdFactory, new_id, utc_now_iso
from campaign_manager.shared.exceptions import InvalidPayloadError, NotFoundError
from campaign_manager.shared.logging import get_logger

logger = get_logger(__name__)


class CampaignService:
    """Service for campaign lifecycle operations."""

    def __init__(
        self,
        repository: CampaignRepository,
        access: AccessControl,
        notifications: NotificationService,
        clock: Clock = utc_now_iso,
        id_factory: IdFactory = new_id,
    ) -> None:
        """Initialize service with its collaborators."""
        self._repository = repository
        self._access = access
        self._notifications = notifications
        self._clock = clock
        self._id_factory = id_factory

    @staticmethod
    def _validate_payload(payload: CampaignPayload) -> None:
        if not payload.name or not payload.description:
            raise InvalidPayloadError("Ensure 'name' and 'description' are provided")

    def create_campaign(self, payload: CampaignPayload) -> Campaign:
        """Create a campaign on behalf of ``payload.created_by``.

        Raises:
            InvalidPayloadError: If name or description is empty.
            NotFoundError: If created_by is not a known user ID.
            UnauthorizedError: If that user is neither Admin nor CampaignManager.
        """
        self._validate_payload(payload)

        author = self._access.resolve_user_id(payload.created_by)
        self._access.require(
            author,
            RolePermissions.CAMPAIGN_CREATE,
            operation="create_campaign",
            message="Only Admins and Campaign Managers can create campaigns",
        )

        timestamp = self._clock()
        campaign = Campaign(
            id=self._id_factory(),
            name=payload.name,
            description=payload.description,
            created_by=author.id,
            created_at=timestamp,
            updated_at=timestamp,
        )
        self._repository.insert(campaign)
        self._notifications.emit(campaign.id, CAMPAIGN_CREATED)

        logger.info(
            "Campaign created",
            extra={"campaign_id": campaign.id, "user_id": author.id},
        )
        return campaign

    def update_campaign(self, campaign_id: str, payload: CampaignPayload) -> Campaign:
        """Replace name, description and created_by of an existing campaign.

        ``id`` and ``created_at`` are preserved; ``updated_at`` is refreshed.
        """
        existing = self.get_campaign(campaign_id)
        self._validate_payload(payload)

        author = self._access.resolve_user_id(payload.created_by)
        self._access.require(
            author,
            RolePermissions.CAMPAIGN_UPDATE,
            operation="update_campaign",
            message="Only Admins and Campaign Managers can update campaigns",
        )

        campaign = existing.model_copy(
            update={
                "name": payload.name,
                "description": payload.description,
                "created_by": author.id,
                "updated_at": self._clock(),
            }
        )
        self._repository.insert(campaign)
        self._notifications.emit(campaign.id, CAMPAIGN_UPDATED)

        logger.info(
            "Campaign updated",
            extra={"campaign_id": campaign.id, "user_id": author.id},
        )
        return campaign

    def get_campaign(self, campaign_id: str) -> Campaign:
        """Get campaign by ID."""
        campaign = self._repository.get(campaign_id)
        if campaign is None:
            raise NotFoundError(f"Campaign with ID {campaign_id} not found")
        return campaign

    def list_campaigns(self) -> list[Campaign]:
        campaigns = self._repository.get_all()
        if not campaigns:
            raise NotFoundError("No campaigns found")
        return campaigns
