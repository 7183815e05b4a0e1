"""
Voter outreach service.
"""

from campaign_manager.auth.rbac import AccessControl, RolePermissions
from campaign_manager.campaigns.repository import CampaignRepository
from campaign_manager.notifications.service import OUTREACH_RECORDED, NotificationService
from campaign_manager.outreach.repository import OutreachRepository
from campaign_manager.outreach.schemas import VoterOutreach, VoterOutreachPayload
from campaign_manager.shared.clock import Clock, IdFactory, new_id, utc_now_iso
from campaign_manager.shared.exceptions import InvalidPayloadError, NotFoundError
from campaign_manager.shared.logging import get_logger

logger = get_logger(__name__)


class OutreachService:
    """Service for voter outreach activities. Any registered user may record one."""

    def __init__(
        self,
        repository: OutreachRepository,
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

    def create_outreach(
        self,
        payload: VoterOutreachPayload,
        caller_username: str | None,
    ) -> VoterOutreach:
        caller = self._access.resolve_caller(
            caller_username,
            operation="create_voter_outreach",
            missing_message="Invalid credentials",
        )
        self._access.require(
            caller,
            RolePermissions.OUTREACH_CREATE,
            operation="create_voter_outreach",
            message="Invalid credentials",
        )

        if not payload.activity or not payload.date or not payload.status:
            raise InvalidPayloadError("Ensure activity, date and status are provided")

        if not self._campaigns.exists(payload.campaign_id):
            raise NotFoundError("Campaign not found")

        outreach = VoterOutreach(
            id=self._id_factory(),
            campaign_id=payload.campaign_id,
            activity=payload.activity,
            date=payload.date,
            status=payload.status,
            created_at=self._clock(),
        )
        self._repository.insert(outreach)
        self._notifications.emit(outreach.campaign_id, OUTREACH_RECORDED)

        logger.info(
            "Voter outreach recorded",
            extra={
                "outreach_id": outreach.id,
                "campaign_id": outreach.campaign_id,
                "user_id": caller.id,
            },
        )
        return outreach

    def list_by_campaign(self, campaign_id: str) -> list[VoterOutreach]:
        outreach = self._repository.list_by_campaign(campaign_id)
        if not outreach:
            raise NotFoundError("No voter outreach found for this campaign")
        return outreach
