"""
Donation and expense services.
"""

from campaign_manager.auth.rbac import AccessControl, RolePermissions
from campaign_manager.campaigns.repository import CampaignRepository
from campaign_manager.finance.repository import DonationRepository, ExpenseRepository
from campaign_manager.finance.schemas import Donation, DonationPayload, Expense, ExpensePayload
from campaign_manager.notifications.service import (
    DONATION_RECEIVED,
    EXPENSE_RECORDED,
    NotificationService,
)
from campaign_manager.shared.clock import Clock, IdFactory, new_id, utc_now_iso
from campaign_manager.shared.exceptions import InvalidPayloadError, NotFoundError
from campaign_manager.shared.logging import get_logger

logger = get_logger(__name__)


class DonationService:
    """Service for campaign donations."""

    def __init__(
        self,
        repository: DonationRepository,
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

    def create_donation(self, payload: DonationPayload, caller_username: str | None) -> Donation:
        """Record a donation made by a Donor.

        Checks run in order: caller exists, caller is Donor, payload is
        complete, campaign exists.
        """
        caller = self._access.resolve_caller(caller_username, operation="create_donation")
        self._access.require(
            caller,
            RolePermissions.DONATION_CREATE,
            operation="create_donation",
            message="Only donors can create donations",
        )

        if not payload.donor_name or payload.amount <= 0:
            raise InvalidPayloadError("Ensure donor name and valid amount are provided")

        if not self._campaigns.exists(payload.campaign_id):
            raise NotFoundError("Campaign not found")

        donation = Donation(
            id=self._id_factory(),
            campaign_id=payload.campaign_id,
            donor_name=payload.donor_name,
            amount=payload.amount,
            created_at=self._clock(),
        )
        self._repository.insert(donation)
        self._notifications.emit(donation.campaign_id, DONATION_RECEIVED)

        logger.info(
            "Donation recorded",
            extra={
                "donation_id": donation.id,
                "campaign_id": donation.campaign_id,
                "user_id": caller.id,
                "amount": donation.amount,
            },
        )
        return donation

    def get_donation(self, donation_id: str) -> Donation:
        """Get a donation whose campaign still exists."""
        donation = self._repository.get(donation_id)
        if donation is None:
            raise NotFoundError(f"Donation with ID {donation_id} not found")

        if not self._campaigns.exists(donation.campaign_id):
            raise NotFoundError(
                f"Associated campaign with ID {donation.campaign_id} not found. "
                "The campaign may have been deleted."
            )
        return donation

    def list_by_campaign(self, campaign_id: str) -> list[Donation]:
        donations = self._repository.list_by_campaign(campaign_id)
        if not donations:
            raise NotFoundError("No donations found for this campaign")
        return donations


class ExpenseService:
    """Service for campaign expenses."""

    def __init__(
        self,
        repository: ExpenseRepository,
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

    def create_expense(self, payload: ExpensePayload, caller_username: str | None) -> Expense:
        """Record an expense. Only Admins may do so."""
        caller = self._access.resolve_caller(caller_username, operation="create_expense")
        self._access.require(
            caller,
            RolePermissions.EXPENSE_CREATE,
            operation="create_expense",
            message="Only admins can create expenses",
        )

        if not payload.description or payload.amount <= 0:
            raise InvalidPayloadError("Ensure description and valid amount are provided")

        if not self._campaigns.exists(payload.campaign_id):
            raise NotFoundError("Campaign not found")

        expense = Expense(
            id=self._id_factory(),
            campaign_id=payload.campaign_id,
            description=payload.description,
            amount=payload.amount,
            created_at=self._clock(),
        )
        self._repository.insert(expense)
        self._notifications.emit(expense.campaign_id, EXPENSE_RECORDED)

        logger.info(
            "Expense recorded",
            extra={
                "expense_id": expense.id,
                "campaign_id": expense.campaign_id,
                "user_id": caller.id,
                "amount": expense.amount,
            },
        )
        return expense

    def list_by_campaign(self, campaign_id: str) -> list[Expense]:
        expenses = self._repository.list_by_campaign(campaign_id)
        if not expenses:
            raise NotFoundError("No expenses found for this campaign")
        return expenses
