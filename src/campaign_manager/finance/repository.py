"""
Donation and expense repositories.
"""

from campaign_manager.finance.schemas import Donation, Expense
from campaign_manager.shared.repository import CampaignScopedRepository


class DonationRepository(CampaignScopedRepository[Donation]):
    """Repository for donation records."""

    namespace = "donations"
    model = Donation


class ExpenseRepository(CampaignScopedRepository[Expense]):
    """Repository for expense records."""

    namespace = "expenses"
    model = Expense
