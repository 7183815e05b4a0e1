"""
Voter outreach repository.
"""

from campaign_manager.outreach.schemas import VoterOutreach
from campaign_manager.shared.repository import CampaignScopedRepository


class OutreachRepository(CampaignScopedRepository[VoterOutreach]):
    """Repository for voter outreach records."""

    namespace = "outreach"
    model = VoterOutreach
