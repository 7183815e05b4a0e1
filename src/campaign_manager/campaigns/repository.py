"""
Campaign repository.
"""

from campaign_manager.campaigns.schemas import Campaign
from campaign_manager.shared.repository import EntityRepository


class CampaignRepository(EntityRepository[Campaign]):
    """Repository for campaign records."""

    namespace = "campaigns"
    model = Campaign

    def exists(self, campaign_id: str) -> bool:
        return self.get(campaign_id) is not None
