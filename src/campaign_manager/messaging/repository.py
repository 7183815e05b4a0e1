"""
Secure message repository.
"""

from campaign_manager.messaging.schemas import SecureMessage
from campaign_manager.shared.repository import CampaignScopedRepository


class MessageRepository(CampaignScopedRepository[SecureMessage]):
    """Repository for secure message records."""

    namespace = "messages"
    model = SecureMessage
