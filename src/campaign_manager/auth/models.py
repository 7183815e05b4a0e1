"""
Role model for users.
"""

from enum import Enum


class UserRole(str, Enum):
    """User roles."""

    ADMIN = "Admin"
    CAMPAIGN_MANAGER = "CampaignManager"
    DONOR = "Donor"
