"""
Pydantic schemas for campaigns.
"""

from pydantic import BaseModel, ConfigDict, Field


class Campaign(BaseModel):
    """Stored campaign record."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Campaign ID")
    name: str = Field(..., description="Campaign name")
    description: str = Field(..., description="Campaign description")
    created_by: str = Field(..., description="ID of the user who last created or updated it")
    created_at: str = Field(..., description="Creation timestamp (ISO-8601)")
    updated_at: str = Field(..., description="Last update timestamp (ISO-8601)")


class CampaignPayload(BaseModel):
    """Schema for creating or fully replacing a campaign."""

    name: str = Field(default="", description="Campaign name")
    description: str = Field(default="", description="Campaign description")
    created_by: str = Field(..., description="ID of the acting Admin or CampaignManager")
