"""
Pydantic schemas for voter outreach.
"""

from pydantic import BaseModel, ConfigDict, Field


class VoterOutreach(BaseModel):
    """Stored voter outreach record."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Outreach ID")
    campaign_id: str = Field(..., description="Campaign the activity belongs to")
    activity: str = Field(..., description="Activity performed, e.g. canvassing")
    date: str = Field(..., description="Date of the activity, free form")
    status: str = Field(..., description="Activity status, free form")
    created_at: str = Field(..., description="Creation timestamp (ISO-8601)")


class VoterOutreachPayload(BaseModel):
    """Schema for recording a voter outreach activity."""

    campaign_id: str = Field(..., description="Campaign the activity belongs to")
    activity: str = Field(default="", description="Activity performed")
    date: str = Field(default="", description="Date of the activity")
    status: str = Field(default="", description="Activity status")
