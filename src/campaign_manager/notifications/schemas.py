"""
Pydantic schemas for notifications.
"""

from pydantic import BaseModel, ConfigDict, Field


class Notification(BaseModel):
    """Stored notification record."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Notification ID")
    campaign_id: str = Field(..., description="Campaign the notification belongs to")
    message: str = Field(..., description="Notification text")
    created_at: str = Field(..., description="Creation timestamp (ISO-8601)")
