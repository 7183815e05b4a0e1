"""
Pydantic schemas for secure messages.
"""

from pydantic import BaseModel, ConfigDict, Field


class SecureMessage(BaseModel):
    """Stored secure message record."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Message ID")
    campaign_id: str = Field(..., description="Campaign the message belongs to")
    sender: str = Field(..., description="ID of the sending user")
    content: str = Field(..., description="Message body")
    created_at: str = Field(..., description="Creation timestamp (ISO-8601)")


class MessagePayload(BaseModel):
    """Schema for sending a secure message."""

    campaign_id: str = Field(..., description="Campaign the message belongs to")
    sender: str = Field(default="", description="ID of the sending user")
    content: str = Field(default="", description="Message body")
