"""
Pydantic schemas for users.
"""

from pydantic import BaseModel, ConfigDict, Field

from campaign_manager.auth.models import UserRole


class User(BaseModel):
    """Stored user record."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="User ID")
    owner: str = Field(..., description="Identity of the caller that registered the user")
    username: str = Field(..., description="Unique username")
    role: UserRole = Field(..., description="User role")
    points: int = Field(default=0, ge=0, description="Engagement points counter")
    created_at: str = Field(..., description="Creation timestamp (ISO-8601)")


class UserPayload(BaseModel):
    """Schema for registering a user.

    Both fields are optional at the schema level so that missing values are
    reported by the service as InvalidPayload.
    """

    username: str = Field(default="", description="Requested username")
    role: UserRole | None = Field(default=None, description="Requested role")
