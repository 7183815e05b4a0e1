"""
Pydantic schemas for donations and expenses.
"""

from pydantic import BaseModel, ConfigDict, Field

# Amounts are unsigned 64-bit integers on the wire.
MAX_AMOUNT = 2**64 - 1


class Donation(BaseModel):
    """Stored donation record."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Donation ID")
    campaign_id: str = Field(..., description="Campaign receiving the donation")
    donor_name: str = Field(..., description="Name of the donor")
    amount: int = Field(..., gt=0, le=MAX_AMOUNT, description="Donated amount")
    created_at: str = Field(..., description="Creation timestamp (ISO-8601)")


class DonationPayload(BaseModel):
    """Schema for recording a donation."""

    campaign_id: str = Field(..., description="Campaign receiving the donation")
    donor_name: str = Field(default="", description="Name of the donor")
    amount: int = Field(
        default=0, strict=True, le=MAX_AMOUNT, description="Donated amount, must be positive"
    )


class Expense(BaseModel):
    """Stored expense record."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Expense ID")
    campaign_id: str = Field(..., description="Campaign incurring the expense")
    description: str = Field(..., description="What the money was spent on")
    amount: int = Field(..., gt=0, le=MAX_AMOUNT, description="Spent amount")
    created_at: str = Field(..., description="Creation timestamp (ISO-8601)")


class ExpensePayload(BaseModel):
    """Schema for recording an expense."""

    campaign_id: str = Field(..., description="Campaign incurring the expense")
    description: str = Field(default="", description="What the money was spent on")
    amount: int = Field(
        default=0, strict=True, le=MAX_AMOUNT, description="Spent amount, must be positive"
    )
