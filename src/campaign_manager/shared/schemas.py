"""
Error response schemas shared by all routers.
"""

from pydantic import BaseModel, Field

from campaign_manager.shared.exceptions import ErrorCode


class ErrorDetail(BaseModel):
    """Schema for error detail."""

    code: ErrorCode = Field(..., description="Error tag")
    message: str = Field(..., description="Human-readable error message")


class ErrorResponse(BaseModel):
    """Schema for error response."""

    detail: ErrorDetail = Field(..., description="Error details")


NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "Record not found"}}
INVALID_PAYLOAD_RESPONSE = {
    400: {"model": ErrorResponse, "description": "Missing or invalid fields"},
    422: {"model": ErrorResponse, "description": "Malformed request body"},
}
UNAUTHORIZED_RESPONSE = {403: {"model": ErrorResponse, "description": "Caller not allowed"}}
