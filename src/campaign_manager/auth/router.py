"""
User API router.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from campaign_manager.auth.models import UserRole
from campaign_manager.auth.schemas import User, UserPayload
from campaign_manager.auth.service import UserService
from campaign_manager.dependencies import CallerPrincipal, get_user_service
from campaign_manager.shared.schemas import (
    INVALID_PAYLOAD_RESPONSE,
    NOT_FOUND_RESPONSE,
    ErrorResponse,
)

router = APIRouter(prefix="/api/users", tags=["users"])

Service = Annotated[UserService, Depends(get_user_service)]


@router.post(
    "",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    responses={
        **INVALID_PAYLOAD_RESPONSE,
        409: {"model": ErrorResponse, "description": "Username already exists"},
    },
)
async def create_user(payload: UserPayload, owner: CallerPrincipal, service: Service) -> User:
    """Register a user. The calling principal becomes its owner."""
    return service.create_user(payload, owner=owner)


@router.get("", response_model=list[User], responses=NOT_FOUND_RESPONSE)
async def get_users(service: Service) -> list[User]:
    return service.list_users()


@router.get("/by-username/{username}", response_model=User, responses=NOT_FOUND_RESPONSE)
async def get_user_by_username(username: str, service: Service) -> User:
    return service.get_user_by_username(username)


@router.get("/by-role/{role}", response_model=list[User], responses=NOT_FOUND_RESPONSE)
async def get_users_by_role(role: UserRole, service: Service) -> list[User]:
    """List users holding a role. Only Admin and CampaignManager ever match."""
    return service.get_users_by_role(role)
