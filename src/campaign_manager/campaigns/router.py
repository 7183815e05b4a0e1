"""
Campaign API router.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from campaign_manager.campaigns.schemas import Campaign, CampaignPayload
from campaign_manager.campaigns.service import CampaignService
from campaign_manager.dependencies import get_campaign_service
from campaign_manager.shared.logging import get_logger
from campaign_manager.shared.schemas import (
    INVALID_PAYLOAD_RESPONSE,
    NOT_FOUND_RESPONSE,
    UNAUTHORIZED_RESPONSE,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/api/campaigns", tags=["campaigns"])

Service = Annotated[CampaignService, Depends(get_campaign_service)]


@router.post(
    "",
    response_model=Campaign,
    status_code=status.HTTP_201_CREATED,
    responses={**INVALID_PAYLOAD_RESPONSE, **UNAUTHORIZED_RESPONSE, **NOT_FOUND_RESPONSE},
)
async def create_campaign(payload: CampaignPayload, service: Service) -> Campaign:
    """Create a campaign.

    ``created_by`` must be the ID of an Admin or CampaignManager.
    """
    logger.info(
        "Creating campaign",
        extra={"user_id": payload.created_by, "campaign_name": payload.name},
    )
    return service.create_campaign(payload)


@router.get("", response_model=list[Campaign], responses=NOT_FOUND_RESPONSE)
async def get_campaigns(service: Service) -> list[Campaign]:
    return service.list_campaigns()


@router.get("/{campaign_id}", response_model=Campaign, responses=NOT_FOUND_RESPONSE)
async def get_campaign_by_id(campaign_id: str, service: Service) -> Campaign:
    return service.get_campaign(campaign_id)


@router.put(
    "/{campaign_id}",
    response_model=Campaign,
    responses={**INVALID_PAYLOAD_RESPONSE, **UNAUTHORIZED_RESPONSE, **NOT_FOUND_RESPONSE},
)
async def update_campaign(
    campaign_id: str,
    payload: CampaignPayload,
    service: Service,
) -> Campaign:
    """Replace a campaign's name, description and created_by."""
    logger.info(
        "Updating campaign",
        extra={"user_id": payload.created_by, "campaign_id": campaign_id},
    )
    return service.update_campaign(campaign_id, payload)
