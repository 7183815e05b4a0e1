"""
Voter outreach API router.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from campaign_manager.dependencies import CallerUsername, get_outreach_service
from campaign_manager.outreach.schemas import VoterOutreach, VoterOutreachPayload
from campaign_manager.outreach.service import OutreachService
from campaign_manager.shared.schemas import (
    INVALID_PAYLOAD_RESPONSE,
    NOT_FOUND_RESPONSE,
    UNAUTHORIZED_RESPONSE,
)

router = APIRouter(prefix="/api", tags=["outreach"])

Service = Annotated[OutreachService, Depends(get_outreach_service)]


@router.post(
    "/outreach",
    response_model=VoterOutreach,
    status_code=status.HTTP_201_CREATED,
    responses={**INVALID_PAYLOAD_RESPONSE, **UNAUTHORIZED_RESPONSE, **NOT_FOUND_RESPONSE},
)
async def create_voter_outreach(
    payload: VoterOutreachPayload,
    caller: CallerUsername,
    service: Service,
) -> VoterOutreach:
    return service.create_outreach(payload, caller)


@router.get(
    "/campaigns/{campaign_id}/outreach",
    response_model=list[VoterOutreach],
    responses=NOT_FOUND_RESPONSE,
)
async def get_voter_outreach_by_campaign_id(
    campaign_id: str,
    service: Service,
) -> list[VoterOutreach]:
    return service.list_by_campaign(campaign_id)
