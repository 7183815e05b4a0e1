"""
Secure message API router.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from campaign_manager.dependencies import CallerUsername, get_message_service
from campaign_manager.messaging.schemas import MessagePayload, SecureMessage
from campaign_manager.messaging.service import MessageService
from campaign_manager.shared.schemas import (
    INVALID_PAYLOAD_RESPONSE,
    NOT_FOUND_RESPONSE,
    UNAUTHORIZED_RESPONSE,
)

router = APIRouter(prefix="/api", tags=["messages"])

Service = Annotated[MessageService, Depends(get_message_service)]


@router.post(
    "/messages",
    response_model=SecureMessage,
    status_code=status.HTTP_201_CREATED,
    responses={**INVALID_PAYLOAD_RESPONSE, **UNAUTHORIZED_RESPONSE, **NOT_FOUND_RESPONSE},
)
async def create_message(
    payload: MessagePayload,
    caller: CallerUsername,
    service: Service,
) -> SecureMessage:
    return service.create_message(payload, caller)


@router.get(
    "/campaigns/{campaign_id}/messages",
    response_model=list[SecureMessage],
    responses=NOT_FOUND_RESPONSE,
)
async def get_messages_by_campaign_id(campaign_id: str, service: Service) -> list[SecureMessage]:
    return service.list_by_campaign(campaign_id)
