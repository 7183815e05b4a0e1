"""
Donation and expense API router.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from campaign_manager.dependencies import (
    CallerUsername,
    get_donation_service,
    get_expense_service,
)
from campaign_manager.finance.schemas import Donation, DonationPayload, Expense, ExpensePayload
from campaign_manager.finance.service import DonationService, ExpenseService
from campaign_manager.shared.schemas import (
    INVALID_PAYLOAD_RESPONSE,
    NOT_FOUND_RESPONSE,
    UNAUTHORIZED_RESPONSE,
)

router = APIRouter(prefix="/api", tags=["finance"])

Donations = Annotated[DonationService, Depends(get_donation_service)]
Expenses = Annotated[ExpenseService, Depends(get_expense_service)]

WRITE_RESPONSES = {**INVALID_PAYLOAD_RESPONSE, **UNAUTHORIZED_RESPONSE, **NOT_FOUND_RESPONSE}


@router.post(
    "/donations",
    response_model=Donation,
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_RESPONSES,
)
async def create_donation(
    payload: DonationPayload,
    caller: CallerUsername,
    service: Donations,
) -> Donation:
    """Record a donation. The caller (``X-Username``) must be a Donor."""
    return service.create_donation(payload, caller)


@router.get("/donations/{donation_id}", response_model=Donation, responses=NOT_FOUND_RESPONSE)
async def get_donation_by_id(donation_id: str, service: Donations) -> Donation:
    return service.get_donation(donation_id)


@router.get(
    "/campaigns/{campaign_id}/donations",
    response_model=list[Donation],
    responses=NOT_FOUND_RESPONSE,
)
async def get_donations_by_campaign_id(campaign_id: str, service: Donations) -> list[Donation]:
    return service.list_by_campaign(campaign_id)


@router.post(
    "/expenses",
    response_model=Expense,
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_RESPONSES,
)
async def create_expense(
    payload: ExpensePayload,
    caller: CallerUsername,
    service: Expenses,
) -> Expense:
    """Record an expense. The caller (``X-Username``) must be an Admin."""
    return service.create_expense(payload, caller)


@router.get(
    "/campaigns/{campaign_id}/expenses",
    response_model=list[Expense],
    responses=NOT_FOUND_RESPONSE,
)
async def get_expenses_by_campaign_id(campaign_id: str, service: Expenses) -> list[Expense]:
    return service.list_by_campaign(campaign_id)
