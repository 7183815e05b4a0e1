"""
FastAPI dependencies shared by the routers.
"""

from typing import Annotated

from fastapi import Depends, Header, Request

from campaign_manager.auth.service import UserService
from campaign_manager.campaigns.service import CampaignService
from campaign_manager.context import ServiceContext
from campaign_manager.finance.service import DonationService, ExpenseService
from campaign_manager.messaging.service import MessageService
from campaign_manager.notifications.service import NotificationService
from campaign_manager.outreach.service import OutreachService

ANONYMOUS_PRINCIPAL = "anonymous"


def get_context(request: Request) -> ServiceContext:
    """Return the service context owned by the running application."""
    return request.app.state.context


Context = Annotated[ServiceContext, Depends(get_context)]


def get_caller_username(
    x_username: Annotated[str | None, Header(description="Username of the calling user")] = None,
) -> str | None:
    """Username the caller acts as on gated writes."""
    return x_username or None


def get_caller_principal(
    x_caller_principal: Annotated[
        str | None,
        Header(description="Identity registering a user; stored as its owner"),
    ] = None,
) -> str:
    return x_caller_principal or ANONYMOUS_PRINCIPAL


def get_user_service(context: Context) -> UserService:
    return context.users


def get_campaign_service(context: Context) -> CampaignService:
    return context.campaigns


def get_donation_service(context: Context) -> DonationService:
    return context.donations


def get_expense_service(context: Context) -> ExpenseService:
    return context.expenses


def get_outreach_service(context: Context) -> OutreachService:
    return context.outreach


def get_message_service(context: Context) -> MessageService:
    return context.messages


def get_notification_service(context: Context) -> NotificationService:
    return context.notifications


CallerUsername = Annotated[str | None, Depends(get_caller_username)]
CallerPrincipal = Annotated[str, Depends(get_caller_principal)]
