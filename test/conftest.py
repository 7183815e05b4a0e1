"""
Pytest configuration and fixtures.
"""
from __future__ import annotations

from collections.abc import AsyncGenerator
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from campaign_manager.auth.models import UserRole
from campaign_manager.auth.schemas import User, UserPayload
from campaign_manager.campaigns.schemas import Campaign, CampaignPayload
from campaign_manager.context import ServiceContext
from campaign_manager.main import create_app
from campaign_manager.shared.store import InMemoryKeyValueStore


class FakeClock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2024, 1, 1, tzinfo=timezone.utc)
        self.calls = 0

    def __call__(self) -> str:
        value = self.current.isoformat(timespec="milliseconds").replace("+00:00", "Z")
        self.current += timedelta(seconds=1)
        self.calls += 1
        return value


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def context(store: InMemoryKeyValueStore, clock: FakeClock) -> ServiceContext:
    """Isolated service context over a fresh in-memory store."""
    return ServiceContext(store=store, clock=clock)


@pytest.fixture
def make_user(context: ServiceContext):
    def _make_user(username: str, role: UserRole, owner: str = "test-principal") -> User:
        return context.users.create_user(UserPayload(username=username, role=role), owner=owner)

    return _make_user


@pytest.fixture
def admin(make_user) -> User:
    return make_user("root", UserRole.ADMIN)


@pytest.fixture
def manager(make_user) -> User:
    return make_user("alice", UserRole.CAMPAIGN_MANAGER)


@pytest.fixture
def donor(make_user) -> User:
    return make_user("bob", UserRole.DONOR)


@pytest.fixture
def campaign(context: ServiceContext, manager: User) -> Campaign:
    return context.campaigns.create_campaign(
        CampaignPayload(
            name="Primary 2024",
            description="State primary campaign",
            created_by=manager.id,
        )
    )


@pytest_asyncio.fixture
async def async_client(context: ServiceContext) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to an app sharing the test's service context."""
    app = create_app(context=context)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
