"""
HTTP API tests: status codes, error bodies and caller headers.
"""

import pytest
from httpx import AsyncClient

from campaign_manager.context import ServiceContext
from campaign_manager.dependencies import get_caller_username


def _error(response) -> dict:
    return response.json()["detail"]


@pytest.mark.asyncio
async def test_health(async_client: AsyncClient) -> None:
    response = await async_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


@pytest.mark.asyncio
async def test_correlation_id_echoed(async_client: AsyncClient) -> None:
    response = await async_client.get("/health", headers={"X-Correlation-ID": "req-42"})

    assert response.headers["X-Correlation-ID"] == "req-42"


@pytest.mark.asyncio
async def test_correlation_id_generated(async_client: AsyncClient) -> None:
    response = await async_client.get("/health")

    assert response.headers["X-Correlation-ID"]


class TestUsersApi:
    @pytest.mark.asyncio
    async def test_create_user_records_principal(self, async_client: AsyncClient) -> None:
        response = await async_client.post(
            "/api/users",
            json={"username": "alice", "role": "CampaignManager"},
            headers={"X-Caller-Principal": "principal-7"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["username"] == "alice"
        assert body["role"] == "CampaignManager"
        assert body["owner"] == "principal-7"
        assert body["points"] == 0

    @pytest.mark.asyncio
    async def test_create_user_anonymous_owner(self, async_client: AsyncClient) -> None:
        response = await async_client.post("/api/users", json={"username": "a", "role": "Donor"})

        assert response.json()["owner"] == "anonymous"

    @pytest.mark.asyncio
    async def test_missing_role(self, async_client: AsyncClient) -> None:
        response = await async_client.post("/api/users", json={"username": "alice"})

        assert response.status_code == 400
        assert _error(response)["code"] == "InvalidPayload"

    @pytest.mark.asyncio
    async def test_unknown_role_rejected_by_schema(self, async_client: AsyncClient) -> None:
        response = await async_client.post(
            "/api/users", json={"username": "alice", "role": "Mayor"}
        )

        assert response.status_code == 422
        assert _error(response)["code"] == "InvalidPayload"
        assert _error(response)["errors"]

    @pytest.mark.asyncio
    async def test_duplicate_username(self, async_client: AsyncClient, manager) -> None:
        response = await async_client.post(
            "/api/users", json={"username": manager.username, "role": "Donor"}
        )

        assert response.status_code == 409
        assert _error(response)["code"] == "ValidationError"

    @pytest.mark.asyncio
    async def test_lookups(self, async_client: AsyncClient, admin, donor) -> None:
        by_name = await async_client.get("/api/users/by-username/bob")
        by_role = await async_client.get("/api/users/by-role/Admin")
        donors = await async_client.get("/api/users/by-role/Donor")
        everyone = await async_client.get("/api/users")

        assert by_name.json()["id"] == donor.id
        assert [u["id"] for u in by_role.json()] == [admin.id]
        assert donors.status_code == 404
        assert [u["id"] for u in everyone.json()] == [admin.id, donor.id]

    @pytest.mark.asyncio
    async def test_list_users_empty(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/api/users")

        assert response.status_code == 404
        assert _error(response) == {"code": "NotFound", "message": "No users found"}


class TestCampaignsApi:
    @pytest.mark.asyncio
    async def test_create_and_fetch(self, async_client: AsyncClient, manager) -> None:
        created = await async_client.post(
            "/api/campaigns",
            json={"name": "Primary", "description": "Spring", "created_by": manager.id},
        )
        fetched = await async_client.get(f"/api/campaigns/{created.json()['id']}")

        assert created.status_code == 201
        assert fetched.status_code == 200
        assert fetched.json() == created.json()

    @pytest.mark.asyncio
    async def test_donor_forbidden(self, async_client: AsyncClient, donor) -> None:
        response = await async_client.post(
            "/api/campaigns",
            json={"name": "Primary", "description": "Spring", "created_by": donor.id},
        )

        assert response.status_code == 403
        assert _error(response)["code"] == "Unauthorized"

    @pytest.mark.asyncio
    async def test_missing_created_by(self, async_client: AsyncClient) -> None:
        response = await async_client.post(
            "/api/campaigns", json={"name": "Primary", "description": "Spring"}
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_update(self, async_client: AsyncClient, campaign, admin) -> None:
        response = await async_client.put(
            f"/api/campaigns/{campaign.id}",
            json={"name": "General", "description": "Fall", "created_by": admin.id},
        )

        assert response.status_code == 200
        assert response.json()["name"] == "General"
        assert response.json()["created_at"] == campaign.created_at

    @pytest.mark.asyncio
    async def test_get_unknown(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/api/campaigns/nope")

        assert response.status_code == 404


class TestRecordsApi:
    @pytest.mark.asyncio
    async def test_donation_requires_caller_header(
        self,
        async_client: AsyncClient,
        campaign,
        donor,
    ) -> None:
        payload = {"campaign_id": campaign.id, "donor_name": "Bob", "amount": 25}

        anonymous = await async_client.post("/api/donations", json=payload)
        as_donor = await async_client.post(
            "/api/donations", json=payload, headers={"X-Username": donor.username}
        )

        assert anonymous.status_code == 403
        assert _error(anonymous) == {"code": "Unauthorized", "message": "User not found"}
        assert as_donor.status_code == 201
        donation = as_donor.json()
        fetched = await async_client.get(f"/api/donations/{donation['id']}")
        assert fetched.json() == donation

    @pytest.mark.asyncio
    async def test_zero_amount(self, async_client: AsyncClient, campaign, donor) -> None:
        response = await async_client.post(
            "/api/donations",
            json={"campaign_id": campaign.id, "donor_name": "Bob", "amount": 0},
            headers={"X-Username": donor.username},
        )

        assert response.status_code == 400
        assert _error(response)["code"] == "InvalidPayload"

    @pytest.mark.asyncio
    async def test_expense_by_manager_forbidden(
        self,
        async_client: AsyncClient,
        campaign,
        manager,
    ) -> None:
        response = await async_client.post(
            "/api/expenses",
            json={"campaign_id": campaign.id, "description": "Ads", "amount": 10},
            headers={"X-Username": manager.username},
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_outreach_and_messages(
        self,
        async_client: AsyncClient,
        context: ServiceContext,
        campaign,
        donor,
        manager,
    ) -> None:
        headers = {"X-Username": donor.username}

        outreach = await async_client.post(
            "/api/outreach",
            json={
                "campaign_id": campaign.id,
                "activity": "Phone bank",
                "date": "2024-04-01",
                "status": "scheduled",
            },
            headers=headers,
        )
        message = await async_client.post(
            "/api/messages",
            json={"campaign_id": campaign.id, "sender": manager.id, "content": "Thanks!"},
            headers=headers,
        )
        notifications = await async_client.get(f"/api/campaigns/{campaign.id}/notifications")

        assert outreach.status_code == 201
        assert message.status_code == 201
        assert [n["message"] for n in notifications.json()] == [
            "New campaign created.",
            "New voter outreach recorded.",
            "New message sent.",
        ]
        assert len(context.outreach.list_by_campaign(campaign.id)) == 1

    @pytest.mark.asyncio
    async def test_empty_lists_are_not_found(self, async_client: AsyncClient, campaign) -> None:
        for kind in ("donations", "expenses", "outreach", "messages"):
            response = await async_client.get(f"/api/campaigns/{campaign.id}/{kind}")
            assert response.status_code == 404, kind


class TestPayloadBoundaries:
    @pytest.mark.asyncio
    async def test_long_text_fields_accepted(
        self,
        async_client: AsyncClient,
        campaign,
        manager,
        donor,
    ) -> None:
        created = await async_client.post(
            "/api/campaigns",
            json={"name": "N" * 300, "description": "d" * 6000, "created_by": manager.id},
        )
        outreach = await async_client.post(
            "/api/outreach",
            json={
                "campaign_id": campaign.id,
                "activity": "a" * 3000,
                "date": "2" * 65,
                "status": "s" * 65,
            },
            headers={"X-Username": donor.username},
        )

        assert created.status_code == 201
        assert outreach.status_code == 201

    @pytest.mark.asyncio
    async def test_largest_amount_accepted(
        self,
        async_client: AsyncClient,
        campaign,
        donor,
    ) -> None:
        response = await async_client.post(
            "/api/donations",
            json={"campaign_id": campaign.id, "donor_name": "Bob", "amount": 2**64 - 1},
            headers={"X-Username": donor.username},
        )

        assert response.status_code == 201
        assert response.json()["amount"] == 2**64 - 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("amount", [2**64, True, "10", 1.5])
    async def test_amount_outside_u64_rejected(
        self,
        async_client: AsyncClient,
        context: ServiceContext,
        campaign,
        donor,
        admin,
        amount,
    ) -> None:
        donation = await async_client.post(
            "/api/donations",
            json={"campaign_id": campaign.id, "donor_name": "Bob", "amount": amount},
            headers={"X-Username": donor.username},
        )
        expense = await async_client.post(
            "/api/expenses",
            json={"campaign_id": campaign.id, "description": "Ads", "amount": amount},
            headers={"X-Username": admin.username},
        )

        for response in (donation, expense):
            assert response.status_code == 422
            assert _error(response)["code"] == "InvalidPayload"
        assert context.store.values("donations") == []
        assert context.store.values("expenses") == []


def test_caller_header_used_verbatim() -> None:
    assert get_caller_username(" bob") == " bob"
    assert get_caller_username("") is None
    assert get_caller_username(None) is None
