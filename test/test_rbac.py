"""
Tests for role-based access control.
"""

import logging

import pytest

from campaign_manager.auth.models import UserRole
from campaign_manager.auth.rbac import AccessControl, RolePermissions
from campaign_manager.auth.repository import UserRepository
from campaign_manager.auth.schemas import User
from campaign_manager.shared.exceptions import ErrorCode, NotFoundError, UnauthorizedError
from campaign_manager.shared.store import InMemoryKeyValueStore


class TestRolePermissions:
    @pytest.mark.parametrize(
        ("permission_set", "allowed"),
        [
            (RolePermissions.CAMPAIGN_CREATE, {UserRole.ADMIN, UserRole.CAMPAIGN_MANAGER}),
            (RolePermissions.CAMPAIGN_UPDATE, {UserRole.ADMIN, UserRole.CAMPAIGN_MANAGER}),
            (RolePermissions.DONATION_CREATE, {UserRole.DONOR}),
            (RolePermissions.EXPENSE_CREATE, {UserRole.ADMIN}),
            (RolePermissions.OUTREACH_CREATE, set(UserRole)),
            (RolePermissions.MESSAGE_CREATE, set(UserRole)),
        ],
    )
    def test_permission_sets(self, permission_set, allowed) -> None:
        for role in UserRole:
            assert RolePermissions.can_perform(role, permission_set) is (role in allowed)


class TestAccessControl:
    @pytest.fixture
    def users(self) -> UserRepository:
        repository = UserRepository(InMemoryKeyValueStore())
        repository.insert(
            User(
                id="u-donor",
                owner="p",
                username="bob",
                role=UserRole.DONOR,
                created_at="2024-01-01T00:00:00.000Z",
            )
        )
        return repository

    @pytest.fixture
    def access(self, users: UserRepository) -> AccessControl:
        return AccessControl(users)

    def test_resolve_caller(self, access: AccessControl) -> None:
        assert access.resolve_caller("bob", operation="test").id == "u-donor"

    @pytest.mark.parametrize("username", ["nobody", "", None])
    def test_resolve_unknown_caller_is_unauthorized(self, access: AccessControl, username) -> None:
        with pytest.raises(UnauthorizedError) as exc_info:
            access.resolve_caller(username, operation="test", missing_message="Invalid credentials")

        assert exc_info.value.code is ErrorCode.UNAUTHORIZED
        assert exc_info.value.message == "Invalid credentials"

    def test_resolve_user_id_not_found(self, access: AccessControl) -> None:
        with pytest.raises(NotFoundError, match="User with ID ghost not found"):
            access.resolve_user_id("ghost")

    def test_require_denies_and_logs(
        self,
        access: AccessControl,
        users: UserRepository,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        donor = users.get("u-donor")

        with caplog.at_level(logging.WARNING, logger="campaign_manager.auth.rbac"):
            with pytest.raises(UnauthorizedError, match="Only admins"):
                access.require(
                    donor,
                    RolePermissions.EXPENSE_CREATE,
                    operation="create_expense",
                    message="Only admins can create expenses",
                )

        record = next(r for r in caplog.records if r.message == "Access denied")
        assert record.operation == "create_expense"
        assert record.user_role == "Donor"

    def test_require_allows(self, access: AccessControl, users: UserRepository) -> None:
        donor = users.get("u-donor")

        assert access.require(donor, RolePermissions.DONATION_CREATE, "create_donation", "x") is donor
