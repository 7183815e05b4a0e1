"""
Role-based access control for record mutations.

Each create/update operation names the set of roles allowed to perform it.
The sets differ per entity kind and are not derived from a hierarchy.
"""

from campaign_manager.auth.models import UserRole
from campaign_manager.auth.repository import UserRepository
from campaign_manager.auth.schemas import User
from campaign_manager.shared.exceptions import NotFoundError, UnauthorizedError
from campaign_manager.shared.logging import get_logger

logger = get_logger(__name__)


class RolePermissions:
    """Roles allowed to perform each operation."""

    CAMPAIGN_CREATE = frozenset({UserRole.ADMIN, UserRole.CAMPAIGN_MANAGER})
    CAMPAIGN_UPDATE = frozenset({UserRole.ADMIN, UserRole.CAMPAIGN_MANAGER})

    DONATION_CREATE = frozenset({UserRole.DONOR})
    EXPENSE_CREATE = frozenset({UserRole.ADMIN})

    # Any registered user
    OUTREACH_CREATE = frozenset(UserRole)
    MESSAGE_CREATE = frozenset(UserRole)

    @classmethod
    def can_perform(cls, user_role: UserRole, permission_set: frozenset[UserRole]) -> bool:
        """Check if a user role can perform an operation.

        Args:
            user_role: User's role.
            permission_set: Set of roles allowed for the operation.

        Returns:
            True if user's role is in the permission set.
        """
        return user_role in permission_set


def log_access_denied(
    operation: str,
    reason: str,
    username: str | None = None,
    user_id: str | None = None,
    user_role: str | None = None,
) -> None:
    """Log an access denied event."""
    logger.warning(
        "Access denied",
        extra={
            "operation": operation,
            "reason": reason,
            "username": username,
            "user_id": user_id,
            "user_role": user_role,
            "event_type": "access_denied",
        },
    )


class AccessControl:
    """Resolves callers and checks their role for an operation."""

    def __init__(self, users: UserRepository) -> None:
        self._users = users

    def resolve_caller(
        self,
        username: str | None,
        operation: str,
        missing_message: str = "User not found",
    ) -> User:
        """Resolve the calling user by username.

        Raises:
            UnauthorizedError: If no user has this username.
        """
        user = self._users.get_by_username(username) if username else None
        if user is None:
            log_access_denied(operation, "unknown_caller", username=username)
            raise UnauthorizedError(missing_message)
        return user

    def resolve_user_id(self, user_id: str) -> User:
        """Resolve a referenced user by ID.

        Raises:
            NotFoundError: If no user has this ID.
        """
        user = self._users.get(user_id)
        if user is None:
            raise NotFoundError(f"User with ID {user_id} not found")
        return user

    def require(
        self,
        user: User,
        permission_set: frozenset[UserRole],
        operation: str,
        message: str,
    ) -> User:
        """Ensure user's role is allowed for the operation.

        Raises:
            UnauthorizedError: If the role is not in permission_set.
        """
        if not RolePermissions.can_perform(user.role, permission_set):
            log_access_denied(
                operation,
                "insufficient_role",
                username=user.username,
                user_id=user.id,
                user_role=user.role.value,
            )
            raise UnauthorizedError(message)

        logger.debug(
            "Access granted",
            extra={"operation": operation, "user_id": user.id},
        )
        return user
