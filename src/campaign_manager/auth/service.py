"""
User registration and lookup.
"""

from campaign_manager.auth.models import UserRole
from campaign_manager.auth.repository import UserRepository
from campaign_manager.auth.schemas import User, UserPayload
from campaign_manager.shared.clock import Clock, IdFactory, new_id, utc_now_iso
from campaign_manager.shared.exceptions import (
    InvalidPayloadError,
    NotFoundError,
    ValidationError,
)
from campaign_manager.shared.logging import get_logger

logger = get_logger(__name__)

# Role queries only ever match these tags; a Donor query finds nobody.
ROLE_QUERY_TAGS = frozenset({UserRole.ADMIN, UserRole.CAMPAIGN_MANAGER})


class UserService:
    """Service for user registration and lookup."""

    def __init__(
        self,
        repository: UserRepository,
        clock: Clock = utc_now_iso,
        id_factory: IdFactory = new_id,
    ) -> None:
        self._repository = repository
        self._clock = clock
        self._id_factory = id_factory

    def create_user(self, payload: UserPayload, owner: str) -> User:
        """Register a new user with zero points.

        Args:
            payload: Requested username and role.
            owner: Identity of the caller registering the user.

        Raises:
            InvalidPayloadError: If role or username is missing.
            ValidationError: If the username is taken.
        """
        if payload.role is None or not payload.username:
            raise InvalidPayloadError("Ensure all required fields are provided")

        if self._repository.get_by_username(payload.username) is not None:
            raise ValidationError(
                f"Username {payload.username} already exists, try another one"
            )

        user = User(
            id=self._id_factory(),
            owner=owner,
            username=payload.username,
            role=payload.role,
            points=0,
            created_at=self._clock(),
        )
        self._repository.insert(user)

        logger.info(
            "User created",
            extra={"user_id": user.id, "username": user.username, "role": user.role.value},
        )
        return user

    def list_users(self) -> list[User]:
        users = self._repository.get_all()
        if not users:
            raise NotFoundError("No users found")
        return users

    def get_user_by_username(self, username: str) -> User:
        user = self._repository.get_by_username(username)
        if user is None:
            raise NotFoundError(f"User with username {username} not found")
        return user

    def get_users_by_role(self, role: UserRole) -> list[User]:
        """Get users holding role.

        Only Admin and CampaignManager are matched; any other role yields
        NotFound.
        """
        users = self._repository.list_by_role(role) if role in ROLE_QUERY_TAGS else []
        if not users:
            raise NotFoundError("No users found with the specified role")
        return users
