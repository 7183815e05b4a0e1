"""
User repository.
"""

from campaign_manager.auth.models import UserRole
from campaign_manager.auth.schemas import User
from campaign_manager.shared.repository import EntityRepository


class UserRepository(EntityRepository[User]):
    """Repository for user records."""

    namespace = "users"
    model = User

    def get_by_username(self, username: str) -> User | None:
        """Get a user by username (linear scan).

        Args:
            username: Username to search.

        Returns:
            User if found, None otherwise.
        """
        return self.find_first(lambda u: u.username == username)

    def list_by_role(self, role: UserRole) -> list[User]:
        """Get all users holding exactly this role."""
        return self.filter(lambda u: u.role == role)
