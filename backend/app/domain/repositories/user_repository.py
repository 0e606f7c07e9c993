"""
User Repository Interface
=========================

Abstract interface for user data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, Optional

from app.domain.models.user import User, UserRole


class UserRepository(ABC):
    """
    Abstract repository for user persistence operations.

    Mutating methods accept an optional transaction ``session`` so they can
    take part in a unit of work opened by a TransactionManager.
    """

    @abstractmethod
    def create(self, user: User, session: Any = None) -> User:
        """
        Create a new user.

        Args:
            user: User entity to create
            session: Optional transaction session

        Returns:
            Created user entity with its id assigned
        """
        pass

    @abstractmethod
    def update(self, user: User, session: Any = None) -> User:
        """
        Update an existing user.

        Raises:
            ValueError: If the user does not exist
        """
        pass

    @abstractmethod
    def find_by_id(self, user_id: str, session: Any = None) -> Optional[User]:
        pass

    @abstractmethod
    def find_by_email(self, email: str, session: Any = None) -> Optional[User]:
        pass

    @abstractmethod
    def find_by_email_or_phone(
        self,
        email: str,
        phone: Optional[str],
        session: Any = None,
    ) -> Optional[User]:
        """Find any user owning either the email or the phone number."""
        pass

    @abstractmethod
    def find_many_by_ids(self, user_ids: Iterable[str]) -> Dict[str, User]:
        """
        Resolve several users at once.

        Returns:
            Mapping of user id to user; unknown ids are absent
        """
        pass

    @abstractmethod
    def delete(self, user_id: str, session: Any = None) -> bool:
        """
        Delete a user account.

        Returns:
            True if a user was deleted, False otherwise
        """
        pass

    @abstractmethod
    def count_active_by_role(self, role: UserRole) -> int:
        """Count non-suspended users holding ``role``."""
        pass
