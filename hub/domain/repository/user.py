"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from hub.domain.model import User
from hub.domain.value import AcademicLevel, Email, UserId


class UserRepository(ABC):
    """Repository for User entity.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by (lowercased) email.

        Args:
            email: Email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find several users at once (for author details on listings).

        Args:
            user_ids: User IDs; unknown IDs are skipped

        Returns:
            Users found, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def count(
        self,
        is_active: Optional[bool] = None,
        is_email_verified: Optional[bool] = None,
    ) -> int:
        """Count users, optionally filtered by flags.

        Args:
            is_active: Only users with this active flag
            is_email_verified: Only users with this verification flag

        Returns:
            Number of matching users
        """
        pass

    @abstractmethod
    async def find_recent(self, limit: int = 5) -> list[User]:
        """Most recently registered users, newest first.

        Args:
            limit: Maximum number of users to return

        Returns:
            List of users
        """
        pass

    @abstractmethod
    async def count_by_academic_level(self) -> dict[AcademicLevel, int]:
        """Number of users per academic level.

        Returns:
            Mapping of level to count (levels with no users omitted)
        """
        pass
