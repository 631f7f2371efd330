"""In-memory user repository for testing."""

from collections import Counter
from typing import Optional

from sqlalchemy.exc import IntegrityError

from hub.domain.model import User
from hub.domain.repository import UserRepository
from hub.domain.value import AcademicLevel, Email, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find several users."""
        return [self._users[uid] for uid in set(user_ids) if uid in self._users]

    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Raises:
            IntegrityError: If another user already has this email
        """
        existing = await self.find_by_email(user.email)
        if existing and existing.id != user.id:
            raise IntegrityError("Duplicate email", None, Exception())
        self._users[user.id] = user
        return user

    async def count(
        self,
        is_active: Optional[bool] = None,
        is_email_verified: Optional[bool] = None,
    ) -> int:
        """Count users, optionally filtered by flags."""
        return sum(
            1
            for user in self._users.values()
            if (is_active is None or user.is_active == is_active)
            and (
                is_email_verified is None
                or user.is_email_verified == is_email_verified
            )
        )

    async def find_recent(self, limit: int = 5) -> list[User]:
        """Most recently registered users."""
        users = sorted(self._users.values(), key=lambda u: u.created_at, reverse=True)
        return users[:limit]

    async def count_by_academic_level(self) -> dict[AcademicLevel, int]:
        """Number of users per academic level."""
        return dict(Counter(user.academic_level for user in self._users.values()))
