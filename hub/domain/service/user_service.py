"""User domain service."""

import asyncio
from typing import Any, Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from hub.config import AuthSettings
from hub.domain.error import (
    AuthenticationError,
    BusinessRuleViolationError,
    NotFoundError,
    ValidationError,
)
from hub.domain.model import User, utcnow
from hub.domain.repository import UserRepository
from hub.domain.value import AcademicLevel, Email, UserId
from hub.domain.value.common import ValueObject
from hub.util.password import check_password, hash_password, verify_password

from .base import Service

INVALID_CREDENTIALS = "Invalid email or password"

# Fields a user may change through the profile endpoint
PROFILE_FIELDS = frozenset(
    {
        "first_name",
        "last_name",
        "bio",
        "phone",
        "institution",
        "department",
        "field_of_study",
        "academic_level",
        "graduation_year",
        "research_interests",
        "skills",
        "social_links",
        "preferences",
        "avatar",
    }
)


class UserStats(ValueObject):
    """Platform-wide user statistics."""

    total_users: int
    verified_users: int
    active_users: int
    recent_users: list[User]
    academic_levels: dict[AcademicLevel, int]


def _parse_email(email: str) -> Email:
    try:
        return Email(email)
    except PydanticValidationError:
        raise ValidationError(
            "Validation failed", ["Please enter a valid email address"]
        )


class UserService(Service):
    """Domain service for user accounts and credentials."""

    def __init__(self, user_repository: UserRepository, auth_settings: AuthSettings) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings (bcrypt cost)
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    async def _hash(self, password: str) -> str:
        # bcrypt is CPU-bound; keep it off the event loop
        return await asyncio.to_thread(
            hash_password, password, self.auth_settings.bcrypt_rounds
        )

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email, or None if the address is unknown or malformed."""
        with logfire.span("user_service.find_by_email"):
            try:
                parsed = Email(email)
            except PydanticValidationError:
                return None
            return await self.user_repository.find_by_email(parsed)

    async def get_many(self, user_ids: list[UserId]) -> dict[UserId, User]:
        """Load several users keyed by ID. Unknown IDs are left out."""
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}
        with logfire.span("user_service.get_many", count=len(unique_ids)):
            users = await self.user_repository.find_by_ids(unique_ids)
            return {user.id: user for user in users}

    async def register(
        self,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
        institution: str,
        field_of_study: str,
        academic_level: AcademicLevel,
        **profile: Any,
    ) -> User:
        """Create a new account.

        Args:
            email: Email address (stored lowercased)
            password: Plain text password, checked against the policy
            first_name: First name
            last_name: Last name
            institution: Institution
            field_of_study: Field of study
            academic_level: Academic level
            **profile: Optional profile fields (department, bio, ...)

        Returns:
            Created user

        Raises:
            ValidationError: If the password or any field fails validation
            BusinessRuleViolationError: If the email is already registered
        """
        with logfire.span("user_service.register", academic_level=academic_level.value):
            parsed_email = _parse_email(email)

            check = check_password(password)
            if not check.is_valid:
                logfire.warn("Registration rejected: weak password", strength=check.strength)
                raise ValidationError("Password does not meet requirements", check.errors)

            existing = await self.user_repository.find_by_email(parsed_email)
            if existing:
                logfire.warn("Registration rejected: email in use")
                raise BusinessRuleViolationError(
                    "An account with this email already exists"
                )

            unknown = set(profile) - PROFILE_FIELDS
            if unknown:
                raise ValidationError(
                    "Validation failed", [f"Unknown field: {name}" for name in sorted(unknown)]
                )

            try:
                user = User(
                    id=UserId(uuid4()),
                    email=parsed_email,
                    password_hash=await self._hash(password),
                    first_name=first_name.strip(),
                    last_name=last_name.strip(),
                    institution=institution.strip(),
                    field_of_study=field_of_study.strip(),
                    academic_level=academic_level,
                    **profile,
                )
            except PydanticValidationError as e:
                raise ValidationError.from_pydantic(e)

            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def authenticate(self, email: str, password: str) -> User:
        """Check credentials and record the login.

        Args:
            email: Email address
            password: Plain text password

        Returns:
            The user, with login count and timestamp updated

        Raises:
            AuthenticationError: If credentials are wrong or the account is
                deactivated
        """
        with logfire.span("user_service.authenticate"):
            user = await self.find_by_email(email)
            if user is None:
                logfire.warn("Login failed: unknown email")
                raise AuthenticationError(INVALID_CREDENTIALS)

            if not user.is_active:
                logfire.warn("Login failed: account deactivated", user_id=str(user.id))
                raise AuthenticationError(
                    "Account has been deactivated. Please contact support."
                )

            matches = await asyncio.to_thread(
                verify_password, password, user.password_hash
            )
            if not matches:
                logfire.warn("Login failed: wrong password", user_id=str(user.id))
                raise AuthenticationError(INVALID_CREDENTIALS)

            saved = await self.user_repository.save(user.record_login())
            logfire.info("User logged in", user_id=str(user.id), login_count=saved.login_count)
            return saved

    async def update_profile(self, user_id: UserId, changes: dict[str, Any]) -> User:
        """Apply allow-listed profile changes.

        Fields outside the allow list are ignored.

        Args:
            user_id: User ID
            changes: Field name to new value

        Returns:
            Updated user

        Raises:
            NotFoundError: If user not found
            ValidationError: If a new value is invalid
        """
        with logfire.span("user_service.update_profile", user_id=str(user_id)):
            user = await self.get_by_id(user_id)
            allowed = {k: v for k, v in changes.items() if k in PROFILE_FIELDS}
            ignored = sorted(set(changes) - PROFILE_FIELDS)
            if ignored:
                logfire.warn("Ignoring non-profile fields", fields=ignored)

            data = user.model_dump(exclude={"full_name", "profile_completion"})
            data.update(allowed, updated_at=utcnow())
            try:
                updated = User.model_validate(data)
            except PydanticValidationError as e:
                raise ValidationError.from_pydantic(e)

            saved = await self.user_repository.save(updated)
            logfire.info("Profile updated", user_id=str(user_id), fields=sorted(allowed))
            return saved

    async def change_password(
        self, user_id: UserId, current_password: str, new_password: str
    ) -> User:
        """Replace a user's password after checking the current one.

        Raises:
            NotFoundError: If user not found
            AuthenticationError: If the current password is wrong
            ValidationError: If the new password fails the policy or equals
                the current one
        """
        with logfire.span("user_service.change_password", user_id=str(user_id)):
            user = await self.get_by_id(user_id)

            matches = await asyncio.to_thread(
                verify_password, current_password, user.password_hash
            )
            if not matches:
                logfire.warn("Password change rejected: wrong current password")
                raise AuthenticationError("Current password is incorrect")

            if new_password == current_password:
                raise ValidationError(
                    "Validation failed",
                    ["New password must be different from current password"],
                )

            check = check_password(new_password)
            if not check.is_valid:
                raise ValidationError("Password does not meet requirements", check.errors)

            updated = user.model_copy(
                update={
                    "password_hash": await self._hash(new_password),
                    "updated_at": utcnow(),
                }
            )
            saved = await self.user_repository.save(updated)
            logfire.info("Password changed", user_id=str(user_id))
            return saved

    async def get_stats(self) -> UserStats:
        """Collect platform-wide user statistics."""
        with logfire.span("user_service.get_stats"):
            stats = UserStats(
                total_users=await self.user_repository.count(),
                verified_users=await self.user_repository.count(is_email_verified=True),
                active_users=await self.user_repository.count(is_active=True),
                recent_users=await self.user_repository.find_recent(limit=5),
                academic_levels=await self.user_repository.count_by_academic_level(),
            )
            logfire.info("User stats computed", total_users=stats.total_users)
            return stats
