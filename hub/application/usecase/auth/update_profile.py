"""Update profile use case."""

from typing import Optional

import logfire
from pydantic import Field

from hub.application.usecase.auth.profile import ProfileInput
from hub.application.usecase.views import UserView
from hub.domain.service import UserService
from hub.domain.value import AcademicLevel, UserId, parse_id


class UpdateProfileRequest(ProfileInput):
    """Profile changes. Only the fields sent are changed."""

    first_name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    institution: Optional[str] = Field(default=None, min_length=1, max_length=100)
    field_of_study: Optional[str] = Field(default=None, min_length=1, max_length=100)
    academic_level: Optional[AcademicLevel] = None


class UpdateProfileUseCase:
    """Use case for changing the caller's profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, user_id: str, request: UpdateProfileRequest) -> UserView:
        """Apply the sent fields to the profile.

        Args:
            user_id: Authenticated user
            request: Fields to change

        Returns:
            Updated profile

        Raises:
            ValidationError: If a new value is invalid
        """
        with logfire.span("update_profile.execute", user_id=user_id):
            user = await self.user_service.update_profile(
                UserId(parse_id(user_id)), request.profile_changes()
            )
            return UserView.from_user(user)
