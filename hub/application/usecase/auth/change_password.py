"""Change password use case."""

import logfire
from pydantic import BaseModel, model_validator

from hub.domain.service import UserService
from hub.domain.value import UserId, parse_id


class ChangePasswordRequest(BaseModel):
    """Change password request."""

    user_id: str
    current_password: str
    new_password: str
    confirm_password: str

    @model_validator(mode="after")
    def passwords_match(self) -> "ChangePasswordRequest":
        """The confirmation must repeat the new password."""
        if self.new_password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self


class ChangePasswordUseCase:
    """Use case for replacing the caller's password."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize change password use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: ChangePasswordRequest) -> None:
        """Check the current password and store the new one.

        Raises:
            AuthenticationError: If the current password is wrong
            ValidationError: If the new password fails the policy
        """
        with logfire.span("change_password.execute", user_id=request.user_id):
            await self.user_service.change_password(
                UserId(parse_id(request.user_id)),
                request.current_password,
                request.new_password,
            )
