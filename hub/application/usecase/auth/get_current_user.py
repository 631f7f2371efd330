"""Get current user use case."""

from pydantic import BaseModel

from hub.application.usecase.views import UserView
from hub.domain.service import UserService
from hub.domain.value import UserId, parse_id


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: str


class GetCurrentUserUseCase:
    """Use case for reading the caller's own profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> UserView:
        user = await self.user_service.get_by_id(UserId(parse_id(request.user_id)))
        return UserView.from_user(user)
