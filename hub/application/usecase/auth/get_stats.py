"""User statistics use case (admins only)."""

import logfire
from pydantic import BaseModel

from hub.application.usecase.views import UserView
from hub.domain.error import NotAuthorizedError
from hub.domain.service import UserService
from hub.domain.value import AcademicLevel, UserId, parse_id


class GetStatsRequest(BaseModel):
    """Get stats request."""

    user_id: str


class GetStatsResponse(BaseModel):
    """Platform-wide user statistics."""

    total_users: int
    verified_users: int
    active_users: int
    recent_users: list[UserView]
    academic_levels: dict[AcademicLevel, int]


class GetStatsUseCase:
    """Use case for the admin statistics page."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get stats use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetStatsRequest) -> GetStatsResponse:
        """Collect statistics for an admin.

        Raises:
            NotAuthorizedError: If the caller is not an admin
        """
        with logfire.span("get_stats.execute", user_id=request.user_id):
            user = await self.user_service.get_by_id(UserId(parse_id(request.user_id)))
            if not user.is_admin:
                logfire.warn("Stats denied to non-admin", user_id=request.user_id)
                raise NotAuthorizedError("Access denied. Admin privileges required.")

            stats = await self.user_service.get_stats()
            return GetStatsResponse(
                total_users=stats.total_users,
                verified_users=stats.verified_users,
                active_users=stats.active_users,
                recent_users=[UserView.from_user(u) for u in stats.recent_users],
                academic_levels=stats.academic_levels,
            )
