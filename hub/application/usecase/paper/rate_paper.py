"""Rate paper use case."""

import logfire
from pydantic import BaseModel, Field

from hub.application.usecase.paper.common import load_paper
from hub.application.usecase.views import PaperView
from hub.domain.access import Capability, require_access
from hub.domain.service import GroupService, PaperService, UserService
from hub.domain.value import UserId, parse_id


class RatePaperRequest(BaseModel):
    """Rate paper request."""

    paper_id: str
    user_id: str
    rating: int = Field(ge=1, le=5)
    review: str | None = Field(default=None, max_length=300)


class RatePaperUseCase:
    """Use case for rating a paper. A second rating replaces the first."""

    def __init__(
        self,
        group_service: GroupService,
        paper_service: PaperService,
        user_service: UserService,
    ) -> None:
        """Initialize rate paper use case.

        Args:
            group_service: Group domain service
            paper_service: Paper domain service
            user_service: User service for the uploader profile
        """
        self.group_service = group_service
        self.paper_service = paper_service
        self.user_service = user_service

    async def execute(self, request: RatePaperRequest) -> PaperView:
        """Record the caller's rating.

        Raises:
            NotAuthorizedError: If the caller is not a member of the group
        """
        with logfire.span("rate_paper.execute", paper_id=request.paper_id):
            paper, group = await load_paper(
                self.paper_service, self.group_service, request.paper_id
            )
            actor_id = UserId(parse_id(request.user_id))
            require_access(actor_id, group, Capability.CONTRIBUTE)

            rated = await self.paper_service.rate(
                paper, actor_id, request.rating, request.review
            )
            uploaders = await self.user_service.get_many([rated.uploaded_by])
            return PaperView.from_paper(rated, uploaders)
