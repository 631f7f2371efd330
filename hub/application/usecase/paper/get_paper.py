"""Get paper use case."""

import logfire
from pydantic import BaseModel

from hub.application.usecase.paper.common import load_paper
from hub.application.usecase.views import PaperView
from hub.domain.access import Capability, require_access
from hub.domain.service import GroupService, PaperService, UserService
from hub.domain.value import UserId, parse_id


class GetPaperRequest(BaseModel):
    """Get paper request."""

    paper_id: str
    user_id: str | None = None  # Current user ID (if authenticated)


class GetPaperUseCase:
    """Use case for reading a paper's details."""

    def __init__(
        self,
        group_service: GroupService,
        paper_service: PaperService,
        user_service: UserService,
    ) -> None:
        """Initialize get paper use case.

        Args:
            group_service: Group domain service
            paper_service: Paper domain service
            user_service: User service for the uploader profile
        """
        self.group_service = group_service
        self.paper_service = paper_service
        self.user_service = user_service

    async def execute(self, request: GetPaperRequest) -> PaperView:
        """Return the paper and count the view.

        Raises:
            NotFoundError: If the paper does not exist
            NotAuthorizedError: If the paper is private and the caller is
                not a member of its group
        """
        with logfire.span("get_paper.execute", paper_id=request.paper_id):
            paper, group = await load_paper(
                self.paper_service, self.group_service, request.paper_id
            )
            actor_id = UserId(parse_id(request.user_id)) if request.user_id else None
            require_access(actor_id, paper, Capability.VIEW_PAPER, group=group)

            viewed = await self.paper_service.record_view(paper)
            uploaders = await self.user_service.get_many([paper.uploaded_by])
            return PaperView.from_paper(viewed, uploaders)
