"""Delete paper use case."""

import logfire
from pydantic import BaseModel

from hub.application.usecase.paper.common import load_paper
from hub.domain.access import Capability, require_access
from hub.domain.service import CommentService, GroupService, PaperService
from hub.domain.value import UserId, parse_id


class DeletePaperRequest(BaseModel):
    """Delete paper request."""

    paper_id: str
    user_id: str


class DeletePaperUseCase:
    """Use case for removing a paper, its file and its comments."""

    def __init__(
        self,
        group_service: GroupService,
        paper_service: PaperService,
        comment_service: CommentService,
    ) -> None:
        """Initialize delete paper use case.

        Args:
            group_service: Group domain service
            paper_service: Paper domain service
            comment_service: Comment service, to drop the paper's comments
        """
        self.group_service = group_service
        self.paper_service = paper_service
        self.comment_service = comment_service

    async def execute(self, request: DeletePaperRequest) -> None:
        """Execute delete paper flow.

        Raises:
            NotFoundError: If the paper does not exist
            NotAuthorizedError: If the caller is neither the uploader nor the
                group owner
        """
        with logfire.span("delete_paper.execute", paper_id=request.paper_id):
            paper, group = await load_paper(
                self.paper_service, self.group_service, request.paper_id
            )
            actor_id = UserId(parse_id(request.user_id))
            require_access(actor_id, paper, Capability.DELETE_PAPER, group=group)

            await self.comment_service.delete_for_paper(paper.id)
            await self.paper_service.delete(paper)
