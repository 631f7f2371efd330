"""Toggle reply reaction use case."""

import logfire
from pydantic import BaseModel

from hub.application.usecase.discussion.common import load_for_member
from hub.domain.service import DiscussionService, GroupService, ReplyService
from hub.domain.value import ReactionKind, ReplyId, UserId, parse_id


class ReactToReplyRequest(BaseModel):
    """Toggle reaction request."""

    discussion_id: str
    reply_id: str
    user_id: str
    kind: ReactionKind


class ReactToReplyResponse(BaseModel):
    """Reaction counts after the toggle."""

    reply_id: str
    kind: ReactionKind
    active: bool
    like_count: int
    helpful_count: int


class ReactToReplyUseCase:
    """Use case for toggling a like or helpful reaction on a reply."""

    def __init__(
        self,
        discussion_service: DiscussionService,
        reply_service: ReplyService,
        group_service: GroupService,
    ) -> None:
        """Initialize react to reply use case.

        Args:
            discussion_service: Discussion domain service
            reply_service: Reply domain service
            group_service: Group service for the membership check
        """
        self.discussion_service = discussion_service
        self.reply_service = reply_service
        self.group_service = group_service

    async def execute(self, request: ReactToReplyRequest) -> ReactToReplyResponse:
        """Add the caller's reaction, or remove it if already given.

        Raises:
            NotFoundError: If the reply is not in this discussion
            NotAuthorizedError: If the caller is not a member
        """
        with logfire.span(
            "react_to_reply.execute", reply_id=request.reply_id, kind=request.kind.value
        ):
            actor_id = UserId(parse_id(request.user_id))
            discussion, _ = await load_for_member(
                self.discussion_service,
                self.group_service,
                request.discussion_id,
                actor_id,
            )
            reply = await self.reply_service.get_reply(
                discussion, ReplyId(parse_id(request.reply_id))
            )

            updated = await self.reply_service.toggle_reaction(
                reply, request.kind, actor_id
            )
            reactors = (
                updated.likes if request.kind == ReactionKind.LIKE else updated.helpful
            )
            return ReactToReplyResponse(
                reply_id=str(updated.id),
                kind=request.kind,
                active=actor_id in reactors,
                like_count=updated.like_count,
                helpful_count=updated.helpful_count,
            )
