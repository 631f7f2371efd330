"""Edit reply use case."""

import logfire
from pydantic import BaseModel, Field

from hub.application.usecase.discussion.common import load_for_member
from hub.application.usecase.views import ReplyNode
from hub.domain.access import Capability, require_access
from hub.domain.service import (
    DiscussionService,
    GroupService,
    ReplyService,
    UserService,
)
from hub.domain.value import ReplyId, UserId, parse_id


class EditReplyRequest(BaseModel):
    """Edit reply request."""

    discussion_id: str
    reply_id: str
    user_id: str
    content: str = Field(max_length=3000)


class EditReplyUseCase:
    """Use case for an author editing their reply."""

    def __init__(
        self,
        discussion_service: DiscussionService,
        reply_service: ReplyService,
        group_service: GroupService,
        user_service: UserService,
    ) -> None:
        """Initialize edit reply use case.

        Args:
            discussion_service: Discussion domain service
            reply_service: Reply domain service
            group_service: Group service for the membership check
            user_service: User service for the author profile
        """
        self.discussion_service = discussion_service
        self.reply_service = reply_service
        self.group_service = group_service
        self.user_service = user_service

    async def execute(self, request: EditReplyRequest) -> ReplyNode:
        """Replace the reply's content and mark it edited.

        Raises:
            NotFoundError: If the reply is not in this discussion
            NotAuthorizedError: If the caller did not write the reply
        """
        with logfire.span("edit_reply.execute", reply_id=request.reply_id):
            actor_id = UserId(parse_id(request.user_id))
            discussion, group = await load_for_member(
                self.discussion_service,
                self.group_service,
                request.discussion_id,
                actor_id,
            )
            reply = await self.reply_service.get_reply(
                discussion, ReplyId(parse_id(request.reply_id))
            )
            require_access(actor_id, reply, Capability.EDIT_ITEM, group=group)

            edited = await self.reply_service.edit_reply(reply, request.content)
            authors = await self.user_service.get_many([edited.author_id])
            return ReplyNode.from_reply(edited, authors)
