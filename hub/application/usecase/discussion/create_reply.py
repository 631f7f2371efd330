"""Create reply use case."""

import logfire
from pydantic import BaseModel, Field

from hub.application.usecase.discussion.common import load_for_member
from hub.application.usecase.views import ReplyNode
from hub.domain.service import (
    DiscussionService,
    GroupService,
    ReplyService,
    UserService,
)
from hub.domain.value import ReplyId, UserId, parse_id


class CreateReplyRequest(BaseModel):
    """Create reply request."""

    discussion_id: str
    user_id: str  # Author, from the authenticated user
    content: str = Field(max_length=3000)
    parent_reply_id: str | None = None


class CreateReplyUseCase:
    """Use case for replying in a discussion."""

    def __init__(
        self,
        discussion_service: DiscussionService,
        reply_service: ReplyService,
        group_service: GroupService,
        user_service: UserService,
    ) -> None:
        """Initialize create reply use case.

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

    async def execute(self, request: CreateReplyRequest) -> ReplyNode:
        """Execute create reply flow.

        Steps:
        1. Check membership of the discussion's group
        2. Create the reply (locked discussions and foreign parents rejected)
        3. Update the discussion's reply count and last activity

        Raises:
            NotAuthorizedError: If the caller is not a member or the
                discussion is locked
            BusinessRuleViolationError: If the parent reply is not in this
                discussion
        """
        with logfire.span(
            "create_reply.execute", discussion_id=request.discussion_id
        ):
            author_id = UserId(parse_id(request.user_id))
            discussion, _ = await load_for_member(
                self.discussion_service,
                self.group_service,
                request.discussion_id,
                author_id,
            )

            parent_id = (
                ReplyId(parse_id(request.parent_reply_id))
                if request.parent_reply_id
                else None
            )
            reply = await self.reply_service.create_reply(
                discussion, author_id, request.content, parent_id=parent_id
            )
            await self.discussion_service.record_reply(discussion, reply)

            authors = await self.user_service.get_many([author_id])
            return ReplyNode.from_reply(reply, authors)
