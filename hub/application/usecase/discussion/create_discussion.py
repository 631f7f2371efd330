"""Create discussion use case."""

import logfire
from pydantic import BaseModel, Field

from hub.application.usecase.views import DiscussionView
from hub.domain.access import Capability, require_access
from hub.domain.service import DiscussionService, GroupService, UserService
from hub.domain.value import DiscussionCategory, GroupId, UserId, parse_id


class CreateDiscussionRequest(BaseModel):
    """Create discussion request."""

    group_id: str
    user_id: str  # Author, from the authenticated user
    title: str = Field(max_length=200)
    content: str = Field(max_length=5000)
    category: DiscussionCategory = DiscussionCategory.GENERAL
    tags: list[str] = Field(default_factory=list)


class CreateDiscussionUseCase:
    """Use case for opening a discussion in a group."""

    def __init__(
        self,
        group_service: GroupService,
        discussion_service: DiscussionService,
        user_service: UserService,
    ) -> None:
        """Initialize create discussion use case.

        Args:
            group_service: Group domain service
            discussion_service: Discussion domain service
            user_service: User service for the author profile
        """
        self.group_service = group_service
        self.discussion_service = discussion_service
        self.user_service = user_service

    async def execute(self, request: CreateDiscussionRequest) -> DiscussionView:
        """Execute create discussion flow.

        Raises:
            NotAuthorizedError: If the caller is not a member
            ValidationError: If title or content is blank
        """
        with logfire.span("create_discussion.execute", group_id=request.group_id):
            group_id = GroupId(parse_id(request.group_id))
            group = await self.group_service.get_group(group_id)
            author_id = UserId(parse_id(request.user_id))
            require_access(author_id, group, Capability.CONTRIBUTE)

            discussion = await self.discussion_service.create_discussion(
                group_id=group.id,
                author_id=author_id,
                title=request.title,
                content=request.content,
                category=request.category,
                tags=request.tags,
            )
            authors = await self.user_service.get_many([author_id])
            return DiscussionView.from_discussion(discussion, authors)
