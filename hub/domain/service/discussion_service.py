"""Discussion and reply domain services."""

from typing import Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from hub.domain.error import (
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from hub.domain.model import Discussion, Reply
from hub.domain.repository import DiscussionRepository, ReplyRepository
from hub.domain.thread import ThreadNode, build_forest
from hub.domain.value import (
    DiscussionCategory,
    DiscussionId,
    GroupId,
    ReactionKind,
    ReplyId,
    UserId,
)

from .base import Service


class DiscussionService(Service):
    """Domain service for discussion topics."""

    def __init__(self, discussion_repository: DiscussionRepository) -> None:
        """Initialize discussion service.

        Args:
            discussion_repository: Discussion repository
        """
        self.discussion_repository = discussion_repository

    async def get_discussion(self, discussion_id: DiscussionId) -> Discussion:
        """Get a discussion by ID.

        Raises:
            NotFoundError: If discussion not found
        """
        with logfire.span(
            "discussion_service.get_discussion", discussion_id=str(discussion_id)
        ):
            discussion = await self.discussion_repository.find_by_id(discussion_id)
            if not discussion:
                logfire.warn("Discussion not found", discussion_id=str(discussion_id))
                raise NotFoundError("Discussion", str(discussion_id))
            return discussion

    async def list_discussions(
        self,
        group_id: GroupId,
        category: Optional[DiscussionCategory] = None,
        search: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> tuple[list[Discussion], int]:
        """List a group's discussions, pinned first, then most recently active.

        Returns:
            The requested page and the total number of matches
        """
        with logfire.span(
            "discussion_service.list_discussions",
            group_id=str(group_id),
            category=category.value if category else None,
            search=search,
        ):
            discussions = await self.discussion_repository.find_by_group(
                group_id, category=category, search=search, limit=limit, offset=offset
            )
            total = await self.discussion_repository.count_by_group(
                group_id, category=category, search=search
            )
            logfire.info("Discussions listed", count=len(discussions), total=total)
            return discussions, total

    async def create_discussion(
        self,
        group_id: GroupId,
        author_id: UserId,
        title: str,
        content: str,
        category: DiscussionCategory = DiscussionCategory.GENERAL,
        tags: Optional[list[str]] = None,
    ) -> Discussion:
        """Open a discussion in a group.

        Raises:
            ValidationError: If title or content is blank, or a field too long
        """
        with logfire.span(
            "discussion_service.create_discussion",
            group_id=str(group_id),
            author_id=str(author_id),
            category=category.value,
        ):
            title, content = title.strip(), content.strip()
            if not title or not content:
                raise ValidationError("Title and content are required")

            try:
                discussion = Discussion(
                    id=DiscussionId(uuid4()),
                    group_id=group_id,
                    author_id=author_id,
                    title=title,
                    content=content,
                    category=category,
                    tags=tags or [],
                )
            except PydanticValidationError as e:
                raise ValidationError.from_pydantic(e)

            saved = await self.discussion_repository.save(discussion)
            logfire.info("Discussion created", discussion_id=str(saved.id))
            return saved

    async def record_reply(self, discussion: Discussion, reply: Reply) -> Discussion:
        """Update reply count, last activity and last reply."""
        with logfire.span(
            "discussion_service.record_reply", discussion_id=str(discussion.id)
        ):
            return await self.discussion_repository.save(
                discussion.record_reply(reply.author_id, reply.created_at)
            )


class ReplyService(Service):
    """Domain service for replies inside a discussion."""

    def __init__(self, reply_repository: ReplyRepository) -> None:
        """Initialize reply service.

        Args:
            reply_repository: Reply repository
        """
        self.reply_repository = reply_repository

    async def get_reply(self, discussion: Discussion, reply_id: ReplyId) -> Reply:
        """Get a reply that belongs to ``discussion``.

        Raises:
            NotFoundError: If the reply does not exist in this discussion
        """
        with logfire.span("reply_service.get_reply", reply_id=str(reply_id)):
            reply = await self.reply_repository.find_by_id(reply_id)
            if not reply or reply.discussion_id != discussion.id:
                logfire.warn("Reply not found", reply_id=str(reply_id))
                raise NotFoundError("Reply", str(reply_id))
            return reply

    async def thread_page(
        self, discussion_id: DiscussionId, limit: int = 20, offset: int = 0
    ) -> tuple[list[ThreadNode[Reply]], int]:
        """One page of replies, nested under their parents.

        Parents that fall outside the page put their children at the top
        level.

        Returns:
            The reply forest and the total number of replies in the discussion
        """
        with logfire.span(
            "reply_service.thread_page",
            discussion_id=str(discussion_id),
            limit=limit,
            offset=offset,
        ):
            replies = await self.reply_repository.find_by_discussion(
                discussion_id, limit=limit, offset=offset
            )
            total = await self.reply_repository.count_by_discussion(discussion_id)
            forest = build_forest(replies)
            logfire.info(
                "Reply page threaded",
                count=len(replies),
                total=total,
                roots=len(forest),
            )
            return forest, total

    async def create_reply(
        self,
        discussion: Discussion,
        author_id: UserId,
        content: str,
        parent_id: Optional[ReplyId] = None,
    ) -> Reply:
        """Reply to a discussion, or to another reply in it.

        Raises:
            ValidationError: If the content is blank or too long
            NotAuthorizedError: If the discussion is locked
            BusinessRuleViolationError: If the parent is not a reply in this
                discussion
        """
        with logfire.span(
            "reply_service.create_reply",
            discussion_id=str(discussion.id),
            author_id=str(author_id),
            is_nested=parent_id is not None,
        ):
            content = content.strip()
            if not content:
                raise ValidationError("Reply content is required")

            if discussion.is_locked:
                logfire.warn("Reply rejected: locked", discussion_id=str(discussion.id))
                raise NotAuthorizedError("This discussion is locked")

            if parent_id is not None:
                parent = await self.reply_repository.find_by_id(parent_id)
                if not parent or parent.discussion_id != discussion.id:
                    logfire.warn("Parent reply not in discussion", parent_id=str(parent_id))
                    raise BusinessRuleViolationError("Parent reply not found")

            try:
                reply = Reply(
                    id=ReplyId(uuid4()),
                    discussion_id=discussion.id,
                    author_id=author_id,
                    content=content,
                    parent_id=parent_id,
                )
            except PydanticValidationError as e:
                raise ValidationError.from_pydantic(e)

            saved = await self.reply_repository.save(reply)
            logfire.info("Reply created", reply_id=str(saved.id))
            return saved

    async def edit_reply(self, reply: Reply, content: str) -> Reply:
        """Replace a reply's content. Authorship is checked by the caller."""
        with logfire.span("reply_service.edit_reply", reply_id=str(reply.id)):
            content = content.strip()
            if not content:
                raise ValidationError("Reply content is required")
            try:
                edited = Reply.model_validate(
                    reply.edit(content).model_dump(exclude={"like_count", "helpful_count"})
                )
            except PydanticValidationError as e:
                raise ValidationError.from_pydantic(e)

            saved = await self.reply_repository.save(edited)
            logfire.info("Reply edited", reply_id=str(reply.id))
            return saved

    async def toggle_reaction(
        self, reply: Reply, kind: ReactionKind, user_id: UserId
    ) -> Reply:
        """Add the user's reaction of ``kind``, or remove it if present."""
        with logfire.span(
            "reply_service.toggle_reaction", reply_id=str(reply.id), kind=kind.value
        ):
            saved = await self.reply_repository.save(reply.toggle_reaction(kind, user_id))
            logfire.info(
                "Reaction toggled",
                reply_id=str(reply.id),
                likes=saved.like_count,
                helpful=saved.helpful_count,
            )
            return saved
