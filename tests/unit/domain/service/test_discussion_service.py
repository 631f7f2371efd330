"""Unit tests for DiscussionService and ReplyService."""

from uuid import uuid4

import pytest

from hub.domain.error import NotAuthorizedError, ValidationError
from hub.domain.repository import DiscussionRepository
from hub.domain.service import DiscussionService, ReplyService
from hub.domain.value import DiscussionCategory, GroupId, ReactionKind, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

AUTHOR = UserId(uuid4())


class TestDiscussionService:
    """Tests for discussions."""

    @pytest.mark.asyncio
    async def test_create_and_list(self, unit_env):
        """Discussions are listed by category."""
        discussion_service = await unit_env.get(DiscussionService)
        group_id = GroupId(uuid4())
        await discussion_service.create_discussion(
            group_id, AUTHOR, "Welcome", "Say hi", DiscussionCategory.ANNOUNCEMENTS
        )
        await discussion_service.create_discussion(group_id, AUTHOR, "Help", "How?")

        announcements, total = await discussion_service.list_discussions(
            group_id, category=DiscussionCategory.ANNOUNCEMENTS
        )

        assert total == 1
        assert announcements[0].title == "Welcome"
        assert announcements[0].category_display == "Announcements"

    @pytest.mark.asyncio
    async def test_blank_title_rejected(self, unit_env):
        """Title and content are required."""
        discussion_service = await unit_env.get(DiscussionService)

        with pytest.raises(ValidationError, match="Title and content are required"):
            await discussion_service.create_discussion(
                GroupId(uuid4()), AUTHOR, "  ", "Body"
            )

    @pytest.mark.asyncio
    async def test_pinned_first(self, unit_env):
        """Pinned discussions lead the listing."""
        discussion_service = await unit_env.get(DiscussionService)
        discussion_repo = await unit_env.get(DiscussionRepository)
        group_id = GroupId(uuid4())
        rules = await discussion_service.create_discussion(
            group_id, AUTHOR, "Rules", "Be kind"
        )
        await discussion_repo.save(rules.model_copy(update={"is_pinned": True}))
        await discussion_service.create_discussion(group_id, AUTHOR, "Later", "Newer")

        discussions, _ = await discussion_service.list_discussions(group_id)

        assert [d.title for d in discussions] == ["Rules", "Later"]


class TestReplyService:
    """Tests for replies."""

    @pytest.mark.asyncio
    async def test_reply_updates_discussion_activity(self, unit_env):
        """Recording a reply bumps the count and last reply."""
        discussion_service = await unit_env.get(DiscussionService)
        reply_service = await unit_env.get(ReplyService)
        discussion = await discussion_service.create_discussion(
            GroupId(uuid4()), AUTHOR, "Topic", "Body"
        )

        reply = await reply_service.create_reply(discussion, AUTHOR, "First!")
        updated = await discussion_service.record_reply(discussion, reply)

        assert updated.reply_count == 1
        assert updated.last_reply.author_id == AUTHOR
        assert updated.last_activity >= discussion.last_activity

    @pytest.mark.asyncio
    async def test_locked_discussion_refuses_replies(self, unit_env):
        """Nobody can reply to a locked discussion."""
        discussion_service = await unit_env.get(DiscussionService)
        reply_service = await unit_env.get(ReplyService)
        discussion = await discussion_service.create_discussion(
            GroupId(uuid4()), AUTHOR, "Topic", "Body"
        )
        locked = discussion.model_copy(update={"is_locked": True})

        with pytest.raises(NotAuthorizedError, match="locked"):
            await reply_service.create_reply(locked, AUTHOR, "Hello")

    @pytest.mark.asyncio
    async def test_page_boundary_promotes_children(self, unit_env):
        """A reply whose parent is on an earlier page is shown at the top level."""
        discussion_service = await unit_env.get(DiscussionService)
        reply_service = await unit_env.get(ReplyService)
        discussion = await discussion_service.create_discussion(
            GroupId(uuid4()), AUTHOR, "Topic", "Body"
        )
        first = await reply_service.create_reply(discussion, AUTHOR, "Root")
        await reply_service.create_reply(discussion, AUTHOR, "Other")
        child = await reply_service.create_reply(
            discussion, AUTHOR, "Answer", parent_id=first.id
        )

        forest, total = await reply_service.thread_page(discussion.id, limit=1, offset=2)

        assert total == 3
        assert [n.item.id for n in forest] == [child.id]

    @pytest.mark.asyncio
    async def test_reactions_toggle_independently(self, unit_env):
        """Like and helpful are separate toggles."""
        discussion_service = await unit_env.get(DiscussionService)
        reply_service = await unit_env.get(ReplyService)
        discussion = await discussion_service.create_discussion(
            GroupId(uuid4()), AUTHOR, "Topic", "Body"
        )
        reply = await reply_service.create_reply(discussion, AUTHOR, "Useful tip")
        reader = UserId(uuid4())

        reply = await reply_service.toggle_reaction(reply, ReactionKind.LIKE, reader)
        reply = await reply_service.toggle_reaction(reply, ReactionKind.HELPFUL, reader)
        reply = await reply_service.toggle_reaction(reply, ReactionKind.LIKE, reader)

        assert reply.like_count == 0
        assert reply.helpful_count == 1
