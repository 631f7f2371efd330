"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from hub.domain.error import BusinessRuleViolationError, ValidationError
from hub.domain.model import Paper
from hub.domain.service import CommentService
from hub.domain.value import CommentId, GroupId, PaperId, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

AUTHOR = UserId(uuid4())


def make_paper() -> Paper:
    return Paper(
        id=PaperId(uuid4()),
        title="Spiking networks",
        file_name="paper-1.pdf",
        original_file_name="spiking.pdf",
        file_path="uploads/papers/paper-1.pdf",
        file_size=10,
        mime_type="application/pdf",
        group_id=GroupId(uuid4()),
        uploaded_by=AUTHOR,
    )


class TestCommentService:
    """Tests for adding, threading, editing and liking comments."""

    @pytest.mark.asyncio
    async def test_reply_nests_under_parent(self, unit_env):
        """Replies appear under the comment they answer."""
        comment_service = await unit_env.get(CommentService)
        paper = make_paper()

        parent = await comment_service.add_comment(paper, AUTHOR, "Great paper")
        reply = await comment_service.add_comment(
            paper, AUTHOR, "Agreed", parent_id=parent.id
        )

        forest, total = await comment_service.thread_for_paper(paper.id)

        assert total == 2
        assert len(forest) == 1
        assert forest[0].item.id == parent.id
        assert [n.item.id for n in forest[0].children] == [reply.id]

    @pytest.mark.asyncio
    async def test_deleting_parent_promotes_replies(self, unit_env):
        """Replies to a deleted comment move to the top level."""
        comment_service = await unit_env.get(CommentService)
        paper = make_paper()
        parent = await comment_service.add_comment(paper, AUTHOR, "Great paper")
        reply = await comment_service.add_comment(
            paper, AUTHOR, "Agreed", parent_id=parent.id
        )

        await comment_service.delete_comment(parent)
        forest, total = await comment_service.thread_for_paper(paper.id)

        assert total == 1
        assert [n.item.id for n in forest] == [reply.id]

    @pytest.mark.asyncio
    async def test_parent_must_be_on_same_paper(self, unit_env):
        """A reply cannot point at a comment on another paper."""
        comment_service = await unit_env.get(CommentService)
        other = await comment_service.add_comment(make_paper(), AUTHOR, "Elsewhere")

        with pytest.raises(BusinessRuleViolationError, match="Parent comment not found"):
            await comment_service.add_comment(
                make_paper(), AUTHOR, "Reply", parent_id=other.id
            )

    @pytest.mark.asyncio
    async def test_unknown_parent_rejected(self, unit_env):
        """A reply to a comment that never existed is rejected."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(BusinessRuleViolationError):
            await comment_service.add_comment(
                make_paper(), AUTHOR, "Reply", parent_id=CommentId(uuid4())
            )

    @pytest.mark.asyncio
    async def test_blank_and_oversized_content(self, unit_env):
        """Content must be present and at most 1000 characters."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(ValidationError, match="content is required"):
            await comment_service.add_comment(make_paper(), AUTHOR, "   ")
        with pytest.raises(ValidationError):
            await comment_service.add_comment(make_paper(), AUTHOR, "x" * 1001)

    @pytest.mark.asyncio
    async def test_edit_marks_comment(self, unit_env):
        """Edited comments carry a flag and timestamp."""
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.add_comment(make_paper(), AUTHOR, "Typo")

        edited = await comment_service.edit_comment(comment, "Fixed")

        assert edited.content == "Fixed"
        assert edited.is_edited
        assert edited.edited_at is not None

    @pytest.mark.asyncio
    async def test_like_toggles(self, unit_env):
        """Liking twice removes the like."""
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.add_comment(make_paper(), AUTHOR, "Nice")
        fan = UserId(uuid4())

        liked = await comment_service.toggle_like(comment, fan)
        unliked = await comment_service.toggle_like(liked, fan)

        assert liked.like_count == 1
        assert unliked.like_count == 0
