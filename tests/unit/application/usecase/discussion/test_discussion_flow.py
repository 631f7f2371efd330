"""Unit tests for the discussion use cases."""

import pytest

from hub.application.usecase.discussion import (
    CreateDiscussionRequest,
    CreateDiscussionUseCase,
    CreateReplyRequest,
    CreateReplyUseCase,
    GetDiscussionRequest,
    GetDiscussionUseCase,
)
from hub.domain.error import NotAuthorizedError
from hub.domain.service import GroupService, UserService
from hub.domain.value import DiscussionCategory
from tests.conftest import create_group, register_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestDiscussionUseCases:
    """Tests for discussions and threaded replies."""

    @pytest.mark.asyncio
    async def test_reply_thread(self, unit_env):
        """Replies nest and the discussion tracks its latest reply."""
        # Arrange
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        owner = await register_user(user_service)
        member = await register_user(user_service, email="bob@uni.edu", first_name="Bob")
        group = await create_group(group_service, owner)
        await group_service.join(group, member.id)
        create_discussion = await unit_env.get(CreateDiscussionUseCase)
        create_reply = await unit_env.get(CreateReplyUseCase)
        get_discussion = await unit_env.get(GetDiscussionUseCase)

        discussion = await create_discussion.execute(
            CreateDiscussionRequest(
                group_id=str(group.id),
                user_id=str(owner.id),
                title="Journal club schedule",
                content="Which day works?",
                category=DiscussionCategory.ANNOUNCEMENTS,
            )
        )
        first = await create_reply.execute(
            CreateReplyRequest(
                discussion_id=discussion.id, user_id=str(member.id), content="Friday"
            )
        )
        await create_reply.execute(
            CreateReplyRequest(
                discussion_id=discussion.id,
                user_id=str(owner.id),
                content="Friday it is",
                parent_reply_id=first.id,
            )
        )

        # Act
        result = await get_discussion.execute(
            GetDiscussionRequest(discussion_id=discussion.id, user_id=str(member.id))
        )

        # Assert
        assert result.discussion.reply_count == 2
        assert result.discussion.category_display == "Announcements"
        assert result.discussion.last_reply.author.first_name == "Alice"
        assert result.pagination.total == 2
        assert len(result.replies) == 1
        assert result.replies[0].author.first_name == "Bob"
        assert result.replies[0].replies[0].content == "Friday it is"

    @pytest.mark.asyncio
    async def test_outsider_cannot_read_or_reply(self, unit_env):
        """Discussions are visible to members only."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        owner = await register_user(user_service)
        outsider = await register_user(user_service, email="eve@uni.edu")
        group = await create_group(group_service, owner)
        create_discussion = await unit_env.get(CreateDiscussionUseCase)
        create_reply = await unit_env.get(CreateReplyUseCase)
        get_discussion = await unit_env.get(GetDiscussionUseCase)
        discussion = await create_discussion.execute(
            CreateDiscussionRequest(
                group_id=str(group.id),
                user_id=str(owner.id),
                title="Members only",
                content="Hello",
            )
        )

        with pytest.raises(NotAuthorizedError):
            await get_discussion.execute(
                GetDiscussionRequest(
                    discussion_id=discussion.id, user_id=str(outsider.id)
                )
            )
        with pytest.raises(NotAuthorizedError):
            await create_reply.execute(
                CreateReplyRequest(
                    discussion_id=discussion.id,
                    user_id=str(outsider.id),
                    content="Let me in",
                )
            )
