"""Unit tests for the comment use cases."""

import pytest

from hub.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    LikeCommentRequest,
    LikeCommentUseCase,
)
from hub.domain.error import NotAuthorizedError
from hub.domain.service import GroupService, PaperMetadata, PaperService, UserService
from tests.conftest import create_group, register_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def body():
    yield b"%PDF-1.7 notes"


async def setup_paper(unit_env, is_public: bool = False):
    """Owner, member, outsider and a paper in the owner's group."""
    user_service = await unit_env.get(UserService)
    group_service = await unit_env.get(GroupService)
    paper_service = await unit_env.get(PaperService)
    owner = await register_user(user_service)
    member = await register_user(user_service, email="bob@uni.edu", first_name="Bob")
    outsider = await register_user(user_service, email="eve@uni.edu")
    group = await create_group(group_service, owner)
    await group_service.join(group, member.id)
    paper = await paper_service.upload(
        group_id=group.id,
        uploaded_by=owner.id,
        chunks=body(),
        original_name="notes.pdf",
        mime_type="application/pdf",
        metadata=PaperMetadata(title="Reading notes", is_public=is_public),
    )
    return owner, member, outsider, paper


class TestCommentUseCases:
    """Tests for adding, reading, liking and deleting comments."""

    @pytest.mark.asyncio
    async def test_thread_counts_nested_comments(self, unit_env):
        """``total`` includes replies, and likes are reported per viewer."""
        # Arrange
        owner, member, _, paper = await setup_paper(unit_env)
        add = await unit_env.get(AddCommentUseCase)
        like = await unit_env.get(LikeCommentUseCase)
        get_comments = await unit_env.get(GetCommentsUseCase)

        root = await add.execute(
            AddCommentRequest(
                paper_id=str(paper.id), user_id=str(owner.id), content="Thoughts?"
            )
        )
        await add.execute(
            AddCommentRequest(
                paper_id=str(paper.id),
                user_id=str(member.id),
                content="Section 3 is great",
                parent_id=root.id,
            )
        )
        await like.execute(
            LikeCommentRequest(
                paper_id=str(paper.id), comment_id=root.id, user_id=str(member.id)
            )
        )

        # Act
        as_member = await get_comments.execute(
            GetCommentsRequest(paper_id=str(paper.id), user_id=str(member.id))
        )
        as_owner = await get_comments.execute(
            GetCommentsRequest(paper_id=str(paper.id), user_id=str(owner.id))
        )

        # Assert
        assert as_member.total == 2
        assert len(as_member.comments) == 1
        assert as_member.comments[0].replies[0].author.first_name == "Bob"
        assert as_member.comments[0].like_count == 1
        assert as_member.comments[0].liked_by_me is True
        assert as_owner.comments[0].liked_by_me is False

    @pytest.mark.asyncio
    async def test_outsider_cannot_read_private_paper_comments(self, unit_env):
        """Comments follow the paper's visibility."""
        _, _, outsider, paper = await setup_paper(unit_env)
        get_comments = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(NotAuthorizedError):
            await get_comments.execute(
                GetCommentsRequest(paper_id=str(paper.id), user_id=str(outsider.id))
            )

    @pytest.mark.asyncio
    async def test_anonymous_reads_public_paper_comments(self, unit_env):
        """Public papers expose their comments without a login."""
        _, _, _, paper = await setup_paper(unit_env, is_public=True)
        get_comments = await unit_env.get(GetCommentsUseCase)

        result = await get_comments.execute(GetCommentsRequest(paper_id=str(paper.id)))

        assert result.total == 0
        assert result.comments == []

    @pytest.mark.asyncio
    async def test_outsider_cannot_comment(self, unit_env):
        """Only members comment, even on public papers."""
        _, _, outsider, paper = await setup_paper(unit_env, is_public=True)
        add = await unit_env.get(AddCommentUseCase)

        with pytest.raises(NotAuthorizedError):
            await add.execute(
                AddCommentRequest(
                    paper_id=str(paper.id), user_id=str(outsider.id), content="Hi"
                )
            )

    @pytest.mark.asyncio
    async def test_group_owner_deletes_member_comment(self, unit_env):
        """The group owner may remove any comment; other members may not."""
        owner, member, _, paper = await setup_paper(unit_env)
        add = await unit_env.get(AddCommentUseCase)
        delete = await unit_env.get(DeleteCommentUseCase)
        get_comments = await unit_env.get(GetCommentsUseCase)
        owner_comment = await add.execute(
            AddCommentRequest(
                paper_id=str(paper.id), user_id=str(owner.id), content="Pinned note"
            )
        )
        member_comment = await add.execute(
            AddCommentRequest(
                paper_id=str(paper.id), user_id=str(member.id), content="Off topic"
            )
        )

        with pytest.raises(NotAuthorizedError):
            await delete.execute(
                DeleteCommentRequest(
                    paper_id=str(paper.id),
                    comment_id=owner_comment.id,
                    user_id=str(member.id),
                )
            )
        await delete.execute(
            DeleteCommentRequest(
                paper_id=str(paper.id),
                comment_id=member_comment.id,
                user_id=str(owner.id),
            )
        )

        result = await get_comments.execute(
            GetCommentsRequest(paper_id=str(paper.id), user_id=str(owner.id))
        )
        assert [c.id for c in result.comments] == [owner_comment.id]
