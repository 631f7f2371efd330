"""Unit tests for ListPapersUseCase."""

import pytest

from hub.application.usecase.paper import ListPapersRequest, ListPapersUseCase
from hub.domain.error import NotAuthorizedError
from hub.domain.service import GroupService, PaperMetadata, PaperService, UserService
from hub.domain.value import PaperCategory
from tests.conftest import create_group, register_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def body():
    yield b"plain text paper"


class TestListPapersUseCase:
    """Tests for ListPapersUseCase."""

    @pytest.mark.asyncio
    async def test_filters_and_paginates(self, unit_env):
        """Category filter, page size and popular tags come back together."""
        # Arrange
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        paper_service = await unit_env.get(PaperService)
        owner = await register_user(user_service)
        group = await create_group(group_service, owner)
        for i in range(3):
            await paper_service.upload(
                group_id=group.id,
                uploaded_by=owner.id,
                chunks=body(),
                original_name=f"review-{i}.txt",
                mime_type="text/plain",
                metadata=PaperMetadata(
                    title=f"Review {i}",
                    category=PaperCategory.REVIEW,
                    tags=["survey"],
                ),
            )
        await paper_service.upload(
            group_id=group.id,
            uploaded_by=owner.id,
            chunks=body(),
            original_name="thesis.txt",
            mime_type="text/plain",
            metadata=PaperMetadata(title="Thesis", category=PaperCategory.THESIS),
        )
        use_case = await unit_env.get(ListPapersUseCase)

        # Act
        result = await use_case.execute(
            ListPapersRequest(
                group_id=str(group.id),
                user_id=str(owner.id),
                category=PaperCategory.REVIEW,
                page=2,
                limit=2,
            )
        )

        # Assert
        assert len(result.papers) == 1
        assert result.pagination.total == 3
        assert result.pagination.pages == 2
        assert result.pagination.page == 2
        assert result.papers[0].uploaded_by.full_name == "Alice Smith"
        assert result.popular_tags[0].tag == "survey"
        assert result.popular_tags[0].count == 3

    @pytest.mark.asyncio
    async def test_non_member_denied(self, unit_env):
        """The library of a group is for its members."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        owner = await register_user(user_service)
        outsider = await register_user(user_service, email="eve@uni.edu")
        group = await create_group(group_service, owner)
        use_case = await unit_env.get(ListPapersUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                ListPapersRequest(group_id=str(group.id), user_id=str(outsider.id))
            )
