"""Integration tests for PostgresPaperRepository queries."""

import pytest

from hub.domain.repository import PaperQuery, PaperRepository
from hub.domain.service import GroupService, PaperMetadata, PaperService, UserService
from tests.conftest import create_group, register_user


async def body():
    yield b"plain text"


class TestPaperRepositoryIntegration:
    """Filtering and tag statistics in SQL."""

    @pytest.mark.asyncio
    async def test_search_tags_and_popular_tags(self, integration_env):
        # Arrange
        user_service = await integration_env.get(UserService)
        group_service = await integration_env.get(GroupService)
        paper_service = await integration_env.get(PaperService)
        paper_repo = await integration_env.get(PaperRepository)
        owner = await register_user(user_service)
        group = await create_group(group_service, owner)
        for title, tags in [
            ("Deep spiking networks", ["ml", "neuro"]),
            ("Deep learning survey", ["ml"]),
            ("Dendritic computation", ["neuro"]),
        ]:
            await paper_service.upload(
                group_id=group.id,
                uploaded_by=owner.id,
                chunks=body(),
                original_name="paper.txt",
                mime_type="text/plain",
                metadata=PaperMetadata(title=title, tags=tags),
            )

        # Act
        both_words = PaperQuery(group_id=group.id, search="deep networks")
        any_tag = PaperQuery(group_id=group.id, tags=["neuro", "unused"])
        searched = await paper_repo.find_by_group(both_words)
        tagged = await paper_repo.find_by_group(any_tag)
        popular = await paper_repo.popular_tags(group.id)

        # Assert
        assert [p.title for p in searched] == ["Deep spiking networks"]
        assert await paper_repo.count_by_group(any_tag) == 2
        assert {p.title for p in tagged} == {
            "Deep spiking networks",
            "Dendritic computation",
        }
        assert {(t.tag, t.count) for t in popular} == {("ml", 2), ("neuro", 2)}
