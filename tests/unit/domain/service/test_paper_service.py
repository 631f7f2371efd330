"""Unit tests for PaperService."""

import pytest

from hub.adapter.error import StorageError
from hub.adapter.storage import FileStorage
from hub.domain.error import ValidationError
from hub.domain.repository import PaperQuery, PaperRepository
from hub.domain.service import GroupService, PaperMetadata, PaperService, UserService
from tests.conftest import create_group, register_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

PDF = "application/pdf"


async def body(*parts: bytes):
    for part in parts:
        yield part


async def upload(paper_service, group, user, title="Spiking networks", **metadata):
    return await paper_service.upload(
        group_id=group.id,
        uploaded_by=user.id,
        chunks=body(b"%PDF-1.7 ", b"content"),
        original_name="spiking.pdf",
        mime_type=PDF,
        metadata=PaperMetadata(title=title, **metadata),
    )


class TestUpload:
    """Tests for upload."""

    @pytest.mark.asyncio
    async def test_upload_stores_file_and_record(self, unit_env):
        """The record points at a committed file of the right size."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        paper_service = await unit_env.get(PaperService)
        storage = await unit_env.get(FileStorage)
        owner = await register_user(user_service)
        group = await create_group(group_service, owner)

        paper = await upload(paper_service, group, owner, tags=[" ML ", "Neuro"])

        assert paper.file_size == len(b"%PDF-1.7 content")
        assert paper.original_file_name == "spiking.pdf"
        assert paper.file_name != "spiking.pdf"
        assert paper.tags == ["ml", "neuro"]
        assert storage.files[paper.file_path] == b"%PDF-1.7 content"
        assert storage.staged_files == {}

    @pytest.mark.asyncio
    async def test_disallowed_type_rejected(self, unit_env):
        """Only PDF, DOC, DOCX and TXT are accepted."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        paper_service = await unit_env.get(PaperService)
        owner = await register_user(user_service)
        group = await create_group(group_service, owner)

        with pytest.raises(ValidationError, match="Invalid file type"):
            await paper_service.upload(
                group_id=group.id,
                uploaded_by=owner.id,
                chunks=body(b"\x89PNG"),
                original_name="figure.png",
                mime_type="image/png",
                metadata=PaperMetadata(title="Figure"),
            )

    @pytest.mark.asyncio
    async def test_oversized_upload_rejected(self, unit_env):
        """Files over the limit are rejected and nothing is kept."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        paper_service = await unit_env.get(PaperService)
        storage = await unit_env.get(FileStorage)
        paper_repo = await unit_env.get(PaperRepository)
        owner = await register_user(user_service)
        group = await create_group(group_service, owner)
        megabyte = b"x" * 1024 * 1024

        with pytest.raises(ValidationError, match="File too large"):
            await paper_service.upload(
                group_id=group.id,
                uploaded_by=owner.id,
                chunks=body(*[megabyte] * 11),
                original_name="huge.pdf",
                mime_type=PDF,
                metadata=PaperMetadata(title="Huge"),
            )

        assert storage.files == {}
        assert await paper_repo.count_by_group(PaperQuery(group_id=group.id)) == 0

    @pytest.mark.asyncio
    async def test_failed_commit_removes_record(self, unit_env):
        """A record is never left pointing at a missing file."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        paper_service = await unit_env.get(PaperService)
        storage = await unit_env.get(FileStorage)
        paper_repo = await unit_env.get(PaperRepository)
        owner = await register_user(user_service)
        group = await create_group(group_service, owner)
        storage.fail_commit = True

        with pytest.raises(StorageError):
            await upload(paper_service, group, owner)

        assert await paper_repo.count_by_group(PaperQuery(group_id=group.id)) == 0
        assert storage.staged_files == {}


class TestLibrary:
    """Tests for listing, rating, downloading and deleting."""

    @pytest.mark.asyncio
    async def test_search_and_tag_filters(self, unit_env):
        """Search needs every word; tags match any."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        paper_service = await unit_env.get(PaperService)
        owner = await register_user(user_service)
        group = await create_group(group_service, owner)
        await upload(paper_service, group, owner, title="Spiking networks", tags=["neuro"])
        await upload(paper_service, group, owner, title="Deep networks", tags=["ml"])
        await upload(paper_service, group, owner, title="Protein folding", tags=["bio"])

        by_words, total = await paper_service.list_papers(
            PaperQuery(group_id=group.id, search="spiking networks")
        )
        by_tags, _ = await paper_service.list_papers(
            PaperQuery(group_id=group.id, tags=["ml", "bio"])
        )

        assert total == 1
        assert [p.title for p in by_words] == ["Spiking networks"]
        assert {p.title for p in by_tags} == {"Deep networks", "Protein folding"}

    @pytest.mark.asyncio
    async def test_popular_tags(self, unit_env):
        """Tags are ranked by how many papers carry them."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        paper_service = await unit_env.get(PaperService)
        owner = await register_user(user_service)
        group = await create_group(group_service, owner)
        await upload(paper_service, group, owner, title="A", tags=["ml", "neuro"])
        await upload(paper_service, group, owner, title="B", tags=["ml"])

        tags = await paper_service.popular_tags(group.id)

        assert [(t.tag, t.count) for t in tags] == [("ml", 2), ("neuro", 1)]

    @pytest.mark.asyncio
    async def test_rating_replaces_previous(self, unit_env):
        """Each user has at most one rating; the average updates."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        paper_service = await unit_env.get(PaperService)
        owner = await register_user(user_service, email="owner@uni.edu")
        bob = await register_user(user_service, email="bob@uni.edu")
        group = await create_group(group_service, owner)
        paper = await upload(paper_service, group, owner)

        paper = await paper_service.rate(paper, owner.id, 5)
        paper = await paper_service.rate(paper, bob.id, 2)
        paper = await paper_service.rate(paper, owner.id, 4, review="Solid")

        assert len(paper.ratings) == 2
        assert paper.average_rating == 3.0

    @pytest.mark.asyncio
    async def test_rating_out_of_range(self, unit_env):
        """Ratings must be between 1 and 5."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        paper_service = await unit_env.get(PaperService)
        owner = await register_user(user_service)
        group = await create_group(group_service, owner)
        paper = await upload(paper_service, group, owner)

        with pytest.raises(ValidationError):
            await paper_service.rate(paper, owner.id, 6)

    @pytest.mark.asyncio
    async def test_download_counts_and_streams(self, unit_env):
        """Opening a download bumps the counter and yields the file."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        paper_service = await unit_env.get(PaperService)
        owner = await register_user(user_service)
        group = await create_group(group_service, owner)
        paper = await upload(paper_service, group, owner)

        chunks = await paper_service.open_download(paper)
        content = b"".join([chunk async for chunk in chunks])

        assert content == b"%PDF-1.7 content"
        assert (await paper_service.get_paper(paper.id)).download_count == 1

    @pytest.mark.asyncio
    async def test_delete_removes_file(self, unit_env):
        """Deleting a paper removes its stored file."""
        user_service = await unit_env.get(UserService)
        group_service = await unit_env.get(GroupService)
        paper_service = await unit_env.get(PaperService)
        storage = await unit_env.get(FileStorage)
        owner = await register_user(user_service)
        group = await create_group(group_service, owner)
        paper = await upload(paper_service, group, owner)

        await paper_service.delete(paper)

        assert paper.file_path not in storage.files
