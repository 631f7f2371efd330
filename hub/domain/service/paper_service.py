"""Paper domain service."""

from collections.abc import AsyncIterator
from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from hub.adapter.error import StorageError, UploadTooLargeError
from hub.adapter.storage import FileStorage, StagedFile
from hub.config import UploadSettings
from hub.domain.error import NotFoundError, ValidationError
from hub.domain.model import Paper, PaperAuthor
from hub.domain.repository import PaperQuery, PaperRepository, TagCount
from hub.domain.value import GroupId, PaperCategory, PaperId, UserId
from hub.domain.value.common import ValueObject

from .base import Service

ALLOWED_TYPES_MESSAGE = "Invalid file type. Only PDF, DOC, DOCX, and TXT files are allowed."


def too_large_message(max_bytes: int) -> str:
    return f"File too large. Maximum size is {max_bytes // (1024 * 1024)}MB."


class PaperMetadata(ValueObject):
    """Bibliographic details supplied with an upload."""

    title: str
    description: Optional[str] = None
    authors: list[PaperAuthor] = []
    tags: list[str] = []
    category: PaperCategory = PaperCategory.RESEARCH
    journal: Optional[str] = None
    published_date: Optional[datetime] = None
    doi: Optional[str] = None
    url: Optional[str] = None
    is_public: bool = False


class PaperService(Service):
    """Domain service for papers and their files."""

    def __init__(
        self,
        paper_repository: PaperRepository,
        file_storage: FileStorage,
        upload_settings: UploadSettings,
    ) -> None:
        """Initialize paper service.

        Args:
            paper_repository: Paper repository
            file_storage: Storage for the uploaded files
            upload_settings: Size and type limits
        """
        self.paper_repository = paper_repository
        self.file_storage = file_storage
        self.upload_settings = upload_settings

    async def get_paper(self, paper_id: PaperId) -> Paper:
        """Get a paper by ID.

        Raises:
            NotFoundError: If paper not found
        """
        with logfire.span("paper_service.get_paper", paper_id=str(paper_id)):
            paper = await self.paper_repository.find_by_id(paper_id)
            if not paper:
                logfire.warn("Paper not found", paper_id=str(paper_id))
                raise NotFoundError("Paper", str(paper_id))
            return paper

    async def list_papers(
        self, query: PaperQuery, limit: int = 12, offset: int = 0
    ) -> tuple[list[Paper], int]:
        """List a group's papers, newest first.

        Returns:
            The requested page and the total number of matches
        """
        with logfire.span(
            "paper_service.list_papers",
            group_id=str(query.group_id),
            category=query.category.value if query.category else None,
            search=query.search,
            tags=query.tags,
        ):
            papers = await self.paper_repository.find_by_group(
                query, limit=limit, offset=offset
            )
            total = await self.paper_repository.count_by_group(query)
            logfire.info("Papers listed", count=len(papers), total=total)
            return papers, total

    async def popular_tags(self, group_id: GroupId, limit: int = 10) -> list[TagCount]:
        """Most used tags in a group."""
        with logfire.span("paper_service.popular_tags", group_id=str(group_id)):
            return await self.paper_repository.popular_tags(group_id, limit=limit)

    def _check_mime_type(self, mime_type: str) -> None:
        if mime_type not in self.upload_settings.allowed_mime_types:
            logfire.warn("Upload rejected: file type", mime_type=mime_type)
            raise ValidationError(ALLOWED_TYPES_MESSAGE)

    def _build_paper(
        self,
        staged: StagedFile,
        group_id: GroupId,
        uploaded_by: UserId,
        metadata: PaperMetadata,
    ) -> Paper:
        try:
            return Paper(
                id=PaperId(uuid4()),
                file_name=staged.file_name,
                original_file_name=staged.original_name,
                file_path=staged.file_path,
                file_size=staged.size,
                mime_type=staged.mime_type,
                group_id=group_id,
                uploaded_by=uploaded_by,
                **metadata.model_dump(),
            )
        except PydanticValidationError as e:
            raise ValidationError.from_pydantic(e)

    async def upload(
        self,
        group_id: GroupId,
        uploaded_by: UserId,
        chunks: AsyncIterator[bytes],
        original_name: str,
        mime_type: str,
        metadata: PaperMetadata,
    ) -> Paper:
        """Store an uploaded file and create its paper record.

        The file is staged first, the record is saved, and only then is the
        file committed. If anything fails before the commit, the staged file
        is discarded.

        Args:
            group_id: Group the paper belongs to
            uploaded_by: Uploading member
            chunks: File body
            original_name: Client-side file name
            mime_type: Declared content type
            metadata: Title, authors, tags and other details

        Returns:
            Created paper

        Raises:
            ValidationError: If the type, size or metadata is invalid
            StorageError: If the file could not be stored
        """
        with logfire.span(
            "paper_service.upload",
            group_id=str(group_id),
            uploaded_by=str(uploaded_by),
            mime_type=mime_type,
        ):
            self._check_mime_type(mime_type)
            if not metadata.title.strip():
                raise ValidationError("Title is required")

            max_bytes = self.upload_settings.max_bytes
            saved: Optional[Paper] = None
            try:
                async with self.file_storage.staged(
                    chunks, original_name, mime_type, max_bytes
                ) as staged:
                    paper = self._build_paper(staged, group_id, uploaded_by, metadata)
                    saved = await self.paper_repository.save(paper)
            except UploadTooLargeError:
                raise ValidationError(too_large_message(max_bytes))
            except StorageError:
                # The record was saved but its file never arrived
                if saved is not None:
                    await self.paper_repository.delete(saved.id)
                raise

            logfire.info(
                "Paper uploaded",
                paper_id=str(saved.id),
                file_size=saved.file_size,
            )
            return saved

    async def record_view(self, paper: Paper) -> Paper:
        """Count a view and return the paper with the new count."""
        with logfire.span("paper_service.record_view", paper_id=str(paper.id)):
            await self.paper_repository.increment_view_count(paper.id)
            return paper.model_copy(update={"view_count": paper.view_count + 1})

    async def open_download(self, paper: Paper) -> AsyncIterator[bytes]:
        """Count a download and return the file body.

        Raises:
            NotFoundError: If the file is missing from storage
        """
        with logfire.span("paper_service.open_download", paper_id=str(paper.id)):
            if not await self.file_storage.exists(paper.file_path):
                logfire.error("Paper file missing", file_path=paper.file_path)
                raise NotFoundError("File", paper.file_name)
            await self.paper_repository.increment_download_count(paper.id)
            logfire.info("Paper downloaded", paper_id=str(paper.id))
            return self.file_storage.stream(paper.file_path)

    async def rate(
        self, paper: Paper, user_id: UserId, rating: int, review: Optional[str] = None
    ) -> Paper:
        """Replace the user's rating of a paper.

        Raises:
            ValidationError: If the rating is outside 1..5 or the review too long
        """
        with logfire.span("paper_service.rate", paper_id=str(paper.id), rating=rating):
            try:
                rated = paper.add_rating(user_id, rating, review)
            except PydanticValidationError as e:
                raise ValidationError.from_pydantic(e)
            saved = await self.paper_repository.save(rated)
            logfire.info(
                "Paper rated", paper_id=str(paper.id), average=saved.average_rating
            )
            return saved

    async def delete(self, paper: Paper) -> None:
        """Delete a paper record and its file."""
        with logfire.span("paper_service.delete", paper_id=str(paper.id)):
            await self.paper_repository.delete(paper.id)
            await self.file_storage.delete(paper.file_path)
            logfire.info("Paper deleted", paper_id=str(paper.id))
