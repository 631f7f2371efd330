"""Upload paper use case."""

from collections.abc import AsyncIterator

import logfire
from pydantic import BaseModel

from hub.application.usecase.views import PaperView
from hub.domain.access import Capability, require_access
from hub.domain.service import GroupService, PaperMetadata, PaperService, UserService
from hub.domain.value import GroupId, UserId, parse_id


class UploadPaperRequest(BaseModel):
    """Upload paper request. The file body is passed separately."""

    group_id: str
    user_id: str  # Uploader, from the authenticated user
    file_name: str
    mime_type: str
    metadata: PaperMetadata


class UploadPaperUseCase:
    """Use case for adding a paper to a group's library."""

    def __init__(
        self,
        group_service: GroupService,
        paper_service: PaperService,
        user_service: UserService,
    ) -> None:
        """Initialize upload paper use case.

        Args:
            group_service: Group domain service
            paper_service: Paper domain service
            user_service: User service for the uploader profile
        """
        self.group_service = group_service
        self.paper_service = paper_service
        self.user_service = user_service

    async def execute(
        self, request: UploadPaperRequest, chunks: AsyncIterator[bytes]
    ) -> PaperView:
        """Execute upload flow.

        Args:
            request: Target group, uploader and metadata
            chunks: File body

        Returns:
            Created paper

        Raises:
            NotAuthorizedError: If the caller is not a member
            ValidationError: If the file type, size or metadata is invalid
            StorageError: If the file could not be stored
        """
        with logfire.span(
            "upload_paper.execute",
            group_id=request.group_id,
            mime_type=request.mime_type,
        ):
            group_id = GroupId(parse_id(request.group_id))
            group = await self.group_service.get_group(group_id)
            uploader_id = UserId(parse_id(request.user_id))
            require_access(uploader_id, group, Capability.CONTRIBUTE)

            paper = await self.paper_service.upload(
                group_id=group.id,
                uploaded_by=uploader_id,
                chunks=chunks,
                original_name=request.file_name,
                mime_type=request.mime_type,
                metadata=request.metadata,
            )
            uploaders = await self.user_service.get_many([uploader_id])
            return PaperView.from_paper(paper, uploaders)
