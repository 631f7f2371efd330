"""Download paper use case."""

from collections.abc import AsyncIterator
from dataclasses import dataclass

import logfire
from pydantic import BaseModel

from hub.application.usecase.paper.common import load_paper
from hub.domain.access import Capability, require_access
from hub.domain.service import GroupService, PaperService
from hub.domain.value import UserId, parse_id


class DownloadPaperRequest(BaseModel):
    """Download paper request."""

    paper_id: str
    user_id: str | None = None  # Current user ID (if authenticated)


@dataclass
class PaperDownload:
    """File body and the headers needed to serve it."""

    file_name: str
    mime_type: str
    size: int
    chunks: AsyncIterator[bytes]


class DownloadPaperUseCase:
    """Use case for downloading a paper's file."""

    def __init__(self, group_service: GroupService, paper_service: PaperService) -> None:
        """Initialize download paper use case.

        Args:
            group_service: Group domain service
            paper_service: Paper domain service
        """
        self.group_service = group_service
        self.paper_service = paper_service

    async def execute(self, request: DownloadPaperRequest) -> PaperDownload:
        """Open the file and count the download.

        Raises:
            NotFoundError: If the paper or its file does not exist
            NotAuthorizedError: If the caller may not view the paper
        """
        with logfire.span("download_paper.execute", paper_id=request.paper_id):
            paper, group = await load_paper(
                self.paper_service, self.group_service, request.paper_id
            )
            actor_id = UserId(parse_id(request.user_id)) if request.user_id else None
            require_access(actor_id, paper, Capability.VIEW_PAPER, group=group)

            chunks = await self.paper_service.open_download(paper)
            return PaperDownload(
                file_name=paper.original_file_name,
                mime_type=paper.mime_type,
                size=paper.file_size,
                chunks=chunks,
            )
