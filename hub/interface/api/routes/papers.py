"""Paper routes: library listing, upload, download and ratings."""

import json
from collections.abc import AsyncIterator
from datetime import datetime
from urllib.parse import quote

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, File, Form, Header, Query, UploadFile, status
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field

from hub.application.usecase.paper import (
    DeletePaperRequest,
    DeletePaperUseCase,
    DownloadPaperRequest,
    DownloadPaperUseCase,
    GetPaperRequest,
    GetPaperUseCase,
    ListPapersRequest,
    ListPapersUseCase,
    RatePaperRequest,
    RatePaperUseCase,
    UploadPaperRequest,
    UploadPaperUseCase,
)
from hub.application.usecase.views import PaperView
from hub.domain.error import ValidationError
from hub.domain.model import PaperAuthor
from hub.domain.repository import TagCount
from hub.domain.service import AuthService, PaperMetadata
from hub.domain.value import MAX_PAGE_SIZE, PaperCategory
from hub.interface.api.envelope import Envelope, MessageResponse

ALL_CATEGORIES = "all"
UPLOAD_CHUNK_SIZE = 64 * 1024

group_router = APIRouter(prefix="/groups", tags=["papers"], route_class=DishkaRoute)
router = APIRouter(prefix="/papers", tags=["papers"], route_class=DishkaRoute)


class PaperLibrary(BaseModel):
    """One page of a group's papers with its most used tags."""

    papers: list[PaperView]
    popular_tags: list[TagCount]


class RatePaperAPIRequest(BaseModel):
    """API request for rating a paper."""

    rating: int = Field(ge=1, le=5)
    review: str | None = Field(default=None, max_length=300)


def _parse_json_list(raw: str | None, field: str) -> list:
    """Decode a JSON array sent as a multipart form field."""
    if not raw:
        return []
    invalid = ValidationError(
        f"Invalid {field} format", [f"{field}: expected a JSON array"]
    )
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        raise invalid
    if not isinstance(value, list):
        raise invalid
    return value


def _parse_authors(raw: str | None) -> list[PaperAuthor]:
    authors = []
    for entry in _parse_json_list(raw, "authors"):
        if isinstance(entry, str):
            entry = {"name": entry}
        if not isinstance(entry, dict):
            raise ValidationError("Invalid authors format", ["authors: invalid entry"])
        authors.append(PaperAuthor.model_validate(entry))
    return authors


def _parse_tags(raw: str | None) -> list[str]:
    tags = [str(tag).strip().lower() for tag in _parse_json_list(raw, "tags")]
    return [tag for tag in tags if tag]


async def _read_chunks(upload: UploadFile) -> AsyncIterator[bytes]:
    while True:
        chunk = await upload.read(UPLOAD_CHUNK_SIZE)
        if not chunk:
            break
        yield chunk


@group_router.get("/{group_id}/papers", response_model=Envelope[PaperLibrary])
async def list_papers(
    group_id: str,
    list_papers_use_case: FromDishka[ListPapersUseCase],
    auth_service: FromDishka[AuthService],
    category: str | None = None,
    search: str | None = None,
    tags: str | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=12, ge=1, le=MAX_PAGE_SIZE),
    authorization: str | None = Header(default=None),
) -> Envelope[PaperLibrary]:
    """List a group's papers, newest first (members only).

    Args:
        group_id: Group UUID
        list_papers_use_case: List papers use case from DI
        auth_service: Auth service from DI
        category: A paper category, or ``all``
        search: Words that must all appear in title or description
        tags: Comma separated; a paper matches if it has any of them
        page: Page number (1-based)
        limit: Page size
        authorization: Bearer token

    Returns:
        One page of papers plus the group's popular tags
    """
    user = await auth_service.authenticate(authorization)
    tag_list = [t.strip().lower() for t in (tags or "").split(",") if t.strip()]
    result = await list_papers_use_case.execute(
        ListPapersRequest(
            group_id=group_id,
            user_id=str(user.id),
            category=None if category in (None, ALL_CATEGORIES) else category,
            search=search,
            tags=tag_list,
            page=page,
            limit=limit,
        )
    )
    return Envelope(
        data=PaperLibrary(papers=result.papers, popular_tags=result.popular_tags),
        pagination=result.pagination,
    )


@group_router.post(
    "/{group_id}/papers",
    response_model=Envelope[PaperView],
    status_code=status.HTTP_201_CREATED,
)
async def upload_paper(
    group_id: str,
    upload_paper_use_case: FromDishka[UploadPaperUseCase],
    auth_service: FromDishka[AuthService],
    file: UploadFile = File(...),
    title: str = Form(...),
    description: str | None = Form(default=None),
    authors: str | None = Form(default=None),
    tags: str | None = Form(default=None),
    category: PaperCategory = Form(default=PaperCategory.RESEARCH),
    journal: str | None = Form(default=None),
    published_date: datetime | None = Form(default=None),
    doi: str | None = Form(default=None),
    url: str | None = Form(default=None),
    is_public: bool = Form(default=False),
    authorization: str | None = Header(default=None),
) -> Envelope[PaperView]:
    """Upload a paper to a group's library (members only).

    Multipart form. ``authors`` and ``tags`` are JSON arrays encoded as
    strings. Accepted types are PDF, DOC, DOCX and TXT, up to the configured
    size limit.
    """
    user = await auth_service.authenticate(authorization)
    metadata = PaperMetadata(
        title=title.strip(),
        description=description,
        authors=_parse_authors(authors),
        tags=_parse_tags(tags),
        category=category,
        journal=journal,
        published_date=published_date,
        doi=doi,
        url=url,
        is_public=is_public,
    )
    try:
        paper = await upload_paper_use_case.execute(
            UploadPaperRequest(
                group_id=group_id,
                user_id=str(user.id),
                file_name=file.filename or "upload",
                mime_type=file.content_type or "application/octet-stream",
                metadata=metadata,
            ),
            _read_chunks(file),
        )
    finally:
        await file.close()
    return Envelope(message="Paper uploaded successfully", data=paper)


@router.get("/{paper_id}", response_model=Envelope[PaperView])
async def get_paper(
    paper_id: str,
    get_paper_use_case: FromDishka[GetPaperUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> Envelope[PaperView]:
    """Get a paper's details. Public papers are visible to anyone."""
    user = await auth_service.authenticate_optional(authorization)
    paper = await get_paper_use_case.execute(
        GetPaperRequest(paper_id=paper_id, user_id=str(user.id) if user else None)
    )
    return Envelope(data=paper)


@router.get("/{paper_id}/download")
async def download_paper(
    paper_id: str,
    download_paper_use_case: FromDishka[DownloadPaperUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> StreamingResponse:
    """Stream the paper's file as an attachment."""
    user = await auth_service.authenticate_optional(authorization)
    download = await download_paper_use_case.execute(
        DownloadPaperRequest(paper_id=paper_id, user_id=str(user.id) if user else None)
    )
    return StreamingResponse(
        download.chunks,
        media_type=download.mime_type,
        headers={
            "Content-Disposition": (
                f"attachment; filename*=UTF-8''{quote(download.file_name)}"
            ),
            "Content-Length": str(download.size),
        },
    )


@router.delete("/{paper_id}", response_model=MessageResponse)
async def delete_paper(
    paper_id: str,
    delete_paper_use_case: FromDishka[DeletePaperUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> MessageResponse:
    """Delete a paper and its file (uploader or group owner)."""
    user = await auth_service.authenticate(authorization)
    await delete_paper_use_case.execute(
        DeletePaperRequest(paper_id=paper_id, user_id=str(user.id))
    )
    return MessageResponse(message="Paper deleted successfully")


@router.post("/{paper_id}/ratings", response_model=Envelope[PaperView])
async def rate_paper(
    paper_id: str,
    body: RatePaperAPIRequest,
    rate_paper_use_case: FromDishka[RatePaperUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> Envelope[PaperView]:
    """Rate a paper from 1 to 5, replacing the caller's earlier rating."""
    user = await auth_service.authenticate(authorization)
    paper = await rate_paper_use_case.execute(
        RatePaperRequest(
            paper_id=paper_id,
            user_id=str(user.id),
            rating=body.rating,
            review=body.review,
        )
    )
    return Envelope(message="Rating saved", data=paper)
