"""Discussion and reply routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from pydantic import BaseModel, Field

from hub.application.usecase.discussion import (
    ALL_CATEGORIES,
    CreateDiscussionRequest,
    CreateDiscussionUseCase,
    CreateReplyRequest,
    CreateReplyUseCase,
    EditReplyRequest,
    EditReplyUseCase,
    GetDiscussionRequest,
    GetDiscussionUseCase,
    ListDiscussionsRequest,
    ListDiscussionsUseCase,
    ReactToReplyRequest,
    ReactToReplyResponse,
    ReactToReplyUseCase,
)
from hub.application.usecase.views import DiscussionView, ReplyNode
from hub.domain.service import AuthService
from hub.domain.value import MAX_PAGE_SIZE, DiscussionCategory
from hub.interface.api.envelope import Envelope

# Listing and creating live under the owning group
group_router = APIRouter(
    prefix="/groups", tags=["discussions"], route_class=DishkaRoute
)
router = APIRouter(prefix="/discussions", tags=["discussions"], route_class=DishkaRoute)


class CreateDiscussionAPIRequest(BaseModel):
    """API request for opening a discussion."""

    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1, max_length=5000)
    category: DiscussionCategory = DiscussionCategory.GENERAL
    tags: list[str] = Field(default_factory=list)


class ReplyAPIRequest(BaseModel):
    """API request for replying, or editing a reply."""

    content: str = Field(min_length=1, max_length=3000)
    parent_reply_id: str | None = None


class DiscussionDetail(BaseModel):
    """A discussion with one page of its replies."""

    discussion: DiscussionView
    replies: list[ReplyNode]


@group_router.get(
    "/{group_id}/discussions", response_model=Envelope[list[DiscussionView]]
)
async def list_discussions(
    group_id: str,
    list_discussions_use_case: FromDishka[ListDiscussionsUseCase],
    auth_service: FromDishka[AuthService],
    category: str | None = None,
    search: str | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=MAX_PAGE_SIZE),
    authorization: str | None = Header(default=None),
) -> Envelope[list[DiscussionView]]:
    """List a group's discussions (members only).

    Pinned discussions come first, then the most recently active.

    Args:
        group_id: Group UUID
        list_discussions_use_case: List discussions use case from DI
        auth_service: Auth service from DI
        category: A discussion category, or ``all``
        search: Case-insensitive match on title or content
        page: Page number (1-based)
        limit: Page size
        authorization: Bearer token

    Returns:
        One page of discussions
    """
    user = await auth_service.authenticate(authorization)
    result = await list_discussions_use_case.execute(
        ListDiscussionsRequest(
            group_id=group_id,
            user_id=str(user.id),
            category=None if category in (None, ALL_CATEGORIES) else category,
            search=search,
            page=page,
            limit=limit,
        )
    )
    return Envelope(data=result.discussions, pagination=result.pagination)


@group_router.post(
    "/{group_id}/discussions",
    response_model=Envelope[DiscussionView],
    status_code=status.HTTP_201_CREATED,
)
async def create_discussion(
    group_id: str,
    body: CreateDiscussionAPIRequest,
    create_discussion_use_case: FromDishka[CreateDiscussionUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> Envelope[DiscussionView]:
    """Open a discussion in a group (members only)."""
    user = await auth_service.authenticate(authorization)
    discussion = await create_discussion_use_case.execute(
        CreateDiscussionRequest(
            group_id=group_id, user_id=str(user.id), **body.model_dump()
        )
    )
    return Envelope(message="Discussion created successfully", data=discussion)


@router.get("/{discussion_id}", response_model=Envelope[DiscussionDetail])
async def get_discussion(
    discussion_id: str,
    get_discussion_use_case: FromDishka[GetDiscussionUseCase],
    auth_service: FromDishka[AuthService],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=MAX_PAGE_SIZE),
    authorization: str | None = Header(default=None),
) -> Envelope[DiscussionDetail]:
    """Get a discussion and one page of threaded replies (members only).

    Pagination counts every reply in the discussion. Replies whose parent is
    on another page are shown at the top level.
    """
    user = await auth_service.authenticate(authorization)
    result = await get_discussion_use_case.execute(
        GetDiscussionRequest(
            discussion_id=discussion_id, user_id=str(user.id), page=page, limit=limit
        )
    )
    return Envelope(
        data=DiscussionDetail(discussion=result.discussion, replies=result.replies),
        pagination=result.pagination,
    )


@router.post(
    "/{discussion_id}/replies",
    response_model=Envelope[ReplyNode],
    status_code=status.HTTP_201_CREATED,
)
async def create_reply(
    discussion_id: str,
    body: ReplyAPIRequest,
    create_reply_use_case: FromDishka[CreateReplyUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> Envelope[ReplyNode]:
    """Reply to a discussion, or to a reply in it (members only)."""
    user = await auth_service.authenticate(authorization)
    reply = await create_reply_use_case.execute(
        CreateReplyRequest(
            discussion_id=discussion_id,
            user_id=str(user.id),
            content=body.content,
            parent_reply_id=body.parent_reply_id,
        )
    )
    return Envelope(message="Reply created successfully", data=reply)


@router.put("/{discussion_id}/replies/{reply_id}", response_model=Envelope[ReplyNode])
async def edit_reply(
    discussion_id: str,
    reply_id: str,
    body: ReplyAPIRequest,
    edit_reply_use_case: FromDishka[EditReplyUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> Envelope[ReplyNode]:
    """Edit a reply (author only)."""
    user = await auth_service.authenticate(authorization)
    reply = await edit_reply_use_case.execute(
        EditReplyRequest(
            discussion_id=discussion_id,
            reply_id=reply_id,
            user_id=str(user.id),
            content=body.content,
        )
    )
    return Envelope(message="Reply updated successfully", data=reply)


@router.post(
    "/{discussion_id}/replies/{reply_id}/reactions/{kind}",
    response_model=Envelope[ReactToReplyResponse],
)
async def react_to_reply(
    discussion_id: str,
    reply_id: str,
    kind: str,
    react_to_reply_use_case: FromDishka[ReactToReplyUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> Envelope[ReactToReplyResponse]:
    """Toggle the caller's ``like`` or ``helpful`` reaction (members only)."""
    user = await auth_service.authenticate(authorization)
    result = await react_to_reply_use_case.execute(
        ReactToReplyRequest(
            discussion_id=discussion_id,
            reply_id=reply_id,
            user_id=str(user.id),
            kind=kind,
        )
    )
    return Envelope(data=result)
