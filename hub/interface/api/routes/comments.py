"""Paper comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel, Field

from hub.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    EditCommentRequest,
    EditCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    LikeCommentRequest,
    LikeCommentResponse,
    LikeCommentUseCase,
)
from hub.application.usecase.views import CommentNode
from hub.domain.service import AuthService
from hub.interface.api.envelope import Envelope, MessageResponse

router = APIRouter(prefix="/papers", tags=["comments"], route_class=DishkaRoute)


class AddCommentAPIRequest(BaseModel):
    """API request for commenting on a paper."""

    content: str = Field(min_length=1, max_length=1000)
    parent_id: str | None = None  # Parent comment ID for replies


class EditCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    content: str = Field(min_length=1, max_length=1000)


@router.get("/{paper_id}/comments", response_model=Envelope[GetCommentsResponse])
async def get_comments(
    paper_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> Envelope[GetCommentsResponse]:
    """Get a paper's comments as a forest, oldest first at every level.

    Comments whose parent was deleted are shown at the top level. If
    authenticated, each comment says whether the caller liked it.
    """
    user = await auth_service.authenticate_optional(authorization)
    result = await get_comments_use_case.execute(
        GetCommentsRequest(paper_id=paper_id, user_id=str(user.id) if user else None)
    )
    return Envelope(data=result)


@router.post(
    "/{paper_id}/comments",
    response_model=Envelope[CommentNode],
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    paper_id: str,
    body: AddCommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> Envelope[CommentNode]:
    """Comment on a paper or reply to a comment (members only)."""
    user = await auth_service.authenticate(authorization)
    comment = await add_comment_use_case.execute(
        AddCommentRequest(
            paper_id=paper_id,
            user_id=str(user.id),
            content=body.content,
            parent_id=body.parent_id,
        )
    )
    return Envelope(message="Comment added successfully", data=comment)


@router.put("/{paper_id}/comments/{comment_id}", response_model=Envelope[CommentNode])
async def edit_comment(
    paper_id: str,
    comment_id: str,
    body: EditCommentAPIRequest,
    edit_comment_use_case: FromDishka[EditCommentUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> Envelope[CommentNode]:
    """Edit a comment (author only)."""
    user = await auth_service.authenticate(authorization)
    comment = await edit_comment_use_case.execute(
        EditCommentRequest(
            paper_id=paper_id,
            comment_id=comment_id,
            user_id=str(user.id),
            content=body.content,
        )
    )
    return Envelope(message="Comment updated successfully", data=comment)


@router.delete("/{paper_id}/comments/{comment_id}", response_model=MessageResponse)
async def delete_comment(
    paper_id: str,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> MessageResponse:
    """Delete one comment (author or group owner). Replies to it remain."""
    user = await auth_service.authenticate(authorization)
    await delete_comment_use_case.execute(
        DeleteCommentRequest(
            paper_id=paper_id, comment_id=comment_id, user_id=str(user.id)
        )
    )
    return MessageResponse(message="Comment deleted successfully")


@router.post(
    "/{paper_id}/comments/{comment_id}/like",
    response_model=Envelope[LikeCommentResponse],
)
async def like_comment(
    paper_id: str,
    comment_id: str,
    like_comment_use_case: FromDishka[LikeCommentUseCase],
    auth_service: FromDishka[AuthService],
    authorization: str | None = Header(default=None),
) -> Envelope[LikeCommentResponse]:
    """Toggle the caller's like on a comment (members only)."""
    user = await auth_service.authenticate(authorization)
    result = await like_comment_use_case.execute(
        LikeCommentRequest(
            paper_id=paper_id, comment_id=comment_id, user_id=str(user.id)
        )
    )
    return Envelope(data=result)
