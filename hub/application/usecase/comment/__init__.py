"""Paper comment use cases."""

from .add_comment import AddCommentRequest, AddCommentUseCase
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase
from .edit_comment import EditCommentRequest, EditCommentUseCase
from .get_comments import GetCommentsRequest, GetCommentsResponse, GetCommentsUseCase
from .like_comment import LikeCommentRequest, LikeCommentResponse, LikeCommentUseCase

__all__ = [
    "AddCommentRequest",
    "AddCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "EditCommentRequest",
    "EditCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "LikeCommentRequest",
    "LikeCommentResponse",
    "LikeCommentUseCase",
]
