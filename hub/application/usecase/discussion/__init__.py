"""Discussion and reply use cases."""

from .create_discussion import CreateDiscussionRequest, CreateDiscussionUseCase
from .create_reply import CreateReplyRequest, CreateReplyUseCase
from .edit_reply import EditReplyRequest, EditReplyUseCase
from .get_discussion import (
    GetDiscussionRequest,
    GetDiscussionResponse,
    GetDiscussionUseCase,
)
from .list_discussions import (
    ALL_CATEGORIES,
    ListDiscussionsRequest,
    ListDiscussionsResponse,
    ListDiscussionsUseCase,
)
from .react_to_reply import (
    ReactToReplyRequest,
    ReactToReplyResponse,
    ReactToReplyUseCase,
)

__all__ = [
    "ALL_CATEGORIES",
    "CreateDiscussionRequest",
    "CreateDiscussionUseCase",
    "CreateReplyRequest",
    "CreateReplyUseCase",
    "EditReplyRequest",
    "EditReplyUseCase",
    "GetDiscussionRequest",
    "GetDiscussionResponse",
    "GetDiscussionUseCase",
    "ListDiscussionsRequest",
    "ListDiscussionsResponse",
    "ListDiscussionsUseCase",
    "ReactToReplyRequest",
    "ReactToReplyResponse",
    "ReactToReplyUseCase",
]
