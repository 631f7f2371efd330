"""Domain value objects for Research Hub."""

from hub.domain.value.identifiers import (
    CommentId,
    DiscussionId,
    GroupId,
    InvitationId,
    PaperId,
    ReplyId,
    UserId,
    parse_id,
)
from hub.domain.value.pagination import MAX_PAGE_SIZE, Pagination, page_offset, paginate
from hub.domain.value.types import (
    AcademicLevel,
    DiscussionCategory,
    Email,
    GroupRole,
    InvitationStatus,
    InvitationToken,
    PaperCategory,
    ProfileVisibility,
    ReactionKind,
    Theme,
    UserRole,
)

__all__ = [
    # Identifiers
    "UserId",
    "GroupId",
    "InvitationId",
    "PaperId",
    "CommentId",
    "DiscussionId",
    "ReplyId",
    "parse_id",
    # Pagination
    "MAX_PAGE_SIZE",
    "Pagination",
    "page_offset",
    "paginate",
    # Types
    "AcademicLevel",
    "DiscussionCategory",
    "Email",
    "GroupRole",
    "InvitationStatus",
    "InvitationToken",
    "PaperCategory",
    "ProfileVisibility",
    "ReactionKind",
    "Theme",
    "UserRole",
]
