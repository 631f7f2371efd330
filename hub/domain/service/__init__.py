"""Domain services."""

from .auth_service import AuthService, extract_bearer_token
from .base import Service
from .comment_service import CommentService
from .discussion_service import DiscussionService, ReplyService
from .group_service import GroupService
from .invitation_service import InvitationService
from .jwt_service import JWTService
from .paper_service import PaperMetadata, PaperService, too_large_message
from .rate_limit_service import RateLimitService
from .user_service import UserService, UserStats

__all__ = [
    "AuthService",
    "CommentService",
    "DiscussionService",
    "GroupService",
    "InvitationService",
    "JWTService",
    "PaperMetadata",
    "PaperService",
    "too_large_message",
    "RateLimitService",
    "ReplyService",
    "Service",
    "UserService",
    "UserStats",
    "extract_bearer_token",
]
