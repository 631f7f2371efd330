"""Domain models for Research Hub."""

from hub.domain.model.comment import PaperComment
from hub.domain.model.common import DomainModel, utcnow
from hub.domain.model.discussion import Discussion, LastReply, Reply
from hub.domain.model.group import Group, GroupMember
from hub.domain.model.invitation import Invitation
from hub.domain.model.paper import Paper, PaperAuthor, PaperRating, format_file_size
from hub.domain.model.user import SocialLinks, User, UserPreferences

__all__ = [
    "DomainModel",
    "utcnow",
    "Discussion",
    "Group",
    "GroupMember",
    "Invitation",
    "LastReply",
    "Paper",
    "PaperAuthor",
    "PaperComment",
    "PaperRating",
    "Reply",
    "SocialLinks",
    "User",
    "UserPreferences",
    "format_file_size",
]
