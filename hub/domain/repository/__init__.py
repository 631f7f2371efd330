"""Repository interfaces for Research Hub.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from hub.domain.repository.attempt import AttemptStore
from hub.domain.repository.comment import CommentRepository
from hub.domain.repository.discussion import DiscussionRepository, ReplyRepository
from hub.domain.repository.group import GroupRepository
from hub.domain.repository.invitation import InvitationRepository
from hub.domain.repository.paper import PaperQuery, PaperRepository, TagCount
from hub.domain.repository.user import UserRepository

__all__ = [
    "AttemptStore",
    "CommentRepository",
    "DiscussionRepository",
    "GroupRepository",
    "InvitationRepository",
    "PaperQuery",
    "PaperRepository",
    "ReplyRepository",
    "TagCount",
    "UserRepository",
]
