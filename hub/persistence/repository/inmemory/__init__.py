"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .discussion import InMemoryDiscussionRepository, InMemoryReplyRepository
from .group import InMemoryGroupRepository
from .invitation import InMemoryInvitationRepository
from .paper import InMemoryPaperRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryDiscussionRepository",
    "InMemoryGroupRepository",
    "InMemoryInvitationRepository",
    "InMemoryPaperRepository",
    "InMemoryReplyRepository",
    "InMemoryUserRepository",
]
