"""PostgreSQL repository implementations."""

from hub.persistence.repository.comment import PostgresCommentRepository
from hub.persistence.repository.discussion import (
    PostgresDiscussionRepository,
    PostgresReplyRepository,
)
from hub.persistence.repository.group import PostgresGroupRepository
from hub.persistence.repository.invitation import PostgresInvitationRepository
from hub.persistence.repository.paper import PostgresPaperRepository
from hub.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresGroupRepository",
    "PostgresInvitationRepository",
    "PostgresPaperRepository",
    "PostgresCommentRepository",
    "PostgresDiscussionRepository",
    "PostgresReplyRepository",
]
