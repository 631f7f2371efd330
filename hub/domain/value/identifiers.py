"""Strongly typed identifiers for Research Hub entities.

NewType keeps group, paper and user ids from being mixed up at call sites.
"""

from typing import NewType
from uuid import UUID

from hub.domain.error import ValidationError

UserId = NewType("UserId", UUID)
GroupId = NewType("GroupId", UUID)
InvitationId = NewType("InvitationId", UUID)
PaperId = NewType("PaperId", UUID)
CommentId = NewType("CommentId", UUID)
DiscussionId = NewType("DiscussionId", UUID)
ReplyId = NewType("ReplyId", UUID)


def parse_id(value: str) -> UUID:
    """Parse an identifier received from a client.

    Raises:
        ValidationError: If ``value`` is not a UUID
    """
    try:
        return UUID(str(value))
    except ValueError:
        raise ValidationError("Invalid ID format")
