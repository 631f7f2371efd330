"""Discussion and reply entities.

A discussion is a topic opened inside a group. Replies hang off the
discussion and may answer one another through ``parent_id``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, computed_field, field_validator

from hub.domain.model.common import DomainModel, utcnow
from hub.domain.value import (
    DiscussionCategory,
    DiscussionId,
    GroupId,
    ReactionKind,
    ReplyId,
    UserId,
)


class LastReply(DomainModel):
    """Who replied last and when."""

    author_id: UserId
    created_at: datetime


class Discussion(DomainModel):
    """Discussion topic in a group."""

    id: DiscussionId
    group_id: GroupId
    author_id: UserId
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1, max_length=5000)
    category: DiscussionCategory = DiscussionCategory.GENERAL
    tags: list[str] = Field(default_factory=list)
    is_pinned: bool = False
    is_locked: bool = False
    reply_count: int = Field(default=0, ge=0)
    last_activity: datetime = Field(default_factory=utcnow)
    last_reply: Optional[LastReply] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: list[str]) -> list[str]:
        """Tags are trimmed, blanks dropped, each at most 50 characters."""
        tags = [tag.strip() for tag in v if tag.strip()]
        if any(len(tag) > 50 for tag in tags):
            raise ValueError("Tag cannot exceed 50 characters")
        return tags

    @computed_field
    @property
    def category_display(self) -> str:
        """Human-readable category label."""
        return self.category.display_name

    def record_reply(self, author_id: UserId, at: datetime) -> "Discussion":
        """Return a copy that accounts for a new reply."""
        return self.model_copy(
            update={
                "reply_count": self.reply_count + 1,
                "last_activity": at,
                "last_reply": LastReply(author_id=author_id, created_at=at),
                "updated_at": at,
            }
        )

    def forget_reply(self) -> "Discussion":
        """Return a copy with the reply count decremented, never below zero."""
        return self.model_copy(
            update={"reply_count": max(0, self.reply_count - 1), "updated_at": utcnow()}
        )


class Reply(DomainModel):
    """Reply to a discussion or to another reply in the same discussion."""

    id: ReplyId
    discussion_id: DiscussionId
    author_id: UserId
    content: str = Field(min_length=1, max_length=3000)
    parent_id: Optional[ReplyId] = None
    is_edited: bool = False
    edited_at: Optional[datetime] = None
    likes: list[UserId] = Field(default_factory=list)
    helpful: list[UserId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @computed_field
    @property
    def like_count(self) -> int:
        """Number of like reactions."""
        return len(self.likes)

    @computed_field
    @property
    def helpful_count(self) -> int:
        """Number of helpful reactions."""
        return len(self.helpful)

    def edit(self, content: str) -> "Reply":
        """Return a copy with new content, marked as edited."""
        now = utcnow()
        return self.model_copy(
            update={
                "content": content,
                "is_edited": True,
                "edited_at": now,
                "updated_at": now,
            }
        )

    def toggle_reaction(self, kind: ReactionKind, user_id: UserId) -> "Reply":
        """Return a copy with the user's reaction of ``kind`` flipped."""
        field = "likes" if kind == ReactionKind.LIKE else "helpful"
        current: list[UserId] = getattr(self, field)
        if user_id in current:
            updated = [u for u in current if u != user_id]
        else:
            updated = [*current, user_id]
        return self.model_copy(update={field: updated, "updated_at": utcnow()})
