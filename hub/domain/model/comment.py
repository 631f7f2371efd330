"""Paper comment entity.

Comments on a paper form a thread through ``parent_id``. The stored form is
flat; the nested view is rebuilt on every read by
``hub.domain.thread.build_forest``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, computed_field

from hub.domain.model.common import DomainModel, utcnow
from hub.domain.value import CommentId, PaperId, UserId


class PaperComment(DomainModel):
    """Comment on a paper, or a reply to another comment on the same paper."""

    id: CommentId
    paper_id: PaperId
    author_id: UserId
    content: str = Field(min_length=1, max_length=1000)
    parent_id: Optional[CommentId] = None
    is_edited: bool = False
    edited_at: Optional[datetime] = None
    likes: list[UserId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @computed_field
    @property
    def like_count(self) -> int:
        """Number of users who liked the comment."""
        return len(self.likes)

    def edit(self, content: str) -> "PaperComment":
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

    def toggle_like(self, user_id: UserId) -> "PaperComment":
        """Return a copy with the user's like added or removed."""
        if user_id in self.likes:
            likes = [u for u in self.likes if u != user_id]
        else:
            likes = [*self.likes, user_id]
        return self.model_copy(update={"likes": likes, "updated_at": utcnow()})
