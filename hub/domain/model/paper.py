"""Paper entity.

A paper is a file uploaded to a group together with its bibliographic
metadata. Comments on a paper live in their own aggregate
(``hub.domain.model.comment``).
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, computed_field, field_validator

from hub.domain.model.common import DomainModel, utcnow
from hub.domain.value import GroupId, PaperCategory, PaperId, UserId

SIZE_UNITS = ["Bytes", "KB", "MB", "GB"]


class PaperAuthor(DomainModel):
    """Author credited on a paper."""

    name: str = Field(min_length=1)
    affiliation: Optional[str] = None


class PaperRating(DomainModel):
    """One user's rating of a paper."""

    user_id: UserId
    rating: int = Field(ge=1, le=5)
    review: Optional[str] = Field(default=None, max_length=300)
    created_at: datetime = Field(default_factory=utcnow)


def format_file_size(size: int) -> str:
    """Format a byte count with two decimals, e.g. ``1.5 MB``."""
    if size == 0:
        return "0 Bytes"
    unit = 0
    value = float(size)
    while value >= 1024 and unit < len(SIZE_UNITS) - 1:
        value /= 1024
        unit += 1
    return f"{round(value, 2):g} {SIZE_UNITS[unit]}"


class Paper(DomainModel):
    """Uploaded paper."""

    id: PaperId
    title: str = Field(min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=1000)
    file_name: str
    original_file_name: str
    file_path: str
    file_size: int = Field(ge=0)
    mime_type: str
    group_id: GroupId
    uploaded_by: UserId
    authors: list[PaperAuthor] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    category: PaperCategory = PaperCategory.RESEARCH
    journal: Optional[str] = None
    published_date: Optional[datetime] = None
    doi: Optional[str] = None
    url: Optional[str] = None
    is_public: bool = False
    download_count: int = Field(default=0, ge=0)
    view_count: int = Field(default=0, ge=0)
    ratings: list[PaperRating] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, v: list[str]) -> list[str]:
        """Tags are trimmed and lowercased; blanks are dropped."""
        return [tag.strip().lower() for tag in v if tag.strip()]

    @computed_field
    @property
    def average_rating(self) -> float:
        """Mean rating rounded to one decimal, 0 when unrated."""
        if not self.ratings:
            return 0
        total = sum(r.rating for r in self.ratings)
        return round(total / len(self.ratings), 1)

    @computed_field
    @property
    def file_size_formatted(self) -> str:
        """File size for display."""
        return format_file_size(self.file_size)

    def add_rating(
        self, user_id: UserId, rating: int, review: Optional[str] = None
    ) -> "Paper":
        """Return a copy with the user's rating replaced by a new one."""
        ratings = [r for r in self.ratings if r.user_id != user_id]
        ratings.append(PaperRating(user_id=user_id, rating=rating, review=review))
        return self.model_copy(update={"ratings": ratings, "updated_at": utcnow()})
