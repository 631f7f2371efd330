"""Domain value objects for Research Hub.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
import secrets
from enum import Enum

from pydantic import field_validator

from hub.domain.value.common import RootValueObject

EMAIL_PATTERN = re.compile(r"^\w+([.-]?\w+)*@\w+([.-]?\w+)*(\.\w{2,3})+$")


class AcademicLevel(str, Enum):
    """Academic career stage of a user."""

    UNDERGRADUATE = "undergraduate"
    GRADUATE = "graduate"
    PHD = "phd"
    POSTDOC = "postdoc"
    FACULTY = "faculty"
    RESEARCHER = "researcher"


class UserRole(str, Enum):
    """Platform-wide role."""

    USER = "user"
    ADMIN = "admin"
    MODERATOR = "moderator"


class ProfileVisibility(str, Enum):
    """Who can see a user's profile."""

    PUBLIC = "public"
    INSTITUTION = "institution"
    PRIVATE = "private"


class Theme(str, Enum):
    """UI theme preference."""

    LIGHT = "light"
    DARK = "dark"
    AUTO = "auto"


class GroupRole(str, Enum):
    """Relationship between a user and a group."""

    OWNER = "owner"
    MEMBER = "member"
    VISITOR = "visitor"


class InvitationStatus(str, Enum):
    """Status of a group invitation."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"
    EXPIRED = "expired"


class PaperCategory(str, Enum):
    """Kind of uploaded paper."""

    RESEARCH = "research"
    REVIEW = "review"
    THESIS = "thesis"
    CONFERENCE = "conference"
    JOURNAL = "journal"
    PREPRINT = "preprint"
    OTHER = "other"


class DiscussionCategory(str, Enum):
    """Discussion board category."""

    GENERAL = "general"
    RESEARCH = "research"
    QUESTIONS = "questions"
    ANNOUNCEMENTS = "announcements"
    IDEAS = "ideas"

    @property
    def display_name(self) -> str:
        """Human-readable category label."""
        return {
            DiscussionCategory.GENERAL: "General Discussion",
            DiscussionCategory.RESEARCH: "Research Topics",
            DiscussionCategory.QUESTIONS: "Questions & Help",
            DiscussionCategory.ANNOUNCEMENTS: "Announcements",
            DiscussionCategory.IDEAS: "Ideas & Brainstorming",
        }[self]


class ReactionKind(str, Enum):
    """Reaction a member can toggle on a reply."""

    LIKE = "like"
    HELPFUL = "helpful"


class Email(RootValueObject[str]):
    """Email address, normalized to lowercase."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Trim, lowercase and check the address shape."""
        normalized = v.strip().lower()
        if not EMAIL_PATTERN.match(normalized):
            raise ValueError("Please enter a valid email")
        return normalized


class InvitationToken(RootValueObject[str]):
    """Opaque invitation token (64 hex characters)."""

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token is not empty."""
        if not v:
            raise ValueError("Invitation token cannot be empty")
        return v

    @classmethod
    def generate(cls) -> "InvitationToken":
        """Create a fresh random token from 32 random bytes."""
        return cls(secrets.token_hex(32))
