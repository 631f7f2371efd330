"""User entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field, computed_field, field_validator

from hub.domain.model.common import DomainModel, utcnow
from hub.domain.value import AcademicLevel, Email, ProfileVisibility, Theme, UserId, UserRole


class SocialLinks(DomainModel):
    """Links to a user's external academic and social profiles."""

    linkedin: Optional[str] = None
    twitter: Optional[str] = None
    github: Optional[str] = None
    orcid: Optional[str] = None
    website: Optional[str] = None


class UserPreferences(DomainModel):
    """Per-user settings."""

    email_notifications: bool = True
    profile_visibility: ProfileVisibility = ProfileVisibility.PUBLIC
    theme: Theme = Theme.LIGHT


class User(DomainModel):
    """Registered researcher.

    The password hash is stored on the entity but never leaves the domain:
    response models are built field by field and do not include it.
    """

    id: UserId
    email: Email
    password_hash: str = Field(repr=False)
    first_name: str = Field(min_length=1, max_length=50)
    last_name: str = Field(min_length=1, max_length=50)
    avatar: Optional[str] = None
    bio: Optional[str] = Field(default=None, max_length=500)
    phone: Optional[str] = None
    institution: str = Field(min_length=1, max_length=100)
    department: Optional[str] = Field(default=None, max_length=100)
    field_of_study: str = Field(min_length=1, max_length=100)
    academic_level: AcademicLevel
    graduation_year: Optional[int] = None
    research_interests: list[str] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    social_links: SocialLinks = Field(default_factory=SocialLinks)
    preferences: UserPreferences = Field(default_factory=UserPreferences)
    is_email_verified: bool = False
    is_active: bool = True
    role: UserRole = UserRole.USER
    last_login: Optional[datetime] = None
    login_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @field_validator("graduation_year")
    @classmethod
    def validate_graduation_year(cls, v: Optional[int]) -> Optional[int]:
        """Graduation year must fall between 1900 and ten years from now."""
        if v is None:
            return v
        if v < 1900 or v > utcnow().year + 10:
            raise ValueError("Graduation year is out of range")
        return v

    @field_validator("research_interests")
    @classmethod
    def validate_research_interests(cls, v: list[str]) -> list[str]:
        """Each research interest is at most 50 characters."""
        if any(len(interest) > 50 for interest in v):
            raise ValueError("Research interest cannot exceed 50 characters")
        return v

    @field_validator("skills")
    @classmethod
    def validate_skills(cls, v: list[str]) -> list[str]:
        """Each skill is at most 30 characters."""
        if any(len(skill) > 30 for skill in v):
            raise ValueError("Skill cannot exceed 30 characters")
        return v

    @computed_field
    @property
    def full_name(self) -> str:
        """First and last name joined."""
        return f"{self.first_name} {self.last_name}"

    @computed_field
    @property
    def profile_completion(self) -> int:
        """Percentage of the core profile fields that are filled in."""
        fields = [
            self.first_name,
            self.last_name,
            self.email.root,
            self.institution,
            self.field_of_study,
            self.academic_level,
            self.bio,
            self.avatar,
            self.department,
        ]
        completed = sum(1 for value in fields if value)
        return round(completed / len(fields) * 100)

    @property
    def is_admin(self) -> bool:
        """Whether the user has the admin role."""
        return self.role == UserRole.ADMIN

    def record_login(self) -> "User":
        """Return a copy with the login timestamp and counter updated."""
        now = utcnow()
        return self.model_copy(
            update={
                "last_login": now,
                "login_count": self.login_count + 1,
                "updated_at": now,
            }
        )
