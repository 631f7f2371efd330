"""Profile fields accepted from clients, with their format rules."""

import re
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from hub.domain.model import SocialLinks, UserPreferences

URL_PATTERN = re.compile(r"^https?://.+")
PHONE_PATTERN = re.compile(r"^[\+]?[1-9][\d]{0,15}$")

MAX_RESEARCH_INTERESTS = 10
MAX_SKILLS = 15


class ProfileInput(BaseModel):
    """Optional profile fields shared by registration and profile updates."""

    bio: Optional[str] = Field(default=None, max_length=500)
    phone: Optional[str] = None
    department: Optional[str] = Field(default=None, max_length=100)
    graduation_year: Optional[int] = None
    research_interests: Optional[list[str]] = Field(
        default=None, max_length=MAX_RESEARCH_INTERESTS
    )
    skills: Optional[list[str]] = Field(default=None, max_length=MAX_SKILLS)
    social_links: Optional[SocialLinks] = None
    preferences: Optional[UserPreferences] = None
    avatar: Optional[str] = None

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: Optional[str]) -> Optional[str]:
        """Digits with an optional leading +; spaces, dashes and brackets ignored."""
        if not v:
            return v
        if not PHONE_PATTERN.match(re.sub(r"[\s\-\(\)]", "", v)):
            raise ValueError("Please enter a valid phone number")
        return v

    @field_validator("social_links")
    @classmethod
    def validate_social_links(cls, v: Optional[SocialLinks]) -> Optional[SocialLinks]:
        """Every link given must be an http(s) URL."""
        if v is None:
            return v
        for name, link in v.model_dump().items():
            if link and not URL_PATTERN.match(link):
                raise ValueError(f"{name} must be a valid URL")
        return v

    def profile_changes(self) -> dict[str, Any]:
        """Fields the client actually sent."""
        return self.model_dump(exclude_unset=True)
