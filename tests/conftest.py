"""Test configuration and fixtures."""

import os

# Test defaults, read by Settings inside every test container
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret-that-is-long-enough-for-hs256")

from hub.domain.model import Group, User  # noqa: E402
from hub.domain.service import GroupService, UserService  # noqa: E402
from hub.domain.value import AcademicLevel  # noqa: E402

PASSWORD = "secret123"


async def register_user(
    user_service: UserService,
    email: str = "alice@uni.edu",
    password: str = PASSWORD,
    **overrides,
) -> User:
    """Helper to register a user with a complete academic profile."""
    fields = {
        "first_name": "Alice",
        "last_name": "Smith",
        "institution": "MIT",
        "field_of_study": "Biology",
        "academic_level": AcademicLevel.PHD,
    }
    fields.update(overrides)
    return await user_service.register(email=email, password=password, **fields)


async def create_group(
    group_service: GroupService,
    owner: User,
    name: str = "Neuro Lab",
    is_public: bool = True,
) -> Group:
    """Helper to create a group owned by ``owner``."""
    return await group_service.create_group(
        owner_id=owner.id,
        name=name,
        description="Computational neuroscience reading group",
        is_public=is_public,
        field_of_study="Neuroscience",
    )


def registration_payload(email: str = "alice@uni.edu", **overrides) -> dict:
    """JSON body for POST /auth/register."""
    payload = {
        "email": email,
        "password": PASSWORD,
        "confirm_password": PASSWORD,
        "first_name": "Alice",
        "last_name": "Smith",
        "institution": "MIT",
        "field_of_study": "Biology",
        "academic_level": "phd",
    }
    payload.update(overrides)
    return payload
