"""Password hashing and strength checks."""

import re

import bcrypt
from pydantic import BaseModel

MIN_PASSWORD_LENGTH = 6

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


class PasswordCheck(BaseModel):
    """Result of checking a password against the policy."""

    is_valid: bool
    errors: list[str]
    score: int
    strength: str


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with bcrypt.

    Args:
        password: Plain text password
        rounds: bcrypt cost factor

    Returns:
        bcrypt hash as text
    """
    hashed = bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds))
    return hashed.decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plain text password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False


def check_password(password: str) -> PasswordCheck:
    """Check a password against the policy and score its strength.

    The policy requires at least six characters, one lowercase letter and
    one digit. Uppercase letters and special characters only raise the
    score.
    """
    errors: list[str] = []
    if len(password) < MIN_PASSWORD_LENGTH:
        errors.append(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )
    if not re.search(r"[a-z]", password):
        errors.append("Password must contain at least one lowercase letter")
    if not re.search(r"\d", password):
        errors.append("Password must contain at least one number")

    score = sum(
        [
            len(password) >= 8,
            bool(re.search(r"[a-z]", password)),
            bool(re.search(r"[A-Z]", password)),
            bool(re.search(r"\d", password)),
            bool(re.search(r"[!@#$%^&*(),.?\":{}|<>]", password)),
        ]
    )
    if score < 3:
        strength = "weak"
    elif score < 4:
        strength = "medium"
    else:
        strength = "strong"

    return PasswordCheck(
        is_valid=not errors, errors=errors, score=score, strength=strength
    )
