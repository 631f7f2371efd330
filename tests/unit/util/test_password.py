"""Unit tests for password hashing and policy."""

from hub.util.password import check_password, hash_password, verify_password


class TestCheckPassword:
    """Tests for the password policy."""

    def test_valid_password(self):
        """Six characters with a lowercase letter and a digit pass."""
        check = check_password("abc123")

        assert check.is_valid
        assert check.errors == []

    def test_short_password_without_digit(self):
        """Every failed rule is reported."""
        check = check_password("abc")

        assert not check.is_valid
        assert "Password must be at least 6 characters long" in check.errors
        assert "Password must contain at least one number" in check.errors

    def test_missing_lowercase(self):
        """Uppercase letters do not satisfy the lowercase rule."""
        check = check_password("ABC123")

        assert check.errors == ["Password must contain at least one lowercase letter"]

    def test_strength_scores(self):
        """Longer passwords with more character classes score higher."""
        assert check_password("abc123").strength == "weak"
        assert check_password("abcdef12").strength == "medium"
        assert check_password("Abcdef12!").strength == "strong"
        assert check_password("abcdef").strength == "weak"


class TestHashing:
    """Tests for bcrypt hashing."""

    def test_hash_and_verify(self):
        """A hash verifies only the original password."""
        hashed = hash_password("secret123", rounds=4)

        assert hashed != "secret123"
        assert verify_password("secret123", hashed)
        assert not verify_password("secret124", hashed)

    def test_malformed_hash_does_not_verify(self):
        """A corrupt stored hash is treated as a mismatch."""
        assert not verify_password("secret123", "not-a-bcrypt-hash")
