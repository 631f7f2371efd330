"""Domain layer errors.

Each error maps to one HTTP status in ``hub.interface.api.errors``.
"""

from pydantic import ValidationError as PydanticValidationError


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Input failed a domain rule.

    Attributes:
        errors: Individual messages, one per failed rule
    """

    def __init__(self, message: str, errors: list[str] | None = None):
        self.message = message
        self.errors = errors or []
        super().__init__(message)

    @classmethod
    def from_pydantic(
        cls, exc: PydanticValidationError, message: str = "Validation failed"
    ) -> "ValidationError":
        """Flatten a pydantic error into one message per failing field."""
        errors = []
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"] if part != "root")
            errors.append(f"{field}: {error['msg']}" if field else error["msg"])
        return cls(message, errors)


class BusinessRuleViolationError(DomainError):
    """Business rule violation error (duplicate name, already a member, ...)."""

    pass


class AuthenticationError(DomainError):
    """Caller identity is missing, invalid or no longer usable."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when an authenticated user lacks a capability on a resource."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")


class RateLimitExceededError(DomainError):
    """Too many attempts inside the current window."""

    def __init__(self, message: str, retry_after: int):
        self.retry_after = retry_after
        super().__init__(message)
