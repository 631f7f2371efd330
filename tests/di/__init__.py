"""Mock providers for testing."""

from .email import MockEmailProvider
from .persistence import MockPersistenceProvider
from .storage import MockStorageProvider
from .container import build_test_container

__all__ = [
    "MockEmailProvider",
    "MockPersistenceProvider",
    "MockStorageProvider",
    "build_test_container",
]
