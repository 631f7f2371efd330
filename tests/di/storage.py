"""Mock file storage provider for testing."""

from dishka import Scope, provide

from hub.adapter.storage import FileStorage, MockFileStorage
from hub.util.di.infrastructure.storage import StorageProvider


class MockStorageProvider(StorageProvider):
    """Keeps uploaded papers in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_file_storage(self) -> FileStorage:
        """Provide in-memory file storage."""
        return MockFileStorage()
