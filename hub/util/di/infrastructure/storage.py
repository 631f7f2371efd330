"""File storage infrastructure providers."""

from dishka import Scope, provide

from hub.adapter.storage import FileStorage, LocalFileStorage
from hub.config import UploadSettings
from hub.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider writing papers to local disk."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_file_storage(self, upload_settings: UploadSettings) -> FileStorage:
        """Provide local file storage rooted at the upload directory."""
        return LocalFileStorage(directory=upload_settings.directory)
