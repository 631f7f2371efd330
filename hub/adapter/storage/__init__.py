"""Paper file storage adapter."""

from .base import FileStorage, StagedFile, unique_file_name
from .local import LocalFileStorage
from .mock import MockFileStorage

__all__ = [
    "FileStorage",
    "LocalFileStorage",
    "MockFileStorage",
    "StagedFile",
    "unique_file_name",
]
