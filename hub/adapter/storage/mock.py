"""In-memory file storage for tests."""

from collections.abc import AsyncIterator

from hub.adapter.error import StorageError, UploadTooLargeError
from hub.adapter.storage.base import FileStorage, StagedFile, unique_file_name


class MockFileStorage(FileStorage):
    """Keeps staged and committed files in dicts keyed by path.

    Set ``fail_commit`` to make ``commit`` raise, to exercise rollback.
    """

    def __init__(self, directory: str = "uploads/papers") -> None:
        self.directory = directory
        self.staged_files: dict[str, bytes] = {}
        self.files: dict[str, bytes] = {}
        self.fail_commit = False

    async def stage(
        self,
        chunks: AsyncIterator[bytes],
        original_name: str,
        mime_type: str,
        max_bytes: int,
    ) -> StagedFile:
        """Buffer the upload in memory."""
        body = b""
        async for chunk in chunks:
            body += chunk
            if len(body) > max_bytes:
                raise UploadTooLargeError(max_bytes)

        file_name = unique_file_name(original_name)
        self.staged_files[file_name] = body
        return StagedFile(
            file_name=file_name,
            original_name=original_name,
            mime_type=mime_type,
            size=len(body),
            file_path=f"{self.directory}/{file_name}",
        )

    async def commit(self, staged: StagedFile) -> None:
        """Move the buffer from staged to committed."""
        if self.fail_commit:
            self.staged_files.pop(staged.file_name, None)
            raise StorageError("Mock commit failure")
        self.files[staged.file_path] = self.staged_files.pop(staged.file_name)

    async def discard(self, staged: StagedFile) -> None:
        """Drop the staged buffer."""
        self.staged_files.pop(staged.file_name, None)

    async def exists(self, file_path: str) -> bool:
        """Check a committed buffer exists."""
        return file_path in self.files

    async def stream(self, file_path: str) -> AsyncIterator[bytes]:
        """Yield the whole buffer at once."""
        if file_path not in self.files:
            raise StorageError(f"File not found: {file_path}")
        yield self.files[file_path]

    async def delete(self, file_path: str) -> None:
        """Drop a committed buffer."""
        self.files.pop(file_path, None)
