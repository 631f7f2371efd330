"""Local disk storage using aiofiles."""

from collections.abc import AsyncIterator
from pathlib import Path

import aiofiles
import aiofiles.os
import logfire

from hub.adapter.error import StorageError, UploadTooLargeError
from hub.adapter.storage.base import FileStorage, StagedFile, unique_file_name

CHUNK_SIZE = 64 * 1024
STAGING_DIR = ".staging"


class LocalFileStorage(FileStorage):
    """Stores papers under one directory, staging in a hidden subdirectory."""

    def __init__(self, directory: Path) -> None:
        """Initialize local storage.

        Args:
            directory: Final location of committed files
        """
        self.directory = directory
        self.staging = directory / STAGING_DIR

    def _staging_path(self, staged: StagedFile) -> Path:
        return self.staging / staged.file_name

    async def stage(
        self,
        chunks: AsyncIterator[bytes],
        original_name: str,
        mime_type: str,
        max_bytes: int,
    ) -> StagedFile:
        """Write the upload into the staging directory."""
        file_name = unique_file_name(original_name)
        target = self.staging / file_name

        with logfire.span("local_file_storage.stage", file_name=file_name):
            size = 0
            try:
                await aiofiles.os.makedirs(self.staging, exist_ok=True)
                async with aiofiles.open(target, "wb") as out:
                    async for chunk in chunks:
                        size += len(chunk)
                        if size > max_bytes:
                            raise UploadTooLargeError(max_bytes)
                        await out.write(chunk)
            except UploadTooLargeError:
                await self._remove(target)
                logfire.warn("Upload rejected as too large", max_bytes=max_bytes)
                raise
            except OSError as e:
                await self._remove(target)
                logfire.error("Failed to stage upload", error=str(e))
                raise StorageError(f"Could not store upload: {e}") from e

            logfire.info("Upload staged", file_name=file_name, size=size)
            return StagedFile(
                file_name=file_name,
                original_name=original_name,
                mime_type=mime_type,
                size=size,
                file_path=str(self.directory / file_name),
            )

    async def commit(self, staged: StagedFile) -> None:
        """Rename the staged file into the upload directory."""
        with logfire.span("local_file_storage.commit", file_name=staged.file_name):
            try:
                await aiofiles.os.rename(self._staging_path(staged), staged.file_path)
            except OSError as e:
                await self._remove(self._staging_path(staged))
                logfire.error("Failed to commit upload", error=str(e))
                raise StorageError(f"Could not store upload: {e}") from e
            logfire.info("Upload committed", file_path=staged.file_path)

    async def discard(self, staged: StagedFile) -> None:
        """Delete the staged file."""
        await self._remove(self._staging_path(staged))
        logfire.info("Staged upload discarded", file_name=staged.file_name)

    async def exists(self, file_path: str) -> bool:
        """Check the file is on disk."""
        return await aiofiles.os.path.exists(file_path)

    async def stream(self, file_path: str) -> AsyncIterator[bytes]:
        """Yield the file in fixed-size chunks."""
        try:
            async with aiofiles.open(file_path, "rb") as f:
                while chunk := await f.read(CHUNK_SIZE):
                    yield chunk
        except FileNotFoundError as e:
            raise StorageError(f"File not found: {file_path}") from e

    async def delete(self, file_path: str) -> None:
        """Delete a committed file."""
        await self._remove(Path(file_path))
        logfire.info("File deleted", file_path=file_path)

    async def _remove(self, path: Path) -> None:
        try:
            await aiofiles.os.remove(path)
        except FileNotFoundError:
            pass
