"""File storage contract.

Uploads are two-phase. ``stage`` writes the incoming bytes somewhere
temporary. ``commit`` moves them to their final location and ``discard``
throws them away. ``staged`` wraps the pair so that any error raised while
the caller persists the paper record discards the staged bytes.
"""

import os
import random
import time
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from pydantic import BaseModel


class StagedFile(BaseModel):
    """Bytes that have been received but not yet committed."""

    file_name: str
    original_name: str
    mime_type: str
    size: int
    file_path: str  # Location after commit


def unique_file_name(original_name: str, prefix: str = "paper") -> str:
    """Collision-resistant stored name that keeps the original extension.

    Example: ``paper-1718000000000-123456789.pdf``
    """
    _, ext = os.path.splitext(original_name)
    millis = int(time.time() * 1000)
    suffix = random.randint(0, 10**9)
    return f"{prefix}-{millis}-{suffix}{ext.lower()}"


class FileStorage(ABC):
    """Stores uploaded paper files."""

    @abstractmethod
    async def stage(
        self,
        chunks: AsyncIterator[bytes],
        original_name: str,
        mime_type: str,
        max_bytes: int,
    ) -> StagedFile:
        """Receive an upload into temporary storage.

        Args:
            chunks: Upload body
            original_name: Client-side file name
            mime_type: Declared content type
            max_bytes: Size limit, checked while reading

        Returns:
            Staged file description

        Raises:
            UploadTooLargeError: If the body exceeds ``max_bytes``
            StorageError: If the bytes could not be written
        """
        pass

    @abstractmethod
    async def commit(self, staged: StagedFile) -> None:
        """Move a staged file to ``staged.file_path``.

        Raises:
            StorageError: If the move failed
        """
        pass

    @abstractmethod
    async def discard(self, staged: StagedFile) -> None:
        """Remove a staged file. Missing files are ignored."""
        pass

    @abstractmethod
    async def exists(self, file_path: str) -> bool:
        """Whether a committed file is present."""
        pass

    @abstractmethod
    def stream(self, file_path: str) -> AsyncIterator[bytes]:
        """Read a committed file in chunks.

        Raises:
            StorageError: If the file is missing
        """
        pass

    @abstractmethod
    async def delete(self, file_path: str) -> None:
        """Remove a committed file. Missing files are ignored."""
        pass

    @asynccontextmanager
    async def staged(
        self,
        chunks: AsyncIterator[bytes],
        original_name: str,
        mime_type: str,
        max_bytes: int,
    ) -> AsyncIterator[StagedFile]:
        """Stage an upload; commit on clean exit, discard on any error.

        Usage:
            async with storage.staged(chunks, name, mime, limit) as staged:
                await repository.save(paper_for(staged))
        """
        staged = await self.stage(chunks, original_name, mime_type, max_bytes)
        try:
            yield staged
        except BaseException:
            await self.discard(staged)
            raise
        try:
            await self.commit(staged)
        except BaseException:
            await self.discard(staged)
            raise
