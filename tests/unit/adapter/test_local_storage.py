"""Unit tests for LocalFileStorage against a temporary directory."""

from pathlib import Path

import pytest

from hub.adapter.error import StorageError, UploadTooLargeError
from hub.adapter.storage import LocalFileStorage


async def body(*parts: bytes):
    for part in parts:
        yield part


def staging_files(storage: LocalFileStorage) -> list[Path]:
    if not storage.staging.exists():
        return []
    return list(storage.staging.iterdir())


class TestLocalFileStorage:
    """Tests for staging, committing and reading papers on disk."""

    @pytest.mark.asyncio
    async def test_oversized_upload_leaves_nothing_staged(self, tmp_path):
        storage = LocalFileStorage(tmp_path / "papers")

        with pytest.raises(UploadTooLargeError):
            await storage.stage(
                body(b"a" * 6, b"b" * 6), "big.pdf", "application/pdf", max_bytes=10
            )

        assert staging_files(storage) == []

    @pytest.mark.asyncio
    async def test_error_while_staged_discards_file(self, tmp_path):
        """A failure while saving the record throws the upload away."""
        storage = LocalFileStorage(tmp_path / "papers")

        with pytest.raises(RuntimeError, match="record not saved"):
            async with storage.staged(
                body(b"%PDF-1.7"), "paper.pdf", "application/pdf", max_bytes=1024
            ) as staged:
                assert (storage.staging / staged.file_name).exists()
                raise RuntimeError("record not saved")

        assert staging_files(storage) == []
        assert not Path(staged.file_path).exists()

    @pytest.mark.asyncio
    async def test_clean_exit_commits_readable_file(self, tmp_path):
        storage = LocalFileStorage(tmp_path / "papers")

        async with storage.staged(
            body(b"%PDF-", b"1.7 body"), "Paper.PDF", "application/pdf", max_bytes=1024
        ) as staged:
            pass

        chunks = [chunk async for chunk in storage.stream(staged.file_path)]

        assert staged.size == 13
        assert staged.file_name.endswith(".pdf")
        assert Path(staged.file_path).parent == tmp_path / "papers"
        assert b"".join(chunks) == b"%PDF-1.7 body"
        assert await storage.exists(staged.file_path)
        assert staging_files(storage) == []

    @pytest.mark.asyncio
    async def test_delete_then_stream_fails(self, tmp_path):
        storage = LocalFileStorage(tmp_path / "papers")
        async with storage.staged(
            body(b"text"), "notes.txt", "text/plain", max_bytes=1024
        ) as staged:
            pass

        await storage.delete(staged.file_path)
        await storage.delete(staged.file_path)

        assert not await storage.exists(staged.file_path)
        with pytest.raises(StorageError, match="File not found"):
            [chunk async for chunk in storage.stream(staged.file_path)]
