"""Local file readers using mmap."""

import asyncio
import io
import mmap
from pathlib import Path
from typing import BinaryIO, Union

from .base import check_prefix_size
from .stream import read_prefix as drain_prefix


class LocalByteReader:
    """Synchronous local prefix reader using mmap."""

    def __init__(self, source: Union[Path, str, BinaryIO]):
        self.bytes_fetched = 0
        self.requests_made = 0
        self._file = None
        self._mmap = None
        self._data = None  # For in-memory sources
        self._streaming = False
        self._should_close_file = False

        if hasattr(source, 'read'):
            # BinaryIO object
            self._file = source
            if isinstance(source, io.BytesIO):
                self._data = source.getvalue()
        else:
            # Path or str
            self._file = open(source, 'rb')
            self._should_close_file = True

    def _ensure_mmap(self):
        """Create mmap on first access."""
        if self._mmap is not None or self._data is not None or self._streaming:
            return
        try:
            if self._file.seekable():
                current_pos = self._file.tell()
                self._file.seek(0, 2)
                file_size = self._file.tell()
                self._file.seek(current_pos)
                if file_size == 0:
                    # mmap refuses empty files
                    self._data = b""
                    return
            self._mmap = mmap.mmap(self._file.fileno(), 0, access=mmap.ACCESS_READ)
        except (io.UnsupportedOperation, OSError, ValueError):
            # No usable file descriptor (pipes, wrapped streams): drain on demand
            self._streaming = True

    @property
    def size(self) -> int | None:
        """Return the total size of the source in bytes, or None for non-seekable streams."""
        self._ensure_mmap()
        if self._streaming:
            if not self._file.seekable():
                return None
            current_pos = self._file.tell()
            try:
                return self._file.seek(0, 2)
            finally:
                self._file.seek(current_pos)
        source = self._mmap if self._mmap is not None else self._data
        return len(source)

    def _drain(self, size: int) -> bytes:
        if not self._file.seekable():
            return drain_prefix(self._file, size)
        current_pos = self._file.tell()
        self._file.seek(0)
        try:
            return drain_prefix(self._file, size)
        finally:
            self._file.seek(current_pos)

    def read_prefix(self, size: int) -> bytes:
        """Return the first `size` bytes, or the whole source if it is shorter."""
        check_prefix_size(size)
        self.requests_made += 1
        self._ensure_mmap()

        if self._streaming:
            data = self._drain(size)
        else:
            source = self._mmap if self._mmap is not None else self._data
            data = bytes(source[:size])
        self.bytes_fetched += len(data)
        return data

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        """Close mmap and file if we opened it."""
        if self._mmap is not None:
            self._mmap.close()
            self._mmap = None
        if self._should_close_file and self._file is not None:
            self._file.close()
            self._file = None


class LocalAsyncByteReader:
    """Asynchronous local file reader - thin wrapper around sync reader."""

    def __init__(self, source: Union[Path, str, BinaryIO]):
        self._sync_reader = LocalByteReader(source)

    @property
    def size(self) -> int | None:
        """Return the total size of the source in bytes."""
        return self._sync_reader.size

    @property
    def bytes_fetched(self) -> int:
        return self._sync_reader.bytes_fetched

    @property
    def requests_made(self) -> int:
        return self._sync_reader.requests_made

    async def read_prefix(self, size: int) -> bytes:
        """Return the first `size` bytes, or the whole source if it is shorter."""
        return await asyncio.to_thread(self._sync_reader.read_prefix, size)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self):
        """Close the underlying sync reader."""
        await asyncio.to_thread(self._sync_reader.close)


def open_local_reader(source: Union[Path, str, BinaryIO]) -> LocalByteReader:
    """Create a synchronous local byte reader."""
    return LocalByteReader(source)


async def open_local_reader_async(source: Union[Path, str, BinaryIO]) -> LocalAsyncByteReader:
    """Create an asynchronous local byte reader."""
    return LocalAsyncByteReader(source)
