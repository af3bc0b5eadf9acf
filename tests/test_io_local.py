"""Tests for local file I/O."""

import pytest
import tempfile
from pathlib import Path
import io

from filesniff import DetectionResult, detect_source_sync
from filesniff.io.local import LocalByteReader, LocalAsyncByteReader, open_local_reader, open_local_reader_async


class TestLocalByteReader:
    """Test synchronous local prefix reader."""

    def test_basic_prefix(self):
        """Test prefix reads are counted."""
        test_data = b"0123456789"

        with tempfile.NamedTemporaryFile() as f:
            f.write(test_data)
            f.flush()

            reader = LocalByteReader(f.name)

            assert reader.read_prefix(5) == b"01234"
            assert reader.read_prefix(3) == b"012"
            assert reader.size == 10

            # Check bytes_fetched accounting
            assert reader.bytes_fetched == 8  # 5 + 3
            assert reader.requests_made == 2

            reader.close()

    def test_prefix_longer_than_file(self):
        """Short files return what they have."""
        with tempfile.NamedTemporaryFile() as f:
            f.write(b"\xFF\xD8\xFF")
            f.flush()

            with LocalByteReader(f.name) as reader:
                assert reader.read_prefix(4096) == b"\xFF\xD8\xFF"
                assert reader.bytes_fetched == 3

    def test_binary_io_source(self):
        """Test using BytesIO as source."""
        bio = io.BytesIO(b"0123456789")

        reader = LocalByteReader(bio)

        assert reader.read_prefix(5) == b"01234"
        assert reader.bytes_fetched == 5

        reader.close()
        # caller-owned streams stay open
        assert not bio.closed

    def test_open_file_source(self):
        """Test using an already-open file object."""
        with tempfile.NamedTemporaryFile() as f:
            f.write(b"%PDF-1.7\n")
            f.flush()

            with open(f.name, "rb") as fh:
                reader = LocalByteReader(fh)
                assert reader.read_prefix(4) == b"%PDF"
                reader.close()
                assert not fh.closed

    def test_path_source(self):
        """Test using Path as source."""
        test_data = b"0123456789"

        with tempfile.NamedTemporaryFile(delete=False) as f:
            f.write(test_data)
            f.flush()
            temp_path = Path(f.name)

        try:
            reader = LocalByteReader(temp_path)

            assert reader.read_prefix(5) == b"01234"
            assert reader.bytes_fetched == 5

            reader.close()
        finally:
            temp_path.unlink()

    def test_empty_file(self):
        """Empty files yield an empty prefix."""
        with tempfile.NamedTemporaryFile() as f:
            with LocalByteReader(f.name) as reader:
                assert reader.read_prefix(16) == b""
                assert reader.size == 0

    def test_missing_file(self, tmp_path):
        """Missing files raise from open()."""
        with pytest.raises(FileNotFoundError):
            LocalByteReader(tmp_path / "missing.bin")

    def test_non_positive_size(self):
        with LocalByteReader(io.BytesIO(b"abc")) as reader:
            with pytest.raises(ValueError):
                reader.read_prefix(-1)


class TestLocalAsyncByteReader:
    """Test asynchronous local prefix reader."""

    @pytest.mark.asyncio
    async def test_basic_prefix(self):
        """Test basic async prefix read."""
        test_data = b"0123456789"

        with tempfile.NamedTemporaryFile() as f:
            f.write(test_data)
            f.flush()

            reader = LocalAsyncByteReader(f.name)

            assert await reader.read_prefix(5) == b"01234"
            assert reader.bytes_fetched == 5
            assert reader.requests_made == 1

            await reader.aclose()

    @pytest.mark.asyncio
    async def test_context_manager(self):
        """Test async context manager usage."""
        test_data = b"0123456789"

        with tempfile.NamedTemporaryFile() as f:
            f.write(test_data)
            f.flush()

            async with LocalAsyncByteReader(f.name) as reader:
                assert await reader.read_prefix(5) == b"01234"
                assert reader.size == 10


class TestFactoryFunctions:
    """Test factory functions."""

    def test_open_local_reader(self):
        """Test sync factory function."""
        with tempfile.NamedTemporaryFile() as f:
            f.write(b"0123456789")
            f.flush()

            reader = open_local_reader(f.name)
            assert isinstance(reader, LocalByteReader)
            assert reader.read_prefix(5) == b"01234"
            reader.close()

    @pytest.mark.asyncio
    async def test_open_local_reader_async(self):
        """Test async factory function."""
        with tempfile.NamedTemporaryFile() as f:
            f.write(b"0123456789")
            f.flush()

            reader = await open_local_reader_async(f.name)
            assert isinstance(reader, LocalAsyncByteReader)
            assert await reader.read_prefix(5) == b"01234"
            await reader.aclose()


class CountingRawStream(io.RawIOBase):
    """Non-seekable stream with no file descriptor that counts the bytes it hands out."""

    def __init__(self, data: bytes):
        self._buf = io.BytesIO(data)
        self.consumed = 0

    def readable(self):
        return True

    def readinto(self, b):
        chunk = self._buf.read(len(b))
        b[:len(chunk)] = chunk
        self.consumed += len(chunk)
        return len(chunk)


class TestStreamingFallback:
    """Sources without a usable file descriptor are drained only up to the cap."""

    PNG_STREAM = b"\x89PNG\r\n\x1a\n\x00\x00\x00\x0dIHDR" + b"\x00" * (8 * 1024 * 1024)

    def test_stops_at_prefix_size(self):
        stream = CountingRawStream(self.PNG_STREAM)

        assert detect_source_sync(stream, prefix_size=4096) == DetectionResult("image/png", "png")
        assert stream.consumed <= 4096
        assert not stream.closed

    def test_reader_on_non_seekable_stream(self):
        stream = CountingRawStream(b"%PDF-1.7\n" + b"x" * 10000)

        with LocalByteReader(stream) as reader:
            assert reader.read_prefix(4) == b"%PDF"
            assert reader.bytes_fetched == 4
            assert reader.size is None
        assert stream.consumed == 4

    @pytest.mark.asyncio
    async def test_async_reader_stops_at_prefix_size(self):
        stream = CountingRawStream(self.PNG_STREAM)

        async with LocalAsyncByteReader(stream) as reader:
            assert (await reader.read_prefix(16))[:8] == b"\x89PNG\r\n\x1a\n"
        assert stream.consumed <= 16
