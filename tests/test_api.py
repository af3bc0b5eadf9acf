"""Tests for the source-level helpers and settings."""

import io

import httpx
import pytest

import filesniff
from filesniff import DetectionResult, detect_source, detect_source_sync
from filesniff.config import DEFAULT_PREFIX_SIZE, Settings, get_settings
from filesniff.logging_config import configure_logging

MP4 = b"\x00\x00\x00\x20ftypisom\x00\x00\x02\x00" + b"\x00" * 64


class TestDetectSource:
    """Paths, file objects and URLs all funnel into detect()."""

    def test_sync_path(self, tmp_path):
        path = tmp_path / "clip.mp4"
        path.write_bytes(MP4)
        assert detect_source_sync(path) == DetectionResult("video/mp4", "mp4")
        assert detect_source_sync(str(path)) == DetectionResult("video/mp4", "mp4")

    def test_sync_file_object(self):
        bio = io.BytesIO(MP4)
        assert detect_source_sync(bio) == DetectionResult("video/mp4", "mp4")
        assert not bio.closed

    def test_sync_empty_file(self, tmp_path):
        path = tmp_path / "empty"
        path.write_bytes(b"")
        assert detect_source_sync(path) is None

    @pytest.mark.asyncio
    async def test_async_path(self, tmp_path):
        path = tmp_path / "clip.mp4"
        path.write_bytes(MP4)
        assert await detect_source(path) == DetectionResult("video/mp4", "mp4")

    @pytest.mark.asyncio
    async def test_async_url_with_client(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(206, content=MP4[:16]))
        async with httpx.AsyncClient(transport=transport) as client:
            result = await detect_source("https://example.com/clip", client=client)
        assert result == DetectionResult("video/mp4", "mp4")

    def test_sync_url(self, httpserver):
        httpserver.expect_request("/clip").respond_with_data(MP4)
        assert detect_source_sync(httpserver.url_for("/clip")) == DetectionResult("video/mp4", "mp4")

    def test_missing_path_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            detect_source_sync(tmp_path / "missing")


class TestSettings:
    """Test settings defaults and environment overrides."""

    def test_defaults(self):
        settings = Settings()
        assert settings.prefix_size == DEFAULT_PREFIX_SIZE == 4096
        assert settings.log_level == "WARNING"
        assert settings.log_format == "console"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("FILESNIFF_PREFIX_SIZE", "512")
        monkeypatch.setenv("FILESNIFF_LOG_LEVEL", "debug")
        settings = Settings()
        assert settings.prefix_size == 512
        assert settings.log_level == "DEBUG"

    def test_invalid_values(self, monkeypatch):
        monkeypatch.setenv("FILESNIFF_PREFIX_SIZE", "0")
        with pytest.raises(ValueError):
            Settings()

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestLogging:
    """Test structlog configuration."""

    def test_configure_logging_writes_to_stderr(self, capsys):
        configure_logging(level="DEBUG", fmt="json")
        try:
            filesniff.detect(b"\xFF\xD8\xFF")
            err = capsys.readouterr().err
            assert "signature matched" in err
            assert "image/jpeg" in err
        finally:
            configure_logging()

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            configure_logging(level="chatty")
