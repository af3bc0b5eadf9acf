"""filesniff - identify file formats from their first bytes."""

from .core.model import DetectionResult, UnsupportedBlobError                 # re-export
from .core.registry import SignatureRegistry, default_registry               # singleton
from .core.matcher import detect
from .core.categories import (
    categories, is_image, is_video, is_audio, is_document, is_archive, is_font, is_executable,
)
from .config import get_settings
from .io import open_reader, open_reader_async, FetchError, DEFAULT_PREFIX_SIZE
from .io.stream import detect_stream, detect_stream_async
from .io.blob import detect_blob, detect_blob_async
from .io.http_sync import detect_url
from .io.http_async import detect_url_async
from .logging_config import configure_logging


async def detect_source(source, *, prefix_size: int | None = None, **http_options) -> DetectionResult | None:
    """Detect the format of a path, URL, or binary file-like object asynchronously."""
    size = prefix_size if prefix_size is not None else get_settings().prefix_size
    reader = await open_reader_async(source, **http_options)
    try:
        prefix = await reader.read_prefix(size)
    finally:
        await reader.aclose()
    return detect(prefix)


def detect_source_sync(source, *, prefix_size: int | None = None, **http_options) -> DetectionResult | None:
    """Detect the format of a path, URL, or binary file-like object synchronously."""
    size = prefix_size if prefix_size is not None else get_settings().prefix_size
    reader = open_reader(source, **http_options)
    try:
        prefix = reader.read_prefix(size)
    finally:
        reader.close()
    return detect(prefix)


__all__ = [
    "detect", "detect_source", "detect_source_sync",
    "detect_stream", "detect_stream_async",
    "detect_blob", "detect_blob_async",
    "detect_url", "detect_url_async",
    "is_image", "is_video", "is_audio", "is_document", "is_archive", "is_font", "is_executable",
    "categories",
    "DetectionResult", "SignatureRegistry", "default_registry",
    "FetchError", "UnsupportedBlobError", "DEFAULT_PREFIX_SIZE",
    "configure_logging",
]
