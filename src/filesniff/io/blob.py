"""Coerce loosely-typed blobs (bytes, int lists, base64 text, streams) into byte streams."""

from __future__ import annotations

import base64
import binascii
import io
from typing import Any

import structlog

from ..core.model import DetectionResult, UnsupportedBlobError
from .stream import detect_stream, detect_stream_async

logger = structlog.get_logger(__name__)


def _decode_text(text: str) -> bytes:
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError):
        logger.debug("blob is not base64, using raw text", length=len(text))
        return text.encode("utf-8")


def _int_list_to_bytes(values) -> bytes:
    try:
        return bytes(values)
    except (TypeError, ValueError) as e:
        raise UnsupportedBlobError(f"Unsupported blob type: sequence is not a list of byte values ({e})") from e


def blob_to_stream(blob: Any, *, allow_async: bool = False) -> Any:
    """Return a byte stream for `blob`.

    bytes-like values and int lists become in-memory streams, text is
    decoded as base64 when it is valid base64 and UTF-8 encoded otherwise,
    and file-like objects or chunk iterables are returned unchanged.
    """
    if isinstance(blob, (bytes, bytearray, memoryview)):
        return io.BytesIO(bytes(blob))
    if isinstance(blob, str):
        return io.BytesIO(_decode_text(blob))
    if isinstance(blob, (list, tuple)):
        if blob and isinstance(blob[0], (bytes, bytearray, memoryview)):
            # a sequence of chunks
            return iter(blob)
        return io.BytesIO(_int_list_to_bytes(blob))
    if hasattr(blob, "read"):
        return blob
    if allow_async and hasattr(blob, "__aiter__"):
        return blob
    if hasattr(blob, "__iter__") and not isinstance(blob, (dict, set, frozenset)):
        return blob
    raise UnsupportedBlobError(f"Unsupported blob type: {type(blob).__name__}")


def detect_blob(blob: Any, *, prefix_size: int | None = None) -> DetectionResult | None:
    """Detect the format of a blob."""
    return detect_stream(blob_to_stream(blob), prefix_size=prefix_size)


async def detect_blob_async(blob: Any, *, prefix_size: int | None = None) -> DetectionResult | None:
    """Detect the format of a blob, accepting async streams too."""
    return await detect_stream_async(blob_to_stream(blob, allow_async=True), prefix_size=prefix_size)
