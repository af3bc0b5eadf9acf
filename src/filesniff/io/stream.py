"""Drain the first bytes of a stream without consuming the rest."""

from __future__ import annotations

import inspect
from typing import Any

import structlog

from ..config import get_settings
from ..core.matcher import detect
from ..core.model import DetectionResult
from .base import check_prefix_size

logger = structlog.get_logger(__name__)


def _resolve_size(prefix_size: int | None) -> int:
    return check_prefix_size(prefix_size if prefix_size is not None else get_settings().prefix_size)


def read_prefix(stream: Any, size: int) -> bytes:
    """Read up to `size` bytes from a file-like object or an iterable of chunks.

    Consumption stops as soon as `size` bytes are held; the stream is
    left open and positioned after what was read.
    """
    check_prefix_size(size)
    buf = bytearray()

    if hasattr(stream, "read"):
        while len(buf) < size:
            chunk = stream.read(size - len(buf))
            if not chunk:
                break
            buf.extend(chunk)
    else:
        for chunk in stream:
            buf.extend(chunk)
            if len(buf) >= size:
                break

    logger.debug("stream drained", requested=size, received=min(len(buf), size))
    return bytes(buf[:size])


async def read_prefix_async(stream: Any, size: int) -> bytes:
    """Async variant of read_prefix for async iterables or objects with an awaitable read()."""
    check_prefix_size(size)
    buf = bytearray()

    if hasattr(stream, "read"):
        while len(buf) < size:
            chunk = stream.read(size - len(buf))
            if inspect.isawaitable(chunk):
                chunk = await chunk
            if not chunk:
                break
            buf.extend(chunk)
    elif hasattr(stream, "__aiter__"):
        async for chunk in stream:
            buf.extend(chunk)
            if len(buf) >= size:
                break
    else:
        # plain iterables are accepted too
        for chunk in stream:
            buf.extend(chunk)
            if len(buf) >= size:
                break

    logger.debug("stream drained", requested=size, received=min(len(buf), size))
    return bytes(buf[:size])


def detect_stream(stream: Any, *, prefix_size: int | None = None) -> DetectionResult | None:
    """Detect the format of a synchronous byte stream."""
    return detect(read_prefix(stream, _resolve_size(prefix_size)))


async def detect_stream_async(stream: Any, *, prefix_size: int | None = None) -> DetectionResult | None:
    """Detect the format of an asynchronous byte stream."""
    return detect(await read_prefix_async(stream, _resolve_size(prefix_size)))
