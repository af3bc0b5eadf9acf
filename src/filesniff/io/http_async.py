"""Asynchronous HTTP prefix reader using httpx."""

from __future__ import annotations

from contextlib import aclosing
from typing import Mapping, Optional

import httpx
import structlog

from ..config import get_settings
from ..core.matcher import detect
from ..core.model import DetectionResult
from .base import FetchError, check_prefix_size
from .stream import read_prefix_async

logger = structlog.get_logger(__name__)


class HTTPAsyncRangeReader:
    """Asynchronous counterpart of HTTPRangeReader.

    A client passed in by the caller is borrowed and never closed;
    otherwise the reader creates one and closes it in aclose().
    """

    def __init__(
        self,
        url: str,
        *,
        client: Optional[httpx.AsyncClient] = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
    ):
        self.url = url
        self.headers = dict(headers or {})
        self.timeout = timeout if timeout is not None else get_settings().http_timeout
        self.bytes_fetched = 0
        self.requests_made = 0
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient(timeout=self.timeout)

    async def read_prefix(self, size: int) -> bytes:
        """Return at most `size` bytes from the start of the resource."""
        check_prefix_size(size)
        headers = dict(self.headers)
        headers["Range"] = f"bytes=0-{size - 1}"

        try:
            async with self._client.stream(
                "GET", self.url, headers=headers, timeout=self.timeout, follow_redirects=True,
            ) as response:
                self.requests_made += 1
                logger.debug("range request", url=self.url, status=response.status_code)
                if not response.is_success:
                    raise FetchError(
                        f"HTTP error: {response.status_code}",
                        url=self.url,
                        status_code=response.status_code,
                    )
                async with aclosing(response.aiter_bytes()) as chunks:
                    data = await read_prefix_async(chunks, size)
        except httpx.HTTPError as e:
            raise FetchError(f"GET request failed: {e}", url=self.url) from e

        self.bytes_fetched += len(data)
        return data

    async def aclose(self):
        """Close the client if this reader created it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()


async def open_http_reader_async(url: str, **kwargs) -> HTTPAsyncRangeReader:
    """Create an asynchronous HTTP prefix reader."""
    return HTTPAsyncRangeReader(url, **kwargs)


async def detect_url_async(
    url: str,
    *,
    prefix_size: Optional[int] = None,
    client: Optional[httpx.AsyncClient] = None,
    headers: Optional[Mapping[str, str]] = None,
    timeout: Optional[float] = None,
) -> DetectionResult | None:
    """Async variant of detect_url."""
    size = prefix_size if prefix_size is not None else get_settings().prefix_size
    async with HTTPAsyncRangeReader(url, client=client, headers=headers, timeout=timeout) as reader:
        return detect(await reader.read_prefix(size))
