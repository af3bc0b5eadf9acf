"""Synchronous HTTP prefix reader using requests."""

from __future__ import annotations

from typing import Mapping, Optional

import requests
import structlog

from ..config import get_settings
from ..core.matcher import detect
from ..core.model import DetectionResult
from .base import FetchError, check_prefix_size
from .stream import read_prefix

logger = structlog.get_logger(__name__)

_CHUNK_SIZE = 8192


class HTTPRangeReader:
    """Fetch the first bytes of a URL with a single ranged GET.

    A session passed in by the caller is borrowed and never closed;
    otherwise the reader creates one and closes it in close().
    """

    def __init__(
        self,
        url: str,
        *,
        session: Optional[requests.Session] = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
    ):
        self.url = url
        self.headers = dict(headers or {})
        self.timeout = timeout if timeout is not None else get_settings().http_timeout
        self.bytes_fetched = 0
        self.requests_made = 0
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    def read_prefix(self, size: int) -> bytes:
        """Return at most `size` bytes from the start of the resource."""
        check_prefix_size(size)
        headers = dict(self.headers)
        headers["Range"] = f"bytes=0-{size - 1}"

        try:
            with self._session.get(self.url, headers=headers, timeout=self.timeout, stream=True) as response:
                self.requests_made += 1
                logger.debug("range request", url=self.url, status=response.status_code)
                # 206 when honoured, 200 when the server ignores Range
                if not 200 <= response.status_code < 300:
                    raise FetchError(
                        f"HTTP error: {response.status_code}",
                        url=self.url,
                        status_code=response.status_code,
                    )
                data = read_prefix(response.iter_content(chunk_size=min(size, _CHUNK_SIZE)), size)
        except requests.RequestException as e:
            raise FetchError(f"GET request failed: {e}", url=self.url) from e

        self.bytes_fetched += len(data)
        return data

    def close(self):
        """Close the session if this reader created it."""
        if self._owns_session and self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def open_http_reader(url: str, **kwargs) -> HTTPRangeReader:
    """Create a synchronous HTTP prefix reader."""
    return HTTPRangeReader(url, **kwargs)


def detect_url(
    url: str,
    *,
    prefix_size: Optional[int] = None,
    session: Optional[requests.Session] = None,
    headers: Optional[Mapping[str, str]] = None,
    timeout: Optional[float] = None,
) -> DetectionResult | None:
    """Detect the format of a remote resource from its first bytes.

    Non-2xx responses and transport failures raise FetchError.
    """
    size = prefix_size if prefix_size is not None else get_settings().prefix_size
    with HTTPRangeReader(url, session=session, headers=headers, timeout=timeout) as reader:
        return detect(reader.read_prefix(size))
