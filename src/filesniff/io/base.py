"""Base protocols and shared types for I/O layer."""

from typing import Protocol, runtime_checkable

from ..config import DEFAULT_PREFIX_SIZE  # noqa: F401


class FetchError(IOError):
    """Raised when a remote prefix cannot be fetched (bad status or transport failure)."""

    def __init__(self, message: str, *, url: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


def check_prefix_size(size: int) -> int:
    if size <= 0:
        raise ValueError(f"Prefix size must be positive, got {size}")
    return size


@runtime_checkable
class PrefixReader(Protocol):
    """Protocol for synchronous prefix readers."""

    bytes_fetched: int  # running total

    def read_prefix(self, size: int) -> bytes:
        """Return at most `size` bytes from the start of the source.
        Fewer bytes are returned only when the source is shorter.
        """
        ...


@runtime_checkable
class AsyncPrefixReader(Protocol):
    """Protocol for asynchronous prefix readers."""

    bytes_fetched: int  # running total

    async def read_prefix(self, size: int) -> bytes:
        """Return at most `size` bytes from the start of the source.
        Fewer bytes are returned only when the source is shorter.
        """
        ...
