"""I/O layer for filesniff - delivers byte prefixes to the matcher."""

# Re-export these for import convenience
from .base import PrefixReader, AsyncPrefixReader, FetchError, DEFAULT_PREFIX_SIZE
from .local import open_local_reader, open_local_reader_async
from .http_sync import open_http_reader
from .http_async import open_http_reader_async


def _is_url(source) -> bool:
    return isinstance(source, str) and source.startswith(('http://', 'https://'))


def open_reader(source, **http_options):
    """Factory function to create appropriate PrefixReader based on source type."""
    if hasattr(source, 'read'):  # BinaryIO
        return open_local_reader(source)

    if _is_url(source):
        return open_http_reader(source, **http_options)
    return open_local_reader(source)


async def open_reader_async(source, **http_options):
    """Factory function to create appropriate AsyncPrefixReader based on source type."""
    if hasattr(source, 'read'):  # BinaryIO
        return await open_local_reader_async(source)

    if _is_url(source):
        return await open_http_reader_async(source, **http_options)
    return await open_local_reader_async(source)
