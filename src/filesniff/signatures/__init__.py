"""Magic-number table, one module per format family.

The order of DEFAULT_TABLE is the match order.
"""

from . import archives, audio, data, documents, executables, fonts, images, video

DEFAULT_TABLE = (
    *images.ENTRIES,
    *documents.ENTRIES,
    *video.ENTRIES,
    *audio.ENTRIES,
    *archives.ENTRIES,
    *executables.ENTRIES,
    *data.ENTRIES,
    *fonts.ENTRIES,
)

__all__ = ["DEFAULT_TABLE"]
