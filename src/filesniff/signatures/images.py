from ..core.signature import Condition, entry, sig

_ANY4 = (None,) * 4

ENTRIES = (
    entry("image/jpeg", sig(b"\xFF\xD8\xFF", "jpg")),
    entry("image/png", sig(b"\x89PNG\r\n\x1a\n", "png")),
    entry("image/gif", sig([*b"GIF8", None, *b"a"], "gif", Condition.GIF_VERSION)),
    entry("image/webp", sig([*b"RIFF", *_ANY4, *b"WEBP"], "webp")),
    entry("image/bmp", sig(b"BM", "bmp")),
    entry("image/x-icon", sig(b"\x00\x00\x01\x00", "ico")),
    entry(
        "image/tiff",
        sig(b"II*\x00", "tif"),     # little endian
        sig(b"MM\x00*", "tif"),     # big endian
    ),
    entry(
        "image/x-canon-cr2",
        sig([*b"II*\x00", *_ANY4, *b"CR"], "cr2"),
        sig([*b"MM\x00*", *_ANY4, *b"CR"], "cr2"),
    ),
    entry("image/heif", sig([*_ANY4, *b"ftypheic"], "heic")),
    entry("image/avif", sig([*_ANY4, *b"ftypavif"], "avif")),
    entry(
        "image/jxl",
        sig(b"\xFF\x0A", "jxl"),                              # bare codestream
        sig(b"\x00\x00\x00\x0CJXL \r\n\x87\n", "jxl"),        # ISOBMFF container
    ),
    entry(
        "image/svg+xml",
        sig(b"<svg", "svg"),
        sig(b"<?xml", "svg"),
    ),
)
