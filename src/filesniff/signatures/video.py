from ..core.signature import Condition, entry, sig

_ANY4 = (None,) * 4
_EBML = b"\x1A\x45\xDF\xA3"

ENTRIES = (
    entry("video/mp4", sig([*_ANY4, *b"ftyp", *_ANY4], "mp4", Condition.MP4_BRAND)),
    entry("video/webm", sig(_EBML, "webm")),
    entry("video/x-matroska", sig(_EBML, "mkv")),
    entry("video/avi", sig([*b"RIFF", *_ANY4, *b"AVI "], "avi")),
    entry(
        "video/quicktime",
        sig([*_ANY4, *b"ftypqt  "], "mov"),
        sig(b"moov", "mov"),
    ),
    entry("video/x-flv", sig(b"FLV\x01", "flv")),
    entry("video/x-m4v", sig([*_ANY4, *b"ftypM4V "], "m4v")),
    entry("video/3gpp", sig([*_ANY4, *b"ftyp3g"], "3gp")),
    entry("video/3gpp2", sig([*_ANY4, *b"ftyp3g2"], "3g2")),
)
