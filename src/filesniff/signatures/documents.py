from ..core.signature import Condition, entry, sig

_ZIP_LOCAL = b"PK\x03\x04"
_CFB = b"\xD0\xCF\x11\xE0\xA1\xB1\x1A\xE1"

# zip is declared before every zip-based container, so those containers
# only resolve here when looked up directly; detect() reports them as zip.
ENTRIES = (
    entry("application/pdf", sig(b"%PDF", "pdf")),
    entry("application/zip", sig([*b"PK", None, None], "zip", Condition.ZIP_RECORD)),
    entry("application/x-rar-compressed", sig(b"Rar!\x1a\x07", "rar")),   # RAR v1.5+
    entry("application/x-7z-compressed", sig(b"7z\xBC\xAF\x27\x1C", "7z")),
    entry("application/gzip", sig(b"\x1F\x8B\x08", "gz")),
    entry(
        "application/x-tar",
        sig(b"ustar\x0000", "tar"),
        sig(b"ustar  \x00", "tar"),
    ),
    entry(
        "application/epub+zip",
        sig([*_ZIP_LOCAL, *(None,) * 12, *b"mimetypeapplication/epub+zip"], "epub"),
    ),
    entry("application/vnd.openxmlformats-officedocument.wordprocessingml.document", sig(_ZIP_LOCAL, "docx")),
    entry("application/vnd.openxmlformats-officedocument.spreadsheetml.sheet", sig(_ZIP_LOCAL, "xlsx")),
    entry("application/vnd.openxmlformats-officedocument.presentationml.presentation", sig(_ZIP_LOCAL, "pptx")),
    # Compound File Binary: doc, xls and ppt share one header
    entry("application/msword", sig(_CFB, "doc")),
    entry("application/vnd.ms-excel", sig(_CFB, "xls")),
    entry("application/vnd.ms-powerpoint", sig(_CFB, "ppt")),
)
