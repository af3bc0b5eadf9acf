"""Category queries over a DetectionResult."""

from __future__ import annotations

from .model import DetectionResult

DOCUMENT_TYPES = frozenset({
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "application/vnd.ms-excel",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "application/vnd.ms-powerpoint",
    "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    "application/epub+zip",
})

ARCHIVE_TYPES = frozenset({
    "application/zip",
    "application/x-rar-compressed",
    "application/x-7z-compressed",
    "application/gzip",
    "application/x-tar",
    "application/x-bzip2",
    "application/x-lzip",
    "application/x-lzma",
    "application/x-xz",
    "application/x-compress",
})

FONT_TYPES = frozenset({
    "application/font-woff",
    "application/font-woff2",
    "application/vnd.ms-fontobject",
    "application/font-sfnt",
})

EXECUTABLE_TYPES = frozenset({
    "application/x-executable",
    "application/x-msdownload",
    "application/x-mach-binary",
    "application/vnd.android.package-archive",
    "application/vnd.microsoft.portable-executable",
})


def _mime(result: DetectionResult | None) -> str | None:
    return result.mime if result is not None else None


def is_image(result: DetectionResult | None) -> bool:
    mime = _mime(result)
    return mime is not None and mime.startswith("image/")


def is_video(result: DetectionResult | None) -> bool:
    mime = _mime(result)
    return mime is not None and mime.startswith("video/")


def is_audio(result: DetectionResult | None) -> bool:
    mime = _mime(result)
    return mime is not None and mime.startswith("audio/")


def is_document(result: DetectionResult | None) -> bool:
    return _mime(result) in DOCUMENT_TYPES


def is_archive(result: DetectionResult | None) -> bool:
    return _mime(result) in ARCHIVE_TYPES


def is_font(result: DetectionResult | None) -> bool:
    return _mime(result) in FONT_TYPES


def is_executable(result: DetectionResult | None) -> bool:
    return _mime(result) in EXECUTABLE_TYPES


_CATEGORIES = (
    ("image", is_image),
    ("video", is_video),
    ("audio", is_audio),
    ("document", is_document),
    ("archive", is_archive),
    ("font", is_font),
    ("executable", is_executable),
)


def categories(result: DetectionResult | None) -> list[str]:
    """Names of every category `result` belongs to, in a fixed order."""
    return [name for name, pred in _CATEGORIES if pred(result)]
