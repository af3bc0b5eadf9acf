from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DetectionResult:
    mime: str | None = None
    ext: str | None = None     # no leading dot


class UnsupportedBlobError(TypeError):
    """Raised when a blob is neither bytes, a byte stream, nor text."""
    pass
