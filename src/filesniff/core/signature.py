from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

_MP4_BRANDS = frozenset({b"isom", b"mp41", b"mp42", b"M4V ", b"MSNV", b"dash"})


class Condition(Enum):
    """Named checks run over the whole prefix once the fixed bytes matched."""

    GIF_VERSION = "gif-version"            # GIF87a / GIF89a
    ZIP_RECORD = "zip-record"              # local file, empty archive, spanned
    MP4_BRAND = "mp4-brand"                # major brand at offset 8
    MPEG_FRAME_SYNC = "mpeg-frame-sync"    # 11-bit frame sync

    def check(self, buf: bytes) -> bool:
        if self is Condition.GIF_VERSION:
            return buf[4] in (0x37, 0x39)
        if self is Condition.ZIP_RECORD:
            return buf[2] in (0x03, 0x05, 0x07) and buf[3] in (0x04, 0x06, 0x08)
        if self is Condition.MP4_BRAND:
            return bytes(buf[8:12]) in _MP4_BRANDS
        if self is Condition.MPEG_FRAME_SYNC:
            return (buf[1] & 0xE0) == 0xE0
        return False


@dataclass(frozen=True, slots=True)
class Signature:
    pattern: tuple[int | None, ...]        # None = wildcard
    ext: str
    condition: Condition | None = None

    def matches(self, buf) -> bool:
        if len(buf) < len(self.pattern):
            return False
        for i, expected in enumerate(self.pattern):
            if expected is not None and buf[i] != expected:
                return False
        if self.condition is not None:
            return self.condition.check(buf)
        return True


@dataclass(frozen=True, slots=True)
class FormatEntry:
    mime: str
    signatures: tuple[Signature, ...]


def sig(pattern: bytes | Sequence[int | None], ext: str, condition: Condition | None = None) -> Signature:
    """Build a Signature from a bytes literal or a list of ints/None."""
    return Signature(tuple(pattern), ext, condition)


def entry(mime: str, *signatures: Signature) -> FormatEntry:
    if not signatures:
        raise ValueError(f"{mime} needs at least one signature")
    return FormatEntry(mime, tuple(signatures))
