from __future__ import annotations
from typing import Iterable, Iterator

from .signature import FormatEntry, Signature


class SignatureRegistry:
    """Ordered, read-only table of MIME type -> signatures.

    Construction order is the tie-break between formats that share a
    prefix: the matcher walks entries first to last and stops at the
    first hit.
    """

    __slots__ = ("_entries", "_by_mime")

    def __init__(self, entries: Iterable[FormatEntry]) -> None:
        ordered: list[FormatEntry] = []
        by_mime: dict[str, FormatEntry] = {}
        for fmt in entries:
            if fmt.mime in by_mime:
                raise ValueError(f"Duplicate format entry: {fmt.mime}")
            by_mime[fmt.mime] = fmt
            ordered.append(fmt)
        self._entries: tuple[FormatEntry, ...] = tuple(ordered)
        self._by_mime = by_mime

    @property
    def entries(self) -> tuple[FormatEntry, ...]:
        return self._entries

    def formats(self) -> list[str]:
        return [fmt.mime for fmt in self._entries]

    def signatures_for(self, mime: str) -> tuple[Signature, ...]:
        fmt = self._by_mime.get(mime)
        return fmt.signatures if fmt is not None else ()

    def __iter__(self) -> Iterator[tuple[str, Signature]]:
        for fmt in self._entries:
            for signature in fmt.signatures:
                yield fmt.mime, signature

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, mime: object) -> bool:
        return mime in self._by_mime

    def __repr__(self) -> str:
        return f"SignatureRegistry({len(self._entries)} formats)"


def _build_default() -> SignatureRegistry:
    from ..signatures import DEFAULT_TABLE
    return SignatureRegistry(DEFAULT_TABLE)


# singleton used project-wide
_REGISTRY = _build_default()


def default_registry() -> SignatureRegistry:
    return _REGISTRY
