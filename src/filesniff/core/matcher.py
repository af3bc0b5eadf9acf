from __future__ import annotations

import structlog

from .model import DetectionResult
from .registry import SignatureRegistry, _REGISTRY

logger = structlog.get_logger(__name__)

# a single byte is not enough context for any signature
MIN_PREFIX_LENGTH = 2


def detect(prefix: bytes | bytearray | memoryview, *, registry: SignatureRegistry | None = None) -> DetectionResult | None:
    """Return the first format whose signature matches `prefix`, else None.

    First match wins: entries are tried in registry order and each entry's
    signatures in declared order. Never raises for bytes-like input.
    """
    if len(prefix) < MIN_PREFIX_LENGTH:
        return None
    table = registry if registry is not None else _REGISTRY
    for mime, signature in table:
        if signature.matches(prefix):
            logger.debug("signature matched", mime=mime, ext=signature.ext, prefix_len=len(prefix))
            return DetectionResult(mime, signature.ext)
    logger.debug("no signature matched", prefix_len=len(prefix))
    return None
