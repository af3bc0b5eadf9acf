from __future__ import annotations
from typing import Dict, Any, Iterable

from .categories import categories
from .model import DetectionResult


def result_asdict(
    source: str,
    result: DetectionResult | None,
    *,
    error: str | None = None,
    fields: Iterable[str] | None = None,
) -> Dict[str, Any]:
    """Return a JSON-serialisable record for one source, optionally filtered."""
    if error is not None:
        return {"source": source, "success": False, "error": error}
    payload: Dict[str, Any] = {
        "source": source,
        "mime": result.mime if result is not None else None,
        "ext": result.ext if result is not None else None,
        "categories": categories(result),
    }
    if fields:
        wanted = set(fields)
        payload = {k: v for k, v in payload.items() if k in wanted}
    payload["success"] = True
    return payload
