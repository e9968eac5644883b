from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from .contracts import PageMetrics, WordToken


def word_coordinates(*, words: Iterable[WordToken], metrics: PageMetrics | None) -> dict[str, Any]:
    """
    Canonical word-coordinate structure for text overlays.

    Array order is document order; it must not be re-sorted.
    """

    return {
        "width": None if metrics is None else metrics.width,
        "height": None if metrics is None else metrics.height,
        "words": [w.to_dict() for w in words],
    }


def serialize_word_coordinates(*, words: Iterable[WordToken], metrics: PageMetrics | None) -> str:
    """
    Stable JSON serialization (same parse -> same bytes).
    """

    payload = word_coordinates(words=words, metrics=metrics)
    return json.dumps(payload, ensure_ascii=False, sort_keys=True, separators=(",", ":"))
