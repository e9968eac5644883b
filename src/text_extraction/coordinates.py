from __future__ import annotations

import logging

from .contracts import PageMetrics

logger = logging.getLogger(__name__)

_BBOX_PREFIX = "bbox "


def _bbox_field(title: str | None, field_index: int) -> tuple[int, int, int, int] | None:
    """
    Read `bbox x1 y1 x2 y2` from one `;`-separated field of an hOCR title.

    Returns None when the field is missing or does not hold four integers.
    """

    if not title:
        return None
    fields = title.split(";")
    if field_index >= len(fields):
        return None
    bbox = fields[field_index].split(_BBOX_PREFIX)[-1]
    values = bbox.split()
    if len(values) < 4:
        return None
    try:
        x1, y1, x2, y2 = (int(v) for v in values[:4])
    except ValueError:
        return None
    return x1, y1, x2, y2


def parse_word_bbox(title: str | None) -> tuple[int, int, int, int] | None:
    """
    Parse a `span.ocrx_word` title into (hpos, vpos, width, height) in px.
    """

    bbox = _bbox_field(title, 0)
    if bbox is None:
        logger.debug("Unparseable word bbox: %r", title)
        return None
    x1, y1, x2, y2 = bbox
    return x1, y1, x2 - x1, y2 - y1


def parse_page_bbox(title: str | None) -> PageMetrics | None:
    """
    Parse a `div.ocr_page` title (`image "..."; bbox x1 y1 x2 y2; ...`).

    Page size is the bbox corner (x2, y2), not a delta from (x1, y1).
    """

    bbox = _bbox_field(title, 1)
    if bbox is None:
        logger.debug("Unparseable page bbox: %r", title)
        return None
    _, _, x2, y2 = bbox
    return PageMetrics(width=x2, height=y2)
