"""
hOCR text extraction (parsing only; no OCR is performed here).

- Input: hOCR markup, or a path to an hOCR file
- Output: normalized plain text, word tokens with pixel bounding boxes, page size
- Constraints: single streaming pass; malformed words are dropped, not repaired

No environment variable reads and no hardcoded paths; filesystem access in
`module` goes through an explicitly passed data_root.
"""

from .contracts import (
    ElementClass,
    HocrDocument,
    HocrIOError,
    HocrParseError,
    HocrReaderError,
    PageMetrics,
    TextExtractionConfig,
    TextExtractionError,
    TextExtractionResult,
    WordToken,
)
from .module import run_text_extraction_on_hocr_file, run_text_extraction_on_hocr_relpath
from .reader import HocrReader, read_hocr
from .serialize import serialize_word_coordinates, word_coordinates

__all__ = [
    "ElementClass",
    "HocrDocument",
    "HocrIOError",
    "HocrParseError",
    "HocrReader",
    "HocrReaderError",
    "PageMetrics",
    "TextExtractionConfig",
    "TextExtractionError",
    "TextExtractionResult",
    "WordToken",
    "read_hocr",
    "run_text_extraction_on_hocr_file",
    "run_text_extraction_on_hocr_relpath",
    "serialize_word_coordinates",
    "word_coordinates",
]
