from __future__ import annotations

import codecs
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any


class ElementClass(str, Enum):
    """
    hOCR element classes recognized by the document stream.

    Every other element is transparent to text extraction.
    """

    NONE = ""
    PAGE = "ocr_page"
    LINE = "ocr_line"
    WORD = "ocrx_word"


@dataclass(frozen=True, slots=True)
class WordToken:
    """
    One recognized word and its pixel rectangle (origin top-left).
    """

    text: str
    hpos: int
    vpos: int
    width: int
    height: int

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "WordToken":
        return WordToken(
            text=str(d["word"]),
            hpos=int(d["hpos"]),
            vpos=int(d["vpos"]),
            width=int(d["width"]),
            height=int(d["height"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "word": self.text,
            "hpos": self.hpos,
            "vpos": self.vpos,
            "width": self.width,
            "height": self.height,
        }


@dataclass(frozen=True, slots=True)
class PageMetrics:
    width: int
    height: int


@dataclass(frozen=True, slots=True)
class HocrDocument:
    """
    Final, immutable result of one hOCR parse pass.

    `words` keeps the document order of `ocrx_word` elements; downstream
    overlays rely on word N here being word N in reading order.
    """

    text: str
    words: tuple[WordToken, ...]
    width: int | None
    height: int | None

    @property
    def page_metrics(self) -> PageMetrics | None:
        if self.width is None or self.height is None:
            return None
        return PageMetrics(width=self.width, height=self.height)

    def to_coordinates(self) -> dict[str, Any]:
        from .serialize import word_coordinates

        return word_coordinates(words=self.words, metrics=self.page_metrics)


class HocrReaderError(Exception):
    """Structural failure reading hOCR; local markup faults never raise."""


class HocrIOError(HocrReaderError):
    pass


class HocrParseError(HocrReaderError):
    pass


@dataclass(frozen=True, slots=True)
class TextExtractionError:
    code: str
    message: str
    detail: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "detail": self.detail}


@dataclass(frozen=True, slots=True)
class TextExtractionResult:
    """
    Machine-readable, auditable text extraction output.

    On failure, `ok` is False and `document` is None. Nothing is fabricated
    to fill in a document that could not be read.
    """

    ok: bool
    source_hocr_relpath: str | None
    document: HocrDocument | None
    errors: list[TextExtractionError]
    meta: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {
            "ok": self.ok,
            "source_hocr_relpath": self.source_hocr_relpath,
            "text": None if self.document is None else self.document.text,
            "coordinates": None if self.document is None else self.document.to_coordinates(),
            "errors": [e.to_dict() for e in self.errors],
            "meta": dict(self.meta),
        }


@dataclass(frozen=True, slots=True)
class TextExtractionConfig:
    """
    Text extraction configuration.

    `data_root` must be the resolved root provided by the caller; this module
    does not read environment variables.
    """

    data_root: Path
    encoding: str = "utf-8"
    compute_source_sha256: bool = False  # optional audit metadata

    def __post_init__(self) -> None:
        if not isinstance(self.data_root, Path):
            raise TypeError("data_root must be a pathlib.Path")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"Unknown encoding: {self.encoding!r}") from None
