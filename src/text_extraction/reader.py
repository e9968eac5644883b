from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from .contracts import HocrDocument, HocrIOError, HocrParseError, PageMetrics, WordToken
from .doc_stream import HocrDocStream
from .serialize import serialize_word_coordinates


def is_markup(source: str) -> bool:
    """
    True if `source` looks like HTML/XML markup rather than a file path.
    """

    return source.lstrip().startswith("<")


def _read_source(path: str | os.PathLike[str], encoding: str) -> str:
    try:
        raw = Path(path).read_bytes()
    except (OSError, ValueError) as e:
        raise HocrIOError(f"Cannot read hOCR file {os.fspath(path)!r}: {e}") from e
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as e:
        raise HocrParseError(f"hOCR file {os.fspath(path)!r} is not valid {encoding}: {e}") from e


def parse_hocr_markup(markup: str) -> HocrDocument:
    """
    Run exactly one streaming parse pass over hOCR markup.
    """

    stream = HocrDocStream()
    try:
        stream.feed(markup)
        return stream.close()
    except (AssertionError, ValueError) as e:
        raise HocrParseError(f"Unable to tokenize hOCR markup: {e}") from e


class HocrReader:
    """
    Plain text and word coordinates from one hOCR page.

    `source` is either hOCR markup or a path to an hOCR file (coordinates are
    in px, no scaling). All outputs come from the single parse performed at
    construction and do not change afterwards.
    """

    __slots__ = ("_source", "_document")

    def __init__(self, source: str | os.PathLike[str], *, encoding: str = "utf-8") -> None:
        if isinstance(source, str) and is_markup(source):
            markup = source
        else:
            markup = _read_source(source, encoding)
        self._source = markup
        self._document = parse_hocr_markup(markup)

    @property
    def source(self) -> str:
        return self._source

    @property
    def document(self) -> HocrDocument:
        return self._document

    @property
    def text(self) -> str:
        return self.document.text

    @property
    def words(self) -> tuple[WordToken, ...]:
        return self.document.words

    @property
    def width(self) -> int | None:
        return self.document.width

    @property
    def height(self) -> int | None:
        return self.document.height

    @property
    def page_metrics(self) -> PageMetrics | None:
        return self.document.page_metrics

    @property
    def coordinates(self) -> dict[str, Any]:
        return self.document.to_coordinates()

    def json(self) -> str:
        return serialize_word_coordinates(words=self.words, metrics=self.page_metrics)


def read_hocr(source: str | os.PathLike[str], *, encoding: str = "utf-8") -> HocrDocument:
    return HocrReader(source, encoding=encoding).document
