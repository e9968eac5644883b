"""
Event-driven hOCR processing.

The handlers here are plain functions over an explicit `ParserState`; the
`HocrDocStream` adapter only forwards `html.parser` events to them. A fresh
state is built for every parse, so nothing is shared between documents.

Recognized elements (everything else is transparent):
- `div.ocr_page`  -- page width/height
- `span.ocr_line` -- line breaks in the plain text
- `span.ocrx_word` -- word tokens with coordinates
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from html.parser import HTMLParser

from .contracts import ElementClass, HocrDocument, PageMetrics, WordToken
from .coordinates import parse_page_bbox, parse_word_bbox
from .text_assembler import TextAssembler
from .word_accumulator import WordAccumulator

logger = logging.getLogger(__name__)

_SELECTORS = {
    ("div", ElementClass.PAGE.value),
    ("span", ElementClass.LINE.value),
    ("span", ElementClass.WORD.value),
}

# Elements that never get an end tag in HTML.
_VOID_TAGS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "param", "source", "track", "wbr"}
)

# Character data inside these is not document text.
_NON_TEXT_TAGS = frozenset({"head", "script", "style", "title"})

_WS_RUN = re.compile(r"\s+")


def consider(tag: str, class_name: str | None) -> bool:
    """
    True iff (tag, class) is one of the recognized hOCR selectors.
    """

    return (tag, class_name or "") in _SELECTORS


@dataclass(slots=True)
class _OpenElement:
    tag: str
    element_class: ElementClass
    word_serial: int = 0  # serial of the word this element opened, if any


@dataclass(slots=True)
class ParserState:
    """
    Mutable state of one in-flight parse. Owned by exactly one parse call.
    """

    stack: list[_OpenElement] = field(default_factory=list)
    word: WordAccumulator = field(default_factory=WordAccumulator)
    text: TextAssembler = field(default_factory=TextAssembler)
    words: list[WordToken] = field(default_factory=list)
    page_metrics: PageMetrics | None = None
    non_text_depth: int = 0

    @property
    def current_element_class(self) -> ElementClass:
        return self.stack[-1].element_class if self.stack else ElementClass.NONE


def _close_word(state: ParserState) -> None:
    token = state.word.close()
    if token is not None:
        state.words.append(token)
    state.text.append_separator()


def _end_entry(state: ParserState, entry: _OpenElement) -> None:
    if entry.tag in _NON_TEXT_TAGS:
        state.non_text_depth -= 1

    if entry.element_class is ElementClass.WORD:
        # Only the element that opened the pending word may finalize it.
        if state.word.is_open and state.word.serial == entry.word_serial:
            _close_word(state)
    elif entry.element_class is ElementClass.LINE:
        state.text.on_line_end()


def _pop_through(state: ParserState, index: int) -> None:
    while len(state.stack) > index:
        _end_entry(state, state.stack.pop())


def _close_orphan_word(state: ParserState) -> None:
    # Drop the orphan's stack entry too, so later end tags reach the enclosing line.
    for i in range(len(state.stack) - 1, -1, -1):
        if state.stack[i].word_serial == state.word.serial:
            _pop_through(state, i)
            return
    _close_word(state)


def start_element(state: ParserState, tag: str, attrs: dict[str, str | None]) -> None:
    if tag == "body":
        # A missing </head> must not hide the body text.
        for i, entry in enumerate(state.stack):
            if entry.tag == "head":
                _pop_through(state, i)
                break

    class_name = attrs.get("class") or ""
    element_class = ElementClass(class_name) if consider(tag, class_name) else ElementClass.NONE
    entry = _OpenElement(tag=tag, element_class=element_class)

    if element_class is ElementClass.WORD:
        if state.word.is_open:
            logger.debug("Unterminated word before new word start; closing it")
            _close_orphan_word(state)
        state.word.open(parse_word_bbox(attrs.get("title")))
        entry.word_serial = state.word.serial
    elif element_class is ElementClass.PAGE:
        if state.page_metrics is None:
            state.page_metrics = parse_page_bbox(attrs.get("title"))
        else:
            logger.debug("Ignoring additional ocr_page; page metrics already set")

    if tag in _VOID_TAGS:
        return
    if tag in _NON_TEXT_TAGS:
        state.non_text_depth += 1
    state.stack.append(entry)


def characters(state: ParserState, data: str) -> None:
    if state.non_text_depth > 0:
        return
    if state.word.is_open:
        state.word.append_text(data)
        state.text.append_raw(data)
        return

    # Inter-element whitespace renders as a single space.
    collapsed = _WS_RUN.sub(" ", data)
    if collapsed.startswith(" ") and state.text.ends_with_whitespace():
        collapsed = collapsed[1:]
    state.text.append_raw(collapsed)


def end_element(state: ParserState, tag: str) -> None:
    """
    End the innermost open `tag`, implicitly ending anything opened inside it.
    Stray end tags are ignored.
    """

    for i in range(len(state.stack) - 1, -1, -1):
        if state.stack[i].tag == tag:
            _pop_through(state, i)
            return


def end_document(state: ParserState) -> HocrDocument:
    _pop_through(state, 0)
    if state.word.is_open:
        _close_word(state)

    metrics = state.page_metrics
    return HocrDocument(
        text=state.text.finalize(),
        words=tuple(state.words),
        width=None if metrics is None else metrics.width,
        height=None if metrics is None else metrics.height,
    )


class HocrDocStream(HTMLParser):
    """
    Lenient streaming tokenizer feeding one `ParserState`.

    Use once: `feed()` the markup, then `close()` returns the document.
    """

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.state = ParserState()
        self.document: HocrDocument | None = None

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        start_element(self.state, tag, dict(attrs))

    def handle_startendtag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        start_element(self.state, tag, dict(attrs))
        end_element(self.state, tag)

    def handle_data(self, data: str) -> None:
        characters(self.state, data)

    def handle_endtag(self, tag: str) -> None:
        end_element(self.state, tag)

    def close(self) -> HocrDocument:
        super().close()
        if self.document is None:
            self.document = end_document(self.state)
        return self.document
