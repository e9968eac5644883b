from __future__ import annotations

import re

_TRAILING_WS = " \t\r\f\v"
_BLANK_LINE_RUN = re.compile(r"\n{3,}")


class TextAssembler:
    """
    Running plain-text buffer for one parse.

    Line ends trim the current line before the newline; `finalize` applies
    the document-wide normalization (no trailing whitespace per line, at most
    one blank line between text blocks).
    """

    def __init__(self) -> None:
        self._done: list[str] = []  # text up to and including the last line end
        self._line: list[str] = []

    def _tail(self) -> str:
        parts = self._line or self._done
        return parts[-1][-1:] if parts else ""

    def ends_with_whitespace(self) -> bool:
        # An empty buffer counts as a line start.
        tail = self._tail()
        return not tail or tail.isspace()

    def append_raw(self, s: str) -> None:
        if s:
            self._line.append(s)

    def append_separator(self) -> None:
        if not self.ends_with_whitespace():
            self._line.append(" ")

    def on_line_end(self) -> None:
        head, sep, line = "".join(self._line).rpartition("\n")
        self._done.append(head + sep + line.rstrip(_TRAILING_WS) + "\n")
        self._line = []

    def finalize(self) -> str:
        text = "".join(self._done) + "".join(self._line)
        text = "\n".join(line.rstrip(_TRAILING_WS) for line in text.split("\n"))
        text = _BLANK_LINE_RUN.sub("\n\n", text)
        return text.strip("\n")
