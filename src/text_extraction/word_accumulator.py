from __future__ import annotations

import logging

from .contracts import WordToken

logger = logging.getLogger(__name__)


class WordAccumulator:
    """
    Holds at most one in-progress word between its start tag, character
    data and end tag.

    `serial` counts opened words so the document stream can tell whether an
    end tag belongs to the word currently pending.
    """

    def __init__(self) -> None:
        self._text: list[str] = []
        self._coords: tuple[int, int, int, int] | None = None
        self._open = False
        self.serial = 0

    @property
    def is_open(self) -> bool:
        return self._open

    def open(self, coords: tuple[int, int, int, int] | None) -> None:
        if self._open:
            raise RuntimeError("A word is already pending; close it first")
        self._text = []
        self._coords = coords
        self._open = True
        self.serial += 1

    def append_text(self, s: str) -> None:
        if self._open:
            self._text.append(s)

    def close(self) -> WordToken | None:
        """
        End the pending word; return its token iff it has text and coordinates.
        """

        if not self._open:
            return None
        text = "".join(self._text)
        coords = self._coords
        self._text = []
        self._coords = None
        self._open = False

        if not text or coords is None:
            logger.debug("Dropping incomplete word: text=%r coords=%r", text, coords)
            return None
        hpos, vpos, width, height = coords
        return WordToken(text=text, hpos=hpos, vpos=vpos, width=width, height=height)
