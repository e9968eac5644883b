from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .contracts import HocrDocument, TextExtractionResult


def serialize_extraction_result(result: TextExtractionResult) -> str:
    """
    Stable JSON serialization for audit artifacts.
    """

    payload: dict[str, Any] = result.to_dict()
    return json.dumps(payload, ensure_ascii=False, sort_keys=True, indent=2) + "\n"


def write_text_artifact(*, document: HocrDocument, out_file: Path) -> None:
    """
    Write the normalized plain text (for full-text indexing).

    Callers provide the output path; no artifact root is assumed.
    """

    out_file.parent.mkdir(parents=True, exist_ok=True)
    text = document.text
    out_file.write_text(text + "\n" if text else "", encoding="utf-8")


def write_coordinates_artifact(*, document: HocrDocument, out_file: Path) -> None:
    """
    Write the word-coordinate JSON consumed by search-highlight overlays.
    """

    out_file.parent.mkdir(parents=True, exist_ok=True)
    payload = document.to_coordinates()
    out_file.write_text(
        json.dumps(payload, ensure_ascii=False, sort_keys=True, separators=(",", ":")) + "\n",
        encoding="utf-8",
    )


def write_result_artifact(*, result: TextExtractionResult, out_file: Path) -> None:
    out_file.parent.mkdir(parents=True, exist_ok=True)
    out_file.write_text(serialize_extraction_result(result), encoding="utf-8")
