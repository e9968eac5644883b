from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .contracts import (
    HocrIOError,
    HocrParseError,
    TextExtractionConfig,
    TextExtractionError,
    TextExtractionResult,
)
from .data_access import (
    DataAccessError,
    HocrFileNotFoundError,
    require_hocr_file,
    resolve_hocr_file,
    sha256_file,
)
from .reader import HocrReader

logger = logging.getLogger(__name__)


def _failed(
    *, source_relpath: str | None, code: str, message: str, detail: dict[str, Any], meta: dict[str, Any]
) -> TextExtractionResult:
    logger.warning("Text extraction failed (%s): %s", code, message)
    return TextExtractionResult(
        ok=False,
        source_hocr_relpath=source_relpath,
        document=None,
        errors=[TextExtractionError(code=code, message=message, detail=detail)],
        meta=meta,
    )


def _attach_source_sha256_if_enabled(
    *, config: TextExtractionConfig, hocr_file: Path, result: TextExtractionResult
) -> TextExtractionResult:
    if not (config.compute_source_sha256 and result.ok):
        return result

    try:
        src_hash = sha256_file(hocr_file)
    except OSError:
        # Hashing is audit metadata only; keep the extraction result.
        logger.warning("Failed to hash %s", hocr_file, exc_info=True)
        return TextExtractionResult(
            ok=result.ok,
            source_hocr_relpath=result.source_hocr_relpath,
            document=result.document,
            errors=result.errors
            + [
                TextExtractionError(
                    code="TEXT_AUDIT_HASH_FAILED",
                    message="Failed to compute source SHA-256",
                    detail={"source_hocr_relpath": result.source_hocr_relpath},
                )
            ],
            meta=result.meta,
        )
    return TextExtractionResult(
        ok=result.ok,
        source_hocr_relpath=result.source_hocr_relpath,
        document=result.document,
        errors=result.errors,
        meta={**result.meta, "source_sha256": src_hash},
    )


def run_text_extraction_on_hocr_file(
    *, config: TextExtractionConfig, hocr_file: Path, source_relpath: str | None
) -> TextExtractionResult:
    """
    Extract plain text and word coordinates from an explicit hOCR file path
    (no data_root resolution).
    """

    meta: dict[str, Any] = {"format": "hocr", "encoding": config.encoding}
    detail: dict[str, Any] = {"source_hocr_relpath": source_relpath}
    if source_relpath is None:
        # Only include absolute path when the caller did not provide a relpath.
        detail["hocr_file"] = str(hocr_file)

    try:
        require_hocr_file(hocr_file)
    except HocrFileNotFoundError:
        return _failed(
            source_relpath=source_relpath,
            code="TEXT_INPUT_NOT_FOUND",
            message="Input hOCR file not found",
            detail=detail,
            meta=meta,
        )

    try:
        reader = HocrReader(hocr_file, encoding=config.encoding)
    except HocrIOError as e:
        return _failed(
            source_relpath=source_relpath,
            code="TEXT_INPUT_UNREADABLE",
            message=str(e),
            detail=detail,
            meta=meta,
        )
    except HocrParseError as e:
        return _failed(
            source_relpath=source_relpath,
            code="TEXT_PARSE_ERROR",
            message=str(e),
            detail=detail,
            meta=meta,
        )

    document = reader.document
    logger.info(
        "Extracted %d words (%d chars) from %s",
        len(document.words),
        len(document.text),
        source_relpath or hocr_file,
    )
    result = TextExtractionResult(
        ok=True,
        source_hocr_relpath=source_relpath,
        document=document,
        errors=[],
        meta={**meta, "word_count": len(document.words)},
    )
    return _attach_source_sha256_if_enabled(config=config, hocr_file=hocr_file, result=result)


def run_text_extraction_on_hocr_relpath(
    *, config: TextExtractionConfig, hocr_relpath: str
) -> TextExtractionResult:
    """
    Extract text from an hOCR file referenced relative to `config.data_root`.
    """

    meta: dict[str, Any] = {"format": "hocr", "encoding": config.encoding}
    try:
        hocr_file = resolve_hocr_file(data_root=config.data_root, relpath=hocr_relpath)
    except HocrFileNotFoundError:
        return _failed(
            source_relpath=hocr_relpath,
            code="TEXT_INPUT_NOT_FOUND",
            message="Input hOCR file not found",
            detail={"source_hocr_relpath": hocr_relpath},
            meta=meta,
        )
    except DataAccessError as e:
        return _failed(
            source_relpath=hocr_relpath,
            code="TEXT_DATA_ACCESS_ERROR",
            message=str(e),
            detail={"data_root": str(config.data_root), "relpath": hocr_relpath},
            meta=meta,
        )

    return run_text_extraction_on_hocr_file(
        config=config, hocr_file=hocr_file, source_relpath=hocr_relpath
    )
