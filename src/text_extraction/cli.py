from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .artifacts import write_coordinates_artifact, write_result_artifact, write_text_artifact
from .contracts import TextExtractionConfig
from .module import run_text_extraction_on_hocr_relpath


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="hocr-text",
        description=(
            "Extract plain text and word coordinates (JSON) from an hOCR file."
        ),
    )
    p.add_argument(
        "--data-root",
        required=True,
        type=Path,
        help="Resolved data root path (must be passed explicitly; no env reads).",
    )
    p.add_argument(
        "--hocr-relpath",
        required=True,
        help="hOCR file path relative to --data-root.",
    )
    p.add_argument(
        "--out-text",
        required=True,
        type=Path,
        help="Output plain text file path.",
    )
    p.add_argument(
        "--out-json",
        required=True,
        type=Path,
        help="Output word-coordinates JSON file path.",
    )
    p.add_argument(
        "--out-result",
        type=Path,
        default=None,
        help="Optional output file for the auditable extraction result (ok/errors/meta).",
    )
    p.add_argument(
        "--encoding",
        default="utf-8",
        help="Encoding of the hOCR file (default: utf-8).",
    )
    p.add_argument(
        "--compute-source-sha256",
        action="store_true",
        help="Include SHA-256 of the source file in meta for auditing.",
    )
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING).",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = TextExtractionConfig(
        data_root=args.data_root,
        encoding=args.encoding,
        compute_source_sha256=args.compute_source_sha256,
    )

    result = run_text_extraction_on_hocr_relpath(config=config, hocr_relpath=args.hocr_relpath)
    if args.out_result is not None:
        write_result_artifact(result=result, out_file=args.out_result)
    if result.document is not None:
        write_text_artifact(document=result.document, out_file=args.out_text)
        write_coordinates_artifact(document=result.document, out_file=args.out_json)

    return 0 if result.ok else 2


if __name__ == "__main__":
    raise SystemExit(main())
