from __future__ import annotations

import hashlib
from pathlib import Path


class DataAccessError(Exception):
    pass


class HocrFileNotFoundError(DataAccessError):
    pass


def require_hocr_file(path: Path) -> Path:
    """
    Return `path` if it names an existing regular file (hOCR pages are single
    files; directories and dangling links are rejected).
    """

    if not path.is_file():
        raise HocrFileNotFoundError(f"hOCR file not found: {path}")
    return path


def resolve_hocr_file(*, data_root: Path, relpath: str) -> Path:
    """
    Resolve an hOCR page file given relative to an explicit data_root.

    Raises DataAccessError for absolute paths or traversal outside data_root,
    and HocrFileNotFoundError when the resolved path is not a file.
    """

    if relpath.startswith(("/", "\\")) or (":" in relpath and "\\" in relpath):
        raise DataAccessError(f"Expected an hOCR path relative to data_root, got: {relpath!r}")

    root = data_root.expanduser().resolve()
    candidate = (root / relpath).resolve()
    if not candidate.is_relative_to(root):
        raise DataAccessError(f"hOCR path escapes data_root: relpath={relpath!r}")

    return require_hocr_file(candidate)


def sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(1024 * 1024), b""):
            h.update(chunk)
    return h.hexdigest()
