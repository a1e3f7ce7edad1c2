"""
Scaffold writer — materialises ScaffoldEntry objects under a project root.

Parent directories are created as needed; files are written as UTF-8.
"""
from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from typing import Iterable

from .errors import ScaffoldError
from .models import ScaffoldEntry

logger = logging.getLogger(__name__)


def _resolve_dest(root: Path, rel_path: str) -> Path:
    """Map a relative POSIX path onto root, refusing anything outside it."""
    pure = PurePosixPath(rel_path)
    if pure.is_absolute() or not rel_path or ".." in pure.parts:
        raise ScaffoldError(f"Refusing to write outside project root: {rel_path!r}")
    return root.joinpath(*pure.parts)


def write_entries(entries: Iterable[ScaffoldEntry], root: Path) -> list[Path]:
    """
    Write every entry under ``root`` and return the written paths in order.

    Existing files are overwritten.
    """
    root = Path(root)
    written: list[Path] = []
    for entry in entries:
        dest = _resolve_dest(root, entry.path)
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(entry.content, encoding="utf-8")
        logger.debug("Scaffolded: %s", entry.path)
        written.append(dest)
    return written
