"""
package.json reader/writer.

The manifest is handled as a plain dict; Python dicts keep insertion order,
so keys that the patch does not touch stay where npm put them.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .errors import ManifestError
from .models import ManifestPatch

logger = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"


def read_manifest(path: Path) -> dict[str, Any]:
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ManifestError(f"Manifest not found: {path}") from exc
    except OSError as exc:
        raise ManifestError(f"Could not read {path}: {exc}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"{path} is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestError(f"{path} must contain a JSON object, got {type(data).__name__}")
    return data


def write_manifest(path: Path, manifest: dict[str, Any]) -> None:
    """Write ``manifest`` as 2-space indented JSON with a trailing newline."""
    text = json.dumps(manifest, indent=2, ensure_ascii=False) + "\n"
    Path(path).write_text(text, encoding="utf-8")


def update_manifest(path: Path, patch: ManifestPatch) -> dict[str, Any]:
    """Read, patch and rewrite the manifest at ``path``. Returns the new document."""
    manifest = patch.apply(read_manifest(path))
    write_manifest(path, manifest)
    logger.debug("Patched %s: type=%s scripts=%s", path, patch.type, list(patch.scripts))
    return manifest
