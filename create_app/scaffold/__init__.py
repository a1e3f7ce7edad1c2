"""
Project generator — turns an app name into a ScaffoldPlan.

Usage:
    plan = generate("my-app")
    # plan.entries: tuple[ScaffoldEntry, ...] — relative path + content
    # plan.manifest_patch: ManifestPatch — applied to package.json

generate() does no I/O and never fails for a string input. Writing the
files, patching package.json and installing packages are left to the
writer, manifest and process_runner modules.
"""
from __future__ import annotations

import logging
from typing import Optional

from create_app.models import ManifestPatch, ScaffoldEntry, ScaffoldPlan, TemplateParams

from .templates import react_express

logger = logging.getLogger(__name__)

MODULE_TYPE = "module"


def generate(app_name: str, params: Optional[TemplateParams] = None) -> ScaffoldPlan:
    """
    Build the scaffold for ``app_name``.

    The name is carried on the plan for reporting only; no generated content
    depends on it. Output is identical for identical (name, params) input.
    """
    params = params or TemplateParams()
    entries = tuple(
        ScaffoldEntry(path=rel_path, content=render(params))
        for rel_path, render in react_express.TEMPLATES
    )
    patch = ManifestPatch(type=MODULE_TYPE, scripts=react_express.scripts(params))
    logger.debug("Generated %d scaffold entries for %s", len(entries), app_name)
    return ScaffoldPlan(
        app_name=app_name,
        entries=entries,
        manifest_patch=patch,
        dependencies=react_express.DEPENDENCIES,
        dev_dependencies=react_express.DEV_DEPENDENCIES,
    )


__all__ = ["generate", "MODULE_TYPE"]
