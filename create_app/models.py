"""
Data model for the project generator.

ScaffoldEntry   — one generated file (relative path + content)
ManifestPatch   — the keys overwritten in package.json
TemplateParams  — the explicit inputs every content template depends on
ScaffoldPlan    — everything generate() produces for one invocation
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class TemplateParams:
    """Parameters shared by all file templates. Defaults give the stock scaffold."""

    port: int = 3000
    environment_mode: str = "production"
    out_dir: str = "dist"
    api_prefix: str = "/api"


@dataclass(frozen=True)
class ScaffoldEntry:
    """A single generated file. ``path`` is relative and POSIX-separated."""

    path: str
    content: str


@dataclass(frozen=True)
class ManifestPatch:
    """
    Key overwrites applied to package.json.

    apply() replaces ``type`` and ``scripts`` wholesale, so applying the same
    patch twice gives the same document as applying it once.
    """

    type: str
    scripts: Mapping[str, str] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        return {"type": self.type, "scripts": dict(self.scripts)}

    def apply(self, manifest: Mapping[str, Any]) -> dict[str, Any]:
        """Return a copy of ``manifest`` with the patch applied; input is untouched."""
        patched = dict(manifest)
        for key, value in self.as_dict().items():
            patched[key] = value
        return patched


@dataclass(frozen=True)
class ScaffoldPlan:
    """Output of generate(): files to write, manifest patch and packages to install."""

    app_name: str
    entries: tuple[ScaffoldEntry, ...]
    manifest_patch: ManifestPatch
    dependencies: tuple[str, ...] = ()
    dev_dependencies: tuple[str, ...] = ()

    def paths(self) -> list[str]:
        return [entry.path for entry in self.entries]

    def render(self) -> str:
        """Return a human-readable description of what would be created."""
        lines: list[str] = []
        lines.append("=" * 64)
        lines.append(f"DRY-RUN: {self.app_name}")
        lines.append("=" * 64)
        lines.append(f"Dependencies    : {' '.join(self.dependencies) or '-'}")
        lines.append(f"Dev dependencies: {' '.join(self.dev_dependencies) or '-'}")
        lines.append("")
        lines.append("── Files ──")
        for entry in self.entries:
            n_lines = entry.content.count("\n")
            lines.append(f"  {entry.path}  ({n_lines} lines)")
        lines.append("")
        lines.append("── package.json ──")
        lines.append(f"  type: {self.manifest_patch.type}")
        for name, command in self.manifest_patch.scripts.items():
            lines.append(f"  scripts.{name}: {command}")
        lines.append("")
        lines.append("=" * 64)
        lines.append("(Nothing was written — this is a dry run)")
        return "\n".join(lines)
