"""
ProjectCreator — wires generator, writer, manifest and process runner.

Pipeline:
  1. validate name, refuse an existing directory   (nothing written yet)
  2. mkdir <target>/<name>
  3. npm init -y                                   (or a minimal package.json)
  4. npm install <dependencies>
  5. npm install --save-dev <dev dependencies>
  6. write_entries()                               -> scaffold files
  7. update_manifest()                             -> package.json scripts

There is no rollback: if a later step fails the partially created project
is left on disk and the error propagates to the caller.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from .config import ScaffoldConfig
from .errors import InvalidAppNameError, ProjectExistsError
from .manifest import MANIFEST_NAME, update_manifest, write_manifest
from .models import ScaffoldPlan
from .process_runner import ProcessRunner
from .scaffold import generate
from .writer import write_entries

logger = logging.getLogger(__name__)


@dataclass
class CreateResult:
    """What create() did."""

    app_name: str
    project_dir: Path
    files_written: list[Path] = field(default_factory=list)
    manifest_path: Optional[Path] = None
    installed: bool = False


def validate_app_name(app_name: str) -> None:
    """The name must be usable as a single directory name."""
    if not app_name or not app_name.strip():
        raise InvalidAppNameError("App name must not be empty")
    if app_name in (".", "..") or "/" in app_name or "\\" in app_name:
        raise InvalidAppNameError(
            f"App name {app_name!r} must be a plain directory name, not a path"
        )
    if "\x00" in app_name:
        raise InvalidAppNameError("App name must not contain NUL characters")


class ProjectCreator:
    """
    Creates a React + Express project on disk.

    Usage:
        creator = ProjectCreator(config)
        result = creator.create("my-app")
    """

    def __init__(
        self,
        config: ScaffoldConfig,
        runner: Optional[ProcessRunner] = None,
        progress: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.config = config
        self.runner = runner or ProcessRunner(executable=config.npm_executable)
        self._progress = progress or (lambda message: None)

    def project_dir(self, app_name: str) -> Path:
        return Path(self.config.target_directory) / app_name

    def plan(self, app_name: str) -> ScaffoldPlan:
        """Validate the name and return the plan without touching the filesystem."""
        validate_app_name(app_name)
        return generate(app_name, self.config.template_params())

    def create(self, app_name: str) -> CreateResult:
        plan = self.plan(app_name)
        project_dir = self.project_dir(app_name)
        if project_dir.exists():
            raise ProjectExistsError(project_dir)

        self._progress(f"Creating project in {project_dir.resolve()}...")
        project_dir.mkdir(parents=True)
        result = CreateResult(app_name=app_name, project_dir=project_dir)
        manifest_path = project_dir / MANIFEST_NAME

        if self.config.install:
            self._progress("Initializing npm project...")
            self.runner.init(project_dir)

            self._progress("Installing dependencies...")
            self.runner.install(plan.dependencies, project_dir)
            self.runner.install(plan.dev_dependencies, project_dir, dev=True)
            result.installed = True
        else:
            logger.info("Skipping npm init/install; writing a minimal %s", MANIFEST_NAME)
            write_manifest(manifest_path, {"name": app_name, "version": "1.0.0"})

        self._progress("Setting up project structure...")
        result.files_written = write_entries(plan.entries, project_dir)

        self._progress(f"Updating {MANIFEST_NAME}...")
        update_manifest(manifest_path, plan.manifest_patch)
        result.manifest_path = manifest_path

        logger.info(
            "Created %s: files_written=%d installed=%s",
            project_dir, len(result.files_written), result.installed,
        )
        return result
