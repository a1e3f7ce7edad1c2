"""
ProcessRunner — thin wrapper around the npm CLI.

All subprocess calls go through a single injectable ``runner`` callable
(subprocess.run by default) so tests never spawn real processes.
"""
from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Callable, Optional, Sequence

from .errors import ProcessError

logger = logging.getLogger(__name__)


class ProcessRunner:
    """
    Runs package-manager commands inside a project directory.

    Usage:
        runner = ProcessRunner()
        runner.init(project_dir)
        runner.install(["react", "react-dom"], project_dir)
        runner.install(["vite"], project_dir, dev=True)
    """

    def __init__(
        self,
        executable: str = "npm",
        runner: Optional[Callable[..., subprocess.CompletedProcess]] = None,
    ) -> None:
        self.executable = executable
        self._run = runner or subprocess.run

    def run(self, args: Sequence[str], cwd: Path) -> subprocess.CompletedProcess:
        """Run ``executable args...`` in ``cwd``; raise ProcessError on failure."""
        command = [self.executable, *args]
        logger.debug("Running %s in %s", " ".join(command), cwd)
        try:
            result = self._run(
                command,
                capture_output=True,
                text=True,
                cwd=str(cwd),
            )
        except OSError as exc:
            raise ProcessError(command, None, str(exc)) from exc

        if result.returncode != 0:
            logger.warning("%s failed: %s", " ".join(command), (result.stderr or "")[:100])
            raise ProcessError(command, result.returncode, result.stderr or "")
        return result

    def init(self, cwd: Path) -> None:
        self.run(["init", "-y"], cwd)

    def install(self, packages: Sequence[str], cwd: Path, dev: bool = False) -> None:
        """Install ``packages``; ``dev=True`` records them as devDependencies."""
        if not packages:
            return
        args = ["install"]
        if dev:
            args.append("--save-dev")
        args.extend(packages)
        self.run(args, cwd)
