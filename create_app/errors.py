"""
Exception hierarchy for create-react-express-app.

Errors are raised where they are detected and handled only by the CLI,
which reports them on stderr and exits with status 1.
"""
from __future__ import annotations

from typing import Sequence


class ScaffoldError(Exception):
    """Base class for every error the scaffolder reports to the user."""


class ProjectExistsError(ScaffoldError, FileExistsError):
    """The target project directory already exists."""

    def __init__(self, path) -> None:
        self.path = path
        super().__init__(f"Directory {path} already exists.")


class InvalidAppNameError(ScaffoldError, ValueError):
    """The application name cannot be used as a single directory name."""


class ConfigError(ScaffoldError, ValueError):
    """A configuration value (env, YAML file or CLI flag) is invalid."""


class ManifestError(ScaffoldError):
    """package.json is missing, unreadable or not a JSON object."""


class ProcessError(ScaffoldError):
    """An external command exited with a non-zero status or could not start."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int | None,
        stderr: str = "",
    ) -> None:
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        cmd = " ".join(self.command)
        if returncode is None:
            msg = f"Could not run '{cmd}': {stderr}"
        else:
            msg = f"'{cmd}' failed with exit code {returncode}"
            if stderr:
                msg += f": {stderr[:200]}"
        super().__init__(msg)
