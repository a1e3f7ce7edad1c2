"""
create-react-express-app
========================
Scaffolds a React + Vite frontend with an Express backend.

Command line:
    create-react-express-app my-app

Programmatic usage:
    from create_app import ProjectCreator, ScaffoldConfig, generate

    plan = generate("my-app")            # pure: files + package.json patch
    result = ProjectCreator(ScaffoldConfig()).create("my-app")
"""

from .models import ManifestPatch, ScaffoldEntry, ScaffoldPlan, TemplateParams
from .scaffold import generate
from .config import ScaffoldConfig, load_config
from .creator import CreateResult, ProjectCreator
from .errors import (
    ConfigError, InvalidAppNameError, ManifestError,
    ProcessError, ProjectExistsError, ScaffoldError,
)
from .process_runner import ProcessRunner

__version__ = "0.1.0"

__all__ = [
    "generate", "ScaffoldEntry", "ManifestPatch", "ScaffoldPlan", "TemplateParams",
    "ScaffoldConfig", "load_config", "ProjectCreator", "CreateResult",
    "ProcessRunner",
    "ScaffoldError", "ProjectExistsError", "InvalidAppNameError",
    "ConfigError", "ManifestError", "ProcessError",
]
