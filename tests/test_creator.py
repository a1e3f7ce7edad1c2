"""
Tests for ProjectCreator — the process runner is mocked, no npm is spawned.
"""
from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from create_app.config import ScaffoldConfig
from create_app.creator import CreateResult, ProjectCreator, validate_app_name
from create_app.errors import (
    InvalidAppNameError,
    ManifestError,
    ProcessError,
    ProjectExistsError,
)
from create_app.manifest import write_manifest
from create_app.process_runner import ProcessRunner


def _fake_runner() -> MagicMock:
    """A ProcessRunner double whose init() writes what `npm init -y` would."""
    runner = MagicMock(spec=ProcessRunner)

    def _init(cwd):
        write_manifest(Path(cwd) / "package.json", {
            "name": Path(cwd).name,
            "version": "1.0.0",
            "description": "",
            "main": "index.js",
            "scripts": {"test": "echo \"Error: no test specified\" && exit 1"},
            "license": "ISC",
        })

    runner.init.side_effect = _init
    return runner


# ─────────────────────────────────────────────────────────────────────────────
# Happy path
# ─────────────────────────────────────────────────────────────────────────────

def test_create_full_pipeline(tmp_path):
    runner = _fake_runner()
    creator = ProjectCreator(ScaffoldConfig(target_directory=tmp_path), runner=runner)

    result = creator.create("demo")

    project = tmp_path / "demo"
    assert isinstance(result, CreateResult)
    assert result.project_dir == project
    assert result.installed is True
    assert result.manifest_path == project / "package.json"
    assert len(result.files_written) == 5
    for rel in ["server.js", "vite.config.js", "index.html", "src/index.jsx", "src/App.jsx"]:
        assert (project / rel).is_file()

    runner.init.assert_called_once_with(project)
    assert runner.install.call_args_list[0].args == (("react", "react-dom", "express"), project)
    assert runner.install.call_args_list[1].args == (("vite", "@vitejs/plugin-react"), project)
    assert runner.install.call_args_list[1].kwargs == {"dev": True}

    manifest = json.loads((project / "package.json").read_text(encoding="utf-8"))
    assert manifest["name"] == "demo"
    assert manifest["license"] == "ISC"
    assert manifest["type"] == "module"
    assert manifest["scripts"] == {
        "dev": "vite",
        "build": "vite build",
        "start": "NODE_ENV=production node server.js",
    }


def test_create_skip_install_writes_minimal_manifest(tmp_path):
    runner = _fake_runner()
    config = ScaffoldConfig(target_directory=tmp_path, install=False)
    result = ProjectCreator(config, runner=runner).create("demo")

    runner.init.assert_not_called()
    runner.install.assert_not_called()
    assert result.installed is False
    manifest = json.loads((tmp_path / "demo" / "package.json").read_text(encoding="utf-8"))
    assert list(manifest) == ["name", "version", "type", "scripts"]


def test_create_uses_config_port(tmp_path):
    config = ScaffoldConfig(target_directory=tmp_path, port=4500, install=False)
    ProjectCreator(config, runner=_fake_runner()).create("demo")
    server = (tmp_path / "demo" / "server.js").read_text(encoding="utf-8")
    assert "process.env.PORT || 4500" in server


def test_create_reports_progress(tmp_path):
    messages: list[str] = []
    config = ScaffoldConfig(target_directory=tmp_path)
    ProjectCreator(config, runner=_fake_runner(), progress=messages.append).create("demo")
    assert messages[0].startswith("Creating project in ")
    assert "Installing dependencies..." in messages
    assert messages[-1] == "Updating package.json..."


# ─────────────────────────────────────────────────────────────────────────────
# Failures
# ─────────────────────────────────────────────────────────────────────────────

def test_existing_directory_fails_before_any_mutation(tmp_path):
    (tmp_path / "demo").mkdir()
    (tmp_path / "demo" / "keep.txt").write_text("mine", encoding="utf-8")
    runner = _fake_runner()

    with pytest.raises(ProjectExistsError) as excinfo:
        ProjectCreator(ScaffoldConfig(target_directory=tmp_path), runner=runner).create("demo")

    assert excinfo.value.path == tmp_path / "demo"
    assert str(excinfo.value) == f"Directory {tmp_path / 'demo'} already exists."

    runner.init.assert_not_called()
    assert [p.name for p in (tmp_path / "demo").iterdir()] == ["keep.txt"]


def test_existing_file_with_same_name_fails(tmp_path):
    (tmp_path / "demo").write_text("", encoding="utf-8")
    with pytest.raises(ProjectExistsError):
        ProjectCreator(ScaffoldConfig(target_directory=tmp_path), runner=_fake_runner()).create("demo")


def test_install_failure_propagates_without_rollback(tmp_path):
    runner = _fake_runner()
    runner.install.side_effect = ProcessError(["npm", "install"], 1, "network down")

    with pytest.raises(ProcessError):
        ProjectCreator(ScaffoldConfig(target_directory=tmp_path), runner=runner).create("demo")

    # partially created project stays on disk
    assert (tmp_path / "demo" / "package.json").exists()
    assert not (tmp_path / "demo" / "server.js").exists()


def test_missing_manifest_after_init_raises(tmp_path):
    runner = MagicMock(spec=ProcessRunner)   # init() writes nothing
    with pytest.raises(ManifestError):
        ProjectCreator(ScaffoldConfig(target_directory=tmp_path), runner=runner).create("demo")


# ─────────────────────────────────────────────────────────────────────────────
# Name validation and planning
# ─────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("name", ["", "   ", ".", "..", "a/b", "a\\b"])
def test_invalid_names(name):
    with pytest.raises(InvalidAppNameError):
        validate_app_name(name)


@pytest.mark.parametrize("name", ["demo", "my-app", "my_app.v2", "@scope-less"])
def test_valid_names(name):
    validate_app_name(name)


def test_plan_does_not_touch_filesystem(tmp_path):
    creator = ProjectCreator(ScaffoldConfig(target_directory=tmp_path), runner=_fake_runner())
    plan = creator.plan("demo")
    assert len(plan.entries) == 5
    assert list(tmp_path.iterdir()) == []


def test_default_runner_uses_configured_executable(tmp_path):
    creator = ProjectCreator(ScaffoldConfig(target_directory=tmp_path, npm_executable="pnpm"))
    assert creator.runner.executable == "pnpm"
