"""
Scaffolder configuration
========================
Resolves a ScaffoldConfig from, lowest to highest precedence:

    defaults → environment → YAML config file → CLI flags

Environment variables (a .env file is honoured by the CLI via python-dotenv):

    CREATE_APP_PORT   default port baked into server.js / vite.config.js
    CREATE_APP_MODE   environment mode that switches server.js to static serving
    CREATE_APP_NPM    npm-compatible executable (default: npm)

YAML config file schema (all fields optional):

    target_directory: ./apps     # parent directory for the new project
    port: 4000
    environment_mode: production
    install: true                # false skips npm init / npm install
    verbose: false
    npm_executable: npm

Only the CLI reads the environment; everything below it receives the
resolved ScaffoldConfig explicitly.
"""
from __future__ import annotations

import os
import re
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from .errors import ConfigError
from .models import TemplateParams

ENV_PORT = "CREATE_APP_PORT"
ENV_MODE = "CREATE_APP_MODE"
ENV_NPM = "CREATE_APP_NPM"

_MODE_RE = re.compile(r"[A-Za-z0-9_.-]+")


@dataclass
class ScaffoldConfig:
    """Everything the creator needs besides the app name."""

    target_directory: Path = field(default_factory=Path.cwd)
    port: Optional[int] = None   # None → template default (3000)
    environment_mode: str = "production"
    install: bool = True
    verbose: bool = False
    npm_executable: str = "npm"

    def template_params(self) -> TemplateParams:
        defaults = TemplateParams()
        return TemplateParams(
            port=self.port if self.port is not None else defaults.port,
            environment_mode=self.environment_mode,
        )


_KNOWN_KEYS = frozenset(f.name for f in fields(ScaffoldConfig))


# ─────────────────────────────────────────────────────────────────────────────
# Value coercion
# ─────────────────────────────────────────────────────────────────────────────

def _parse_port(value: Any, source: str) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        port = value
    elif isinstance(value, str) and value.strip().isascii() and value.strip().isdigit():
        port = int(value.strip())
    else:
        raise ConfigError(f"{source}: port must be an integer, got {value!r}")
    if not 1 <= port <= 65535:
        raise ConfigError(f"{source}: port must be between 1 and 65535, got {port}")
    return port


def _parse_mode(value: Any, source: str) -> str:
    # Embedded in a JS string literal and in the unquoted npm start command
    mode = str(value).strip()
    if not _MODE_RE.fullmatch(mode):
        raise ConfigError(
            f"{source}: environment_mode may only contain letters, digits, '_', '.' "
            f"and '-', got {value!r}"
        )
    return mode


def _parse_bool(value: Any, source: str, key: str) -> bool:
    if isinstance(value, bool):
        return value
    raise ConfigError(f"{source}: '{key}' must be true or false, got {value!r}")


def _coerce(values: Mapping[str, Any], source: str) -> dict[str, Any]:
    """Validate and convert raw values onto ScaffoldConfig field types."""
    out: dict[str, Any] = {}
    for key, value in values.items():
        if key not in _KNOWN_KEYS:
            raise ConfigError(
                f"{source}: unknown setting '{key}'. Valid settings: {sorted(_KNOWN_KEYS)}"
            )
        if value is None:
            continue
        if key == "port":
            out[key] = _parse_port(value, source)
        elif key == "environment_mode":
            out[key] = _parse_mode(value, source)
        elif key in ("install", "verbose"):
            out[key] = _parse_bool(value, source, key)
        elif key == "target_directory":
            out[key] = Path(str(value)).expanduser()
        else:
            text = str(value).strip()
            if not text:
                raise ConfigError(f"{source}: '{key}' must not be empty")
            out[key] = text
    return out


# ─────────────────────────────────────────────────────────────────────────────
# Sources
# ─────────────────────────────────────────────────────────────────────────────

def config_from_env(environ: Optional[Mapping[str, str]] = None) -> dict[str, Any]:
    environ = os.environ if environ is None else environ
    raw: dict[str, Any] = {}
    if environ.get(ENV_PORT):
        raw["port"] = environ[ENV_PORT]
    if environ.get(ENV_MODE):
        raw["environment_mode"] = environ[ENV_MODE]
    if environ.get(ENV_NPM):
        raw["npm_executable"] = environ[ENV_NPM]
    return _coerce(raw, "environment")


def load_config_file(path: str | Path) -> dict[str, Any]:
    """
    Parse a YAML config file.

    Raises
    ------
    ConfigError — file missing, not YAML, not a mapping, or invalid values
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"'{path}': invalid YAML: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"'{path}': top level must be a mapping")

    values = _coerce(raw, f"'{path}'")
    # Relative target directories are relative to the config file
    target = values.get("target_directory")
    if target is not None and not target.is_absolute():
        values["target_directory"] = path.parent / target
    return values


def load_config(
    config_file: str | Path | None = None,
    environ: Optional[Mapping[str, str]] = None,
    **overrides: Any,
) -> ScaffoldConfig:
    """
    Build a ScaffoldConfig. ``overrides`` are CLI-level values; None means
    "not given" and leaves the lower-precedence value in place.
    """
    config = ScaffoldConfig()
    config = replace(config, **config_from_env(environ))
    if config_file:
        config = replace(config, **load_config_file(config_file))
    config = replace(config, **_coerce(overrides, "command line"))
    return config
