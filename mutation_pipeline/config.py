"""mutation_pipeline.config

Configuration loading.

Values come from four places, highest precedence first:

1. command-line arguments
2. environment variables (``MUTATION_PIPELINE_*``; a ``.env`` file is loaded
   by :mod:`mutation_pipeline.wiring` without overriding the real environment)
3. a YAML config file
4. defaults

A config file is a flat mapping::

    base_path: .
    solution_path: ./Acme.sln
    analyzer: static
    engine: acme_mutator.engine:create
    log_level: DEBUG
    dotnet_timeout_seconds: 300
    criteria:
      mutate: ["**/*.cs", "!**/Generated/**"]
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from mutation_pipeline.models import WorkspaceOptions

ENV_PREFIX = "MUTATION_PIPELINE_"

ANALYZERS = ("static", "dotnet")
DEFAULT_ANALYZER = "static"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_DOTNET_TIMEOUT_SECONDS = 300

CONFIG_KEYS = frozenset(
    {
        "base_path",
        "solution_path",
        "analyzer",
        "engine",
        "log_level",
        "dotnet_timeout_seconds",
        "criteria",
    }
)

# Keys that may also come from the environment.
ENV_KEYS = ("base_path", "solution_path", "analyzer", "engine", "log_level")


class ConfigError(ValueError):
    """Invalid configuration file or value."""


@dataclass(frozen=True)
class RunConfig:
    options: WorkspaceOptions
    analyzer: str = DEFAULT_ANALYZER
    engine: Optional[str] = None
    dotnet_timeout_seconds: int = DEFAULT_DOTNET_TIMEOUT_SECONDS


def load_config_file(path: str | Path) -> Dict[str, Any]:
    p = Path(path).expanduser()
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {p}")

    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {p}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {p} must contain a mapping, got {type(data).__name__}")

    unknown = sorted(str(k) for k in data if k not in CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config keys in {p}: {', '.join(unknown)}")
    return dict(data)


def env_values(env: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    env = os.environ if env is None else env
    out: Dict[str, str] = {}
    for key in ENV_KEYS:
        raw = env.get(ENV_PREFIX + key.upper())
        if raw is not None and raw.strip():
            out[key] = raw.strip()
    return out


def _pick(key: str, *layers: Mapping[str, Any]) -> Any:
    for layer in layers:
        val = layer.get(key)
        if val is not None:
            return val
    return None


def _absolute(raw: Any, cwd: Path) -> str:
    p = Path(str(raw)).expanduser()
    if not p.is_absolute():
        p = cwd / p
    return os.path.normpath(str(p))


def build_run_config(
    *,
    cli_values: Optional[Mapping[str, Any]] = None,
    env: Optional[Mapping[str, str]] = None,
    file_values: Optional[Mapping[str, Any]] = None,
    cwd: Optional[Path] = None,
) -> RunConfig:
    cli_layer = dict(cli_values or {})
    env_layer = env_values(env)
    file_layer = dict(file_values or {})
    cwd = Path(cwd) if cwd is not None else Path.cwd()
    layers = (cli_layer, env_layer, file_layer)

    base_path = _absolute(_pick("base_path", *layers) or ".", cwd)

    solution_raw = _pick("solution_path", *layers)
    solution_path = _absolute(solution_raw, cwd) if solution_raw else None

    analyzer = str(_pick("analyzer", *layers) or DEFAULT_ANALYZER).lower()
    if analyzer not in ANALYZERS:
        raise ConfigError(f"Unknown analyzer {analyzer!r}. Valid: {', '.join(ANALYZERS)}")

    log_level = str(_pick("log_level", *layers) or DEFAULT_LOG_LEVEL).upper()

    raw_timeout = _pick("dotnet_timeout_seconds", *layers)
    try:
        timeout = int(raw_timeout) if raw_timeout is not None else DEFAULT_DOTNET_TIMEOUT_SECONDS
    except (TypeError, ValueError) as e:
        raise ConfigError(f"dotnet_timeout_seconds must be an integer, got {raw_timeout!r}") from e
    if timeout < 0:
        raise ConfigError("dotnet_timeout_seconds must not be negative")

    criteria = file_layer.get("criteria") or {}
    if not isinstance(criteria, Mapping):
        raise ConfigError("criteria must be a mapping")

    engine = _pick("engine", *layers)

    options = WorkspaceOptions(
        base_path=base_path,
        solution_path=solution_path,
        criteria=dict(criteria),
        log_level=log_level,
    )
    return RunConfig(
        options=options,
        analyzer=analyzer,
        engine=str(engine) if engine else None,
        dotnet_timeout_seconds=timeout,
    )
