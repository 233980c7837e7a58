"""mutation_pipeline.engine_loader

Load the mutation engine bindings named on the command line or in config.

An engine spec is ``<module-or-file>:<factory>``:

- ``acme_mutator.engine:create`` imports a module
- ``./engine.py:create`` loads a Python file

The factory is called with the run's :class:`WorkspaceOptions` and must
return :class:`EngineBindings` (or a mapping with the same keys).
"""

from __future__ import annotations

import importlib
import importlib.util
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Any, Mapping

from mutation_pipeline.models import WorkspaceOptions


class EngineLoadError(ImportError):
    """Raised when an engine spec cannot be turned into engine bindings."""


@dataclass(frozen=True)
class EngineBindings:
    initialisation_process_provider: Any
    mutation_test_process_provider: Any
    reporter: Any = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "EngineBindings":
        try:
            return cls(
                initialisation_process_provider=data["initialisation_process_provider"],
                mutation_test_process_provider=data["mutation_test_process_provider"],
                reporter=data.get("reporter"),
            )
        except KeyError as e:
            raise EngineLoadError(f"Engine factory result is missing {e.args[0]!r}") from e


def _load_module_from_path(path: Path) -> ModuleType:
    p = Path(path).expanduser().resolve()
    if not p.exists():
        raise EngineLoadError(f"Engine file not found: {p}")
    mod_name = f"mutation_engine_{p.stem}_{abs(hash(str(p)))}"
    spec = importlib.util.spec_from_file_location(mod_name, str(p))
    if spec is None or spec.loader is None:
        raise EngineLoadError(f"Unable to import engine file: {p}")
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)  # type: ignore[union-attr]
    return mod


def _load_module(target: str) -> ModuleType:
    if target.endswith(".py"):
        return _load_module_from_path(Path(target))
    try:
        return importlib.import_module(target)
    except ImportError as e:
        raise EngineLoadError(f"Cannot import engine module {target!r}: {e}") from e


def load_engine(spec: str, options: WorkspaceOptions) -> EngineBindings:
    target, sep, attr = spec.rpartition(":")
    if not sep or not target or not attr:
        raise EngineLoadError(f"Engine spec must look like 'module:factory', got {spec!r}")

    mod = _load_module(target)
    factory = getattr(mod, attr, None)
    if factory is None or not callable(factory):
        raise EngineLoadError(f"Engine module {target!r} has no callable {attr!r}")

    bindings = factory(options)
    if isinstance(bindings, EngineBindings):
        return bindings
    if isinstance(bindings, Mapping):
        return EngineBindings.from_mapping(bindings)
    raise EngineLoadError(
        f"Engine factory {spec!r} returned {type(bindings).__name__}; expected EngineBindings or a mapping"
    )
