"""mutation_pipeline.wiring

This module is the **composition root**.

It is the single place where the running application is assembled from its
building blocks:

- load ``.env`` and configure logging
- choose the build-analysis adapter
- load the mutation engine bindings
- build the :class:`~mutation_pipeline.pipeline.MutationPipeline` facade

Components below this layer receive their logger and collaborators as
constructor arguments; none of them reach for global state.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from build_tools.dotnet_analyzer import DotnetBuildAnalyzerProvider
from build_tools.static_analyzer import StaticBuildAnalyzerProvider
from mutation_pipeline.config import ANALYZERS, ConfigError, RunConfig
from mutation_pipeline.engine_loader import EngineBindings, load_engine
from mutation_pipeline.interfaces import BuildAnalyzerProvider
from mutation_pipeline.orchestrator import ProjectOrchestrator
from mutation_pipeline.pipeline import MutationPipeline
from mutation_pipeline.workspace_resolver import WorkspaceResolver

LOGGER_NAME = "mutation_pipeline"
# Adapters log under their own package; both trees share one handler.
CONFIGURED_LOGGERS = (LOGGER_NAME, "build_tools")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def load_environment(dotenv_path: Optional[Path] = None) -> bool:
    """Load a ``.env`` file into the environment without overriding existing keys."""
    path = Path(dotenv_path) if dotenv_path is not None else Path.cwd() / ".env"
    if not path.exists():
        return False
    return bool(load_dotenv(dotenv_path=path, override=False))


def configure_logging(level: str = "INFO") -> logging.Logger:
    numeric = logging.getLevelName(str(level).upper())
    if not isinstance(numeric, int):
        raise ConfigError(f"Unknown log level {level!r}")

    loggers = [logging.getLogger(name) for name in CONFIGURED_LOGGERS]
    handler = next((h for lg in loggers for h in lg.handlers), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))

    for lg in loggers:
        lg.setLevel(numeric)
        if handler not in lg.handlers:
            lg.addHandler(handler)
    return loggers[0]


def build_analyzer_provider(name: str, *, dotnet_timeout_seconds: int = 300) -> BuildAnalyzerProvider:
    if name == "static":
        return StaticBuildAnalyzerProvider()
    if name == "dotnet":
        return DotnetBuildAnalyzerProvider(timeout_seconds=dotnet_timeout_seconds)
    raise ConfigError(f"Unknown analyzer {name!r}. Valid: {', '.join(ANALYZERS)}")


def build_pipeline(
    config: RunConfig,
    *,
    engine: Optional[EngineBindings] = None,
    build_analyzer: Optional[BuildAnalyzerProvider] = None,
) -> MutationPipeline:
    """Build the facade for one run.

    ``engine`` and ``build_analyzer`` are normally derived from ``config``;
    passing them directly lets tests swap in doubles.
    """
    logger = logging.getLogger(LOGGER_NAME)

    analyzer = build_analyzer or build_analyzer_provider(
        config.analyzer, dotnet_timeout_seconds=config.dotnet_timeout_seconds
    )
    if engine is None and config.engine:
        engine = load_engine(config.engine, config.options)
    if engine is None:
        resolver = WorkspaceResolver(
            build_analyzer_provider=analyzer,
            logger=logger.getChild("resolver"),
        )
        return MutationPipeline(resolver=resolver)

    orchestrator = ProjectOrchestrator(
        build_analyzer_provider=analyzer,
        initialisation_process_provider=engine.initialisation_process_provider,
        mutation_test_process_provider=engine.mutation_test_process_provider,
        logger=logger.getChild("orchestrator"),
    )
    # plan() and run() share the orchestrator's resolver.
    return MutationPipeline(resolver=orchestrator.resolver, orchestrator=orchestrator, reporter=engine.reporter)
