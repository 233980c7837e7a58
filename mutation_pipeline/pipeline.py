"""mutation_pipeline.pipeline

A single, high-level object for callers (CLI, scripts, CI runners).

- ``plan(...)``: resolve which projects would be mutated, without running anything
- ``run(...)``: resolve and run the pipeline for each target, lazily

Callers should build it through :func:`mutation_pipeline.wiring.build_pipeline`
rather than wiring the resolver and orchestrator themselves.
"""

from __future__ import annotations

from typing import Any, Iterator, List, Optional, Tuple

from mutation_pipeline.engine_loader import EngineLoadError
from mutation_pipeline.interfaces import MutationTestProcess
from mutation_pipeline.models import WorkspaceOptions
from mutation_pipeline.orchestrator import ProjectOrchestrator
from mutation_pipeline.workspace_resolver import WorkspaceResolver


class MutationPipeline:
    def __init__(
        self,
        *,
        resolver: WorkspaceResolver,
        orchestrator: Optional[ProjectOrchestrator] = None,
        reporter: Any = None,
    ) -> None:
        self._resolver = resolver
        self._orchestrator = orchestrator
        self._reporter = reporter

    @property
    def resolver(self) -> WorkspaceResolver:
        return self._resolver

    @property
    def orchestrator(self) -> Optional[ProjectOrchestrator]:
        return self._orchestrator

    @property
    def can_run(self) -> bool:
        return self._orchestrator is not None

    def plan(self, options: WorkspaceOptions) -> List[WorkspaceOptions]:
        return list(self._resolver.resolve(options))

    def run(self, options: WorkspaceOptions) -> Iterator[MutationTestProcess]:
        if self._orchestrator is None:
            raise EngineLoadError("No mutation engine configured; pass --engine or set MUTATION_PIPELINE_ENGINE.")
        return self._orchestrator.mutate_projects(options, self._reporter)

    def run_with_options(self, options: WorkspaceOptions) -> Iterator[Tuple[WorkspaceOptions, MutationTestProcess]]:
        if self._orchestrator is None:
            raise EngineLoadError("No mutation engine configured; pass --engine or set MUTATION_PIPELINE_ENGINE.")
        return self._orchestrator.iter_runs(options, self._reporter)
