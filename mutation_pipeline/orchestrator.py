"""mutation_pipeline.orchestrator

Compose the workspace resolver and the pipeline runner.

:meth:`ProjectOrchestrator.mutate_projects` is a generator: each derived
options object is resolved and run only when the caller asks for the next
process. A failure while producing item N is raised from that ``next()``
call; processes already yielded are unaffected.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Tuple

from mutation_pipeline.interfaces import (
    BuildAnalyzerProvider,
    InitialisationProcessProvider,
    MutationTestProcess,
    MutationTestProcessProvider,
)
from mutation_pipeline.models import WorkspaceOptions
from mutation_pipeline.runner import PipelineRunner
from mutation_pipeline.workspace_resolver import WorkspaceResolver


class ProjectOrchestrator:
    def __init__(
        self,
        *,
        build_analyzer_provider: BuildAnalyzerProvider,
        initialisation_process_provider: InitialisationProcessProvider,
        mutation_test_process_provider: MutationTestProcessProvider,
        logger: logging.Logger,
    ) -> None:
        self.resolver = WorkspaceResolver(
            build_analyzer_provider=build_analyzer_provider,
            logger=logger,
        )
        self.runner = PipelineRunner(
            initialisation_process_provider=initialisation_process_provider,
            mutation_test_process_provider=mutation_test_process_provider,
            logger=logger,
        )

    def mutate_projects(self, options: WorkspaceOptions, reporter: Any) -> Iterator[MutationTestProcess]:
        for _, process in self.iter_runs(options, reporter):
            yield process

    def iter_runs(
        self, options: WorkspaceOptions, reporter: Any
    ) -> Iterator[Tuple[WorkspaceOptions, MutationTestProcess]]:
        """Like :meth:`mutate_projects`, but also yields the options each process ran with."""
        for project_options in self.resolver.resolve(options):
            yield project_options, self.runner.run_one(project_options, reporter)
