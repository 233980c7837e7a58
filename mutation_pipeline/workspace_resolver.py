"""mutation_pipeline.workspace_resolver

Turn the user's options into one derived :class:`WorkspaceOptions` per
mutation target.

Two modes:

* **solution mode** (base path is the directory holding the solution file):
  every project in the solution is analyzed, classified and matched, and each
  project under test with at least one test project gets its own options.
* **project mode** (anything else): exactly one derived options object, with
  no project-under-test or test-project overrides; the initialisation
  collaborator locates the projects itself.

Resolution is lazy. Nothing is analyzed until the first item is requested,
and derived options are handed out one at a time.
"""

from __future__ import annotations

import logging
from typing import Iterator, List

from workspace_model import AggregateFailure, AnalyzedProject

from mutation_pipeline.classification import split_projects
from mutation_pipeline.interfaces import BuildAnalyzerProvider
from mutation_pipeline.matching import match_projects
from mutation_pipeline.models import ProjectPairing, WorkspaceOptions


class WorkspaceResolver:
    def __init__(self, *, build_analyzer_provider: BuildAnalyzerProvider, logger: logging.Logger) -> None:
        self._build_analyzer_provider = build_analyzer_provider
        self._logger = logger

    def resolve(self, options: WorkspaceOptions) -> Iterator[WorkspaceOptions]:
        if options.is_solution_mode():
            self._logger.info("Identifying projects to mutate.")
            for pairing in self.resolve_pairings(options):
                yield derive_pairing_options(options, pairing)
        else:
            self._logger.info("Identifying project to mutate.")
            yield options.copy(base_path=options.base_path, project_under_test=None, test_projects=None)

    def resolve_pairings(self, options: WorkspaceOptions) -> Iterator[ProjectPairing]:
        projects = self.analyze_projects(str(options.solution_path))

        under_test, test_projects = split_projects(projects)
        self._logger.debug("Found %d projects under test", len(under_test))
        self._logger.debug("Found %d test projects", len(test_projects))

        pairings = match_projects(under_test, test_projects)
        paired = {p.project_under_test for p in pairings}
        for project in under_test:
            if project not in paired:
                self._logger.debug(
                    "No test project references %s, it will not be mutated", project.project_file_path
                )

        for pairing in pairings:
            self._logger.debug(
                "Matched %s to %d test projects:",
                pairing.project_under_test.project_file_path,
                len(pairing.test_projects),
            )
            for test_project in pairing.test_projects:
                self._logger.debug("%s", test_project.project_file_path)
            yield pairing

    def analyze_projects(self, solution_path: str) -> List[AnalyzedProject]:
        """Build every project in the solution, keeping the ones that produced a result.

        A batched failure from the build tool is fatal: its first underlying
        cause is raised. A single project failing to build is only logged.
        """
        analyzed: List[AnalyzedProject] = []
        try:
            manager = self._build_analyzer_provider.provide(solution_path)
            self._logger.debug("Analysing %d projects", len(manager.projects))
            for project in manager.projects.values():
                path = project.project_file_path
                self._logger.debug("Analysing %s", path)
                result = project.build().first()
                if result is not None:
                    analyzed.append(result)
                    self._logger.debug("Analysis of project %s succeeded", path)
                else:
                    self._logger.warning("Analysis of project %s failed", path)
        except AggregateFailure as failure:
            # The aggregate stays reachable as __context__; the cause keeps its own chain.
            cause = failure.base_exception()
            raise cause.with_traceback(cause.__traceback__)
        return analyzed


def derive_pairing_options(options: WorkspaceOptions, pairing: ProjectPairing) -> WorkspaceOptions:
    path = pairing.project_under_test.project_file_path
    return options.copy(
        base_path=path,
        project_under_test=path,
        test_projects=pairing.test_project_paths,
    )
