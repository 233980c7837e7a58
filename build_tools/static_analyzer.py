"""build_tools/static_analyzer.py

Build-analysis adapter that reads solution and project files directly.

  solution.sln -> project paths -> per-project static read -> AnalyzedProject

No SDK is required, which makes this the default adapter. The trade-off is
that only declared values are visible: properties set by imported targets
(other than the test-SDK rule in :mod:`build_tools.msbuild_project`) are not.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict

from build_tools.msbuild_project import ProjectFileError, read_project_file
from build_tools.solution import read_solution_project_paths
from workspace_model import AggregateFailure, BuildResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StaticProjectAnalyzer:
    project_file_path: str

    def build(self) -> BuildResult:
        """Read the project file; a missing or malformed file yields an empty result."""
        try:
            project = read_project_file(self.project_file_path)
        except (OSError, ProjectFileError) as e:
            logger.debug("Static read of %s failed: %s", self.project_file_path, e)
            return BuildResult()
        return BuildResult(results=(project,))


@dataclass(frozen=True)
class StaticBuildManager:
    solution_path: str
    projects: Dict[str, StaticProjectAnalyzer] = field(default_factory=dict)


class StaticBuildAnalyzerProvider:
    """Provide a :class:`StaticBuildManager` for a solution file."""

    def provide(self, solution_path: str) -> StaticBuildManager:
        error = None
        try:
            paths = read_solution_project_paths(solution_path)
        except OSError as e:
            error = e
        if error is not None:
            raise AggregateFailure([error])

        return StaticBuildManager(
            solution_path=str(solution_path),
            projects={p: StaticProjectAnalyzer(project_file_path=p) for p in paths},
        )
