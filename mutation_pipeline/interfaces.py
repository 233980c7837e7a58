"""mutation_pipeline.interfaces

Collaborator contracts for the orchestration layer.

The orchestrator only decides *what* to mutate and in *which grouping*. Build
analysis, environment setup, the initial test run and the mutation engine
itself are collaborators described here as structural protocols, so real
implementations and test doubles are interchangeable.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol

from workspace_model import BuildResult

from mutation_pipeline.models import MutationTestExecutor, MutationTestInput, WorkspaceOptions


class ProjectAnalyzer(Protocol):
    project_file_path: str

    def build(self) -> BuildResult: ...


class BuildManager(Protocol):
    projects: Mapping[str, ProjectAnalyzer]


class BuildAnalyzerProvider(Protocol):
    def provide(self, solution_path: str) -> BuildManager: ...


class InitialisationProcess(Protocol):
    def initialize(self, options: WorkspaceOptions) -> MutationTestInput: ...

    def initial_test(self, mutation_test_input: MutationTestInput, options: WorkspaceOptions) -> int:
        """Run the unmutated test suite once and return a timeout budget in ms."""
        ...


class InitialisationProcessProvider(Protocol):
    def provide(self) -> InitialisationProcess: ...


class MutationTestProcess(Protocol):
    def mutate(self) -> None: ...


class MutationTestProcessProvider(Protocol):
    def provide(
        self,
        *,
        mutation_test_input: MutationTestInput,
        reporter: Any,
        mutation_test_executor: MutationTestExecutor,
        options: WorkspaceOptions,
    ) -> MutationTestProcess: ...
