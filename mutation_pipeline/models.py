"""mutation_pipeline.models

Data structures used across the orchestration layer.

These dataclasses provide a small, explicit vocabulary for:
- what the user asked for (WorkspaceOptions)
- how a project was classified (ProjectRole)
- which test projects exercise which project (ProjectPairing)
- the per-pairing state handed from step to step (MutationTestInput)
"""

from __future__ import annotations

import dataclasses
import enum
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Tuple

from workspace_model import AnalyzedProject


@dataclass(frozen=True)
class WorkspaceOptions:
    """Options for one mutation run.

    Never mutated. Per-project options are derived with :meth:`copy`, so a
    pairing can never see another pairing's overrides.
    """

    base_path: str
    solution_path: Optional[str] = None

    # Set only on options derived for a solution-mode pairing.
    project_under_test: Optional[str] = None
    test_projects: Tuple[str, ...] = ()

    # Opaque to this layer; forwarded to the initialisation and mutation collaborators.
    criteria: Mapping[str, Any] = field(default_factory=dict)

    log_level: str = "INFO"

    def copy(
        self,
        *,
        base_path: str,
        project_under_test: Optional[str],
        test_projects: Optional[Iterable[str]],
    ) -> "WorkspaceOptions":
        return dataclasses.replace(
            self,
            base_path=base_path,
            project_under_test=project_under_test,
            test_projects=tuple(test_projects or ()),
        )

    def is_solution_mode(self) -> bool:
        """True when the base path is the directory holding the solution file."""
        if not self.solution_path:
            return False
        base = os.path.normpath(str(Path(self.base_path).expanduser().absolute()))
        solution_dir = os.path.dirname(
            os.path.normpath(str(Path(self.solution_path).expanduser().absolute()))
        )
        return base == solution_dir

    def to_plan_entry(self) -> dict:
        return {
            "base_path": self.base_path,
            "project_under_test": self.project_under_test,
            "test_projects": list(self.test_projects),
        }


class ProjectRole(enum.Enum):
    UNDER_TEST = "under-test"
    TEST_PROJECT = "test-project"


@dataclass(frozen=True)
class ProjectPairing:
    """A project under test and the test projects that reference it."""

    project_under_test: AnalyzedProject
    test_projects: Tuple[AnalyzedProject, ...]

    def __post_init__(self) -> None:
        if not self.test_projects:
            raise ValueError(
                f"A pairing needs at least one test project: {self.project_under_test.project_file_path}"
            )

    @property
    def test_project_paths(self) -> Tuple[str, ...]:
        return tuple(t.project_file_path for t in self.test_projects)


class PipelineStage(enum.Enum):
    INITIALISED = "initialised"
    CALIBRATED = "calibrated"
    MUTATION_READY = "mutation-ready"


@dataclass
class MutationTestInput:
    """State accumulated across the pipeline steps of one pairing.

    Created by the initialisation collaborator and owned by exactly one
    pairing.
    """

    options: WorkspaceOptions
    test_runner: Any = None
    timeout_ms: Optional[int] = None
    stage: PipelineStage = PipelineStage.INITIALISED


@dataclass(frozen=True)
class MutationTestExecutor:
    """Handle on the test runner the mutation process executes mutants with.

    How mutants are run is up to the engine; this only carries the runner
    prepared during initialisation.
    """

    test_runner: Any
