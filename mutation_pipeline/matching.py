"""mutation_pipeline.matching

Pair each project under test with the test projects that reference it.

Matching is structural: a test project matches a project under test when its
declared project references contain the project file path verbatim. There is
no transitive closure and no name-based guessing.
"""

from __future__ import annotations

from typing import List, Sequence

from workspace_model import AnalyzedProject

from mutation_pipeline.models import ProjectPairing


def find_test_projects(
    project: AnalyzedProject,
    test_projects: Sequence[AnalyzedProject],
) -> List[AnalyzedProject]:
    """Test projects referencing ``project``, in discovery order."""
    return [t for t in test_projects if t.references(project.project_file_path)]


def match_projects(
    under_test: Sequence[AnalyzedProject],
    test_projects: Sequence[AnalyzedProject],
) -> List[ProjectPairing]:
    """Build pairings in ``under_test`` order.

    Projects no test project references are left out.
    """
    pairings: List[ProjectPairing] = []
    for project in under_test:
        related = find_test_projects(project, test_projects)
        if related:
            pairings.append(ProjectPairing(project_under_test=project, test_projects=tuple(related)))
    return pairings
