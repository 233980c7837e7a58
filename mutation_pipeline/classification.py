"""mutation_pipeline.classification

Decide whether an analyzed project is a project under test or a test project.

Policy, first match wins:

1. ``IsTestProject`` declared: ``"false"`` (any case) means under test; any
   other value, including ``"true"``, ``""`` or garbage, means test project.
2. ``ProjectTypeGuids`` declared: containing the test project type GUID means
   test project, otherwise under test.
3. Neither declared: under test. Unknown projects are never silently excluded.

Rule 1 is asymmetric on purpose: only an explicit ``false`` keeps a project
in the mutation set. Keep it that way until product decides otherwise.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from workspace_model import AnalyzedProject

from mutation_pipeline.models import ProjectRole

IS_TEST_PROJECT_PROPERTY = "IsTestProject"
PROJECT_TYPE_GUIDS_PROPERTY = "ProjectTypeGuids"

# Legacy (non-SDK) test projects carry this GUID in ProjectTypeGuids.
TEST_PROJECT_TYPE_GUID = "{3AC096D0-A1C2-E12C-1390-A8335801FDAB}"


def classify(project: AnalyzedProject) -> ProjectRole:
    props = project.properties

    if IS_TEST_PROJECT_PROPERTY in props:
        if props[IS_TEST_PROJECT_PROPERTY].lower() == "false":
            return ProjectRole.UNDER_TEST
        return ProjectRole.TEST_PROJECT

    if PROJECT_TYPE_GUIDS_PROPERTY in props:
        if TEST_PROJECT_TYPE_GUID in props[PROJECT_TYPE_GUIDS_PROPERTY]:
            return ProjectRole.TEST_PROJECT
        return ProjectRole.UNDER_TEST

    return ProjectRole.UNDER_TEST


def split_projects(
    projects: Iterable[AnalyzedProject],
) -> Tuple[List[AnalyzedProject], List[AnalyzedProject]]:
    """Partition projects into (under_test, test_projects), keeping input order."""
    under_test: List[AnalyzedProject] = []
    test_projects: List[AnalyzedProject] = []
    for project in projects:
        if classify(project) is ProjectRole.UNDER_TEST:
            under_test.append(project)
        else:
            test_projects.append(project)
    return under_test, test_projects
