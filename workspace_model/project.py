"""workspace_model.project

Canonical representation of one analyzed project.

A build-analysis adapter reads a project file (statically, or by asking
MSBuild) and produces an :class:`AnalyzedProject`. Everything downstream
(classification, matching, per-project options) only looks at three things:

* the project file path (the identity of the project within a workspace)
* the declared build properties (sparse: a property may be missing entirely)
* the declared project references (paths to other project files)

Paths are expected to be normalized by the adapter that produced them.
Matching compares them with plain string equality.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple


@dataclass(frozen=True, eq=False)
class AnalyzedProject:
    """Build metadata for one project. Identity is the project file path."""

    project_file_path: str
    properties: Mapping[str, str] = field(default_factory=dict)
    project_references: Tuple[str, ...] = ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnalyzedProject):
            return NotImplemented
        return self.project_file_path == other.project_file_path

    def __hash__(self) -> int:
        return hash(self.project_file_path)

    def references(self, project_file_path: str) -> bool:
        return project_file_path in self.project_references

    @classmethod
    def build(
        cls,
        project_file_path: str,
        *,
        properties: Optional[Mapping[str, Any]] = None,
        project_references: Iterable[str] = (),
    ) -> "AnalyzedProject":
        """Create a project, coercing property values to strings.

        References keep their declared order; duplicates are dropped.
        """
        props: Dict[str, str] = {}
        for k, v in (properties or {}).items():
            if v is None:
                continue
            props[str(k)] = str(v)

        refs: list[str] = []
        for r in project_references:
            if r and r not in refs:
                refs.append(str(r))

        return cls(
            project_file_path=str(project_file_path),
            properties=props,
            project_references=tuple(refs),
        )


@dataclass(frozen=True)
class BuildResult:
    """Outcome of building one project.

    ``results`` is empty when the build failed to produce anything usable.
    Only the first entry is consumed by the orchestration layer.
    """

    results: Tuple[AnalyzedProject, ...] = ()

    @property
    def succeeded(self) -> bool:
        return bool(self.results)

    def first(self) -> Optional[AnalyzedProject]:
        return self.results[0] if self.results else None
