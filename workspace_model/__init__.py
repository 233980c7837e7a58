"""workspace_model

Contracts shared between the build-analysis adapters and the orchestration
layer.

Why this exists
---------------
Build-analysis adapters (``build_tools``) and the mutation orchestration
(``mutation_pipeline``) need to agree on one shape for "what a project looks
like after its build metadata was read". Keeping that shape in a package that
imports nothing else lets both sides depend on it without depending on each
other.
"""

from __future__ import annotations

from .errors import AggregateFailure
from .project import AnalyzedProject, BuildResult

__all__ = [
    "AggregateFailure",
    "AnalyzedProject",
    "BuildResult",
]
