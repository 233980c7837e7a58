"""mutation_pipeline

Decide which projects of a workspace get mutation-tested, pair each one with
the test projects that exercise it, and drive the per-project pipeline
(initialize -> initial test -> mutate) once per pairing.
"""

from __future__ import annotations
