from __future__ import annotations

from mutation_pipeline.config import RunConfig
from mutation_pipeline.pipeline import MutationPipeline

from cli.common import describe_options


def run_mutation(args, pipeline: MutationPipeline, *, config: RunConfig) -> int:
    """Mutate every resolved target, one at a time."""
    if not pipeline.can_run:
        raise SystemExit(
            "Run mode needs a mutation engine: pass --engine module:factory or set MUTATION_PIPELINE_ENGINE."
        )

    completed = 0
    for project_options, _process in pipeline.run_with_options(config.options):
        completed += 1
        print(f"[{completed}] done: {describe_options(project_options)}")

    if completed == 0:
        print("No projects were mutated (no project under test is referenced by a test project).")
    return 0
