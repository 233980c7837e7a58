from __future__ import annotations

from pathlib import Path

from build_tools.io import write_json
from mutation_pipeline.config import RunConfig
from mutation_pipeline.pipeline import MutationPipeline

from cli.common import describe_options


def run_plan(args, pipeline: MutationPipeline, *, config: RunConfig) -> int:
    """Print (and optionally write) the projects a run would mutate."""
    options = config.options
    derived = pipeline.plan(options)
    mode = "solution" if options.is_solution_mode() else "project"

    print(f"Mode    : {mode}")
    print(f"Targets : {len(derived)}")
    for item in derived:
        print(f"  - {describe_options(item)}")

    if args.out:
        out_path = Path(args.out).expanduser()
        write_json(
            out_path,
            {
                "mode": mode,
                "base_path": options.base_path,
                "solution_path": options.solution_path,
                "projects": [d.to_plan_entry() for d in derived],
            },
        )
        print(f"Plan written to {out_path}")
    return 0
