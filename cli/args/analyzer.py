from __future__ import annotations

import argparse

from mutation_pipeline.config import ANALYZERS


def add_analyzer_args(parser: argparse.ArgumentParser) -> None:
    """Register flags that pick the build-analysis adapter and the mutation engine."""

    parser.add_argument(
        "--analyzer",
        choices=list(ANALYZERS),
        default=None,
        help="static = read project files directly, dotnet = ask 'dotnet msbuild' (default: static)",
    )
    parser.add_argument(
        "--dotnet-timeout-seconds",
        type=int,
        default=None,
        help="(dotnet analyzer) Per-project timeout for 'dotnet msbuild'.",
    )
    parser.add_argument(
        "--engine",
        default=None,
        help="(run mode) Mutation engine factory as 'module:factory' or 'path/to/file.py:factory'.",
    )
