from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Optional

from cli.args.analyzer import add_analyzer_args
from cli.args.base import add_base_args
from cli.commands.plan import run_plan
from cli.commands.run import run_mutation
from cli.common import cli_values

from mutation_pipeline.config import ConfigError, build_run_config, load_config_file
from mutation_pipeline.engine_loader import EngineLoadError
from mutation_pipeline.wiring import build_pipeline, configure_logging, load_environment


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find the projects of a .NET workspace to mutation-test and run the pipeline for each."
    )
    add_base_args(parser)
    add_analyzer_args(parser)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        load_environment(Path(args.dotenv) if args.dotenv else None)
        file_values = load_config_file(args.config) if args.config else {}
        config = build_run_config(cli_values=cli_values(args), file_values=file_values)
        configure_logging(config.options.log_level)
        pipeline = build_pipeline(config)

        if args.mode == "run":
            return int(run_mutation(args, pipeline, config=config))
        return int(run_plan(args, pipeline, config=config))
    except (ConfigError, EngineLoadError, FileNotFoundError) as e:
        raise SystemExit(f"ERROR: {e}")
