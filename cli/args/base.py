from __future__ import annotations

import argparse


def add_base_args(parser: argparse.ArgumentParser) -> None:
    """Register flags shared by every mode.

    Defaults are ``None`` on purpose: an unset flag falls through to the
    environment, then the config file.
    """

    parser.add_argument(
        "--mode",
        choices=["plan", "run"],
        default="plan",
        help="plan = list the projects that would be mutated, run = mutate them (needs --engine)",
    )
    parser.add_argument(
        "--base-path",
        default=None,
        help="Project or solution directory (default: current directory).",
    )
    parser.add_argument(
        "--solution-path",
        default=None,
        help="Solution file. When it lives in --base-path, every project in it is considered.",
    )
    parser.add_argument("--config", default=None, help="YAML config file.")
    parser.add_argument(
        "--dotenv",
        default=None,
        help="Path to a .env file (default: ./.env if present). Existing variables win.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ...). Default: INFO.",
    )
    parser.add_argument(
        "--out",
        default=None,
        help="(plan mode) Write the plan as JSON to this path.",
    )
