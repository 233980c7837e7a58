"""cli.common

Small shared helpers for CLI command modules.
"""

from __future__ import annotations

import argparse
from typing import Any, Dict

# argparse dest -> config key
_CLI_CONFIG_KEYS = {
    "base_path": "base_path",
    "solution_path": "solution_path",
    "analyzer": "analyzer",
    "engine": "engine",
    "log_level": "log_level",
    "dotnet_timeout_seconds": "dotnet_timeout_seconds",
}


def cli_values(args: argparse.Namespace) -> Dict[str, Any]:
    """Config values explicitly given on the command line (unset flags omitted)."""
    out: Dict[str, Any] = {}
    for dest, key in _CLI_CONFIG_KEYS.items():
        val = getattr(args, dest, None)
        if val is not None:
            out[key] = val
    return out


def describe_options(options: Any) -> str:
    if options.project_under_test:
        tests = ", ".join(options.test_projects)
        return f"{options.project_under_test}  <-  [{tests}]"
    return f"{options.base_path}  (project mode)"
