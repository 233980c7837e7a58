"""build_tools/dotnet_analyzer.py

Build-analysis adapter backed by the .NET SDK.

For each project, MSBuild is asked for evaluated values:

  dotnet msbuild <project> -getProperty:IsTestProject -getProperty:ProjectTypeGuids
                           -getItem:ProjectReference

With more than one ``-get*`` switch MSBuild prints a JSON document::

    {"Properties": {"IsTestProject": "true", "ProjectTypeGuids": ""},
     "Items": {"ProjectReference": [{"Identity": "..\\\\A\\\\A.csproj", "FullPath": "/w/A/A.csproj"}]}}

Empty property values are dropped, so an undefined property is reported the
same way the static reader reports it (absent).
"""

from __future__ import annotations

import json
import logging
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from build_tools.core_cmd import run_cmd, which_or_raise
from build_tools.io import normalize_project_path
from build_tools.solution import read_solution_project_paths
from workspace_model import AggregateFailure, AnalyzedProject, BuildResult

logger = logging.getLogger(__name__)

DOTNET_FALLBACKS = ["~/.dotnet/dotnet", "/usr/local/share/dotnet/dotnet", "/usr/share/dotnet/dotnet"]

QUERIED_PROPERTIES: Sequence[str] = ("IsTestProject", "ProjectTypeGuids")

DEFAULT_TIMEOUT_SECONDS = 300


def build_msbuild_query_command(dotnet: str, project_file_path: str) -> List[str]:
    cmd = [dotnet, "msbuild", project_file_path, "-nologo"]
    cmd += [f"-getProperty:{name}" for name in QUERIED_PROPERTIES]
    cmd.append("-getItem:ProjectReference")
    return cmd


def parse_msbuild_query_output(project_file_path: str, stdout: str) -> Optional[AnalyzedProject]:
    """Decode ``dotnet msbuild -get*`` JSON output. Returns None if undecodable."""
    try:
        data = json.loads(stdout)
    except json.JSONDecodeError:
        return None
    if not isinstance(data, dict):
        return None

    raw_props = data.get("Properties") or {}
    properties = {
        str(k): str(v) for k, v in raw_props.items() if v is not None and str(v).strip()
    }

    project_dir = Path(project_file_path).parent
    references: List[str] = []
    items = (data.get("Items") or {}).get("ProjectReference") or []
    for item in items:
        if not isinstance(item, dict):
            continue
        raw = item.get("FullPath") or item.get("Identity")
        if raw:
            references.append(normalize_project_path(str(raw), relative_to=project_dir))

    return AnalyzedProject.build(
        project_file_path,
        properties=properties,
        project_references=references,
    )


@dataclass(frozen=True)
class DotnetProjectAnalyzer:
    project_file_path: str
    dotnet: str
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS

    def build(self) -> BuildResult:
        cmd = build_msbuild_query_command(self.dotnet, self.project_file_path)
        try:
            res = run_cmd(
                cmd,
                cwd=Path(self.project_file_path).parent,
                timeout_seconds=self.timeout_seconds,
            )
        except subprocess.TimeoutExpired:
            logger.debug("dotnet msbuild timed out for %s", self.project_file_path)
            return BuildResult()

        if res.exit_code != 0:
            logger.debug(
                "dotnet msbuild exited %s for %s", res.exit_code, self.project_file_path
            )
            return BuildResult()

        project = parse_msbuild_query_output(self.project_file_path, res.stdout)
        if project is None:
            logger.debug("Could not decode dotnet msbuild output for %s", self.project_file_path)
            return BuildResult()
        return BuildResult(results=(project,))


@dataclass(frozen=True)
class DotnetBuildManager:
    solution_path: str
    projects: Dict[str, DotnetProjectAnalyzer] = field(default_factory=dict)


class DotnetBuildAnalyzerProvider:
    """Provide a :class:`DotnetBuildManager` for a solution file."""

    def __init__(self, *, timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS, dotnet: Optional[str] = None) -> None:
        self._timeout_seconds = timeout_seconds
        self._dotnet = dotnet

    def provide(self, solution_path: str) -> DotnetBuildManager:
        errors: List[BaseException] = []
        dotnet: Any = self._dotnet
        if not dotnet:
            try:
                dotnet = which_or_raise("dotnet", DOTNET_FALLBACKS)
            except FileNotFoundError as e:
                errors.append(e)

        paths: List[str] = []
        try:
            paths = read_solution_project_paths(solution_path)
        except OSError as e:
            errors.append(e)

        if errors:
            raise AggregateFailure(errors)

        return DotnetBuildManager(
            solution_path=str(solution_path),
            projects={
                p: DotnetProjectAnalyzer(
                    project_file_path=p,
                    dotnet=str(dotnet),
                    timeout_seconds=self._timeout_seconds,
                )
                for p in paths
            },
        )
