"""build_tools/solution.py

Read the project list out of a Visual Studio solution (``.sln``) file.

Only ``Project(...)`` entries are of interest. A line looks like::

    Project("{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}") = "Api", "src\\Api\\Api.csproj", "{6F2D...}"

Solution folders use their own type GUID and are not buildable, so they are
skipped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import List

from build_tools.io import normalize_project_path

SOLUTION_FOLDER_TYPE_GUID = "2150E333-8FDC-42A3-9474-1A3956D46DE8"

_PROJECT_LINE_RE = re.compile(
    r'^\s*Project\("\{(?P<type>[^}]+)\}"\)\s*=\s*'
    r'"(?P<name>[^"]*)"\s*,\s*"(?P<path>[^"]*)"\s*,\s*"\{(?P<guid>[^}]+)\}"'
)


@dataclass(frozen=True)
class SolutionProject:
    name: str
    path: str
    type_guid: str
    project_guid: str


def read_solution_projects(solution_path: str | Path) -> List[SolutionProject]:
    """Return buildable projects declared by a solution, in file order.

    Raises ``OSError`` if the solution cannot be read.
    """
    sln = Path(solution_path).expanduser().absolute()
    text = sln.read_text(encoding="utf-8-sig", errors="replace")

    out: List[SolutionProject] = []
    seen: set[str] = set()
    for line in text.splitlines():
        m = _PROJECT_LINE_RE.match(line)
        if not m:
            continue
        type_guid = m.group("type").upper()
        if type_guid == SOLUTION_FOLDER_TYPE_GUID:
            continue
        path = normalize_project_path(m.group("path"), relative_to=sln.parent)
        if path in seen:
            continue
        seen.add(path)
        out.append(
            SolutionProject(
                name=m.group("name"),
                path=path,
                type_guid=type_guid,
                project_guid=m.group("guid").upper(),
            )
        )
    return out


def read_solution_project_paths(solution_path: str | Path) -> List[str]:
    return [p.path for p in read_solution_projects(solution_path)]
