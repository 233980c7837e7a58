"""build_tools/msbuild_project.py

Static reader for MSBuild project files (``.csproj`` and friends).

This does not evaluate MSBuild. It reads what the project file declares:

* properties from unconditional ``<PropertyGroup>`` elements (later values win,
  names compare case-insensitively, empty values are treated as undefined)
* ``<ProjectReference Include="...">`` items, resolved against the project
  directory

Both SDK-style projects (no XML namespace) and legacy projects (the
``http://schemas.microsoft.com/developer/msbuild/2003`` namespace) are
supported; element names are matched without their namespace.

One piece of SDK behavior is reproduced: referencing the
``Microsoft.NET.Test.Sdk`` package makes MSBuild set ``IsTestProject=true``
during evaluation, so the reader reports the same when the project does not
declare ``IsTestProject`` itself.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Dict, Iterator, List

from build_tools.io import normalize_project_path
from workspace_model import AnalyzedProject

TEST_SDK_PACKAGE = "Microsoft.NET.Test.Sdk"

# MSBuild property names are case-insensitive; these are reported with their usual spelling.
WELL_KNOWN_PROPERTIES = ("IsTestProject", "ProjectTypeGuids", "TargetFramework", "TargetFrameworks", "OutputType")
_CANONICAL_NAMES = {name.lower(): name for name in WELL_KNOWN_PROPERTIES}


class ProjectFileError(ValueError):
    """Raised when a project file cannot be parsed."""


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1] if "}" in tag else tag


def _children(elem: ET.Element, name: str) -> Iterator[ET.Element]:
    for child in elem:
        if isinstance(child.tag, str) and _local_name(child.tag) == name:
            yield child


def _read_properties(root: ET.Element) -> Dict[str, str]:
    """Unconditional properties keyed case-insensitively. Empty values count as undefined."""
    spelling: Dict[str, str] = dict(_CANONICAL_NAMES)
    values: Dict[str, str] = {}
    for group in _children(root, "PropertyGroup"):
        if group.get("Condition"):
            continue
        for prop in group:
            if not isinstance(prop.tag, str) or prop.get("Condition"):
                continue
            name = _local_name(prop.tag)
            key = name.lower()
            spelling.setdefault(key, name)
            value = (prop.text or "").strip()
            if value:
                values[key] = value
            else:
                values.pop(key, None)
    return {spelling[k]: v for k, v in values.items()}


def _read_items(root: ET.Element, item_name: str) -> List[ET.Element]:
    items: List[ET.Element] = []
    for group in _children(root, "ItemGroup"):
        if group.get("Condition"):
            continue
        items.extend(_children(group, item_name))
    return items


def read_project_file(project_path: str | Path) -> AnalyzedProject:
    """Read one project file into an :class:`AnalyzedProject`.

    Raises ``OSError`` if the file cannot be read and
    :class:`ProjectFileError` if it is not well-formed XML.
    """
    path = Path(normalize_project_path(str(project_path), relative_to=Path.cwd()))
    raw = path.read_bytes()
    try:
        root = ET.fromstring(raw)
    except ET.ParseError as e:
        raise ProjectFileError(f"Malformed project file {path}: {e}") from e

    if _local_name(root.tag) != "Project":
        raise ProjectFileError(f"Not an MSBuild project (root element {root.tag!r}): {path}")

    properties = _read_properties(root)

    references = [
        normalize_project_path(item.get("Include", ""), relative_to=path.parent)
        for item in _read_items(root, "ProjectReference")
        if item.get("Include", "").strip()
    ]

    if "IsTestProject" not in properties:
        packages = {
            (item.get("Include") or "").strip().lower()
            for item in _read_items(root, "PackageReference")
        }
        if TEST_SDK_PACKAGE.lower() in packages:
            properties["IsTestProject"] = "true"

    return AnalyzedProject.build(
        str(path),
        properties=properties,
        project_references=references,
    )
