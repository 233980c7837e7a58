"""build_tools/io.py

Tiny filesystem helpers shared by the adapters and the CLI.

Keep the actual implementations here and have other modules import them, so
JSON formatting and path normalization do not drift between callers.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any


def write_json(path: Path, data: Any) -> None:
    """Write pretty JSON to disk (UTF-8)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def read_json(path: Path) -> Any:
    """Read JSON from disk (UTF-8)."""
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def normalize_project_path(raw: str, *, relative_to: Path) -> str:
    """Normalize a path as written in a solution or project file.

    MSBuild files use ``\\`` separators regardless of platform. The result is
    absolute and collapsed (``..`` removed) but symlinks are not resolved, so
    two references to the same file produce the same string.
    """
    cleaned = raw.strip().replace("\\", "/")
    p = Path(cleaned)
    if not p.is_absolute():
        p = relative_to / p
    return os.path.normpath(os.path.abspath(str(p)))
