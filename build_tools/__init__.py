"""build_tools

Build-analysis adapters.

Each adapter turns a solution file into per-project
:class:`workspace_model.AnalyzedProject` records:

* :mod:`build_tools.static_analyzer` reads project files directly (no SDK needed)
* :mod:`build_tools.dotnet_analyzer` asks ``dotnet msbuild`` for evaluated values

Adapters must not import :mod:`mutation_pipeline`.
"""

from __future__ import annotations
