import os
import tempfile
import unittest
from pathlib import Path

from build_tools.solution import read_solution_project_paths, read_solution_projects

SLN = """﻿
Microsoft Visual Studio Solution File, Format Version 12.00
# Visual Studio Version 17
Project("{9A19103F-16F7-4668-BE54-9A1E7A4F7556}") = "Acme.Api", "src\\Acme.Api\\Acme.Api.csproj", "{11111111-1111-1111-1111-111111111111}"
EndProject
Project("{2150E333-8FDC-42A3-9474-1A3956D46DE8}") = "tests", "tests", "{22222222-2222-2222-2222-222222222222}"
EndProject
Project("{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}") = "Acme.Api.Tests", "tests\\Acme.Api.Tests\\Acme.Api.Tests.csproj", "{33333333-3333-3333-3333-333333333333}"
EndProject
Project("{9A19103F-16F7-4668-BE54-9A1E7A4F7556}") = "Acme.Api", "src\\Acme.Api\\Acme.Api.csproj", "{44444444-4444-4444-4444-444444444444}"
EndProject
Global
EndGlobal
"""


class TestSolutionFile(unittest.TestCase):
    def test_reads_projects_in_order_and_skips_solution_folders(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            sln = root / "Acme.sln"
            sln.write_text(SLN, encoding="utf-8")

            paths = read_solution_project_paths(sln)

            self.assertEqual(
                paths,
                [
                    os.path.normpath(str(root / "src" / "Acme.Api" / "Acme.Api.csproj")),
                    os.path.normpath(str(root / "tests" / "Acme.Api.Tests" / "Acme.Api.Tests.csproj")),
                ],
            )

    def test_project_metadata_is_kept(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            sln = Path(td) / "Acme.sln"
            sln.write_text(SLN, encoding="utf-8")

            projects = read_solution_projects(sln)

            self.assertEqual([p.name for p in projects], ["Acme.Api", "Acme.Api.Tests"])
            self.assertEqual(projects[1].type_guid, "FAE04EC0-301F-11D3-BF4B-00C04F79EFBC")
            self.assertEqual(projects[0].project_guid, "11111111-1111-1111-1111-111111111111")

    def test_missing_solution_raises_oserror(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(OSError):
                read_solution_project_paths(Path(td) / "missing.sln")


if __name__ == "__main__":
    unittest.main()
