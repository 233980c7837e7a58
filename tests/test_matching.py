import unittest

from fakes import project
from mutation_pipeline.matching import find_test_projects, match_projects
from mutation_pipeline.models import ProjectPairing


class TestMatching(unittest.TestCase):
    def test_single_test_project_matches_its_reference(self) -> None:
        a = project("A.csproj")
        a_tests = project("A.Tests.csproj", {"IsTestProject": "true"}, ["A.csproj"])

        pairings = match_projects([a], [a_tests])

        self.assertEqual(len(pairings), 1)
        self.assertEqual(pairings[0].project_under_test.project_file_path, "A.csproj")
        self.assertEqual(pairings[0].test_project_paths, ("A.Tests.csproj",))

    def test_fan_in_keeps_discovery_order(self) -> None:
        a = project("A.csproj")
        unit = project("A.UnitTests.csproj", refs=["A.csproj"])
        integration = project("A.IntegrationTests.csproj", refs=["Other.csproj", "A.csproj"])

        pairings = match_projects([a], [unit, integration])
        self.assertEqual(pairings[0].test_project_paths, ("A.UnitTests.csproj", "A.IntegrationTests.csproj"))

        reversed_pairings = match_projects([a], [integration, unit])
        self.assertEqual(
            reversed_pairings[0].test_project_paths, ("A.IntegrationTests.csproj", "A.UnitTests.csproj")
        )

    def test_fan_out_pairs_one_test_project_with_many(self) -> None:
        a = project("A.csproj")
        b = project("B.csproj")
        shared = project("Shared.Tests.csproj", refs=["A.csproj", "B.csproj"])

        pairings = match_projects([a, b], [shared])

        self.assertEqual([p.project_under_test.project_file_path for p in pairings], ["A.csproj", "B.csproj"])
        for p in pairings:
            self.assertEqual(p.test_project_paths, ("Shared.Tests.csproj",))

    def test_unreferenced_project_is_dropped(self) -> None:
        a = project("A.csproj")
        orphan = project("Orphan.csproj")
        a_tests = project("A.Tests.csproj", refs=["A.csproj"])

        pairings = match_projects([orphan, a], [a_tests])

        self.assertEqual([p.project_under_test.project_file_path for p in pairings], ["A.csproj"])

    def test_matching_is_not_transitive(self) -> None:
        core = project("Core.csproj")
        api = project("Api.csproj", refs=["Core.csproj"])
        api_tests = project("Api.Tests.csproj", refs=["Api.csproj"])

        pairings = match_projects([core, api], [api_tests])

        self.assertEqual([p.project_under_test.project_file_path for p in pairings], ["Api.csproj"])

    def test_matching_uses_exact_path_equality(self) -> None:
        a = project("/w/src/A/A.csproj")
        near_miss = project("A.Tests.csproj", refs=["/w/src/A/a.csproj", "/w/src/A/A.csproj.bak"])

        self.assertEqual(find_test_projects(a, [near_miss]), [])
        self.assertEqual(match_projects([a], [near_miss]), [])

    def test_pairing_requires_a_test_project(self) -> None:
        with self.assertRaises(ValueError):
            ProjectPairing(project_under_test=project("A.csproj"), test_projects=())


if __name__ == "__main__":
    unittest.main()
