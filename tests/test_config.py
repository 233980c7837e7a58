import os
import tempfile
import unittest
from pathlib import Path

from mutation_pipeline.config import ConfigError, build_run_config, env_values, load_config_file


class TestConfigFile(unittest.TestCase):
    def test_loads_yaml_mapping(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "mutation.yaml"
            p.write_text(
                "solution_path: Acme.sln\nanalyzer: dotnet\ncriteria:\n  mutate: ['**/*.cs']\n",
                encoding="utf-8",
            )
            data = load_config_file(p)
        self.assertEqual(data["solution_path"], "Acme.sln")
        self.assertEqual(data["criteria"], {"mutate": ["**/*.cs"]})

    def test_empty_file_is_empty_mapping(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "mutation.yaml"
            p.write_text("", encoding="utf-8")
            self.assertEqual(load_config_file(p), {})

    def test_unknown_keys_are_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "mutation.yaml"
            p.write_text("solution: Acme.sln\n", encoding="utf-8")
            with self.assertRaises(ConfigError):
                load_config_file(p)

    def test_non_mapping_and_bad_yaml_are_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "mutation.yaml"
            p.write_text("- a\n- b\n", encoding="utf-8")
            with self.assertRaises(ConfigError):
                load_config_file(p)
            p.write_text("a: [unclosed\n", encoding="utf-8")
            with self.assertRaises(ConfigError):
                load_config_file(p)

    def test_missing_file(self) -> None:
        with self.assertRaises(FileNotFoundError):
            load_config_file("/definitely/not/here/mutation.yaml")


class TestBuildRunConfig(unittest.TestCase):
    def test_defaults(self) -> None:
        cwd = Path(tempfile.gettempdir())
        config = build_run_config(env={}, cwd=cwd)

        self.assertEqual(config.options.base_path, os.path.normpath(str(cwd)))
        self.assertIsNone(config.options.solution_path)
        self.assertEqual(config.analyzer, "static")
        self.assertIsNone(config.engine)
        self.assertEqual(config.options.log_level, "INFO")
        self.assertEqual(config.dotnet_timeout_seconds, 300)

    def test_precedence_cli_over_env_over_file(self) -> None:
        cwd = Path(tempfile.gettempdir())
        config = build_run_config(
            cli_values={"analyzer": "static"},
            env={"MUTATION_PIPELINE_ANALYZER": "dotnet", "MUTATION_PIPELINE_LOG_LEVEL": "debug"},
            file_values={"analyzer": "dotnet", "log_level": "WARNING", "solution_path": "Acme.sln"},
            cwd=cwd,
        )

        self.assertEqual(config.analyzer, "static")
        self.assertEqual(config.options.log_level, "DEBUG")
        self.assertEqual(config.options.solution_path, os.path.normpath(str(cwd / "Acme.sln")))

    def test_relative_base_and_solution_make_solution_mode(self) -> None:
        cwd = Path(tempfile.gettempdir()) / "ws"
        config = build_run_config(file_values={"base_path": ".", "solution_path": "Acme.sln"}, env={}, cwd=cwd)
        self.assertTrue(config.options.is_solution_mode())

    def test_criteria_are_passed_through(self) -> None:
        config = build_run_config(file_values={"criteria": {"threshold": 80}}, env={})
        self.assertEqual(dict(config.options.criteria), {"threshold": 80})

    def test_invalid_values(self) -> None:
        with self.assertRaises(ConfigError):
            build_run_config(cli_values={"analyzer": "buildalyzer"}, env={})
        with self.assertRaises(ConfigError):
            build_run_config(file_values={"dotnet_timeout_seconds": "soon"}, env={})
        with self.assertRaises(ConfigError):
            build_run_config(file_values={"dotnet_timeout_seconds": -1}, env={})
        with self.assertRaises(ConfigError):
            build_run_config(file_values={"criteria": ["a"]}, env={})

    def test_env_values_ignores_blank_and_unrelated(self) -> None:
        env = {
            "MUTATION_PIPELINE_ENGINE": "acme.engine:create",
            "MUTATION_PIPELINE_SOLUTION_PATH": "   ",
            "OTHER": "x",
        }
        self.assertEqual(env_values(env), {"engine": "acme.engine:create"})


if __name__ == "__main__":
    unittest.main()
