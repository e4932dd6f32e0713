"""End-to-end tests driving the patterns CLI through main()."""

import json

import pytest

from src._package import DESCRIPTION
from src.cli.main import main, parse_args


class TestCLIArguments:
    def test_global_options(self):
        args = parse_args(["--config", "c.json", "--log-level", "DEBUG", "--format", "json", "run", "mvc"])

        assert args.config == "c.json"
        assert args.log_level == "DEBUG"
        assert args.format == "json"
        assert args.command == "run"
        assert args.name == "mvc"

    def test_help_uses_package_metadata(self, capsys):
        with pytest.raises(SystemExit):
            parse_args(["--help"])

        out = capsys.readouterr().out
        assert out.startswith("usage: patterns")
        assert DESCRIPTION in out

    def test_invalid_format_rejected(self):
        with pytest.raises(SystemExit):
            parse_args(["--format", "yaml", "list"])


class TestCLICommands:
    def test_no_command(self, capsys):
        assert main([]) == 1
        assert "No command specified" in capsys.readouterr().out

    def test_list(self, capsys):
        assert main(["list"]) == 0

        out = capsys.readouterr().out
        for name in ("singleton", "factory", "observer", "decorator", "middleware", "di", "mvc"):
            assert name in out

    def test_run_single_text(self, capsys):
        assert main(["run", "singleton"]) == 0

        assert capsys.readouterr().out.splitlines() == [
            "== Singleton ==",
            "1 Logs",
            "2 Logs",
            "Same instance: True",
        ]

    def test_run_all_json(self, capsys):
        assert main(["--format", "json", "run", "all"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert len(data["results"]) == 7
        assert data["results"][0]["name"] == "singleton"

    def test_unknown_demo(self, capsys):
        assert main(["run", "visitor"]) == 1

        assert "Demonstration 'visitor' not found" in capsys.readouterr().out

    def test_unknown_demo_json(self, capsys):
        assert main(["--format", "json", "run", "visitor"]) == 1

        data = json.loads(capsys.readouterr().out)
        assert data["error"] == "DEMO_NOT_FOUND"
        assert data["details"]["name"] == "visitor"


class TestCLIConfiguration:
    def test_missing_config_file(self, tmp_path, capsys):
        assert main(["--config", str(tmp_path / "absent.json"), "list"]) == 1

        assert "Failed to load configuration" in capsys.readouterr().out

    def test_config_file_sets_output_format(self, config_file, capsys):
        path = config_file({"demo": {"output_format": "json"}})

        assert main(["--config", path, "list"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert [item["name"] for item in data["demos"]][:2] == ["singleton", "factory"]

    def test_config_file_drives_demo_values(self, config_file, capsys):
        path = config_file({"demo": {"coffee_base_cost": 1.0}})

        assert main(["--config", path, "run", "decorator"]) == 0

        assert "Coffee ($1.00)" in capsys.readouterr().out

    def test_format_flag_overrides_config(self, config_file, capsys):
        path = config_file({"demo": {"output_format": "json"}})

        assert main(["--config", path, "--format", "text", "run", "di"]) == 0

        assert capsys.readouterr().out.startswith("== Dependency Injection ==")

    def test_environment_config_file(self, config_file, monkeypatch, capsys):
        monkeypatch.setenv("PATTERNS_CONFIG_FILE", config_file({"demo": {"output_format": "json"}}))

        assert main(["run", "mvc"]) == 0

        assert json.loads(capsys.readouterr().out)["results"][0]["name"] == "mvc"
