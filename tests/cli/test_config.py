"""Tests for ``jbfinder config --name``.

Verifies the labeled text block, JSON output, and exact-name lookup.
"""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from jbfinder.cli.main import cli

from tests.discovery.helpers import FakeProfile, create_idea_home, create_logs_dir


class TestConfigText:

    def test_full_record(
        self, runner: CliRunner, fake_profile: FakeProfile, root_args: list[str], tmp_path: Path,
    ) -> None:
        create_idea_home(fake_profile, port_file=tmp_path / "p")
        result = runner.invoke(cli, [*root_args, "config", "--name", "IntelliJIdea2024.3"])
        assert result.exit_code == 0
        assert "Install directory:" in result.output
        assert "Config directory:" in result.output
        assert "Logs directory:" in result.output
        assert "    -Xmx2048m" in result.output
        assert "# custom IDE options" not in result.output
        assert "63342" in result.output

    def test_missing_optionals_shown_as_not_found(
        self, runner: CliRunner, fake_profile: FakeProfile, root_args: list[str],
    ) -> None:
        create_logs_dir(fake_profile, "GoLand2024.3")
        result = runner.invoke(cli, [*root_args, "config", "-n", "GoLand2024.3"])
        assert result.exit_code == 0
        assert result.output.count("Not found") == 2

    def test_unused_ide_is_still_found(
        self, runner: CliRunner, fake_profile: FakeProfile, root_args: list[str],
    ) -> None:
        create_logs_dir(fake_profile, "GoLand2024.3", with_log=False)
        result = runner.invoke(cli, [*root_args, "config", "-n", "GoLand2024.3"])
        assert result.exit_code == 0
        assert "GoLand2024.3" in result.output


class TestConfigJson:

    def test_single_record_under_tools(
        self, runner: CliRunner, fake_profile: FakeProfile, root_args: list[str], tmp_path: Path,
    ) -> None:
        create_idea_home(fake_profile, port_file=tmp_path / "p")
        result = runner.invoke(
            cli, [*root_args, "config", "--name", "IntelliJIdea2024.3", "--output", "json"],
        )
        assert result.exit_code == 0
        record = json.loads(result.output)["tools"]
        assert record["name"] == "IntelliJIdea2024.3"
        assert record["notification_port"] == 63342
        assert record["vm_options"][0] == "-Xmx2048m"
        assert record["config_dir"] == str(fake_profile.config_root() / "IntelliJIdea2024.3")


class TestConfigNotFound:

    def test_unknown_name(
        self, runner: CliRunner, fake_profile: FakeProfile, root_args: list[str],
    ) -> None:
        create_logs_dir(fake_profile, "IntelliJIdea2024.3")
        result = runner.invoke(cli, [*root_args, "config", "--name", "GoLand2024.3"])
        assert result.exit_code == 2
        assert "GoLand2024.3" in result.output
        assert "Error" in result.output

    def test_case_differs(
        self, runner: CliRunner, fake_profile: FakeProfile, root_args: list[str],
    ) -> None:
        create_logs_dir(fake_profile, "IntelliJIdea2024.3")
        result = runner.invoke(cli, [*root_args, "config", "--name", "intellijidea2024.3"])
        assert result.exit_code == 2

    def test_name_is_required(self, runner: CliRunner, root_args: list[str]) -> None:
        result = runner.invoke(cli, [*root_args, "config"])
        assert result.exit_code == 2
        assert "Missing option" in result.output
