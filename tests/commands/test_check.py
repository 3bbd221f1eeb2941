"""Tests for the check command."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from click.testing import CliRunner

from shuttleforge.cli import cli


class TestCheckCommand:
    def test_blocked_exits_1(self, cli_runner: CliRunner, snapshot_file: Path) -> None:
        result = cli_runner.invoke(cli, ["check", str(snapshot_file)])
        assert result.exit_code == 1
        assert "BLOCKED" in result.output
        assert "Leg B must be at least the next day after Leg A" in result.output

    def test_clean_exits_0(self, cli_runner: CliRunner, clean_snapshot_file: Path) -> None:
        result = cli_runner.invoke(cli, ["check", str(clean_snapshot_file)])
        assert result.exit_code == 0, result.output
        assert result.output.startswith("OK")

    def test_json(self, cli_runner: CliRunner, snapshot_file: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", str(snapshot_file)])
        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["ok"] is True
        assert payload["data"]["export_blocked"] is True
        assert payload["data"]["capacity"][0]["cars"] == 3

    def test_quiet(self, cli_runner: CliRunner, clean_snapshot_file: Path) -> None:
        result = cli_runner.invoke(cli, ["-q", "check", str(clean_snapshot_file)])
        assert result.exit_code == 0
        assert result.output.strip() == "OK: evaluate — 0 errors, 0 warnings"

    def test_errors_only(self, cli_runner: CliRunner, snapshot_file: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "check", str(snapshot_file), "--errors-only"])
        payload = json.loads(result.output)
        assert [i["code"] for i in payload["data"]["issues"]] == ["leg_spacing"]

    def test_today_option(self, cli_runner: CliRunner, snapshot_file: Path) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "check", str(snapshot_file), "--today", "2025-10-01"]
        )
        payload = json.loads(result.output)
        assert payload["meta"]["today"] == "2025-10-01"

    def test_bad_today(self, cli_runner: CliRunner, snapshot_file: Path) -> None:
        result = cli_runner.invoke(cli, ["check", str(snapshot_file), "--today", "10/01/25"])
        assert result.exit_code == 2
        assert "YYYY-MM-DD" in result.output

    def test_missing_snapshot(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["check", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "Snapshot file not found" in result.output

    def test_config_relaxes_rules(
        self, cli_runner: CliRunner, snapshot_file: Path, tmp_path: Path
    ) -> None:
        config = tmp_path / "relaxed.toml"
        config.write_text("[rules]\nmin_leg_gap_days = 0\n", encoding="utf-8")
        result = cli_runner.invoke(cli, ["-c", str(config), "check", str(snapshot_file)])
        assert result.exit_code == 0, result.output

    def test_unknown_leg_label_reported_not_fatal(
        self, cli_runner: CliRunner, route_document: dict[str, Any], tmp_path: Path
    ) -> None:
        route_document["jobs"][0]["legs"][1]["leg"] = "C"
        path = tmp_path / "stray_label.json"
        path.write_text(json.dumps(route_document), encoding="utf-8")
        result = cli_runner.invoke(cli, ["--json", "check", str(path)])
        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["ok"] is True
        assert [(i["job_id"], i["code"]) for i in payload["data"]["issues"]] == [
            ("J-1002", "leg_order"),
            ("J-1003", "leg_spacing"),
            ("J-1003", "missing_driver"),
        ]

    def test_yaml_sample(self, cli_runner: CliRunner) -> None:
        sample = Path(__file__).parents[2] / "samples" / "main_salmon.yaml"
        result = cli_runner.invoke(cli, ["-q", "check", str(sample)])
        assert result.exit_code == 1
        assert result.output.startswith("BLOCKED")
