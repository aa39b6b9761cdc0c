"""Command line interface."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from app.cli import cli


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_scan_clean_project_exits_zero(tmp_path: Path) -> None:
    _write(tmp_path, "a.css", ".a { gap: 1rem; }\n")

    result = CliRunner().invoke(cli, ["--log-level", "error", "scan", str(tmp_path)])

    assert result.exit_code == 0


def test_scan_limited_feature_exits_one(tmp_path: Path) -> None:
    _write(tmp_path, "a.css", ".hero { view-transition-name: hero; }\n")

    result = CliRunner().invoke(cli, ["--log-level", "error", "scan", str(tmp_path)])

    assert result.exit_code == 1


def test_scan_warnings_only_fail_when_asked(tmp_path: Path) -> None:
    _write(tmp_path, "index.html", "<dialog>hi</dialog>\n")
    runner = CliRunner()

    assert runner.invoke(cli, ["--log-level", "error", "scan", str(tmp_path)]).exit_code == 0
    assert runner.invoke(cli, ["--log-level", "error", "scan", str(tmp_path), "--fail-on", "warning"]).exit_code == 1


def test_scan_json_output(tmp_path: Path) -> None:
    path = _write(tmp_path, "app.js", "document.startViewTransition(() => render());\n")

    result = CliRunner().invoke(
        cli, ["--log-level", "error", "scan", str(path), "--target", "2023", "--json"]
    )

    assert result.exit_code == 1
    data = json.loads(result.stdout)
    assert data["baseline_target"] == "2023"
    assert data["critical"] == 1
    assert data["report"]["critical_issues"] == 1
    diagnostics = next(iter(data["files"].values()))["diagnostics"]
    assert diagnostics[0]["feature_id"] == "view-transitions"
    assert diagnostics[0]["message"].endswith("Baseline 2023")


def test_scan_missing_path_is_a_usage_error(tmp_path: Path) -> None:
    result = CliRunner().invoke(cli, ["scan", str(tmp_path / "nope")])

    assert result.exit_code == 2


def test_feature_command_json() -> None:
    result = CliRunner().invoke(cli, ["--log-level", "error", "feature", "dialog", "--json"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["status"] == "newly"
    assert data["feature"]["id"] == "dialog"


def test_feature_command_unknown() -> None:
    result = CliRunner().invoke(cli, ["--log-level", "error", "feature", "nonexistent-feature"])

    assert result.exit_code == 0
    assert 'Feature "nonexistent-feature" not found' in result.output


def test_stats_command() -> None:
    result = CliRunner().invoke(cli, ["--log-level", "error", "stats"])

    assert result.exit_code == 0
    assert "notBaseline" in result.output
