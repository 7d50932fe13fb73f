from __future__ import annotations

import json
import textwrap
from pathlib import Path

from click.testing import CliRunner

from trycmd import __version__
from trycmd.cli.main import cli, main
from trycmd.executors import executor_manager

from .helpers import RecordingExecutor


def _write_suite(tmp_path: Path, extra: str = "") -> Path:
    suite = tmp_path / "suite.yaml"
    suite.write_text(
        textwrap.dedent(
            """
            bin: {name: tool}
            cases:
              - pattern: cmd/*.toml
              - pattern: cmd/broken.toml
                status: fail
            """
        )
        + extra,
        encoding="utf-8",
    )
    return suite


def _register(tmp_path: Path, outcomes=None) -> RecordingExecutor:
    base = tmp_path.resolve()
    executor = RecordingExecutor(
        matches={(base / "cmd/*.toml").as_posix(): ["cmd/alpha.toml", "cmd/beta.toml"]},
        outcomes=outcomes,
    )
    executor_manager.register(executor)
    return executor


def test_cli_help_short_flag() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["-h"])
    assert result.exit_code == 0
    assert "Usage:" in result.output
    assert "run" in result.output


def test_cli_version() -> None:
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert result.output.strip() == f"trycmd {__version__}"


def test_cli_run_suite(tmp_path: Path) -> None:
    executor = _register(tmp_path)
    result = CliRunner().invoke(cli, ["run", "--suite", str(_write_suite(tmp_path)), "--no-color"])
    assert result.exit_code == 0, result.output
    assert "Summary: total=3 passed=3" in result.output
    assert executor.executed_names()[:2] == ["cmd/alpha.toml", "cmd/beta.toml"]


def test_cli_run_applies_filters(tmp_path: Path) -> None:
    executor = _register(tmp_path)
    result = CliRunner().invoke(
        cli, ["run", "--suite", str(_write_suite(tmp_path)), "trycmd=beta", "trycmd="]
    )
    assert result.exit_code == 0, result.output
    assert executor.executed_names() == ["cmd/beta.toml"]


def test_cli_run_exits_non_zero_on_failures(tmp_path: Path) -> None:
    _register(tmp_path, outcomes={"cmd/beta.toml": "failed"})
    result = CliRunner().invoke(cli, ["run", "--suite", str(_write_suite(tmp_path))])
    assert result.exit_code == 1
    assert "failed=1" in result.output


def test_cli_json_report(tmp_path: Path) -> None:
    _register(tmp_path)
    report_path = tmp_path / "report.json"
    result = CliRunner().invoke(
        cli,
        [
            "run",
            "--suite",
            str(_write_suite(tmp_path)),
            "--report",
            "json",
            "--report-path",
            str(report_path),
        ],
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(report_path.read_text(encoding="utf-8"))
    assert payload["summary"]["total"] == 3


def test_cli_unknown_executor(tmp_path: Path) -> None:
    _register(tmp_path)
    result = CliRunner().invoke(
        cli, ["run", "--suite", str(_write_suite(tmp_path, "executor: missing\n"))]
    )
    assert result.exit_code == 1
    assert "Error: No executor registered as 'missing'" in result.output
    assert '"No executor' not in result.output


def test_cli_rejects_invalid_suite(tmp_path: Path) -> None:
    suite = tmp_path / "suite.yaml"
    suite.write_text("cases: nope\n", encoding="utf-8")
    result = CliRunner().invoke(cli, ["run", "--suite", str(suite)])
    assert result.exit_code == 1
    assert "Suite schema validation failed" in result.output


def test_main_returns_exit_code(tmp_path: Path) -> None:
    _register(tmp_path)
    assert main(["run", "--suite", str(_write_suite(tmp_path)), "--no-color"]) == 0
