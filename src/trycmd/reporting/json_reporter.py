"""JSON reporter emitting structured execution results."""
from __future__ import annotations

import datetime as dt
import json
import pathlib
from typing import TYPE_CHECKING, Any, Dict, Optional, Sequence

import click
from jsonschema import validate

from trycmd.core import CaseResult, Mode, RunReport

from .base import Reporter
from .schema import JSON_SCHEMA_V1, SCHEMA_VERSION

if TYPE_CHECKING:  # pragma: no cover
    from trycmd.runner.runner import Runner


class JsonReporter(Reporter):
    """Writes results to a JSON file validated against the schema."""

    def __init__(self, path: str) -> None:
        self._path = pathlib.Path(path)
        self._records: list[Dict[str, Any]] = []
        self._include: Optional[Sequence[str]] = None

    def on_start(self, runner: "Runner", mode: Mode, total: int) -> None:
        self._records.clear()
        self._include = sorted(runner.include) if runner.include is not None else None

    def on_case_result(self, result: CaseResult, index: int, total: int) -> None:
        self._records.append(_result_to_dict(result))

    def on_complete(self, report: RunReport) -> None:
        payload = {
            "schema_version": SCHEMA_VERSION,
            "generated_at": dt.datetime.now(dt.timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
            "summary": _build_summary(report, self._include),
            "cases": self._records,
        }
        validate(instance=payload, schema=JSON_SCHEMA_V1)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        except OSError as exc:  # pragma: no cover - filesystem protection
            raise RuntimeError(f"Failed to write JSON report to {self._path}: {exc}") from exc
        click.echo(f"JSON report written to {self._path}")


def _build_summary(report: RunReport, include: Optional[Sequence[str]]) -> Dict[str, Any]:
    return {
        "total": len(report.results),
        "passed": report.count("passed"),
        "failed": report.count("failed"),
        "errors": report.count("error"),
        "skipped": report.count("skipped"),
        "mode": report.mode.label(),
        "include": list(include) if include is not None else None,
        "duration_s": report.duration_s,
    }


def _result_to_dict(result: CaseResult) -> Dict[str, Any]:
    case = result.case
    record: Dict[str, Any] = {
        "name": result.name,
        "status": result.status,
        "duration_ms": result.duration_s * 1000,
    }
    if case is not None:
        record["pattern"] = case.pattern
        record["expected"] = case.expected.value if case.expected else None
        record["bin"] = case.bin.label() if case.bin else None
        record["timeout_s"] = case.timeout
    if result.details:
        record["details"] = result.details
    return record
