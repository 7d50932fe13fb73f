"""Terminal reporter rendering progress and summaries."""
from __future__ import annotations

from typing import TYPE_CHECKING

import click
from colorama import Fore, Style

from trycmd.core import CaseResult, Mode, RunReport

from .base import Reporter

if TYPE_CHECKING:  # pragma: no cover
    from trycmd.runner.runner import Runner


STATUS_LABELS = {
    "passed": "PASS",
    "failed": "FAIL",
    "error": "ERROR",
    "skipped": "SKIP",
    "overwritten": "OVERWRITE",
    "dumped": "DUMP",
}

STATUS_COLORS = {
    "passed": Fore.GREEN,
    "failed": Fore.RED,
    "error": Fore.RED,
    "skipped": Fore.YELLOW,
    "overwritten": Fore.CYAN,
    "dumped": Fore.CYAN,
}


class TerminalReporter(Reporter):
    """Human-readable reporter that streams to stdout."""

    def __init__(self, *, use_color: bool = True) -> None:
        self._use_color = use_color

    def on_start(self, runner: "Runner", mode: Mode, total: int) -> None:
        filters = ",".join(sorted(runner.include)) if runner.include else "all"
        click.echo(
            self._colored(
                f"Running {total} test(s) from {len(runner.cases)} case(s) mode={mode.label()} include={filters}",
                Fore.CYAN,
            )
        )

    def on_case_result(self, result: CaseResult, index: int, total: int) -> None:
        label = STATUS_LABELS.get(result.status, result.status.upper())
        status_block = self._colored(f"{label:<10}", STATUS_COLORS.get(result.status, ""))
        ms = result.duration_s * 1000
        click.echo(f"[{index}/{total}] {status_block} {result.name} ({ms:.2f} ms)")
        if result.details:
            click.echo(f"    detail: {result.details}")

    def on_complete(self, report: RunReport) -> None:
        color = Fore.GREEN if report.passed else Fore.RED
        click.echo(
            f"{self._colored('Summary', color)}: total={len(report.results)} "
            f"passed={report.count('passed')} failed={report.count('failed')} "
            f"errors={report.count('error')} skipped={report.count('skipped')} "
            f"duration={report.duration_s:.2f}s"
        )

    def _colored(self, text: str, color: str) -> str:
        if not self._use_color or not color:
            return text
        return f"{color}{text}{Style.RESET_ALL}"
