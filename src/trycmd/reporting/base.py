"""Reporter interface definitions."""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Sequence

from trycmd.core import CaseResult, Mode, RunReport

if TYPE_CHECKING:  # pragma: no cover
    from trycmd.runner.runner import Runner


class Reporter:
    """Interface for output renderers."""

    def on_start(self, runner: "Runner", mode: Mode, total: int) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def on_case_result(self, result: CaseResult, index: int, total: int) -> None:  # pragma: no cover
        raise NotImplementedError

    def on_complete(self, report: RunReport) -> None:  # pragma: no cover
        raise NotImplementedError


class NullReporter(Reporter):
    """Reporter that discards every callback."""

    def on_start(self, runner: "Runner", mode: Mode, total: int) -> None:
        return

    def on_case_result(self, result: CaseResult, index: int, total: int) -> None:
        return

    def on_complete(self, report: RunReport) -> None:
        return


class ReportManager(Reporter):
    """Dispatches lifecycle callbacks to multiple reporters."""

    def __init__(self, reporters: Sequence[Reporter]) -> None:
        self._reporters = list(reporters)

    def on_start(self, runner: "Runner", mode: Mode, total: int) -> None:
        for reporter in self._reporters:
            reporter.on_start(runner, mode, total)

    def on_case_result(self, result: CaseResult, index: int, total: int) -> None:
        for reporter in self._reporters:
            reporter.on_case_result(result, index, total)

    def on_complete(self, report: RunReport) -> None:
        for reporter in self._reporters:
            reporter.on_complete(report)

    def reporters(self) -> List[Reporter]:
        return list(self._reporters)
