"""Runner dispatching prepared cases to a case executor."""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Sequence

from trycmd.core import CaseResult, CaseSpec, Mode, RunReport
from trycmd.executors import CaseExecutor
from trycmd.reporting import NullReporter, Reporter


@dataclass(frozen=True)
class _PlannedTest:
    case: CaseSpec
    name: str
    error: Optional[str] = None


@dataclass(frozen=True)
class Runner:
    """Immutable execution plan produced by ``RunnerSpec.prepare``."""

    cases: Sequence[CaseSpec]
    include: Optional[FrozenSet[str]] = None
    executor: Optional[CaseExecutor] = None

    def is_included(self, name: str) -> bool:
        if self.include is None:
            return True
        return any(fragment in name for fragment in self.include)

    def run(self, mode: Mode, reporter: Optional[Reporter] = None) -> RunReport:
        """Execute every included test and return the aggregate report."""

        reporter = reporter or NullReporter()
        start = time.perf_counter()
        planned = [item for item in self._plan() if self.is_included(item.name)]
        total = len(planned)
        report = RunReport(mode=mode)
        reporter.on_start(self, mode, total)
        for index, item in enumerate(planned, start=1):
            result = self._execute(item, mode)
            report.results.append(result)
            reporter.on_case_result(result, index, total)
        report.duration_s = time.perf_counter() - start
        reporter.on_complete(report)
        return report

    def _plan(self) -> List[_PlannedTest]:
        # Names expanded from a later case replace earlier ones in place.
        planned: Dict[str, _PlannedTest] = {}
        for case in self.cases:
            if self.executor is None:
                planned[case.pattern] = _PlannedTest(case, case.pattern, "no case executor registered")
                continue
            try:
                names = list(self.executor.expand(case))
            except Exception as exc:
                planned[case.pattern] = _PlannedTest(
                    case, case.pattern, f"failed to expand pattern {case.pattern!r}: {exc}"
                )
                continue
            if not names:
                planned[case.pattern] = _PlannedTest(
                    case, case.pattern, f"pattern {case.pattern!r} matched no tests"
                )
                continue
            for name in names:
                planned[name] = _PlannedTest(case, name)
        return list(planned.values())

    def _execute(self, item: _PlannedTest, mode: Mode) -> CaseResult:
        if item.error is not None:
            return CaseResult(name=item.name, status="error", case=item.case, details=item.error)
        assert self.executor is not None
        start = time.perf_counter()
        try:
            result = self.executor.execute(item.case, item.name, mode)
        except Exception as exc:
            return CaseResult(
                name=item.name,
                status="error",
                duration_s=time.perf_counter() - start,
                case=item.case,
                details=str(exc),
            )
        if result.case is None:
            result.case = item.case
        if not result.duration_s:
            result.duration_s = time.perf_counter() - start
        return result
