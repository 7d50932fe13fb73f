"""Chained registration of CLI snapshot cases with run-once finalization."""
from __future__ import annotations

import datetime as dt
import logging
import os
import sys
import warnings
from pathlib import Path
from typing import FrozenSet, Iterable, Optional, Union

from trycmd.core import BinName, BinPath, CommandStatus, RunReport, resolve_mode
from trycmd.executors import CaseExecutor, executor_manager
from trycmd.plugins import bootstrap
from trycmd.reporting import Reporter, TerminalReporter
from trycmd.runner import RunnerSpec

logger = logging.getLogger(__name__)

FILTER_PREFIX = "trycmd="

PathLike = Union[str, os.PathLike]


class TestCases:
    """Registry of snapshot cases sharing harness-wide defaults.

    Every configuration method returns the registry itself so calls can be
    chained. The accumulated cases execute once, either through ``run()`` or
    on leaving a ``with`` block normally::

        with TestCases() as cases:
            cases.case("tests/cmd/*.toml").fail("tests/cmd/broken-*.toml")

    Leaving the block because of an exception skips execution so the original
    error is reported untouched. A registry belongs to a single owner and is
    not safe to share between threads.
    """

    __test__ = False

    def __init__(
        self,
        args: Optional[Iterable[object]] = None,
        *,
        executor: Optional[CaseExecutor] = None,
        reporter: Optional[Reporter] = None,
    ) -> None:
        self._spec = RunnerSpec()
        self._executor = executor
        self._reporter = reporter
        self._executed = False
        self._report: Optional[RunReport] = None
        self._entered = False
        self._spec.include(parse_include(sys.argv if args is None else args))

    def case(self, pattern: PathLike) -> "TestCases":
        """Load tests from ``pattern`` using each fixture's recorded status."""

        self._spec.case(pattern, None)
        return self

    def pass_(self, pattern: PathLike) -> "TestCases":
        self._spec.case(pattern, CommandStatus.PASS)
        return self

    def fail(self, pattern: PathLike) -> "TestCases":
        self._spec.case(pattern, CommandStatus.FAIL)
        return self

    def interrupted(self, pattern: PathLike) -> "TestCases":
        self._spec.case(pattern, CommandStatus.INTERRUPTED)
        return self

    def skip(self, pattern: PathLike) -> "TestCases":
        self._spec.case(pattern, CommandStatus.SKIP)
        return self

    def default_bin_path(self, path: PathLike) -> "TestCases":
        self._spec.default_bin(BinPath(path=Path(path)))
        return self

    def default_bin_name(self, name: str) -> "TestCases":
        self._spec.default_bin(BinName(name=str(name)))
        return self

    def timeout(self, duration: Union[float, dt.timedelta]) -> "TestCases":
        """Set the default per-command timeout, in seconds or as a timedelta."""

        if isinstance(duration, dt.timedelta):
            seconds = duration.total_seconds()
        else:
            seconds = float(duration)
        self._spec.timeout(seconds)
        return self

    def env(self, key: str, value: str) -> "TestCases":
        self._spec.env(key, value)
        return self

    @property
    def spec(self) -> RunnerSpec:
        return self._spec

    @property
    def executed(self) -> bool:
        return self._executed

    @property
    def report(self) -> Optional[RunReport]:
        """Report of the run, once one has happened."""

        return self._report

    def run(self) -> Optional[RunReport]:
        """Run the registered cases; later calls are no-ops returning ``None``.

        Raises ``ModeInitError`` when the mode's output target cannot be
        prepared. Case failures are returned in the report, not raised.
        """

        if self._executed:
            logger.debug("Cases already executed; ignoring repeated run()")
            return None
        self._executed = True
        mode = resolve_mode()
        mode.initialize()
        runner = self._spec.prepare(self._resolve_executor())
        self._report = runner.run(mode, self._reporter or TerminalReporter())
        return self._report

    def __enter__(self) -> "TestCases":
        self._entered = True
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            if not self._executed:
                logger.debug("Skipping automatic run while %s propagates", exc_type.__name__)
            return None
        self.run()
        return None

    def __del__(self) -> None:
        if getattr(self, "_executed", True) or getattr(self, "_entered", True):
            return
        warnings.warn(
            "TestCases discarded without running; call run() or use it as a context manager",
            ResourceWarning,
            stacklevel=2,
        )

    def _resolve_executor(self) -> Optional[CaseExecutor]:
        if self._executor is not None:
            return self._executor
        bootstrap()
        return executor_manager.default()


def parse_include(args: Iterable[object]) -> Optional[FrozenSet[str]]:
    """Collect ``trycmd=<substring>`` filters from command-line arguments.

    Empty remainders are dropped; ``None`` means no filter was given.
    """

    filters = set()
    for arg in args:
        if not isinstance(arg, str) or not arg.startswith(FILTER_PREFIX):
            continue
        remainder = arg[len(FILTER_PREFIX):]
        if remainder:
            filters.add(remainder)
    if not filters:
        return None
    return frozenset(filters)
