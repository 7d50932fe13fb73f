"""Data models for YAML suite files."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Mapping, Optional, Sequence

from trycmd.core import Bin, BinName, BinPath, CommandStatus

if TYPE_CHECKING:  # pragma: no cover
    from trycmd.cases import TestCases


@dataclass(frozen=True)
class SuiteCase:
    pattern: str
    status: Optional[CommandStatus] = None


@dataclass(frozen=True)
class SuiteConfig:
    cases: Sequence[SuiteCase]
    suite_dir: Path
    bin: Optional[Bin] = None
    timeout: Optional[float] = None
    env: Mapping[str, str] = field(default_factory=dict)
    executor: Optional[str] = None

    def apply(self, test_cases: "TestCases") -> "TestCases":
        """Replay the suite onto ``test_cases`` through its chain methods."""

        if isinstance(self.bin, BinPath):
            test_cases.default_bin_path(self.bin.path)
        elif isinstance(self.bin, BinName):
            test_cases.default_bin_name(self.bin.name)
        if self.timeout is not None:
            test_cases.timeout(self.timeout)
        for key, value in self.env.items():
            test_cases.env(key, value)
        registrars = {
            None: test_cases.case,
            CommandStatus.PASS: test_cases.pass_,
            CommandStatus.FAIL: test_cases.fail,
            CommandStatus.INTERRUPTED: test_cases.interrupted,
            CommandStatus.SKIP: test_cases.skip,
        }
        for case in self.cases:
            registrars[case.status](case.pattern)
        return test_cases
