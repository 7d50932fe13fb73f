"""trycmd package initialization."""
from __future__ import annotations

from .version import __version__
from .cases import FILTER_PREFIX, TestCases, parse_include
from .core import BinName, BinPath, CaseResult, CaseSpec, CommandStatus, Mode, RunReport, parse_mode
from .errors import ModeInitError, TrycmdError
from .executors import CaseExecutor, executor_manager
from .plugins import bootstrap

__all__ = [
    "__version__",
    "BinName",
    "BinPath",
    "CaseExecutor",
    "CaseResult",
    "CaseSpec",
    "CommandStatus",
    "FILTER_PREFIX",
    "Mode",
    "ModeInitError",
    "RunReport",
    "TestCases",
    "TrycmdError",
    "bootstrap",
    "executor_manager",
    "parse_include",
    "parse_mode",
]
