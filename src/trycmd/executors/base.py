"""Case executor abstractions."""
from __future__ import annotations

from typing import Dict, Iterable, Optional, Sequence

from trycmd.core import CaseResult, CaseSpec, Mode


class CaseExecutor:
    """Base interface for the collaborator that runs registered cases.

    An executor owns everything past registration: resolving a case's glob
    pattern into test names, spawning the command, comparing its output with
    the recorded fixture and honouring the mode on divergence.
    """

    name: str = ""

    def expand(self, case: CaseSpec) -> Sequence[str]:
        raise NotImplementedError

    def execute(self, case: CaseSpec, name: str, mode: Mode) -> CaseResult:
        raise NotImplementedError


class ExecutorManager:
    """Registry for case executors keyed by name."""

    def __init__(self) -> None:
        self._executors: Dict[str, CaseExecutor] = {}

    def register(self, executor: CaseExecutor) -> CaseExecutor:
        if executor.name in self._executors:
            raise ValueError(f"Executor '{executor.name}' already registered")
        self._executors[executor.name] = executor
        return executor

    def get(self, name: str) -> CaseExecutor:
        try:
            return self._executors[name]
        except KeyError as exc:
            available = ", ".join(sorted(self._executors)) or "none"
            raise KeyError(f"No executor registered as {name!r} (available: {available})") from exc

    def default(self) -> Optional[CaseExecutor]:
        """First registered executor, if any."""

        for executor in self._executors.values():
            return executor
        return None

    def executors(self) -> Iterable[CaseExecutor]:
        return tuple(self._executors.values())

    def names(self) -> Iterable[str]:
        return tuple(self._executors.keys())

    def clear(self) -> None:
        self._executors.clear()


executor_manager = ExecutorManager()
