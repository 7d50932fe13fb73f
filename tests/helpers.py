"""Shared test doubles."""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from trycmd.core import CaseResult, CaseSpec, Mode
from trycmd.executors import CaseExecutor


class RecordingExecutor(CaseExecutor):
    """Executor double recording every expansion and execution.

    Patterns expand to themselves unless ``matches`` maps them to names;
    every test passes unless ``outcomes`` names another status.
    """

    name = "recording"

    def __init__(
        self,
        matches: Optional[Dict[str, Sequence[str]]] = None,
        outcomes: Optional[Dict[str, str]] = None,
    ) -> None:
        self.matches = matches or {}
        self.outcomes = outcomes or {}
        self.expanded: List[str] = []
        self.executed: List[Tuple[str, CaseSpec, Mode]] = []

    def expand(self, case: CaseSpec) -> Sequence[str]:
        self.expanded.append(case.pattern)
        return self.matches.get(case.pattern, [case.pattern])

    def execute(self, case: CaseSpec, name: str, mode: Mode) -> CaseResult:
        self.executed.append((name, case, mode))
        return CaseResult(name=name, status=self.outcomes.get(name, "passed"))

    def executed_names(self) -> List[str]:
        return [name for name, _, _ in self.executed]
