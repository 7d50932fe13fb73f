"""Result data structures produced by the runner."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .mode import Mode
from .models import CaseSpec

FAILURE_STATUSES = frozenset({"failed", "error"})


@dataclass
class CaseResult:
    """Outcome of executing a single test name matched by a case."""

    name: str
    status: str
    duration_s: float = 0.0
    case: Optional[CaseSpec] = None
    details: str = ""

    @property
    def passed(self) -> bool:
        return self.status not in FAILURE_STATUSES


@dataclass
class RunReport:
    """Aggregate outcome of one runner execution."""

    mode: Mode
    results: List[CaseResult] = field(default_factory=list)
    duration_s: float = 0.0

    @property
    def passed(self) -> bool:
        return all(result.passed for result in self.results)

    def count(self, status: str) -> int:
        return sum(1 for result in self.results if result.status == status)

    @property
    def failures(self) -> int:
        return sum(1 for result in self.results if not result.passed)
