"""Mutable accumulation of case registrations and harness defaults."""
from __future__ import annotations

import os
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Tuple, Union

from trycmd.core import Bin, CaseSpec, CommandStatus
from trycmd.executors import CaseExecutor

from .runner import Runner

PathLike = Union[str, os.PathLike]


class RunnerSpec:
    """Configuration collected before a run.

    Patterns are keyed by their exact string form: registering the same
    pattern again replaces its expected status in place, while overlapping
    but different patterns are kept as separate entries.
    """

    def __init__(self) -> None:
        self._cases: Dict[str, Optional[CommandStatus]] = {}
        self._default_bin: Optional[Bin] = None
        self._timeout: Optional[float] = None
        self._env: Dict[str, str] = {}
        self._include: Optional[FrozenSet[str]] = None

    def case(self, pattern: PathLike, expected: Optional[CommandStatus] = None) -> None:
        self._cases[os.fspath(pattern)] = expected

    def default_bin(self, bin: Optional[Bin]) -> None:
        self._default_bin = bin

    def timeout(self, seconds: Optional[float]) -> None:
        self._timeout = seconds

    def env(self, key: str, value: str) -> None:
        self._env[str(key)] = str(value)

    def include(self, include: Optional[Iterable[str]]) -> None:
        self._include = frozenset(include) if include is not None else None

    @property
    def cases(self) -> Tuple[Tuple[str, Optional[CommandStatus]], ...]:
        return tuple(self._cases.items())

    @property
    def default_bin_value(self) -> Optional[Bin]:
        return self._default_bin

    @property
    def timeout_value(self) -> Optional[float]:
        return self._timeout

    @property
    def env_vars(self) -> Mapping[str, str]:
        return dict(self._env)

    @property
    def include_filter(self) -> Optional[FrozenSet[str]]:
        return self._include

    def prepare(self, executor: Optional[CaseExecutor] = None) -> Runner:
        """Freeze the configuration into a runner with defaults merged into each case."""

        cases = tuple(
            CaseSpec(
                pattern=pattern,
                expected=expected,
                bin=self._default_bin,
                timeout=self._timeout,
                env=dict(self._env),
            )
            for pattern, expected in self._cases.items()
        )
        return Runner(cases=cases, include=self._include, executor=executor)
