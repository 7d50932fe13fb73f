"""Core dataclasses shared across trycmd subsystems."""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Union


class CommandStatus(enum.Enum):
    """Expected terminal outcome of a command."""

    PASS = "pass"
    FAIL = "fail"
    INTERRUPTED = "interrupted"
    SKIP = "skip"

    @classmethod
    def from_name(cls, name: str) -> "CommandStatus":
        try:
            return cls(name.strip().lower())
        except ValueError as exc:
            supported = ", ".join(status.value for status in cls)
            raise ValueError(f"Unknown command status '{name}'. Supported: {supported}") from exc


@dataclass(frozen=True)
class BinPath:
    """Executable referenced by a filesystem location."""

    path: Path

    def label(self) -> str:
        return str(self.path)


@dataclass(frozen=True)
class BinName:
    """Executable referenced by a name resolved by the executor."""

    name: str

    def label(self) -> str:
        return self.name


Bin = Union[BinPath, BinName]


@dataclass(frozen=True)
class CaseSpec:
    """A registered glob pattern with defaults merged in."""

    pattern: str
    expected: Optional[CommandStatus] = None
    bin: Optional[Bin] = None
    timeout: Optional[float] = None
    env: Mapping[str, str] = field(default_factory=dict)

    def identifier(self) -> str:
        if self.expected is None:
            return self.pattern
        return f"{self.pattern}[{self.expected.value}]"
