"""Execution modes and their resolution from the environment."""
from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from trycmd.errors import ModeInitError

logger = logging.getLogger(__name__)

MODE_ENV_VAR = "TRYCMD"
DEFAULT_DUMP_DIR = Path("dump")


class ModeKind(enum.Enum):
    FAIL = "fail"
    OVERWRITE = "overwrite"
    DUMP = "dump"


@dataclass(frozen=True)
class Mode:
    """What the executor does when actual output diverges from a fixture.

    ``fail`` reports the mismatch, ``overwrite`` rewrites the fixture and
    ``dump`` writes actual output under ``destination`` without touching
    fixtures.
    """

    kind: ModeKind
    destination: Optional[Path] = None

    @classmethod
    def fail(cls) -> "Mode":
        return cls(kind=ModeKind.FAIL)

    @classmethod
    def overwrite(cls) -> "Mode":
        return cls(kind=ModeKind.OVERWRITE)

    @classmethod
    def dump(cls, destination: Path = DEFAULT_DUMP_DIR) -> "Mode":
        return cls(kind=ModeKind.DUMP, destination=Path(destination))

    def label(self) -> str:
        if self.kind is ModeKind.DUMP:
            return f"{self.kind.value}:{self.destination}"
        return self.kind.value

    def initialize(self) -> None:
        """Prepare the mode's output target before any case runs."""

        if self.kind is not ModeKind.DUMP:
            return
        destination = self.destination or DEFAULT_DUMP_DIR
        try:
            destination.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ModeInitError(
                f"Failed to create dump destination {destination}: {exc}"
            ) from exc


def parse_mode(value: Optional[str]) -> Mode:
    if value == ModeKind.OVERWRITE.value:
        return Mode.overwrite()
    if value == ModeKind.DUMP.value:
        return Mode.dump()
    return Mode.fail()


def resolve_mode(environ: Optional[Mapping[str, str]] = None) -> Mode:
    """Resolve the mode from ``TRYCMD`` in ``environ`` (defaults to ``os.environ``)."""

    environ = os.environ if environ is None else environ
    mode = parse_mode(environ.get(MODE_ENV_VAR))
    logger.debug("Resolved mode %s from %s=%r", mode.label(), MODE_ENV_VAR, environ.get(MODE_ENV_VAR))
    return mode
