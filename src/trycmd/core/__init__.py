"""Core models and helpers exposed at the package level."""
from .mode import DEFAULT_DUMP_DIR, MODE_ENV_VAR, Mode, ModeKind, parse_mode, resolve_mode
from .models import Bin, BinName, BinPath, CaseSpec, CommandStatus
from .results import CaseResult, RunReport

__all__ = [
    "Bin",
    "BinName",
    "BinPath",
    "CaseResult",
    "CaseSpec",
    "CommandStatus",
    "DEFAULT_DUMP_DIR",
    "MODE_ENV_VAR",
    "Mode",
    "ModeKind",
    "RunReport",
    "parse_mode",
    "resolve_mode",
]
