"""Reporting exports."""
from .base import NullReporter, ReportManager, Reporter
from .json_reporter import JsonReporter
from .terminal import TerminalReporter

__all__ = [
    "JsonReporter",
    "NullReporter",
    "ReportManager",
    "Reporter",
    "TerminalReporter",
]
