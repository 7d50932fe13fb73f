"""Exception types raised by trycmd."""
from __future__ import annotations


class TrycmdError(Exception):
    """Base class for trycmd failures."""


class ModeInitError(TrycmdError):
    """Raised when the resolved mode cannot prepare its output target."""
