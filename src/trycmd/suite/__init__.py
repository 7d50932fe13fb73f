"""Suite files replaying case registrations from YAML."""
from .loader import SUITE_SCHEMA, load_suite
from .models import SuiteCase, SuiteConfig

__all__ = [
    "SUITE_SCHEMA",
    "SuiteCase",
    "SuiteConfig",
    "load_suite",
]
