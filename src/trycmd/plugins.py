"""Plugin loading for case executors."""
from __future__ import annotations

import importlib
import logging
import os

logger = logging.getLogger(__name__)

PLUGINS_ENV_VAR = "TRYCMD_PLUGINS"

_BOOTSTRAPPED = False


def bootstrap() -> None:
    """Import executor plugins named in ``TRYCMD_PLUGINS`` (idempotent)."""

    global _BOOTSTRAPPED
    if _BOOTSTRAPPED:
        return
    _load_plugins()
    _BOOTSTRAPPED = True


def reset() -> None:
    global _BOOTSTRAPPED
    _BOOTSTRAPPED = False


def _load_plugins() -> None:
    plugin_env = os.environ.get(PLUGINS_ENV_VAR)
    if not plugin_env:
        return
    for item in plugin_env.split(","):
        module_name = item.strip()
        if not module_name:
            continue
        logger.debug("Loading executor plugin %s", module_name)
        module = importlib.import_module(module_name)
        register = getattr(module, "register", None)
        if callable(register):
            register()
