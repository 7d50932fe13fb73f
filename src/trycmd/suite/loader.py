"""YAML loader and validation for suite files."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from jsonschema import Draft7Validator

from trycmd.core import Bin, BinName, BinPath, CommandStatus

from .models import SuiteCase, SuiteConfig

_STATUS_NAMES = [status.value for status in CommandStatus]

SUITE_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["cases"],
    "additionalProperties": False,
    "properties": {
        "bin": {
            "type": "object",
            "oneOf": [
                {"required": ["path"], "not": {"required": ["name"]}},
                {"required": ["name"], "not": {"required": ["path"]}},
            ],
            "properties": {
                "path": {"type": "string", "minLength": 1},
                "name": {"type": "string", "minLength": 1},
            },
            "additionalProperties": False,
        },
        "timeout": {"type": "number", "exclusiveMinimum": 0},
        "env": {
            "type": "object",
            "additionalProperties": {"type": ["string", "number", "boolean"]},
        },
        "executor": {"type": "string", "minLength": 1},
        "cases": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["pattern"],
                "additionalProperties": False,
                "properties": {
                    "pattern": {"type": "string", "minLength": 1},
                    "status": {"enum": _STATUS_NAMES},
                },
            },
        },
    },
}

_validator = Draft7Validator(SUITE_SCHEMA)


def load_suite(path: str) -> SuiteConfig:
    """Load and validate a suite file."""

    suite_path = Path(path).expanduser().resolve()
    raw = yaml.safe_load(suite_path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, Mapping):
        raise ValueError("Suite file must contain a mapping at the top level")
    errors = sorted(_validator.iter_errors(raw), key=lambda e: list(e.path))
    if errors:
        messages = "; ".join(f"{'/'.join(map(str, err.path)) or 'root'}: {err.message}" for err in errors)
        raise ValueError(f"Suite schema validation failed: {messages}")
    base = suite_path.parent
    cases = tuple(_parse_case(entry, base) for entry in raw["cases"])
    timeout = raw.get("timeout")
    return SuiteConfig(
        cases=cases,
        suite_dir=base,
        bin=_parse_bin(raw.get("bin"), base),
        timeout=float(timeout) if timeout is not None else None,
        env={str(k): _env_value(v) for k, v in (raw.get("env") or {}).items()},
        executor=raw.get("executor"),
    )


def _parse_case(entry: Mapping[str, Any], base: Path) -> SuiteCase:
    status = entry.get("status")
    return SuiteCase(
        pattern=_resolve_pattern(entry["pattern"], base),
        status=CommandStatus.from_name(status) if status is not None else None,
    )


def _resolve_pattern(pattern: str, base: Path) -> str:
    if Path(pattern).is_absolute():
        return pattern
    return (base / pattern).as_posix()


def _parse_bin(raw: Optional[Mapping[str, str]], base: Path) -> Optional[Bin]:
    if raw is None:
        return None
    if "name" in raw:
        return BinName(name=raw["name"])
    path = Path(raw["path"])
    if not path.is_absolute():
        path = base / path
    return BinPath(path=path)


def _env_value(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)
