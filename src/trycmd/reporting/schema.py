"""JSON schema definition for reporter output."""
from __future__ import annotations

SCHEMA_VERSION = "1.0.0"

JSON_SCHEMA_V1 = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "trycmd report",
    "type": "object",
    "required": ["schema_version", "generated_at", "summary", "cases"],
    "properties": {
        "schema_version": {"type": "string"},
        "generated_at": {"type": "string", "format": "date-time"},
        "summary": {
            "type": "object",
            "required": ["total", "passed", "failed", "errors", "skipped", "mode", "duration_s"],
            "properties": {
                "total": {"type": "integer"},
                "passed": {"type": "integer"},
                "failed": {"type": "integer"},
                "errors": {"type": "integer"},
                "skipped": {"type": "integer"},
                "mode": {"type": "string"},
                "include": {"type": ["array", "null"], "items": {"type": "string"}},
                "duration_s": {"type": "number"},
            },
        },
        "cases": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name", "status", "duration_ms"],
                "properties": {
                    "name": {"type": "string"},
                    "status": {"type": "string"},
                    "duration_ms": {"type": "number"},
                    "pattern": {"type": ["string", "null"]},
                    "expected": {"type": ["string", "null"]},
                    "bin": {"type": ["string", "null"]},
                    "timeout_s": {"type": ["number", "null"]},
                    "details": {"type": "string"},
                },
            },
        },
    },
}
