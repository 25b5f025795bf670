"""
Schema Validation Utilities

Validates persisted session state before it is loaded into a SessionState.

Two levels:
- Basic structural checks (always): mappings where mappings are required,
  integer seeds, non-negative attempt counts, numeric raw scores.
- Strict JSON Schema validation (``strict=True``) against the bundled
  ``session_state.schema.json`` using jsonschema.

Validation never fills in missing keys: absent data is legal and means
"no data yet".
"""

from __future__ import annotations

import json
from numbers import Real
from pathlib import Path
from typing import Any, Iterable, Mapping

import jsonschema

from ..models.state import STATE_KEYS


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class StateValidationError(Exception):
    """Raised when session state fails validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _entries(value: Any) -> Iterable[tuple[Any, Any]]:
    """Iterate (key, value) pairs of a mapping or sequential list."""
    if isinstance(value, Mapping):
        return value.items()
    return enumerate(value)


def _is_indexed(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple))


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def validate_state(data: Any, *, strict: bool = False) -> None:
    """
    Validate session state data.

    Args:
        data: State dictionary (parsed JSON or SessionState.to_dict())
        strict: If True, also validate against the JSON schema

    Raises:
        StateValidationError: If data is invalid, with every problem
            listed in ``errors``
    """
    if not isinstance(data, Mapping):
        raise StateValidationError(
            f"Session state must be a mapping, got {type(data).__name__}",
            path="",
        )

    errors: list[str] = []

    for key in STATE_KEYS:
        value = data.get(key)
        if value is not None and not _is_indexed(value):
            errors.append(f"{key}: expected mapping or list, got {type(value).__name__}")

    seeds = data.get("seeds")
    if _is_indexed(seeds):
        for qn, seed in _entries(seeds):
            if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool)):
                errors.append(f"seeds[{qn}]: seed must be an integer, got {seed!r}")

    attempts = data.get("partattemptn")
    if _is_indexed(attempts):
        for qn, parts in _entries(attempts):
            if parts is None:
                continue
            if not _is_indexed(parts):
                errors.append(f"partattemptn[{qn}]: expected part mapping")
                continue
            for pn, count in _entries(parts):
                if not isinstance(count, int) or isinstance(count, bool) or count < 0:
                    errors.append(f"partattemptn[{qn}][{pn}]: attempt count must be a non-negative integer, got {count!r}")

    raw = data.get("rawscores")
    if _is_indexed(raw):
        for qn, parts in _entries(raw):
            if parts is None:
                continue
            if not _is_indexed(parts):
                errors.append(f"rawscores[{qn}]: expected part mapping")
                continue
            for pn, score in _entries(parts):
                if not _is_number(score) or score > 1:
                    errors.append(f"rawscores[{qn}][{pn}]: raw score must be a number <= 1, got {score!r}")

    if errors:
        raise StateValidationError(
            f"Invalid session state ({len(errors)} problem(s))",
            path="",
            errors=errors,
        )

    if strict:
        # Schema works on JSON form (string keys)
        normalised = json.loads(json.dumps(data))
        validator = jsonschema.Draft7Validator(_load_schema("session_state"))
        schema_errors = sorted(validator.iter_errors(normalised), key=lambda e: [str(p) for p in e.path])
        if schema_errors:
            first = schema_errors[0]
            raise StateValidationError(
                f"Schema validation failed: {first.message}",
                path="/".join(str(p) for p in first.path),
                errors=[e.message for e in schema_errors],
            )
