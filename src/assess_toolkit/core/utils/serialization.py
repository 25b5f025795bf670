"""
Serialization Utilities

Provides to/from JSON utilities for the session state record.

The persisted form keeps the legacy key names and the legacy layout:
answer history and flags keyed by ``qn + 1``, scalars for single-part
questions and part-keyed mappings for multi-part questions. Nothing is
reshaped on the way in or out, so state persisted by earlier systems
round-trips unchanged.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

from ..models.state import SessionState
from ..schemas.validator import validate_state, StateValidationError

logger = logging.getLogger(__name__)


def serialize_state(state: SessionState) -> dict[str, Any]:
    """
    Serialize a SessionState to a dictionary.

    Args:
        state: Record to serialize

    Returns:
        Dictionary suitable for JSON serialization (integer keys are
        written as strings by ``json``)
    """
    return state.to_dict()


def deserialize_state(
    data: Mapping[str, Any],
    *,
    validate: bool = True,
    strict: bool = False,
) -> SessionState:
    """
    Deserialize a SessionState from a dictionary.

    Args:
        data: Dictionary from JSON or from ``serialize_state``
        validate: Whether to run structural validation first
        strict: Also validate against the JSON schema

    Returns:
        SessionState instance

    Raises:
        StateValidationError: If validation is enabled and data is invalid
    """
    if validate:
        validate_state(data, strict=strict)
    try:
        return SessionState.from_dict(data)
    except TypeError as e:
        raise StateValidationError(f"Cannot read session state: {e}", errors=[str(e)]) from e


def load_state_json(
    path: Path,
    *,
    validate: bool = True,
    strict: bool = False,
) -> SessionState:
    """
    Load a session state from a JSON file.

    Raises:
        FileNotFoundError: If file doesn't exist
        StateValidationError: If the file is not valid JSON or fails validation
    """
    if not path.exists():
        raise FileNotFoundError(f"State file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise StateValidationError(
            f"Invalid JSON in state file: {e}",
            path=str(path),
            errors=[str(e)],
        ) from e

    state = deserialize_state(data, validate=validate, strict=strict)
    logger.debug(f"Loaded session state from {path} ({len(state.seeds)} questions)")
    return state


def save_state_json(state: SessionState, path: Path) -> None:
    """
    Save a session state to a JSON file.

    Args:
        state: Record to save
        path: Output path (parent directories are created)
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(serialize_state(state), f, indent=2, ensure_ascii=False)
    logger.debug(f"Saved session state to {path}")
