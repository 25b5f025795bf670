"""
Utils Package

Serialization utilities for the session state record.
"""

from .serialization import (
    serialize_state,
    deserialize_state,
    load_state_json,
    save_state_json,
)

__all__ = [
    "serialize_state",
    "deserialize_state",
    "load_state_json",
    "save_state_json",
]
