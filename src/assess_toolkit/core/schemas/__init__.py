"""
Schemas Package

JSON Schema for the persisted session state and its validator.
"""

from .validator import validate_state, StateValidationError

__all__ = [
    "validate_state",
    "StateValidationError",
]
