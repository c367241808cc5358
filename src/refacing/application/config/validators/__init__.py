"""Project state validators."""

from .base import ValidationError, ValidationResult, ValidationWarning
from .catalog import (
    validate_pricing,
    validate_project,
    validate_selections,
    validate_style,
)

__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "validate_pricing",
    "validate_project",
    "validate_selections",
    "validate_style",
]
