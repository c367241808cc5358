"""Infrastructure layer - storage and terminal output."""

from .formatters import (
    CatalogFormatter,
    PricingFormatter,
    ProgressFormatter,
    ProjectFormatter,
    SelectionFormatter,
    format_sample_codes,
    format_usd,
)
from .storage import InMemoryStateRepository, JsonFileStateRepository

__all__ = [
    "CatalogFormatter",
    "InMemoryStateRepository",
    "JsonFileStateRepository",
    "PricingFormatter",
    "ProgressFormatter",
    "ProjectFormatter",
    "SelectionFormatter",
    "format_sample_codes",
    "format_usd",
]
