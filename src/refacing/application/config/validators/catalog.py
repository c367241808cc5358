"""Catalog and pricing consistency checks for a project state."""

from __future__ import annotations

from refacing.domain.catalog import get_category, get_door_style, get_finish
from refacing.domain.pricing import CodeKind, valid_fractions
from refacing.domain.state import ProjectState

from .base import ValidationResult


def validate_selections(state: ProjectState) -> ValidationResult:
    """Check every selection's height and width labels against the catalog."""
    result = ValidationResult()
    for key, selections in state.all_selections():
        category = get_category(key)
        for index, selection in enumerate(selections):
            path = f"{key.value}[{index}]"
            if selection.height not in category.heights:
                result.add_error(
                    f"{path}.height",
                    f"Unknown height for {category.title}",
                    selection.height,
                )
            for width in selection.width_quantities:
                if width not in category.widths:
                    result.add_error(
                        f"{path}.width_quantities",
                        f"Unknown width for {category.title}",
                        width,
                    )
    return result


def validate_style(state: ProjectState) -> ValidationResult:
    """Warn about door style or finish ids missing from the catalog."""
    result = ValidationResult()
    if state.door_style and get_door_style(state.door_style) is None:
        result.add_warning(
            "door_style",
            f"Unknown door style '{state.door_style}'",
            suggestion="Run 'refacing catalog' to see available styles",
        )
    if state.finish and get_finish(state.finish) is None:
        result.add_warning(
            "finish",
            f"Unknown finish '{state.finish}'",
            suggestion="Run 'refacing catalog' to see available finishes",
        )
    return result


def validate_pricing(state: ProjectState) -> ValidationResult:
    """Check that applied fractions come from the code tables."""
    result = ValidationResult()
    if state.discount_amount not in valid_fractions(CodeKind.DISCOUNT):
        result.add_error(
            "discount_amount", "Discount is not a known code fraction", state.discount_amount
        )
    if state.referral_discount not in valid_fractions(CodeKind.REFERRAL):
        result.add_error(
            "referral_discount",
            "Referral discount is not a known code fraction",
            state.referral_discount,
        )
    return result


def validate_project(state: ProjectState) -> ValidationResult:
    """Run every project check and merge the results."""
    return (
        validate_selections(state)
        .merge(validate_style(state))
        .merge(validate_pricing(state))
    )
