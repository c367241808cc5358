"""Unit tests for project consistency validation."""

from refacing.application.config.validators import (
    ValidationResult,
    validate_pricing,
    validate_project,
    validate_selections,
    validate_style,
)
from refacing.domain.state import ProjectState
from refacing.domain.value_objects import CabinetSelection


class TestValidationResult:
    def test_exit_codes(self) -> None:
        assert ValidationResult().exit_code == 0
        assert ValidationResult().add_warning("a", "b").exit_code == 2
        assert ValidationResult().add_warning("a", "b").add_error("c", "d").exit_code == 1

    def test_merge(self) -> None:
        merged = ValidationResult().add_error("a", "x").merge(
            ValidationResult().add_warning("b", "y")
        )
        assert not merged.is_valid
        assert merged.has_warnings


class TestValidateSelections:
    def test_catalog_labels_pass(self) -> None:
        state = ProjectState(
            drawers=(CabinetSelection('12"', {'28"-36"': 1}),),
            plain_panels=(CabinetSelection('37"-48"', {'Over 36"': 2}),),
        )
        assert validate_selections(state).is_valid

    def test_unknown_height(self) -> None:
        state = ProjectState(tall_cabinets=(CabinetSelection('30"'),))
        result = validate_selections(state)
        assert [e.path for e in result.errors] == ["tall_cabinets[0].height"]
        assert result.errors[0].message == "Unknown height for Tall Cabinet Doors"
        assert result.errors[0].value == '30"'

    def test_width_from_another_category(self) -> None:
        state = ProjectState(
            wall_cabinets=(CabinetSelection('Up to 18"'), CabinetSelection('48"+', {'Over 36"': 1}))
        )
        result = validate_selections(state)
        assert [e.path for e in result.errors] == ["wall_cabinets[1].width_quantities"]


class TestValidateStyle:
    def test_unset_style_is_fine(self) -> None:
        assert not validate_style(ProjectState()).has_warnings

    def test_unknown_ids_warn(self) -> None:
        result = validate_style(ProjectState(door_style="louvered", finish="teal"))
        assert result.is_valid
        assert [w.path for w in result.warnings] == ["door_style", "finish"]
        assert "louvered" in result.warnings[0].message


class TestValidatePricing:
    def test_code_fractions_pass(self) -> None:
        state = ProjectState(discount_amount=0.15, referral_discount=0.08)
        assert validate_pricing(state).is_valid

    def test_arbitrary_fraction_flagged(self) -> None:
        state = ProjectState(discount_amount=0.33)
        result = validate_pricing(state)
        assert [e.path for e in result.errors] == ["discount_amount"]


def test_validate_project_combines_checks() -> None:
    state = ProjectState(
        door_style="unknown",
        referral_discount=0.5,
        base_cabinets=(CabinetSelection('31"'),),
    )
    result = validate_project(state)
    assert len(result.errors) == 2
    assert len(result.warnings) == 1
    assert result.exit_code == 1


def test_describe_lines() -> None:
    result = ValidationResult().add_error("drawers[0].height", "Unknown height", '7"')
    result.add_warning("finish", "Unknown finish 'teal'")
    assert result.errors[0].describe() == "drawers[0].height: Unknown height (got: '7\"')"
    assert result.warnings[0].describe() == "finish: Unknown finish 'teal'"
