"""Unit tests for terminal formatters."""

from refacing.domain.pricing import summarize_pricing
from refacing.domain.state import ProjectState
from refacing.domain.value_objects import CabinetSelection, CustomerInfo
from refacing.infrastructure.formatters import (
    CatalogFormatter,
    PricingFormatter,
    ProgressFormatter,
    ProjectFormatter,
    SelectionFormatter,
    format_percent,
    format_sample_codes,
    format_usd,
)


class TestScalars:
    def test_format_usd(self) -> None:
        assert format_usd(1234.5) == "$1,234.50"
        assert format_usd(0) == "$0.00"

    def test_format_percent(self) -> None:
        assert format_percent(0.10) == "10%"
        assert format_percent(0.12) == "12%"


class TestProgressFormatter:
    def test_marks_current_and_completed(self) -> None:
        state = ProjectState(current_step=2, completed_steps=frozenset({0, 1}))
        output = ProgressFormatter().format(state)
        assert "Step 3/7: Cabinet Selection" in output
        assert "2 of 6 steps completed (33%)" in output
        assert "[x] 0. Project Setup" in output
        assert "[>] 2. Cabinet Selection" in output
        assert "[ ] 6. Complete" in output


class TestSelectionFormatter:
    def test_lists_categories(self) -> None:
        state = ProjectState(drawers=(CabinetSelection('6"', {'Up to 14"': 2}),))
        output = SelectionFormatter().format(state)
        assert "CABINET SELECTIONS" in output
        assert "Drawers (drawers) - 2 drawers" in output
        assert '[0] Height 6" | Up to 14": 2 | 2 items' in output
        assert "No selections yet." in output
        assert "2 total items selected" in output


class TestPricingFormatter:
    def test_empty_project(self) -> None:
        output = PricingFormatter().format(summarize_pricing(ProjectState()))
        assert output == "No items selected yet. Go back to add cabinet selections."

    def test_without_codes(self) -> None:
        state = ProjectState(subtotal=250.0, grand_total=250.0)
        output = PricingFormatter().format(summarize_pricing(state))
        assert "Project Subtotal:" in output
        assert "Discount" not in output
        assert "Total Savings" not in output
        assert "$250.00" in output

    def test_with_both_codes(self) -> None:
        state = ProjectState(
            subtotal=250.0,
            discount_code="SAVE10",
            discount_amount=0.10,
            referral_code="REF2024",
            referral_discount=0.05,
            grand_total=212.5,
        )
        output = PricingFormatter().format(summarize_pricing(state))
        assert "Discount (10%):" in output
        assert "-$25.00" in output
        assert "Referral Bonus (5%):" in output
        assert "-$12.50" in output
        assert "Total Savings:" in output
        assert "$37.50" in output
        assert "$212.50" in output


class TestProjectFormatter:
    def test_unset_fields(self) -> None:
        output = ProjectFormatter().format(ProjectState())
        assert "Job: (not set)" in output
        assert "Door style: (not set)" in output
        assert "Customer: " not in output

    def test_populated(self) -> None:
        state = ProjectState(
            job_name="Smith Kitchen",
            door_style="shaker",
            finish="navy",
            customer=CustomerInfo(first_name="Ana", last_name="Ruiz"),
            sales_rep_name="Pat Lee",
            agreement_signed=True,
        )
        output = ProjectFormatter().format(state)
        assert "Job: Smith Kitchen" in output
        assert "Door style: Shaker" in output
        assert "Finish: Navy Blue" in output
        assert "Customer: Ana Ruiz" in output
        assert "Agreement signed (rep: Pat Lee)" in output


def test_catalog_lists_everything() -> None:
    output = CatalogFormatter().format()
    assert "Wall Cabinets (wall_cabinets) - $150.00" in output
    assert "raised-panel" in output
    assert "espresso" in output


def test_sample_codes() -> None:
    output = format_sample_codes()
    assert "SAVE10" in output
    assert "REF2024" in output
