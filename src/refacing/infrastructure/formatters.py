"""Plain-text formatters for the terminal front end."""

from __future__ import annotations

from refacing.domain.catalog import (
    CABINET_CATEGORIES,
    DOOR_STYLES,
    FINISH_OPTIONS,
    get_door_style,
    get_finish,
)
from refacing.domain.navigation import STEP_COUNT, progress_percentage
from refacing.domain.pricing import DISCOUNT_CODES, REFERRAL_CODES, PricingSummary
from refacing.domain.selections import count_units, total_units
from refacing.domain.state import ProjectState
from refacing.domain.value_objects import CabinetCategoryKey, WizardStep


def format_usd(amount: float) -> str:
    return f"${amount:,.2f}"


def format_percent(fraction: float) -> str:
    return f"{fraction * 100:.0f}%"


class ProgressFormatter:
    """Renders the step bar and completion count."""

    def format(self, state: ProjectState) -> str:
        completable = STEP_COUNT - 1
        lines = [
            f"Step {state.current_step + 1}/{STEP_COUNT}: "
            f"{WizardStep(state.current_step).title}",
            f"{len(state.completed_steps)} of {completable} steps completed "
            f"({progress_percentage(state.completed_steps):.0f}%)",
            "",
        ]
        for step in WizardStep:
            if step == state.current_step:
                marker = ">"
            elif step in state.completed_steps:
                marker = "x"
            else:
                marker = " "
            lines.append(f"  [{marker}] {step.value}. {step.title}")
        return "\n".join(lines)


class SelectionFormatter:
    """Lists cabinet selections per category with unit counts."""

    def format(self, state: ProjectState) -> str:
        units = total_units(state)
        lines = ["CABINET SELECTIONS", "=" * 60]
        for key, selections in state.all_selections():
            lines.append(self._format_category(key, selections))
        lines.append("-" * 60)
        lines.append(f"{units} total items selected")
        return "\n".join(lines)

    def _format_category(self, key: CabinetCategoryKey, selections) -> str:
        category = CABINET_CATEGORIES[key]
        count = count_units(selections)
        header = f"{category.title} ({key.value})"
        if count:
            header += f" - {count} {category.unit_label}"
        lines = [header]
        if not selections:
            lines.append("    No selections yet.")
        for index, selection in enumerate(selections):
            quantities = ", ".join(
                f"{width}: {qty}" for width, qty in selection.width_quantities.items()
            )
            lines.append(
                f"    [{index}] Height {selection.height} | {quantities} "
                f"| {selection.unit_count} items"
            )
        return "\n".join(lines)


class PricingFormatter:
    """Renders the project summary shown on the pricing step."""

    def format(self, summary: PricingSummary) -> str:
        if summary.subtotal <= 0:
            return "No items selected yet. Go back to add cabinet selections."

        lines = [
            "PROJECT SUMMARY",
            "=" * 40,
            f"{'Project Subtotal:':<28}{format_usd(summary.subtotal):>12}",
        ]
        if summary.discount_amount > 0:
            label = f"Discount ({format_percent(summary.discount_amount)}):"
            lines.append(f"{label:<28}{'-' + format_usd(summary.discount_savings):>12}")
        if summary.referral_discount > 0:
            label = f"Referral Bonus ({format_percent(summary.referral_discount)}):"
            lines.append(f"{label:<28}{'-' + format_usd(summary.referral_savings):>12}")
        if summary.has_discount:
            lines.append(f"{'Total Savings:':<28}{format_usd(summary.total_savings):>12}")
        lines.append("-" * 40)
        lines.append(f"{'Project Total:':<28}{format_usd(summary.grand_total):>12}")
        return "\n".join(lines)


class ProjectFormatter:
    """Full status report for a project."""

    def __init__(self) -> None:
        self._progress = ProgressFormatter()

    def format(self, state: ProjectState) -> str:
        style = get_door_style(state.door_style)
        finish = get_finish(state.finish)
        lines = [
            f"Job: {state.job_name or '(not set)'}",
            f"Door style: {style.name if style else state.door_style or '(not set)'}",
            f"Finish: {finish.name if finish else state.finish or '(not set)'}",
            f"Items: {total_units(state)}",
            f"Subtotal: {format_usd(state.subtotal)}",
            f"Total: {format_usd(state.grand_total)}",
        ]
        if state.customer.full_name:
            lines.append(f"Customer: {state.customer.full_name}")
        if state.agreement_signed:
            lines.append(f"Agreement signed (rep: {state.sales_rep_name or 'unknown'})")
        lines.append("")
        lines.append(self._progress.format(state))
        return "\n".join(lines)


class CatalogFormatter:
    """Lists categories, door styles and finishes."""

    def format(self) -> str:
        lines = ["CABINET CATEGORIES", "=" * 60]
        for key, category in CABINET_CATEGORIES.items():
            lines.append(f"{category.title} ({key.value}) - {format_usd(category.base_price)}")
            lines.append(f"    Heights: {', '.join(category.heights)}")
            lines.append(f"    Widths:  {', '.join(category.widths)}")
        lines.extend(["", "DOOR STYLES", "=" * 60])
        for style in DOOR_STYLES:
            lines.append(f"  {style.id:<14} {style.name:<14} {style.price_note}")
        lines.extend(["", "FINISHES", "=" * 60])
        for finish in FINISH_OPTIONS:
            lines.append(f"  {finish.id:<14} {finish.name:<14} {finish.description}")
        return "\n".join(lines)


def format_sample_codes() -> str:
    """Sample codes block shown on the pricing step."""
    return "\n".join(
        [
            "Sample Codes (Demo)",
            f"  Discount: {', '.join(DISCOUNT_CODES)}",
            f"  Referral: {', '.join(REFERRAL_CODES)}",
        ]
    )
