"""The ProjectState aggregate.

A ProjectState is an immutable snapshot of everything the wizard has
collected. Mutation happens by building a new snapshot (see
ProjectStore in the application layer).
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable

from .value_objects import CabinetCategoryKey, CabinetSelection, CustomerInfo

# Category key -> ProjectState attribute holding that category's selections.
CATEGORY_FIELDS: dict[CabinetCategoryKey, str] = {
    key: key.value for key in CabinetCategoryKey
}


@dataclass(frozen=True)
class ProjectState:
    """Single source of truth for one sales session.

    Attributes:
        job_name: Free-form project name entered at setup.
        door_style: Selected door style id.
        finish: Selected finish id.
        wall_cabinets .. applied_panels: Ordered selections per category.
        subtotal: Pre-discount price derived from the selections.
        discount_code: Last applied discount code (normalized).
        discount_amount: Discount fraction, 0 or a value from the code table.
        referral_code: Last applied referral code (normalized).
        referral_discount: Referral fraction, 0 or a value from the code table.
        grand_total: Subtotal after both fractions, floored at zero.
        customer: Contact and address record.
        customer_signature: Captured customer signature payload.
        sales_rep_signature: Captured sales rep signature payload.
        sales_rep_name: Printed name of the sales rep.
        agreement_signed: Whether the agreement has been executed.
        current_step: Index of the active wizard step.
        completed_steps: Indices of steps marked complete.
    """

    job_name: str = ""
    door_style: str = ""
    finish: str = ""

    wall_cabinets: tuple[CabinetSelection, ...] = ()
    tall_cabinets: tuple[CabinetSelection, ...] = ()
    base_cabinets: tuple[CabinetSelection, ...] = ()
    drawers: tuple[CabinetSelection, ...] = ()
    plain_panels: tuple[CabinetSelection, ...] = ()
    applied_panels: tuple[CabinetSelection, ...] = ()

    subtotal: float = 0.0
    discount_code: str = ""
    discount_amount: float = 0.0
    referral_code: str = ""
    referral_discount: float = 0.0
    grand_total: float = 0.0

    customer: CustomerInfo = field(default_factory=CustomerInfo)

    customer_signature: str = ""
    sales_rep_signature: str = ""
    sales_rep_name: str = ""
    agreement_signed: bool = False

    current_step: int = 0
    completed_steps: frozenset[int] = frozenset()

    def selections_for(
        self, category: CabinetCategoryKey | str
    ) -> tuple[CabinetSelection, ...]:
        """Return the selections recorded for a category."""
        return getattr(self, CATEGORY_FIELDS[CabinetCategoryKey(category)])

    def with_selections(
        self,
        category: CabinetCategoryKey | str,
        selections: Iterable[CabinetSelection],
    ) -> "ProjectState":
        """Return a copy with one category's selections replaced wholesale."""
        attr = CATEGORY_FIELDS[CabinetCategoryKey(category)]
        return replace(self, **{attr: tuple(selections)})

    def all_selections(
        self,
    ) -> list[tuple[CabinetCategoryKey, tuple[CabinetSelection, ...]]]:
        """Return (category, selections) pairs in catalog order."""
        return [(key, self.selections_for(key)) for key in CabinetCategoryKey]


def initial_state() -> ProjectState:
    """Return the documented initial value of every field."""
    return ProjectState()
