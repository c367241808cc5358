"""Value objects for the refacing domain."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Mapping


class CabinetCategoryKey(str, Enum):
    """The six fixed product groupings a salesperson can quote."""

    WALL_CABINETS = "wall_cabinets"
    TALL_CABINETS = "tall_cabinets"
    BASE_CABINETS = "base_cabinets"
    DRAWERS = "drawers"
    PLAIN_PANELS = "plain_panels"
    APPLIED_PANELS = "applied_panels"


class WizardStep(IntEnum):
    """Ordered stages of the sales wizard."""

    PROJECT_SETUP = 0
    DOOR_STYLE = 1
    CABINET_SELECTION = 2
    PRICING = 3
    CUSTOMER_INFO = 4
    AGREEMENT = 5
    COMPLETE = 6

    @property
    def title(self) -> str:
        """Display title shown in the step navigation bar."""
        return _STEP_TITLES[self]


_STEP_TITLES: dict[WizardStep, str] = {
    WizardStep.PROJECT_SETUP: "Project Setup",
    WizardStep.DOOR_STYLE: "Door Style & Finish",
    WizardStep.CABINET_SELECTION: "Cabinet Selection",
    WizardStep.PRICING: "Pricing & Discounts",
    WizardStep.CUSTOMER_INFO: "Customer Info",
    WizardStep.AGREEMENT: "Agreement & Signatures",
    WizardStep.COMPLETE: "Complete",
}


@dataclass(frozen=True)
class CabinetSelection:
    """One configured batch of units for a category.

    Attributes:
        height: Height label chosen from the category's allowed heights.
        width_quantities: Width label -> unit count. All counts are >= 0.
            Stored as a read-only copy of the mapping passed in.
    """

    height: str
    width_quantities: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        quantities = dict(self.width_quantities)
        object.__setattr__(self, "width_quantities", MappingProxyType(quantities))
        for width, quantity in quantities.items():
            if quantity < 0:
                raise ValueError(
                    f"Quantity for width {width!r} must be non-negative, got {quantity}"
                )

    @property
    def unit_count(self) -> int:
        """Total units across all widths."""
        return sum(self.width_quantities.values())


@dataclass(frozen=True)
class CustomerInfo:
    """Flat contact and address record for the homeowner."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)
