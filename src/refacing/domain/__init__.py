"""Domain layer - refacing catalog, project state and pricing rules."""

from .catalog import (
    CABINET_CATEGORIES,
    DOOR_STYLES,
    FINISH_OPTIONS,
    CabinetCategory,
    DoorStyle,
    FinishOption,
    get_category,
    get_door_style,
    get_finish,
)
from .navigation import (
    LAST_STEP,
    STEP_COUNT,
    can_navigate_to,
    clamp_step,
    progress_percentage,
    step_requirements,
)
from .pricing import (
    DISCOUNT_CODES,
    REFERRAL_CODES,
    CodeKind,
    CodeValidation,
    PricingSummary,
    PromoCode,
    calculate_grand_total,
    calculate_subtotal,
    summarize_pricing,
    validate_discount_code,
    validate_referral_code,
)
from .state import ProjectState, initial_state
from .value_objects import (
    CabinetCategoryKey,
    CabinetSelection,
    CustomerInfo,
    WizardStep,
)

__all__ = [
    "CABINET_CATEGORIES",
    "CabinetCategory",
    "CabinetCategoryKey",
    "CabinetSelection",
    "CodeKind",
    "CodeValidation",
    "CustomerInfo",
    "DISCOUNT_CODES",
    "DOOR_STYLES",
    "DoorStyle",
    "FINISH_OPTIONS",
    "FinishOption",
    "LAST_STEP",
    "PricingSummary",
    "ProjectState",
    "PromoCode",
    "REFERRAL_CODES",
    "STEP_COUNT",
    "WizardStep",
    "calculate_grand_total",
    "calculate_subtotal",
    "can_navigate_to",
    "clamp_step",
    "get_category",
    "get_door_style",
    "get_finish",
    "initial_state",
    "progress_percentage",
    "step_requirements",
    "summarize_pricing",
    "validate_discount_code",
    "validate_referral_code",
]
