"""Pricing and promo-code rules.

Promo codes are resolved against a single canonical table per kind. The
same tables drive user-facing validation feedback and the fraction the
store actually applies.

Pricing is by selection *record*, not by unit quantity: each record in a
category adds that category's base price once regardless of its width
quantities.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .catalog import CABINET_CATEGORIES
from .state import ProjectState


class CodeKind(str, Enum):
    """Which promo table a code belongs to."""

    DISCOUNT = "discount"
    REFERRAL = "referral"


@dataclass(frozen=True)
class PromoCode:
    """A known promo code and the fraction it takes off the subtotal."""

    code: str
    discount: float
    description: str

    def __post_init__(self) -> None:
        if not 0 <= self.discount <= 1:
            raise ValueError(f"Discount fraction must be within [0, 1], got {self.discount}")


@dataclass(frozen=True)
class CodeValidation:
    """Result of looking up a user-entered code."""

    is_valid: bool
    discount: float = 0.0
    description: str = ""


DISCOUNT_CODES: dict[str, PromoCode] = {
    promo.code: promo
    for promo in (
        PromoCode("SAVE10", 0.10, "10% off your total order"),
        PromoCode("WELCOME15", 0.15, "15% off for new customers"),
        PromoCode("SPRING2024", 0.20, "20% spring special discount"),
        PromoCode("LOYALTY", 0.12, "12% loyalty member discount"),
    )
}

REFERRAL_CODES: dict[str, PromoCode] = {
    promo.code: promo
    for promo in (
        PromoCode("REF2024", 0.05, "5% referral bonus"),
        PromoCode("FRIEND", 0.07, "7% friend referral discount"),
        PromoCode("FAMILY", 0.08, "8% family member discount"),
    )
}

_TABLES: dict[CodeKind, dict[str, PromoCode]] = {
    CodeKind.DISCOUNT: DISCOUNT_CODES,
    CodeKind.REFERRAL: REFERRAL_CODES,
}


def normalize_code(code: str) -> str:
    """Normalize a user-entered code for lookup and storage."""
    return code.strip().upper()


def validate_code(kind: CodeKind, code: str) -> CodeValidation:
    """Look up a code in the table for ``kind`` (case-insensitive)."""
    promo = _TABLES[kind].get(normalize_code(code))
    if promo is None:
        return CodeValidation(is_valid=False)
    return CodeValidation(is_valid=True, discount=promo.discount, description=promo.description)


def validate_discount_code(code: str) -> CodeValidation:
    return validate_code(CodeKind.DISCOUNT, code)


def validate_referral_code(code: str) -> CodeValidation:
    return validate_code(CodeKind.REFERRAL, code)


def valid_fractions(kind: CodeKind) -> frozenset[float]:
    """Every fraction a state field of this kind may legally hold."""
    return frozenset({0.0, *(promo.discount for promo in _TABLES[kind].values())})


def calculate_subtotal(state: ProjectState) -> float:
    """Sum number-of-records x base price over all six categories."""
    return float(
        sum(
            len(selections) * CABINET_CATEGORIES[key].base_price
            for key, selections in state.all_selections()
        )
    )


def calculate_grand_total(
    subtotal: float, discount_amount: float, referral_discount: float
) -> float:
    """Apply both fractions to the subtotal, floored at zero, rounded to cents."""
    discounted = subtotal * (1 - discount_amount - referral_discount)
    return round(max(0.0, discounted), 2)


@dataclass(frozen=True)
class PricingSummary:
    """Display breakdown of a state's pricing fields."""

    subtotal: float
    discount_code: str
    discount_amount: float
    discount_savings: float
    referral_code: str
    referral_discount: float
    referral_savings: float
    grand_total: float

    @property
    def total_savings(self) -> float:
        return round(self.discount_savings + self.referral_savings, 2)

    @property
    def has_discount(self) -> bool:
        return self.discount_amount > 0 or self.referral_discount > 0


def summarize_pricing(state: ProjectState) -> PricingSummary:
    """Build the pricing breakdown shown on the pricing step."""
    return PricingSummary(
        subtotal=state.subtotal,
        discount_code=state.discount_code,
        discount_amount=state.discount_amount,
        discount_savings=round(state.subtotal * state.discount_amount, 2),
        referral_code=state.referral_code,
        referral_discount=state.referral_discount,
        referral_savings=round(state.subtotal * state.referral_discount, 2),
        grand_total=state.grand_total,
    )
