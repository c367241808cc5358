"""Static product catalog.

The category table is shared by the selection helpers, the pricing
calculation and the catalog validator, so option sets and base prices can
never diverge between what a salesperson can pick and what gets priced.
Prices are flat per-record mock values.
"""

from __future__ import annotations

from dataclasses import dataclass

from .value_objects import CabinetCategoryKey

_NARROW_WIDTHS: tuple[str, ...] = ('Up to 14"', '15"-21"', '22"-27"')


@dataclass(frozen=True)
class CabinetCategory:
    """Configuration for one product category.

    Attributes:
        key: Category identifier.
        title: Display title.
        heights: Allowed height labels, in display order.
        widths: Allowed width labels, in display order.
        base_price: Flat price per selection record in dollars.
        unit_label: Plural noun used when counting units ("doors", "drawers").
    """

    key: CabinetCategoryKey
    title: str
    heights: tuple[str, ...]
    widths: tuple[str, ...]
    base_price: float
    unit_label: str = "doors"

    def __post_init__(self) -> None:
        if self.base_price < 0:
            raise ValueError("Base price must be non-negative")
        if not self.heights or not self.widths:
            raise ValueError("A category needs at least one height and one width")


CABINET_CATEGORIES: dict[CabinetCategoryKey, CabinetCategory] = {
    CabinetCategoryKey.WALL_CABINETS: CabinetCategory(
        key=CabinetCategoryKey.WALL_CABINETS,
        title="Wall Cabinets",
        heights=('Up to 18"', '19"-30"', '31"-42"', '42"-48"', '48"+'),
        widths=_NARROW_WIDTHS,
        base_price=150,
    ),
    CabinetCategoryKey.TALL_CABINETS: CabinetCategory(
        key=CabinetCategoryKey.TALL_CABINETS,
        title="Tall Cabinet Doors",
        heights=('60"',),
        widths=_NARROW_WIDTHS,
        base_price=200,
    ),
    CabinetCategoryKey.BASE_CABINETS: CabinetCategory(
        key=CabinetCategoryKey.BASE_CABINETS,
        title="Base Cabinet Doors",
        heights=('30"',),
        widths=_NARROW_WIDTHS,
        base_price=175,
    ),
    CabinetCategoryKey.DRAWERS: CabinetCategory(
        key=CabinetCategoryKey.DRAWERS,
        title="Drawers",
        heights=('6"', '12"'),
        widths=(*_NARROW_WIDTHS, '28"-36"'),
        base_price=100,
        unit_label="drawers",
    ),
    CabinetCategoryKey.PLAIN_PANELS: CabinetCategory(
        key=CabinetCategoryKey.PLAIN_PANELS,
        title="Plain Panels",
        heights=('Up to 36"', '37"-48"'),
        widths=(*_NARROW_WIDTHS, '28"-36"', 'Over 36"'),
        base_price=80,
    ),
    CabinetCategoryKey.APPLIED_PANELS: CabinetCategory(
        key=CabinetCategoryKey.APPLIED_PANELS,
        title="Applied Door Panels",
        heights=('Up to 36"', '37"-48"'),
        widths=_NARROW_WIDTHS,
        base_price=120,
    ),
}


@dataclass(frozen=True)
class DoorStyle:
    """A door design offered in the style step."""

    id: str
    name: str
    description: str
    price_note: str


@dataclass(frozen=True)
class FinishOption:
    """A color/texture finish offered in the style step."""

    id: str
    name: str
    description: str
    color: str


DOOR_STYLES: tuple[DoorStyle, ...] = (
    DoorStyle("shaker", "Shaker", "Classic American style with clean lines", "Base Price"),
    DoorStyle(
        "raised-panel",
        "Raised Panel",
        "Traditional style with decorative raised center",
        "+$15 per door",
    ),
    DoorStyle("flat-panel", "Flat Panel", "Modern minimalist design", "Base Price"),
    DoorStyle("beadboard", "Beadboard", "Cottage style with vertical grooves", "+$25 per door"),
)

FINISH_OPTIONS: tuple[FinishOption, ...] = (
    FinishOption("white", "Classic White", "Timeless and versatile", "#FFFFFF"),
    FinishOption("espresso", "Espresso", "Rich dark brown", "#3C2415"),
    FinishOption("gray", "Storm Gray", "Modern neutral", "#6B7280"),
    FinishOption("navy", "Navy Blue", "Bold and sophisticated", "#1E3A8A"),
    FinishOption("sage", "Sage Green", "Natural and calming", "#84A98C"),
    FinishOption("natural", "Natural Oak", "Wood grain finish", "#DEB887"),
)


def get_category(key: CabinetCategoryKey | str) -> CabinetCategory:
    """Look up a category by key.

    Args:
        key: A CabinetCategoryKey or its string value (e.g. "drawers").

    Raises:
        ValueError: If the key does not name a category.
    """
    return CABINET_CATEGORIES[CabinetCategoryKey(key)]


def get_door_style(style_id: str) -> DoorStyle | None:
    """Return the door style with the given id, or None."""
    return next((style for style in DOOR_STYLES if style.id == style_id), None)


def get_finish(finish_id: str) -> FinishOption | None:
    """Return the finish with the given id, or None."""
    return next((finish for finish in FINISH_OPTIONS if finish.id == finish_id), None)
