"""Selection list helpers.

These build replacement selection lists for
``ProjectStore.update_category_selections``. None of them mutate their
input.
"""

from __future__ import annotations

from typing import Sequence

from .catalog import get_category
from .state import ProjectState
from .value_objects import CabinetCategoryKey, CabinetSelection


def new_selection(category: CabinetCategoryKey | str, height: str) -> CabinetSelection:
    """Create a selection with every width of the category at zero."""
    widths = get_category(category).widths
    return CabinetSelection(height=height, width_quantities={width: 0 for width in widths})


def add_selection(
    category: CabinetCategoryKey | str,
    selections: Sequence[CabinetSelection],
    height: str,
) -> list[CabinetSelection]:
    """Append a zeroed selection for ``height``."""
    return [*selections, new_selection(category, height)]


def remove_selection(
    selections: Sequence[CabinetSelection], index: int
) -> list[CabinetSelection]:
    """Drop the selection at ``index``; out-of-range indices remove nothing."""
    return [selection for i, selection in enumerate(selections) if i != index]


def update_quantity(
    selections: Sequence[CabinetSelection],
    index: int,
    width: str,
    quantity: int,
) -> list[CabinetSelection]:
    """Set one width's quantity on one selection, clamped to >= 0.

    Raises:
        IndexError: If ``index`` does not address a selection.
    """
    if not 0 <= index < len(selections):
        raise IndexError(f"No selection at index {index}")
    updated = list(selections)
    target = updated[index]
    quantities = dict(target.width_quantities)
    quantities[width] = max(0, quantity)
    updated[index] = CabinetSelection(height=target.height, width_quantities=quantities)
    return updated


def count_units(selections: Sequence[CabinetSelection]) -> int:
    """Sum of all width quantities across the selections."""
    return sum(selection.unit_count for selection in selections)


def total_units(state: ProjectState) -> int:
    """Units selected across every category."""
    return sum(count_units(selections) for _, selections in state.all_selections())
