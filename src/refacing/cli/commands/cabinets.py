"""Cabinet selection commands.

Provides the `cabinets` command group for adding, removing and adjusting
selections in each of the six categories.
"""

from typing import Annotated

import typer

from refacing.cli.context import get_session
from refacing.domain.catalog import get_category
from refacing.domain.selections import add_selection, remove_selection, update_quantity
from refacing.domain.value_objects import CabinetCategoryKey
from refacing.infrastructure.formatters import SelectionFormatter

cabinets_app = typer.Typer(
    name="cabinets",
    help="Select the cabinets to reface.",
)

CategoryArg = Annotated[
    CabinetCategoryKey,
    typer.Argument(help="Cabinet category", case_sensitive=False),
]


@cabinets_app.command(name="list")
def list_selections(ctx: typer.Context) -> None:
    """Show current selections in every category."""
    session = get_session(ctx)
    typer.echo(SelectionFormatter().format(session.store.state))


@cabinets_app.command(name="add")
def add(
    ctx: typer.Context,
    category: CategoryArg,
    height: Annotated[str, typer.Argument(help='Height label, e.g. \'19"-30"\'')],
) -> None:
    """Add a selection for HEIGHT with every width at zero.

    Example:
        refacing cabinets add wall_cabinets '19"-30"'
    """
    session = get_session(ctx)
    config = get_category(category)
    if height not in config.heights:
        typer.echo(f"Error: Unknown height for {config.title}: {height}", err=True)
        typer.echo(f"Available heights: {', '.join(config.heights)}", err=True)
        raise typer.Exit(code=1)

    store = session.store
    selections = store.state.selections_for(category)
    store.update_category_selections(category, add_selection(category, selections, height))
    typer.echo(f"Added {config.title} selection at height {height}")


@cabinets_app.command(name="remove")
def remove(
    ctx: typer.Context,
    category: CategoryArg,
    index: Annotated[int, typer.Argument(help="Selection index (see 'cabinets list')")],
) -> None:
    """Remove the selection at INDEX."""
    session = get_session(ctx)
    store = session.store
    selections = store.state.selections_for(category)
    if not 0 <= index < len(selections):
        typer.echo(f"Error: No selection at index {index}", err=True)
        raise typer.Exit(code=1)
    store.update_category_selections(category, remove_selection(selections, index))
    typer.echo(f"Removed {get_category(category).title} selection {index}")


@cabinets_app.command(name="qty", context_settings={"ignore_unknown_options": True})
def set_quantity(
    ctx: typer.Context,
    category: CategoryArg,
    index: Annotated[int, typer.Argument(help="Selection index")],
    width: Annotated[str, typer.Argument(help="Width label, e.g. 'Up to 14\"'")],
    quantity: Annotated[int, typer.Argument(help="Units at this width (negative clamps to 0)")],
) -> None:
    """Set the unit count for one width of a selection."""
    session = get_session(ctx)
    config = get_category(category)
    if width not in config.widths:
        typer.echo(f"Error: Unknown width for {config.title}: {width}", err=True)
        typer.echo(f"Available widths: {', '.join(config.widths)}", err=True)
        raise typer.Exit(code=1)

    store = session.store
    try:
        updated = update_quantity(store.state.selections_for(category), index, width, quantity)
    except IndexError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    store.update_category_selections(category, updated)
    typer.echo(f"{config.title} [{index}] {width}: {updated[index].width_quantities[width]}")
