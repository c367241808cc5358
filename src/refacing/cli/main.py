"""Typer CLI for the cabinet refacing sales wizard."""

from pathlib import Path
from typing import Annotated

import typer

from refacing.application import NavigationError, ServiceFactory
from refacing.application.config import (
    ConfigError,
    RefacingSettings,
    load_settings,
    merge_settings_with_cli,
)
from refacing.cli.commands import (
    cabinets_app,
    discount_app,
    referral_app,
    validate_command,
)
from refacing.cli.context import CliSession, get_session
from refacing.domain.catalog import DOOR_STYLES, FINISH_OPTIONS, get_door_style, get_finish
from refacing.domain.navigation import step_requirements
from refacing.domain.pricing import summarize_pricing
from refacing.domain.value_objects import WizardStep
from refacing.infrastructure.formatters import (
    CatalogFormatter,
    PricingFormatter,
    ProgressFormatter,
    ProjectFormatter,
    format_sample_codes,
)

app = typer.Typer(
    name="refacing",
    help="Walk a cabinet refacing sale from project setup to signed agreement.",
    no_args_is_help=True,
)

app.command(name="validate")(validate_command)
app.add_typer(cabinets_app, name="cabinets")
app.add_typer(discount_app, name="discount")
app.add_typer(referral_app, name="referral")


def _load_settings(config_file: Path | None, storage_dir: Path | None) -> RefacingSettings:
    try:
        settings = load_settings(config_file) if config_file else RefacingSettings()
        return merge_settings_with_cli(settings, storage_dir=storage_dir)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


@app.callback()
def main(
    ctx: typer.Context,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON settings file"),
    ] = None,
    storage_dir: Annotated[
        Path | None,
        typer.Option("--storage-dir", help="Directory for the saved project state"),
    ] = None,
) -> None:
    """Load settings and restore the saved project for this invocation."""
    settings = _load_settings(config_file, storage_dir)
    factory = ServiceFactory(settings=settings)
    store = factory.create_store()
    ctx.obj = CliSession(store=store, navigator=factory.create_navigator(store))


@app.command()
def status(ctx: typer.Context) -> None:
    """Show the project and wizard progress."""
    typer.echo(ProjectFormatter().format(get_session(ctx).store.state))


@app.command()
def catalog() -> None:
    """List cabinet categories, door styles and finishes."""
    typer.echo(CatalogFormatter().format())


@app.command()
def codes() -> None:
    """List sample discount and referral codes."""
    typer.echo(format_sample_codes())


@app.command()
def setup(
    ctx: typer.Context,
    job_name: Annotated[str, typer.Argument(help="Project name, e.g. 'Smith Kitchen Remodel'")],
) -> None:
    """Set the job name for the project."""
    get_session(ctx).store.set_job_name(job_name)
    typer.echo(f"Job name: {job_name}")


@app.command()
def style(
    ctx: typer.Context,
    door: Annotated[
        str | None,
        typer.Option("--door", "-d", help=f"Door style: {', '.join(s.id for s in DOOR_STYLES)}"),
    ] = None,
    finish: Annotated[
        str | None,
        typer.Option("--finish", "-f", help=f"Finish: {', '.join(f.id for f in FINISH_OPTIONS)}"),
    ] = None,
) -> None:
    """Choose the door style and finish."""
    store = get_session(ctx).store
    if door is None and finish is None:
        typer.echo("Error: Provide --door and/or --finish", err=True)
        raise typer.Exit(code=1)

    if door is not None:
        door_style = get_door_style(door)
        if door_style is None:
            typer.echo(f"Error: Unknown door style: {door}", err=True)
            raise typer.Exit(code=1)
        store.set_door_style(door_style.id)
        typer.echo(f"Door style: {door_style.name} ({door_style.price_note})")

    if finish is not None:
        finish_option = get_finish(finish)
        if finish_option is None:
            typer.echo(f"Error: Unknown finish: {finish}", err=True)
            raise typer.Exit(code=1)
        store.set_finish(finish_option.id)
        typer.echo(f"Finish: {finish_option.name}")


@app.command()
def pricing(ctx: typer.Context) -> None:
    """Recalculate and show the pricing summary."""
    store = get_session(ctx).store
    store.calculate_total()
    typer.echo(PricingFormatter().format(summarize_pricing(store.state)))
    typer.echo()
    typer.echo(format_sample_codes())


@app.command()
def customer(
    ctx: typer.Context,
    first_name: Annotated[str | None, typer.Option("--first-name")] = None,
    last_name: Annotated[str | None, typer.Option("--last-name")] = None,
    email: Annotated[str | None, typer.Option("--email")] = None,
    phone: Annotated[str | None, typer.Option("--phone")] = None,
    address: Annotated[str | None, typer.Option("--address")] = None,
    city: Annotated[str | None, typer.Option("--city")] = None,
    state: Annotated[str | None, typer.Option("--state")] = None,
    zip_code: Annotated[str | None, typer.Option("--zip")] = None,
) -> None:
    """Update customer contact details. Only the given fields change."""
    fields = {
        "first_name": first_name,
        "last_name": last_name,
        "email": email,
        "phone": phone,
        "address": address,
        "city": city,
        "state": state,
        "zip_code": zip_code,
    }
    info = {key: value for key, value in fields.items() if value is not None}
    store = get_session(ctx).store
    if info:
        store.update_customer_info(**info)
    record = store.state.customer
    typer.echo(f"Customer: {record.full_name or '(no name)'}")
    for key, value in info.items():
        typer.echo(f"  {key}: {value}")


@app.command()
def sign(
    ctx: typer.Context,
    customer_signature: Annotated[
        str | None, typer.Option("--customer", help="Customer signature")
    ] = None,
    rep_signature: Annotated[
        str | None, typer.Option("--rep", help="Sales rep signature")
    ] = None,
    rep_name: Annotated[str | None, typer.Option("--rep-name", help="Sales rep name")] = None,
) -> None:
    """Record signatures. The agreement is signed once both are present."""
    store = get_session(ctx).store
    if customer_signature is not None:
        store.set_customer_signature(customer_signature)
    if rep_signature is not None or rep_name is not None:
        store.set_sales_rep_signature(
            rep_signature if rep_signature is not None else store.state.sales_rep_signature,
            rep_name if rep_name is not None else store.state.sales_rep_name,
        )

    state = store.state
    signed = bool(state.customer_signature and state.sales_rep_signature)
    if signed != state.agreement_signed:
        store.set_agreement_signed(signed)
    typer.echo("Agreement signed" if signed else "Agreement awaiting signatures")


@app.command(name="next")
def next_step(ctx: typer.Context) -> None:
    """Complete the current step and advance."""
    navigator = get_session(ctx).navigator
    try:
        step = navigator.complete_current_step()
    except NavigationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Now at step {step.value}: {step.title}")


@app.command()
def back(ctx: typer.Context) -> None:
    """Go back one step."""
    step = get_session(ctx).navigator.go_back()
    typer.echo(f"Now at step {step.value}: {step.title}")


@app.command()
def goto(
    ctx: typer.Context,
    step: Annotated[int, typer.Argument(help="Step index 0-6")],
) -> None:
    """Jump to a visited or completed step."""
    navigator = get_session(ctx).navigator
    try:
        target = navigator.go_to(step)
    except NavigationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Now at step {target.value}: {target.title}")


@app.command()
def steps(ctx: typer.Context) -> None:
    """Show wizard progress and what blocks the current step."""
    state = get_session(ctx).store.state
    typer.echo(ProgressFormatter().format(state))
    missing = step_requirements(state, state.current_step)
    if missing:
        typer.echo()
        typer.echo(f"To complete {WizardStep(state.current_step).title}:")
        for item in missing:
            typer.echo(f"  - {item}")


@app.command()
def reset(
    ctx: typer.Context,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
) -> None:
    """Discard the project and start over."""
    if not yes:
        typer.confirm("Discard the current project?", abort=True)
    get_session(ctx).store.reset_project()
    typer.echo("Project reset")


if __name__ == "__main__":
    app()
