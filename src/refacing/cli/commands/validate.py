"""Validate command for checking the saved project against the catalog."""

import typer

from refacing.application.config.validators import ValidationResult, validate_project
from refacing.cli.context import get_session


def validate_command(ctx: typer.Context) -> None:
    """Validate the current project.

    Checks selection heights and widths against the catalog, door style
    and finish ids, and applied discount fractions.

    Exit codes:
        0 - Project is valid with no warnings
        1 - Project has errors
        2 - Project is valid but has warnings
    """
    result = validate_project(get_session(ctx).store.state)
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)


def _display_validation_result(result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  - {error.describe()}", err=True)

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  - {warning.describe()}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")

    if result.is_valid and not result.has_warnings:
        typer.echo("Project is valid.")
    elif result.is_valid:
        typer.echo("Project is valid with warnings.")
