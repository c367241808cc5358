"""Discount and referral code commands.

Codes are validated against the same tables the store applies, so a code
reported as valid always changes the total.
"""

from typing import Annotated

import typer

from refacing.cli.context import get_session
from refacing.domain.pricing import (
    CodeKind,
    summarize_pricing,
    validate_code,
)
from refacing.infrastructure.formatters import PricingFormatter, format_percent

discount_app = typer.Typer(name="discount", help="Apply or remove a discount code.")
referral_app = typer.Typer(name="referral", help="Apply or remove a referral code.")

_LABELS: dict[CodeKind, tuple[str, str]] = {
    CodeKind.DISCOUNT: ("Discount applied", "discount"),
    CodeKind.REFERRAL: ("Referral bonus applied", "referral"),
}


def _apply(ctx: typer.Context, kind: CodeKind, code: str) -> None:
    session = get_session(ctx)
    success_label, noun = _LABELS[kind]
    if not code.strip():
        typer.echo(f"Error: Enter a {noun} code", err=True)
        raise typer.Exit(code=1)

    validation = validate_code(kind, code)
    if not validation.is_valid:
        typer.echo(f"Error: Invalid {noun} code. Please check and try again.", err=True)
        raise typer.Exit(code=1)

    store = session.store
    if kind is CodeKind.DISCOUNT:
        store.apply_discount_code(code)
    else:
        store.apply_referral_code(code)
    typer.echo(
        f"{success_label}: {validation.description} ({format_percent(validation.discount)})"
    )
    typer.echo(PricingFormatter().format(summarize_pricing(store.state)))


def _remove(ctx: typer.Context, kind: CodeKind) -> None:
    store = get_session(ctx).store
    if kind is CodeKind.DISCOUNT:
        store.apply_discount_code("")
        typer.echo("Discount code removed")
    else:
        store.apply_referral_code("")
        typer.echo("Referral code removed")


@discount_app.command(name="apply")
def apply_discount(
    ctx: typer.Context,
    code: Annotated[str, typer.Argument(help="Discount code (case-insensitive)")],
) -> None:
    """Apply a discount code, e.g. SAVE10."""
    _apply(ctx, CodeKind.DISCOUNT, code)


@discount_app.command(name="remove")
def remove_discount(ctx: typer.Context) -> None:
    """Remove the applied discount code."""
    _remove(ctx, CodeKind.DISCOUNT)


@referral_app.command(name="apply")
def apply_referral(
    ctx: typer.Context,
    code: Annotated[str, typer.Argument(help="Referral code (case-insensitive)")],
) -> None:
    """Apply a referral code, e.g. REF2024."""
    _apply(ctx, CodeKind.REFERRAL, code)


@referral_app.command(name="remove")
def remove_referral(ctx: typer.Context) -> None:
    """Remove the applied referral code."""
    _remove(ctx, CodeKind.REFERRAL)
