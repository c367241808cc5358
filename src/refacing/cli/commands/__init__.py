"""CLI command groups for the refacing wizard.

This package contains:
- cabinets: add, remove and adjust cabinet selections
- discount / referral: apply and remove promo codes
- validate: check the saved project against the catalog
"""

from refacing.cli.commands.cabinets import cabinets_app
from refacing.cli.commands.pricing import discount_app, referral_app
from refacing.cli.commands.validate import validate_command

__all__ = ["cabinets_app", "discount_app", "referral_app", "validate_command"]
