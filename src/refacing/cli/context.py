"""Per-invocation session shared by CLI commands."""

from __future__ import annotations

from dataclasses import dataclass

import typer

from refacing.application.store import ProjectStore
from refacing.application.wizard import WizardNavigator


@dataclass
class CliSession:
    """The store and navigator built by the root callback."""

    store: ProjectStore
    navigator: WizardNavigator


def get_session(ctx: typer.Context) -> CliSession:
    """Return the session attached to the root context."""
    session = ctx.find_root().obj
    if not isinstance(session, CliSession):
        raise RuntimeError("CLI session was not initialized")
    return session
