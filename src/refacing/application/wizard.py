"""Wizard navigation driven on top of the project store.

The store accepts any step change; the navigator is the UI-side controller
that enforces forward gating and jump rules before calling it.
"""

from __future__ import annotations

import logging

from refacing.application.store import ProjectStore
from refacing.domain.navigation import (
    FIRST_STEP,
    can_navigate_to,
    is_terminal,
    step_requirements,
)
from refacing.domain.value_objects import WizardStep

logger = logging.getLogger(__name__)


class NavigationError(Exception):
    """Raised when a requested step transition is not allowed."""

    def __init__(self, message: str, step: int | None = None) -> None:
        self.message = message
        self.step = step
        super().__init__(message)


class StepIncompleteError(NavigationError):
    """Raised when the current step has unmet requirements."""

    def __init__(self, step: int, missing: list[str]) -> None:
        self.missing = missing
        title = WizardStep(step).title
        super().__init__(f"Cannot complete {title}: {'; '.join(missing)}", step=step)


class WizardNavigator:
    """Moves a ProjectStore through the seven wizard steps."""

    def __init__(self, store: ProjectStore) -> None:
        self.store = store

    @property
    def current_step(self) -> WizardStep:
        return WizardStep(self.store.state.current_step)

    def complete_current_step(self) -> WizardStep:
        """Mark the current step complete and advance to the next one.

        Leaving cabinet selection recomputes totals so the pricing step
        opens on fresh numbers.

        Returns:
            The step now active.

        Raises:
            NavigationError: If the wizard is already at the final step.
            StepIncompleteError: If the current step's requirements are unmet.
        """
        step = self.store.state.current_step
        if is_terminal(step):
            raise NavigationError("The project is already complete", step=step)

        missing = step_requirements(self.store.state, step)
        if missing:
            raise StepIncompleteError(step, missing)

        if step == WizardStep.CABINET_SELECTION:
            self.store.calculate_total()
        self.store.mark_step_completed(step)
        self.store.set_current_step(step + 1)
        logger.debug(f"Completed step {step}, now at {step + 1}")
        return self.current_step

    def go_to(self, target: int) -> WizardStep:
        """Jump to ``target`` if it is at or behind the current step or completed.

        Raises:
            NavigationError: If the target step is not reachable.
        """
        state = self.store.state
        if not can_navigate_to(target, state.current_step, state.completed_steps):
            raise NavigationError(f"Step {target} is not available yet", step=target)
        self.store.set_current_step(target)
        return self.current_step

    def go_back(self) -> WizardStep:
        """Step back one; at the first step this is a no-op."""
        step = self.store.state.current_step
        if step > FIRST_STEP:
            self.store.set_current_step(step - 1)
        return self.current_step
