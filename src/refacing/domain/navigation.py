"""Step navigation rules for the seven-stage wizard."""

from __future__ import annotations

from typing import AbstractSet

from .state import ProjectState
from .value_objects import WizardStep

FIRST_STEP: int = WizardStep.PROJECT_SETUP
LAST_STEP: int = WizardStep.COMPLETE
STEP_COUNT: int = len(WizardStep)


def clamp_step(step: int) -> int:
    """Clamp a step index into [FIRST_STEP, LAST_STEP]."""
    return max(FIRST_STEP, min(LAST_STEP, step))


def is_terminal(step: int) -> bool:
    return step >= LAST_STEP


def can_navigate_to(target: int, current: int, completed: AbstractSet[int]) -> bool:
    """Whether a step button for ``target`` is enabled.

    Any step at or behind the current one is reachable, as is any step
    already completed. Unvisited steps ahead are not.
    """
    if target < FIRST_STEP or target > LAST_STEP:
        return False
    return target <= current or target in completed


def progress_percentage(completed: AbstractSet[int]) -> float:
    """Share of completable steps done; the terminal step does not count."""
    completable = STEP_COUNT - 1
    return min(100.0, len(completed) / completable * 100)


def step_requirements(state: ProjectState, step: int) -> list[str]:
    """Return unmet requirements that block completing ``step``.

    An empty list means the step may be completed.
    """
    missing: list[str] = []
    if step == WizardStep.PROJECT_SETUP:
        if not state.job_name.strip():
            missing.append("Job name is required")
    elif step == WizardStep.DOOR_STYLE:
        if not state.door_style:
            missing.append("Select a door style")
        if not state.finish:
            missing.append("Select a finish")
    return missing
