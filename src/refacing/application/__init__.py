"""Application layer - the project store, wizard navigation and wiring."""

from .factory import ServiceFactory
from .store import ProjectStore
from .wizard import NavigationError, StepIncompleteError, WizardNavigator

__all__ = [
    "NavigationError",
    "ProjectStore",
    "ServiceFactory",
    "StepIncompleteError",
    "WizardNavigator",
]
