"""Service factory wiring settings, storage and the project store."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, cast

from refacing.application.config.schema import RefacingSettings

if TYPE_CHECKING:
    from refacing.application.store import ProjectStore
    from refacing.application.wizard import WizardNavigator
    from refacing.contracts.protocols import StateRepositoryProtocol


@dataclass
class ServiceFactory:
    """Builds the collaborators for one session.

    A factory is constructed once per process and passed to whatever drives
    the UI. There is no module-level default instance; each session owns
    its store.

    Example:
        ```python
        factory = ServiceFactory(settings=load_settings(Path("refacing.json")))
        store = factory.create_store()
        navigator = factory.create_navigator(store)
        ```
    """

    settings: RefacingSettings = field(default_factory=RefacingSettings)

    _repository: "StateRepositoryProtocol | None" = field(
        default=None, init=False, repr=False
    )

    def get_repository(self) -> "StateRepositoryProtocol":
        """Get or create the state repository for the configured storage."""
        if self._repository is None:
            from refacing.infrastructure.storage import JsonFileStateRepository

            self._repository = cast(
                "StateRepositoryProtocol",
                JsonFileStateRepository.from_settings(self.settings),
            )
        return self._repository

    def set_repository(self, repository: "StateRepositoryProtocol") -> None:
        """Inject a repository (for testing)."""
        self._repository = repository

    def create_store(self) -> "ProjectStore":
        """Create a store rehydrated from the configured repository."""
        from refacing.application.store import ProjectStore

        return ProjectStore(repository=self.get_repository())

    def create_navigator(self, store: "ProjectStore") -> "WizardNavigator":
        from refacing.application.wizard import WizardNavigator

        return WizardNavigator(store)
