"""Unit tests for ServiceFactory wiring."""

from pathlib import Path

from refacing.application import ServiceFactory, WizardNavigator
from refacing.application.config import RefacingSettings
from refacing.domain.state import ProjectState
from refacing.infrastructure.storage import InMemoryStateRepository, JsonFileStateRepository


class TestServiceFactory:
    def test_default_repository_follows_settings(self, tmp_path: Path) -> None:
        """Test that the default repository writes where the settings point."""
        factory = ServiceFactory(settings=RefacingSettings(storage_dir=tmp_path))
        repository = factory.get_repository()
        assert isinstance(repository, JsonFileStateRepository)
        assert repository.path == tmp_path / "cabinet-refacing-storage.json"
        assert factory.get_repository() is repository

    def test_injected_repository_feeds_store(self) -> None:
        """Test that an injected repository is used to rehydrate new stores."""
        factory = ServiceFactory()
        factory.set_repository(InMemoryStateRepository(ProjectState(job_name="Saved")))
        store = factory.create_store()
        assert store.state.job_name == "Saved"

    def test_each_store_is_independent(self) -> None:
        """Test that stores built by one factory do not share state."""
        factory = ServiceFactory()
        factory.set_repository(InMemoryStateRepository())
        first = factory.create_store()
        second = factory.create_store()
        first.set_job_name("only first")
        assert second.state.job_name == ""

    def test_create_navigator(self) -> None:
        """Test that the navigator drives the store it was given."""
        factory = ServiceFactory()
        factory.set_repository(InMemoryStateRepository())
        store = factory.create_store()
        navigator = factory.create_navigator(store)
        assert isinstance(navigator, WizardNavigator)
        assert navigator.store is store
