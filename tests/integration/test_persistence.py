"""Integration tests for store rehydration from the JSON repository."""

import json

import pytest

from refacing.application import ProjectStore, ServiceFactory, WizardNavigator
from refacing.application.config import RefacingSettings
from refacing.domain.value_objects import CabinetSelection
from refacing.infrastructure.storage import JsonFileStateRepository

pytestmark = pytest.mark.integration


class TestStoreRehydration:
    """A new store over the same file resumes where the last one stopped."""

    def test_resume_mid_wizard(self, file_repository: JsonFileStateRepository) -> None:
        """Test that a second store resumes from the saved file."""
        store = ProjectStore(repository=file_repository)
        navigator = WizardNavigator(store)
        store.set_job_name("Smith Kitchen")
        navigator.complete_current_step()
        store.update_drawers([CabinetSelection('6"', {'Up to 14"': 2})])
        store.apply_discount_code("spring2024")

        resumed = ProjectStore(repository=file_repository)
        assert resumed.state == store.state
        assert resumed.state.current_step == 1
        assert resumed.state.completed_steps == frozenset({0})
        assert resumed.state.discount_code == "SPRING2024"
        assert resumed.state.grand_total == pytest.approx(80.0)

    def test_reset_is_persisted(self, file_repository: JsonFileStateRepository) -> None:
        """Test that a reset is written to disk."""
        store = ProjectStore(repository=file_repository)
        store.set_job_name("Temp")
        store.reset_project()
        assert ProjectStore(repository=file_repository).state.job_name == ""

    def test_bumped_version_starts_fresh(self, tmp_path) -> None:
        """Test that a schema version change discards the saved project."""
        v1 = ServiceFactory(settings=RefacingSettings(storage_dir=tmp_path))
        v1.create_store().set_job_name("Old format")

        v2 = ServiceFactory(settings=RefacingSettings(storage_dir=tmp_path, schema_version=2))
        store = v2.create_store()
        assert store.state.job_name == ""

        store.set_job_name("New format")
        data = json.loads((tmp_path / "cabinet-refacing-storage.json").read_text())
        assert data["version"] == 2

    def test_corrupt_file_starts_fresh(self, file_repository: JsonFileStateRepository) -> None:
        """Test that a corrupt file is replaced by the next save."""
        file_repository.directory.mkdir(parents=True)
        file_repository.path.write_text("\x00garbage")
        store = ProjectStore(repository=file_repository)
        assert store.state.job_name == ""
        store.set_job_name("Recovered")
        assert ProjectStore(repository=file_repository).state.job_name == "Recovered"

    def test_tampered_discount_starts_fresh(
        self, file_repository: JsonFileStateRepository
    ) -> None:
        """Test that a hand-edited discount fraction is not rehydrated."""
        file_repository.directory.mkdir(parents=True)
        file_repository.path.write_text(
            json.dumps(
                {
                    "state": {"discount_amount": 0.5, "subtotal": 999.0, "grand_total": 1.0},
                    "version": 1,
                }
            )
        )
        store = ProjectStore(repository=file_repository)
        assert store.state.discount_amount == 0
        assert store.state.subtotal == 0
        assert store.state.grand_total == 0
