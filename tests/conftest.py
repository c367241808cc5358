"""Pytest configuration and shared fixtures for refacing tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from refacing.application import ProjectStore, WizardNavigator
from refacing.domain import CabinetSelection
from refacing.infrastructure import InMemoryStateRepository, JsonFileStateRepository


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: tests touching the file system or CLI")


@pytest.fixture
def repository() -> InMemoryStateRepository:
    return InMemoryStateRepository()


@pytest.fixture
def store(repository: InMemoryStateRepository) -> ProjectStore:
    """A fresh store backed by an in-memory repository."""
    return ProjectStore(repository=repository)


@pytest.fixture
def navigator(store: ProjectStore) -> WizardNavigator:
    return WizardNavigator(store)


@pytest.fixture
def file_repository(tmp_path: Path) -> JsonFileStateRepository:
    """A JSON repository writing into a per-test directory."""
    return JsonFileStateRepository(directory=tmp_path / "storage")


@pytest.fixture
def wall_selection() -> CabinetSelection:
    return CabinetSelection(height='19"-30"', width_quantities={'Up to 14"': 0})


@pytest.fixture
def drawer_selection() -> CabinetSelection:
    return CabinetSelection(
        height='6"', width_quantities={'Up to 14"': 2, '15"-21"': 1}
    )
