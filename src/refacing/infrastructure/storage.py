"""Project state repositories.

JsonFileStateRepository writes the named, versioned blob
``{"state": {...}, "version": N}`` to ``<dir>/<name>.json``. Anything that
cannot be turned back into a ProjectState at the expected version loads as
None, which callers treat as "no prior state".
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError as PydanticValidationError

from refacing.application.config.adapter import schema_to_state, state_to_schema
from refacing.application.config.schema import (
    DEFAULT_SCHEMA_VERSION,
    DEFAULT_STORAGE_NAME,
    PersistedStateEnvelope,
    RefacingSettings,
)
from refacing.domain.state import ProjectState

logger = logging.getLogger(__name__)


class JsonFileStateRepository:
    """Persist project state as a versioned JSON document on disk."""

    def __init__(
        self,
        directory: Path,
        name: str = DEFAULT_STORAGE_NAME,
        version: int = DEFAULT_SCHEMA_VERSION,
    ) -> None:
        """Initialize the repository.

        Args:
            directory: Directory holding the state file; created on first save.
            name: Storage key, used as the file stem.
            version: Schema version written on save and required on load.
        """
        self.directory = directory
        self.name = name
        self.version = version

    @classmethod
    def from_settings(cls, settings: RefacingSettings) -> "JsonFileStateRepository":
        return cls(
            directory=settings.storage_dir.expanduser(),
            name=settings.storage_name,
            version=settings.schema_version,
        )

    @property
    def path(self) -> Path:
        return self.directory / f"{self.name}.json"

    def load(self) -> ProjectState | None:
        """Read the persisted state.

        Returns:
            The stored ProjectState, or None if the file is missing,
            unreadable, not JSON, stamped with a different version, or
            fails schema validation.
        """
        path = self.path
        if not path.exists():
            return None

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable project state at {path}: {e}")
            return None

        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed project state at {path}: not an object")
            return None

        stored_version = data.get("version")
        if stored_version != self.version:
            logger.info(
                f"Discarding project state at {path}: version {stored_version!r} "
                f"does not match {self.version}"
            )
            return None

        try:
            envelope = PersistedStateEnvelope.model_validate(data)
        except PydanticValidationError as e:
            logger.warning(
                f"Ignoring invalid project state at {path}: {e.error_count()} errors"
            )
            return None

        return schema_to_state(envelope.state)

    def save(self, state: ProjectState) -> None:
        """Write the state atomically (temp file + rename).

        Raises:
            OSError: If the directory or file cannot be written.
        """
        envelope = PersistedStateEnvelope(state=state_to_schema(state), version=self.version)
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.directory, prefix=f".{self.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(envelope.model_dump_json(indent=2))
            os.replace(tmp_name, self.path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug(f"Saved project state to {self.path}")

    def clear(self) -> None:
        """Delete the state file if present."""
        self.path.unlink(missing_ok=True)


class InMemoryStateRepository:
    """Repository double holding the last saved snapshot in memory."""

    def __init__(self, state: ProjectState | None = None) -> None:
        self.state = state
        self.save_count = 0

    def load(self) -> ProjectState | None:
        return self.state

    def save(self, state: ProjectState) -> None:
        self.state = state
        self.save_count += 1
