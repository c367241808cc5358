"""Collaborator protocols for the project store.

The store depends on these protocols rather than concrete storage or view
implementations, so tests can inject in-memory doubles.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from refacing.domain.state import ProjectState


@runtime_checkable
class StateRepositoryProtocol(Protocol):
    """Durable storage for a single project state blob.

    Example:
        ```python
        class DictRepository:
            def __init__(self) -> None:
                self.saved: ProjectState | None = None

            def load(self) -> ProjectState | None:
                return self.saved

            def save(self, state: ProjectState) -> None:
                self.saved = state
        ```
    """

    def load(self) -> ProjectState | None:
        """Return the persisted state, or None when there is nothing usable.

        Implementations must return None rather than raise for missing,
        corrupted or version-mismatched data.
        """
        ...

    def save(self, state: ProjectState) -> None:
        """Persist a state snapshot.

        Implementations may raise OSError or ValueError; the store logs
        and ignores both.
        """
        ...


class StateListener(Protocol):
    """Callback notified with each new state snapshot."""

    def __call__(self, state: ProjectState) -> None: ...
