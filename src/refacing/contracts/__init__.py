"""Contracts module - protocols for cross-layer communication.

Example:
    ```python
    from refacing.contracts import StateRepositoryProtocol

    def restore(repository: StateRepositoryProtocol) -> ProjectState | None:
        return repository.load()
    ```
"""

from .protocols import (
    StateListener as StateListener,
    StateRepositoryProtocol as StateRepositoryProtocol,
)
