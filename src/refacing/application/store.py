"""ProjectStore - the wizard's state container.

The store owns every mutation of the project state. Each action builds a
new immutable ProjectState and recomputes derived pricing where needed.
The snapshot is written to the injected repository before subscribers are
notified. Actions never raise for domain reasons. A failed write or a
failing subscriber is logged, and the in-memory state stays authoritative
for the session.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Any, Callable, Iterable

from refacing.domain.navigation import clamp_step
from refacing.domain.pricing import (
    CodeKind,
    calculate_grand_total,
    calculate_subtotal,
    normalize_code,
    validate_code,
)
from refacing.domain.state import ProjectState, initial_state
from refacing.domain.value_objects import CabinetCategoryKey, CabinetSelection

if TYPE_CHECKING:
    from refacing.contracts.protocols import StateListener, StateRepositoryProtocol

logger = logging.getLogger(__name__)


class ProjectStore:
    """Single source of truth for one sales session.

    Example:
        ```python
        store = ProjectStore(repository=InMemoryStateRepository())
        unsubscribe = store.subscribe(lambda state: print(state.grand_total))
        store.update_drawers([CabinetSelection(height='6"')])
        store.apply_discount_code("save10")
        unsubscribe()
        ```
    """

    def __init__(self, repository: "StateRepositoryProtocol | None" = None) -> None:
        """Create the store, rehydrating from ``repository`` when it has state.

        Args:
            repository: Persistence collaborator. None keeps state in memory only.
        """
        self._repository = repository
        self._listeners: list["StateListener"] = []
        restored = repository.load() if repository is not None else None
        if restored is None:
            self._state = initial_state()
        else:
            logger.debug("Rehydrated project state from repository")
            self._state = self._priced(restored)

    @property
    def state(self) -> ProjectState:
        """Current state snapshot."""
        return self._state

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def subscribe(self, listener: "StateListener") -> Callable[[], None]:
        """Register a listener called after every state change.

        Returns:
            A callable that removes the listener. Calling it twice is harmless.
        """
        self._listeners.append(listener)
        logger.debug(f"Registered state listener ({len(self._listeners)} total)")

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set(self, **changes: Any) -> None:
        self._commit(replace(self._state, **changes))

    def _commit(self, state: ProjectState) -> None:
        self._state = state
        self._persist(state)
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception(f"State listener {listener!r} failed")

    def _persist(self, state: ProjectState) -> None:
        if self._repository is None:
            return
        try:
            self._repository.save(state)
        except (OSError, ValueError) as e:
            # pydantic.ValidationError is a ValueError
            logger.warning(f"Could not persist project state: {e}")

    # ------------------------------------------------------------------
    # Project setup
    # ------------------------------------------------------------------

    def set_job_name(self, name: str) -> None:
        """Set the project name. Empty or blank names are stored as given.

        Args:
            name: Free-form job name, e.g. "Smith Kitchen Remodel".
        """
        self._set(job_name=name)

    def set_door_style(self, style_id: str) -> None:
        """Set the door style id. The id is not checked against the catalog.

        Args:
            style_id: Door style id such as "shaker".
        """
        self._set(door_style=style_id)

    def set_finish(self, finish_id: str) -> None:
        """Set the finish id, e.g. "navy"."""
        self._set(finish=finish_id)

    # ------------------------------------------------------------------
    # Cabinet selections
    # ------------------------------------------------------------------

    def update_category_selections(
        self,
        category: CabinetCategoryKey | str,
        selections: Iterable[CabinetSelection],
    ) -> None:
        """Replace one category's selection list wholesale and reprice."""
        self._commit(self._priced(self._state.with_selections(category, selections)))

    def update_wall_cabinets(self, selections: Iterable[CabinetSelection]) -> None:
        """Replace the wall cabinet selections and reprice."""
        self.update_category_selections(CabinetCategoryKey.WALL_CABINETS, selections)

    def update_tall_cabinets(self, selections: Iterable[CabinetSelection]) -> None:
        self.update_category_selections(CabinetCategoryKey.TALL_CABINETS, selections)

    def update_base_cabinets(self, selections: Iterable[CabinetSelection]) -> None:
        self.update_category_selections(CabinetCategoryKey.BASE_CABINETS, selections)

    def update_drawers(self, selections: Iterable[CabinetSelection]) -> None:
        self.update_category_selections(CabinetCategoryKey.DRAWERS, selections)

    def update_plain_panels(self, selections: Iterable[CabinetSelection]) -> None:
        self.update_category_selections(CabinetCategoryKey.PLAIN_PANELS, selections)

    def update_applied_panels(self, selections: Iterable[CabinetSelection]) -> None:
        self.update_category_selections(CabinetCategoryKey.APPLIED_PANELS, selections)

    # ------------------------------------------------------------------
    # Pricing
    # ------------------------------------------------------------------

    def apply_discount_code(self, code: str) -> None:
        """Apply a discount code; unknown or empty codes apply a 0 fraction."""
        validation = validate_code(CodeKind.DISCOUNT, code)
        state = replace(
            self._state,
            discount_code=normalize_code(code),
            discount_amount=validation.discount,
        )
        self._commit(self._priced(state))

    def apply_referral_code(self, code: str) -> None:
        """Apply a referral code; unknown or empty codes apply a 0 fraction."""
        validation = validate_code(CodeKind.REFERRAL, code)
        state = replace(
            self._state,
            referral_code=normalize_code(code),
            referral_discount=validation.discount,
        )
        self._commit(self._priced(state))

    def calculate_total(self) -> None:
        """Recompute subtotal and grand total from the current selections."""
        self._commit(self._priced(self._state))

    @staticmethod
    def _priced(state: ProjectState) -> ProjectState:
        subtotal = calculate_subtotal(state)
        return replace(
            state,
            subtotal=subtotal,
            grand_total=calculate_grand_total(
                subtotal, state.discount_amount, state.referral_discount
            ),
        )

    # ------------------------------------------------------------------
    # Customer and signatures
    # ------------------------------------------------------------------

    def update_customer_info(self, **info: str) -> None:
        """Shallow-merge the given fields into the customer record.

        Raises:
            TypeError: If a keyword does not name a customer field.
        """
        self._set(customer=replace(self._state.customer, **info))

    def set_customer_signature(self, signature: str) -> None:
        """Store the captured customer signature payload."""
        self._set(customer_signature=signature)

    def set_sales_rep_signature(self, signature: str, name: str) -> None:
        """Store the sales rep signature together with the printed name.

        Args:
            signature: Captured signature payload.
            name: Sales rep name shown on the agreement.
        """
        self._set(sales_rep_signature=signature, sales_rep_name=name)

    def set_agreement_signed(self, signed: bool) -> None:
        """Mark the agreement as executed or not. Signatures are not checked."""
        self._set(agreement_signed=signed)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def set_current_step(self, step: int) -> None:
        """Move to ``step``, clamped to the valid step range."""
        self._set(current_step=clamp_step(step))

    def mark_step_completed(self, step: int) -> None:
        """Add ``step`` to the completed set (idempotent)."""
        if step in self._state.completed_steps:
            return
        self._set(completed_steps=self._state.completed_steps | {step})

    # ------------------------------------------------------------------
    # Reset
    # ------------------------------------------------------------------

    def reset_project(self) -> None:
        """Replace the entire state with the initial state."""
        logger.debug("Resetting project state")
        self._commit(initial_state())
