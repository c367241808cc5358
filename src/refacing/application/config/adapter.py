"""Conversion between persisted schemas and domain objects."""

from refacing.application.config.schema import (
    CabinetSelectionSchema,
    CustomerSchema,
    ProjectStateSchema,
)
from refacing.domain.state import CATEGORY_FIELDS, ProjectState
from refacing.domain.value_objects import CabinetSelection, CustomerInfo


def schema_to_selection(schema: CabinetSelectionSchema) -> CabinetSelection:
    return CabinetSelection(
        height=schema.height, width_quantities=dict(schema.width_quantities)
    )


def selection_to_schema(selection: CabinetSelection) -> CabinetSelectionSchema:
    return CabinetSelectionSchema(
        height=selection.height, width_quantities=dict(selection.width_quantities)
    )


def schema_to_state(schema: ProjectStateSchema) -> ProjectState:
    """Build a domain ProjectState from a validated schema.

    Args:
        schema: The validated persisted-state schema.

    Returns:
        An equivalent ProjectState. Completed steps become a frozenset.
    """
    selections = {
        attr: tuple(schema_to_selection(s) for s in getattr(schema, attr))
        for attr in CATEGORY_FIELDS.values()
    }
    return ProjectState(
        job_name=schema.job_name,
        door_style=schema.door_style,
        finish=schema.finish,
        **selections,
        subtotal=schema.subtotal,
        discount_code=schema.discount_code,
        discount_amount=schema.discount_amount,
        referral_code=schema.referral_code,
        referral_discount=schema.referral_discount,
        grand_total=schema.grand_total,
        customer=CustomerInfo(**schema.customer.model_dump()),
        customer_signature=schema.customer_signature,
        sales_rep_signature=schema.sales_rep_signature,
        sales_rep_name=schema.sales_rep_name,
        agreement_signed=schema.agreement_signed,
        current_step=schema.current_step,
        completed_steps=frozenset(schema.completed_steps),
    )


def state_to_schema(state: ProjectState) -> ProjectStateSchema:
    """Build the persisted schema for a domain ProjectState."""
    selections = {
        attr: [selection_to_schema(s) for s in getattr(state, attr)]
        for attr in CATEGORY_FIELDS.values()
    }
    customer = state.customer
    return ProjectStateSchema(
        job_name=state.job_name,
        door_style=state.door_style,
        finish=state.finish,
        **selections,
        subtotal=state.subtotal,
        discount_code=state.discount_code,
        discount_amount=state.discount_amount,
        referral_code=state.referral_code,
        referral_discount=state.referral_discount,
        grand_total=state.grand_total,
        customer=CustomerSchema(
            first_name=customer.first_name,
            last_name=customer.last_name,
            email=customer.email,
            phone=customer.phone,
            address=customer.address,
            city=customer.city,
            state=customer.state,
            zip_code=customer.zip_code,
        ),
        customer_signature=state.customer_signature,
        sales_rep_signature=state.sales_rep_signature,
        sales_rep_name=state.sales_rep_name,
        agreement_signed=state.agreement_signed,
        current_step=state.current_step,
        completed_steps=sorted(state.completed_steps),
    )
