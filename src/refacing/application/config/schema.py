"""Pydantic schemas for settings files and the persisted state blob.

The persisted blob mirrors ProjectState field for field and is wrapped in a
``{"state": ..., "version": N}`` envelope. Domain objects are converted to
and from these schemas in ``adapter.py``.
"""

from pathlib import Path

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    NonNegativeInt,
    field_validator,
)

from refacing.domain.navigation import FIRST_STEP, LAST_STEP
from refacing.domain.pricing import CodeKind, valid_fractions

DEFAULT_STORAGE_NAME = "cabinet-refacing-storage"
DEFAULT_SCHEMA_VERSION = 1


def _default_storage_dir() -> Path:
    return Path.home() / ".refacing"


class RefacingSettings(BaseModel):
    """Application settings.

    Attributes:
        storage_dir: Directory holding the persisted state file.
        storage_name: Fixed storage key; the file is ``<storage_name>.json``.
        schema_version: Version stamped on saved state. Persisted state with
            any other version is discarded on load.
    """

    model_config = ConfigDict(extra="forbid")

    storage_dir: Path = Field(default_factory=_default_storage_dir)
    storage_name: str = Field(default=DEFAULT_STORAGE_NAME, min_length=1)
    schema_version: int = Field(default=DEFAULT_SCHEMA_VERSION, ge=1)

    @field_validator("storage_name")
    @classmethod
    def storage_name_is_plain(cls, v: str) -> str:
        """The storage name becomes a file name, so it cannot contain separators."""
        if "/" in v or "\\" in v:
            raise ValueError("storage_name must not contain path separators")
        return v

    @property
    def storage_path(self) -> Path:
        return self.storage_dir.expanduser() / f"{self.storage_name}.json"


class CabinetSelectionSchema(BaseModel):
    """Persisted form of one cabinet selection."""

    model_config = ConfigDict(extra="forbid")

    height: str
    width_quantities: dict[str, NonNegativeInt] = Field(default_factory=dict)


class CustomerSchema(BaseModel):
    """Persisted customer contact record."""

    model_config = ConfigDict(extra="forbid")

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""


class ProjectStateSchema(BaseModel):
    """Persisted form of the full project state."""

    model_config = ConfigDict(extra="forbid")

    job_name: str = ""
    door_style: str = ""
    finish: str = ""

    wall_cabinets: list[CabinetSelectionSchema] = Field(default_factory=list)
    tall_cabinets: list[CabinetSelectionSchema] = Field(default_factory=list)
    base_cabinets: list[CabinetSelectionSchema] = Field(default_factory=list)
    drawers: list[CabinetSelectionSchema] = Field(default_factory=list)
    plain_panels: list[CabinetSelectionSchema] = Field(default_factory=list)
    applied_panels: list[CabinetSelectionSchema] = Field(default_factory=list)

    subtotal: float = Field(default=0.0, ge=0)
    discount_code: str = ""
    discount_amount: float = Field(default=0.0, ge=0, le=1)
    referral_code: str = ""
    referral_discount: float = Field(default=0.0, ge=0, le=1)
    grand_total: float = Field(default=0.0, ge=0)

    customer: CustomerSchema = Field(default_factory=CustomerSchema)

    customer_signature: str = ""
    sales_rep_signature: str = ""
    sales_rep_name: str = ""
    agreement_signed: bool = False

    current_step: int = Field(default=FIRST_STEP, ge=FIRST_STEP, le=LAST_STEP)
    completed_steps: list[int] = Field(default_factory=list)

    @field_validator("completed_steps")
    @classmethod
    def completed_steps_unique(cls, v: list[int]) -> list[int]:
        return sorted(set(v))

    @field_validator("discount_amount")
    @classmethod
    def discount_from_code_table(cls, v: float) -> float:
        if v not in valid_fractions(CodeKind.DISCOUNT):
            raise ValueError(f"{v} is not the fraction of any discount code")
        return v

    @field_validator("referral_discount")
    @classmethod
    def referral_from_code_table(cls, v: float) -> float:
        if v not in valid_fractions(CodeKind.REFERRAL):
            raise ValueError(f"{v} is not the fraction of any referral code")
        return v


class PersistedStateEnvelope(BaseModel):
    """The named, versioned blob written to durable storage."""

    model_config = ConfigDict(extra="forbid")

    state: ProjectStateSchema
    version: int = Field(..., ge=1)
