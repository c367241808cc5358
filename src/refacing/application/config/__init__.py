"""Settings, persisted-state schemas and project validation.

Example:
    ```python
    from refacing.application.config import load_settings, ConfigError

    try:
        settings = load_settings(Path("refacing.json"))
    except ConfigError as e:
        print(e.error_type, e.message)
    ```
"""

from refacing.application.config.adapter import (
    schema_to_selection,
    schema_to_state,
    selection_to_schema,
    state_to_schema,
)
from refacing.application.config.loader import (
    ConfigError,
    extract_validation_errors,
    format_json_path,
    load_settings,
    load_settings_from_dict,
    merge_settings_with_cli,
)
from refacing.application.config.schema import (
    DEFAULT_SCHEMA_VERSION,
    DEFAULT_STORAGE_NAME,
    CabinetSelectionSchema,
    CustomerSchema,
    PersistedStateEnvelope,
    ProjectStateSchema,
    RefacingSettings,
)
from refacing.application.config.validators import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_project,
)

__all__ = [
    "CabinetSelectionSchema",
    "ConfigError",
    "CustomerSchema",
    "DEFAULT_SCHEMA_VERSION",
    "DEFAULT_STORAGE_NAME",
    "PersistedStateEnvelope",
    "ProjectStateSchema",
    "RefacingSettings",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "extract_validation_errors",
    "format_json_path",
    "load_settings",
    "load_settings_from_dict",
    "merge_settings_with_cli",
    "schema_to_selection",
    "schema_to_state",
    "selection_to_schema",
    "state_to_schema",
    "validate_project",
]
