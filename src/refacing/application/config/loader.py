"""Settings file loader with error reporting.

Settings come from an optional JSON file, then CLI flags on top. Every
failure surfaces as ConfigError whose ``error_type`` tells the CLI what
went wrong: file_not_found, permission_denied, file_read_error, json_parse
or validation.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from refacing.application.config.schema import RefacingSettings


class ConfigError(Exception):
    """A settings file could not be turned into RefacingSettings.

    Attributes:
        message: Text shown to the user
        error_type: Failure category (see module docstring)
        path: Settings file involved, when there is one
        details: Structured detail rows (JSON position or field errors)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = list(details or [])

    def __str__(self) -> str:
        return self.message


def format_json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location as a dotted path.

    Examples:
        >>> format_json_path(("state", "drawers", 0, "height"))
        'state.drawers[0].height'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        else:
            path += f".{segment}" if path else str(segment)
    return path


def extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    """One row per field error, keyed by path, message, value and error_type."""
    rows = []
    for err in error.errors():
        rows.append(
            {
                "path": format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return rows


def _validation_message(details: list[dict[str, Any]]) -> str:
    lines = ["Settings validation failed:"]
    for row in details:
        line = f"  - {row['path']}: {row['message']}"
        if row.get("value") is not None:
            line += f" (got: {row['value']!r})"
        lines.append(line)
    return "\n".join(lines)


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise ConfigError(
            f"Settings file not found: {path}", error_type="file_not_found", path=path
        )
    try:
        text = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            f"Permission denied reading settings file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            f"Error reading settings file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in settings file: {path} "
            f"(line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )


def load_settings(path: Path) -> RefacingSettings:
    """Load and validate a JSON settings file.

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON, or does
            not match the settings schema.
    """
    return _validate(_read_json(path), path)


def load_settings_from_dict(data: dict[str, Any]) -> RefacingSettings:
    """Validate settings supplied as a dictionary.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data, None)


def _validate(data: Any, path: Path | None) -> RefacingSettings:
    try:
        return RefacingSettings.model_validate(data)
    except PydanticValidationError as e:
        details = extract_validation_errors(e)
        raise ConfigError(
            _validation_message(details),
            error_type="validation",
            path=path,
            details=details,
        )


def merge_settings_with_cli(
    settings: RefacingSettings,
    *,
    storage_dir: Path | None = None,
    storage_name: str | None = None,
) -> RefacingSettings:
    """Apply non-None CLI overrides on top of file settings.

    Precedence is CLI args > settings file > defaults.
    """
    overrides = {
        key: value
        for key, value in (("storage_dir", storage_dir), ("storage_name", storage_name))
        if value is not None
    }
    if not overrides:
        return settings
    return _validate({**settings.model_dump(), **overrides}, None)
