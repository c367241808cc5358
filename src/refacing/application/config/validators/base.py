"""Result types for project consistency checks.

A salesperson can save a project, close the terminal and come back later,
and the saved file can be edited by hand in between. The checks in
``catalog.py`` compare such a project with the current catalog and code
tables. They report two kinds of issue:

- errors: the project would be quoted or ordered wrong (a height the
  category does not offer, a discount no code grants)
- warnings: the project is usable but shows something a salesperson
  should confirm with the customer (a retired door style id)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

EXIT_OK = 0
EXIT_ERRORS = 1
EXIT_WARNINGS = 2


@dataclass
class ValidationError:
    """A project problem that would misprice or misorder the job.

    Attributes:
        path: Location in the project, e.g. "drawers[0].height"
        message: What is wrong, in salesperson terms
        value: The offending catalog label or fraction, if any
    """

    path: str
    message: str
    value: Any = None

    def describe(self) -> str:
        """One-line report entry, with the offending value when known."""
        suffix = f" (got: {self.value!r})" if self.value is not None else ""
        return f"{self.path}: {self.message}{suffix}"


@dataclass
class ValidationWarning:
    """Something to confirm with the customer that does not block the sale.

    Attributes:
        path: Location in the project, e.g. "finish"
        message: What looks off
        suggestion: CLI hint for resolving it
    """

    path: str
    message: str
    suggestion: str | None = None

    def describe(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass
class ValidationResult:
    """Issues found in one project by one or more checks.

    Checks build a fresh result each and ``validate_project`` folds them
    together with ``merge``.
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True when the project can be quoted as saved."""
        return not self.errors

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def exit_code(self) -> int:
        """Exit status for ``refacing validate``.

        Returns:
            EXIT_ERRORS if any error was found, else EXIT_WARNINGS if any
            warning was found, else EXIT_OK.
        """
        if self.errors:
            return EXIT_ERRORS
        return EXIT_WARNINGS if self.warnings else EXIT_OK

    def add_error(self, path: str, message: str, value: Any = None) -> ValidationResult:
        """Record a blocking issue at ``path``; returns self for chaining."""
        self.errors.append(ValidationError(path, message, value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> ValidationResult:
        """Record a non-blocking issue at ``path``; returns self for chaining."""
        self.warnings.append(ValidationWarning(path, message, suggestion))
        return self

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Append the issues from another check's result and return self."""
        self.errors += other.errors
        self.warnings += other.warnings
        return self
