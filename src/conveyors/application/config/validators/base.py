"""Findings and their container.

A validator never raises for a bad configuration; it records a
ValidationMessage. Severity decides which bucket a message lands in and,
through ValidationResult.exit_code, what the CLI returns.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from conveyors.domain.value_objects import Severity


@dataclass(frozen=True)
class ValidationMessage:
    """A single field-scoped finding.

    Attributes:
        field: Input field the finding is about (e.g., "conveyor_incline_deg").
        message: Human-readable description.
        severity: error (blocking), warning or info (advisory).
    """

    field: str
    message: str
    severity: Severity = Severity.ERROR

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message, "severity": self.severity.value}


@dataclass
class ValidationResult:
    """Findings from one or more validators.

    Attributes:
        errors: Blocking findings.
        warnings: Advisory findings of warning and info severity, in the
            order the rules produced them.
    """

    errors: list[ValidationMessage] = field(default_factory=list)
    warnings: list[ValidationMessage] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True when nothing blocks the calculation."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        """Check for warning-severity findings; info notes do not count."""
        return any(w.severity == Severity.WARNING for w in self.warnings)

    @property
    def infos(self) -> list[ValidationMessage]:
        return [w for w in self.warnings if w.severity == Severity.INFO]

    @property
    def exit_code(self) -> int:
        """1 for errors, 2 for warnings only, otherwise 0.

        Info notes alone leave the exit code at 0.
        """
        if self.errors:
            return 1
        if self.has_warnings:
            return 2
        return 0

    def add(self, message: ValidationMessage) -> ValidationResult:
        if message.severity == Severity.ERROR:
            self.errors.append(message)
        else:
            self.warnings.append(message)
        return self

    def add_error(self, field: str, message: str) -> ValidationResult:
        return self.add(ValidationMessage(field, message, Severity.ERROR))

    def add_warning(self, field: str, message: str) -> ValidationResult:
        return self.add(ValidationMessage(field, message, Severity.WARNING))

    def add_info(self, field: str, message: str) -> ValidationResult:
        return self.add(ValidationMessage(field, message, Severity.INFO))

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Append the other result's findings after ours."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self

    def fields_with_errors(self) -> set[str]:
        return {e.field for e in self.errors}
