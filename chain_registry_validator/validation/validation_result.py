"""Validation Result data class.

Result container with the error messages of one rule.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ValidationResult:
    """Result of a validation operation.

    Attributes:
        valid: Whether validation passed (no errors)
        errors: List of error messages, each reported as a violation
    """

    valid: bool
    errors: list[str] = field(default_factory=list)

    @classmethod
    def failure(cls, message: str) -> ValidationResult:
        """Build a failed result carrying one error."""
        return cls(valid=False, errors=[message])

    def merge(self, other: ValidationResult) -> None:
        """Merge another validation result into this one.

        Args:
            other: ValidationResult to merge
        """
        self.valid = self.valid and other.valid
        self.errors.extend(other.errors)

    def __str__(self) -> str:
        """Return string representation of validation result."""
        if self.errors:
            return f"Errors: {', '.join(self.errors)}"
        return "Valid"
