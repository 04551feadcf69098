"""Validation Rule abstract base class.

Abstract base class for all chain record validation rules.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..domain.entities import ChainRecord
from ..domain.helpers import ValidationError
from .validation_context import ValidationContext
from .validation_result import ValidationResult


class ValidationRule(ABC):
    """Abstract base class for validation rules.

    All validation rules must implement the validate() method which takes
    a record and context, returning a ValidationResult with at most one
    error.

    Attributes:
        name: Short rule identifier used in logs
        blocking: Skip the remaining rules for the chain when this one fails
    """

    name: str = "rule"
    blocking: bool = False

    @abstractmethod
    def validate(self, record: ChainRecord, context: ValidationContext) -> ValidationResult:
        """Validate a record against this rule.

        Args:
            record: The chain record to validate
            context: Validation context (chain directory, tracker, settings)

        Returns:
            ValidationResult carrying any violation messages
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class CheckRule(ValidationRule):
    """Rule that wraps a single check_* helper.

    Subclasses implement check(), which raises ValidationError on failure,
    and set ``label``. The violation reads ``<label>: <value> (<reason>)``.
    """

    label: str = "Bad value"

    @abstractmethod
    def check(self, record: ChainRecord, context: ValidationContext) -> None:
        """Run the check. Returns silently when the rule does not apply.

        Raises:
            ValidationError: If the check fails
        """

    def describe(self, record: ChainRecord) -> object:
        """Value shown next to the label when the check fails."""
        return None

    def validate(self, record: ChainRecord, context: ValidationContext) -> ValidationResult:
        """Turn check() into a ValidationResult."""
        try:
            self.check(record, context)
        except ValidationError as err:
            shown = self.describe(record)
            if shown is None:
                return ValidationResult.failure(f"{self.label} ({err})")
            return ValidationResult.failure(f"{self.label}: {shown} ({err})")
        return ValidationResult(valid=True)
