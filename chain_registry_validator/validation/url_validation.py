"""URL validation rules.

Endpoint URL sets (RPC, REST, block explorer RPC, EVM RPC) follow the
strict rule; website and faucet URLs are optional and follow the loose
rule.
"""

from __future__ import annotations

from typing import Callable

from ..domain.entities import ChainRecord
from ..domain.exceptions import UrlSetTypeError
from ..domain.helpers import ValidationError, check_optional_url, check_urls
from .validation_context import ValidationContext
from .validation_result import ValidationResult
from .validation_rule import CheckRule, ValidationRule


class EndpointUrlsValidation(ValidationRule):
    """Validate one endpoint URL set.

    A field holding neither a string nor a list of strings is reported as
    ``Failed to get <kind> urls``; bad members as ``Bad <kind> urls``.
    """

    def __init__(
        self,
        name: str,
        kind: str,
        getter: Callable[[ChainRecord], list[str]],
        applies: Callable[[ChainRecord], bool] | None = None,
    ) -> None:
        """Initialize endpoint rule.

        Args:
            name: Rule identifier
            kind: Endpoint kind shown in reports, e.g. "RPC"
            getter: ChainRecord accessor returning the normalized URLs
            applies: Optional predicate limiting the rule to some records
        """
        self.name = name
        self.kind = kind
        self._getter = getter
        self._applies = applies

    def validate(self, record: ChainRecord, context: ValidationContext) -> ValidationResult:
        """Check the URL set has the right shape and every URL is clean."""
        if self._applies is not None and not self._applies(record):
            return ValidationResult(valid=True)

        try:
            urls = self._getter(record)
        except UrlSetTypeError as err:
            return ValidationResult.failure(f"Failed to get {self.kind} urls: {err}")

        try:
            check_urls(urls)
        except ValidationError as err:
            return ValidationResult.failure(f"Bad {self.kind} urls: {urls} ({err})")
        return ValidationResult(valid=True)


class OptionalUrlValidation(CheckRule):
    """Validate an optional single URL field."""

    def __init__(self, name: str, label: str, getter: Callable[[ChainRecord], str]) -> None:
        """Initialize optional URL rule.

        Args:
            name: Rule identifier
            label: Violation label, e.g. "Bad website url"
            getter: ChainRecord accessor returning the URL
        """
        self.name = name
        self.label = label
        self._getter = getter

    def check(self, record: ChainRecord, context: ValidationContext) -> None:
        check_optional_url(self._getter(record))

    def describe(self, record: ChainRecord) -> object:
        return self._getter(record)
