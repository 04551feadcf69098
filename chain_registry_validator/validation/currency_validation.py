"""Currency validation rule.

Validates the ordered currency list in one pass: each currency on its
own, exactly one main currency, and no duplicate denoms. Denoms are
tracked per chain by DenomTracker.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..domain.entities import ChainRecord, Currency
from ..domain.helpers import (
    ValidationError,
    check_base_denom,
    check_bridge_denom,
    check_currency_type,
    check_decimals,
    check_display_denom,
    check_ibc_representation,
    check_logo,
)
from .validation_context import ValidationContext
from .validation_result import ValidationResult
from .validation_rule import ValidationRule

_LOGGER = logging.getLogger(__name__)


@dataclass
class DenomTracker:
    """Seen denoms of one chain's currency list.

    Example:
        >>> tracker = DenomTracker()
        >>> tracker.add("base", "adym")
        True
        >>> tracker.add("base", "adym")
        False
    """

    _seen: dict[str, set[str]] = field(default_factory=dict)

    def add(self, kind: str, denom: str) -> bool:
        """Record a denom of the given kind.

        Empty denoms are never tracked.

        Returns:
            False if the denom was already recorded for this kind
        """
        if not denom:
            return True
        seen = self._seen.setdefault(kind, set())
        if denom in seen:
            return False
        seen.add(denom)
        return True


def check_currency(currency: Currency, chain_dir: Path) -> Currency:
    """Validate one currency.

    Args:
        currency: Currency to validate
        chain_dir: Chain directory, for resolving the currency logo

    Returns:
        Validated currency

    Raises:
        ValidationError: On the first failing field
    """
    check_display_denom(currency.display_denom)
    check_base_denom(currency.base_denom)
    check_ibc_representation(currency.ibc_representation)
    check_bridge_denom(currency.bridge_denom)
    check_decimals(currency.decimals)
    try:
        check_logo(currency.logo, chain_dir)
    except ValidationError as err:
        raise ValidationError(f"Bad currency logo: {currency.logo} ({err})") from err
    check_currency_type(currency.type)
    return currency


def check_currencies(
    currencies: tuple[Currency, ...], chain_dir: Path
) -> tuple[Optional[str], Optional[ValidationError]]:
    """Validate a currency list, stopping at the first problem.

    Returns:
        ``(identity, error)``; both None when the list is valid. The
        identity is the JSON form of an invalid currency or the duplicated
        denom, and None when no main currency exists.
    """
    found_main = False
    tracker = DenomTracker()

    for currency in currencies:
        try:
            check_currency(currency, chain_dir)
        except ValidationError as err:
            return currency.describe(), err

        if currency.is_main:
            if found_main:
                return currency.base_denom, ValidationError("Duplicated main currency found")
            found_main = True

        for kind, denom, label in (
            ("base", currency.base_denom, "base denom"),
            ("display", currency.display_denom, "display denom"),
            ("ibc", currency.ibc_representation, "IBC representation"),
        ):
            if not tracker.add(kind, denom):
                return denom, ValidationError(f"Duplicated {label} found: {denom}")

    if not found_main:
        return None, ValidationError("At least one main currency is required")
    return None, None


class CurrenciesValidation(ValidationRule):
    """At least one currency, each valid, exactly one main, unique denoms."""

    name = "currencies"

    def validate(self, record: ChainRecord, context: ValidationContext) -> ValidationResult:
        """Check the record's currency list."""
        if not record.currencies:
            return ValidationResult.failure("Currencies is required")

        identity, error = check_currencies(record.currencies, context.chain_dir)
        if error is None:
            return ValidationResult(valid=True)

        _LOGGER.debug("Bad currency in %s: %s", context.chain_dir_name, error)
        if identity is None:
            return ValidationResult.failure(f"Bad currencies ({error})")
        return ValidationResult.failure(f"Bad currencies: {identity} ({error})")
