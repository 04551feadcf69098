"""Denomination validation helpers.

Character-class and separator rules for currency denoms, IBC
representations and IBC allowed denoms.
"""

from __future__ import annotations

from typing import Iterable

from ... import const
from .validators import ValidationError, check_trimmed, passes


def _check_separators(value: str, name: str, separators: Iterable[str]) -> None:
    labels = {"  ": "spaces", "//": "slashes", "--": "dashes", "__": "underscores"}
    for separator in separators:
        if separator in value:
            raise ValidationError(
                f"{name} must not have consecutive {labels[separator]}"
            )


def check_display_denom(denom: str) -> str:
    """Validate a currency display denom.

    Raises:
        ValidationError: If denom is empty, untrimmed or has bad characters
    """
    if not denom:
        raise ValidationError("Display denom is required")
    check_trimmed(denom, "Display denom")
    _check_separators(denom, "Display denom", ("  ",))
    if not const.DISPLAY_DENOM.fullmatch(denom):
        raise ValidationError(
            "Display denom must be alphanumeric, space, underscore, or dash"
        )
    return denom


def check_base_denom(denom: str, name: str = "Base denom") -> str:
    """Validate a currency base denom.

    Bridge denoms follow the same rules and reuse this check with a
    different name.

    Raises:
        ValidationError: If denom is empty, untrimmed or has bad characters
    """
    if not denom:
        raise ValidationError(f"{name} is required")
    check_trimmed(denom, name)
    _check_separators(denom, name, ("  ", "//", "--", "__"))
    if not const.BASE_DENOM.fullmatch(denom):
        raise ValidationError(
            f"{name} must be alphanumeric, space, underscore, dash, or slash"
        )
    return denom


def check_bridge_denom(denom: str) -> str:
    """Validate an optional bridge denom. Empty is allowed."""
    if not denom:
        return denom
    return check_base_denom(denom, name="Bridge denom")


def check_ibc_representation(value: str) -> str:
    """Validate an optional ``ibc/<HASH>`` denom. Empty is allowed.

    Raises:
        ValidationError: If value is not ``ibc/`` followed by 64 upper hex
    """
    if not value:
        return value
    check_trimmed(value, "IBC representation")
    if not const.IBC_REPRESENTATION.fullmatch(value):
        raise ValidationError("IBC representation must match format ibc/32BYTESHASH")
    return value


def is_valid_ibc_representation(value: str) -> bool:
    """Return True if value passes check_ibc_representation."""
    return passes(check_ibc_representation, value)


def check_ibc_allowed_denom(denom: str) -> str:
    """Validate one entry of an IBC allowed denom list.

    Raises:
        ValidationError: If denom is empty or malformed
    """
    if not denom:
        raise ValidationError("IBC allowed denom must not be empty")
    check_trimmed(denom, "IBC allowed denom")
    if " " in denom:
        raise ValidationError("IBC allowed denom must not contains space")
    _check_separators(denom, "IBC allowed denom", ("//", "--", "__"))
    if not const.IBC_ALLOWED_DENOM.fullmatch(denom):
        raise ValidationError(
            "IBC allowed denom must be alphanumeric, dash, underscore, or slash"
        )
    return denom


def check_decimals(decimals: int) -> int:
    """Validate currency decimals are within [0, 18].

    Raises:
        ValidationError: If decimals out of range
    """
    if decimals < const.MIN_DECIMALS:
        raise ValidationError("Decimals must be non-negative")
    if decimals > const.MAX_DECIMALS:
        raise ValidationError(f"Decimals must not exceed {const.MAX_DECIMALS}")
    return decimals


def check_currency_type(currency_type: str) -> str:
    """Validate currency type is main or regular."""
    if currency_type not in const.ALLOWED_CURRENCY_TYPES:
        raise ValidationError(f"Not recognized currency type: {currency_type}")
    return currency_type
