"""Validation helper functions.

This module provides the field-level predicates for chain records. Every
check comes in two forms:

- ``check_*`` raises ValidationError (subclass of ValueError) with a
  human-readable reason and returns the validated value
- ``is_valid_*`` returns a bool and logs the reason at DEBUG level

Rules use the ``check_*`` form so the reason ends up in the violation.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Sequence

from ... import const

_LOGGER = logging.getLogger(__name__)


class ValidationError(ValueError):
    """Field validation error.

    Raised when a predicate fails. The message is the reason, suitable
    for appending to a violation line.
    """


def passes(check: Callable[..., object], *args: object) -> bool:
    """Run a check_* function as a predicate."""
    try:
        check(*args)
    except ValidationError as err:
        _LOGGER.debug("%s rejected %r: %s", check.__name__, args[0], err)
        return False
    return True


def check_trimmed(value: str, name: str) -> None:
    if value.strip() != value:
        raise ValidationError(f"{name} must not have leading or trailing spaces")


# ============================================================================
# IDENTIFIERS
# ============================================================================


def check_chain_id(chain_id: str, is_evm_rollapp: bool = False) -> str:
    """Validate a chain id.

    Args:
        chain_id: Chain id to validate
        is_evm_rollapp: Require the EVM form ``<name>_<number>-<number>``

    Returns:
        Validated chain id

    Raises:
        ValidationError: If chain id is invalid

    Examples:
        >>> check_chain_id("dymension_1100-1")
        'dymension_1100-1'
        >>> check_chain_id("Dym")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValidationError: chain id must be lowercase
    """
    if not chain_id:
        raise ValidationError("chain id can not be empty")
    if len(chain_id) < const.MIN_CHAIN_ID_LENGTH:
        raise ValidationError("chain id is too short")
    if "--" in chain_id:
        raise ValidationError("chain id must not have consecutive dashes")
    if "__" in chain_id:
        raise ValidationError("chain id must not have consecutive underscores")
    if chain_id.lower() != chain_id:
        raise ValidationError("chain id must be lowercase")
    if not "a" <= chain_id[0] <= "z":
        raise ValidationError("chain id must start with a letter")

    if is_evm_rollapp:
        if not const.CHAIN_ID_EVM.fullmatch(chain_id):
            raise ValidationError("chain id not match for EVM RollApp")
        return chain_id

    for pattern in (
        const.CHAIN_ID_ALPHANUMERIC,
        const.CHAIN_ID_COSMOS,
        const.CHAIN_ID_EVM,
        const.CHAIN_ID_MULTI_DASH,
    ):
        if pattern.fullmatch(chain_id):
            return chain_id

    raise ValidationError("chain id does not match any accepted format")


def is_valid_chain_id(chain_id: str, is_evm_rollapp: bool = False) -> bool:
    """Return True if chain id passes check_chain_id."""
    return passes(check_chain_id, chain_id, is_evm_rollapp)


def check_chain_name(chain_name: str) -> str:
    """Validate a chain display name.

    ``<`` and ``>`` are rejected to keep markup out of UIs, ``/``, ``\\``
    and ``%`` to keep the name usable as a path component.

    Raises:
        ValidationError: If chain name is invalid
    """
    if not chain_name:
        raise ValidationError("chain name can not be empty")
    check_trimmed(chain_name, "chain name")
    if "  " in chain_name:
        raise ValidationError("chain name must not have consecutive spaces")
    if const.CHAIN_NAME_PROHIBITED.search(chain_name):
        raise ValidationError(
            "chain name contains prohibited characters: <, >, /, \\, %"
        )
    return chain_name


def is_valid_chain_name(chain_name: str) -> bool:
    """Return True if chain name passes check_chain_name."""
    return passes(check_chain_name, chain_name)


def check_bech32_prefix(prefix: str) -> str:
    """Validate a bech32 human-readable prefix.

    ``1`` is the bech32 separator and can never appear in the prefix.

    Raises:
        ValidationError: If prefix is invalid
    """
    if not prefix:
        raise ValidationError("bech32 prefix can not be empty")
    check_trimmed(prefix, "bech32 prefix")
    if prefix.lower() != prefix:
        raise ValidationError("bech32 prefix must be lowercase")
    if " " in prefix:
        raise ValidationError("bech32 prefix must not contains space")
    if "1" in prefix:
        raise ValidationError("bech32 prefix must not contains '1'")
    if not const.BECH32_PREFIX.fullmatch(prefix):
        raise ValidationError("bech32 prefix must be lowercase alphanumeric")
    return prefix


def is_valid_bech32_prefix(prefix: str) -> bool:
    """Return True if prefix passes check_bech32_prefix."""
    return passes(check_bech32_prefix, prefix)


# ============================================================================
# URLS
# ============================================================================


def check_url(url: str) -> str:
    """Validate a required endpoint URL.

    Raises:
        ValidationError: If URL is empty or contains whitespace
    """
    if not url:
        raise ValidationError("url can not be empty")
    check_trimmed(url, "url")
    if " " in url:
        raise ValidationError("url must not contains space")
    return url


def check_urls(urls: Sequence[str]) -> Sequence[str]:
    """Validate an ordered set of endpoint URLs.

    An empty set is valid. A set holding a single empty string is accepted
    as a present-but-blank placeholder.

    Raises:
        ValidationError: If any URL is invalid
    """
    if len(urls) == 1 and urls[0] == "":
        return urls
    for url in urls:
        check_url(url)
    return urls


def is_valid_urls(urls: Sequence[str]) -> bool:
    """Return True if urls passes check_urls."""
    return passes(check_urls, urls)


def check_optional_url(url: str) -> str:
    """Validate an optional URL such as website or faucet.

    Raises:
        ValidationError: If a non-empty URL contains whitespace
    """
    if not url:
        return url
    check_trimmed(url, "url")
    if " " in url:
        raise ValidationError("url must not contains space")
    return url


def is_valid_optional_url(url: str) -> bool:
    """Return True if url passes check_optional_url."""
    return passes(check_optional_url, url)


# ============================================================================
# NUMERIC
# ============================================================================


def check_coin_type(coin_type: int) -> int:
    """Validate a BIP-44 coin type for non EVM RollApp chains.

    Raises:
        ValidationError: If coin type is outside [0, 255]
    """
    if coin_type < const.MIN_COIN_TYPE:
        raise ValidationError("coin type must be non-negative")
    if coin_type > const.MAX_COIN_TYPE:
        raise ValidationError(f"coin type must not exceed {const.MAX_COIN_TYPE}")
    return coin_type


def check_gas_adjustment(gas_adjustment: float) -> float:
    """Validate gas adjustment. Zero means unset.

    Raises:
        ValidationError: If gas adjustment is not finite, negative or below 1.0
    """
    if gas_adjustment == 0:
        return gas_adjustment
    if not math.isfinite(gas_adjustment):
        raise ValidationError("gas adjustment must be a finite number")
    if not gas_adjustment >= 0:
        raise ValidationError("gas adjustment must be non-negative")
    if not gas_adjustment >= const.MIN_GAS_ADJUSTMENT:
        raise ValidationError(
            f"gas adjustment must be at least {const.MIN_GAS_ADJUSTMENT}"
        )
    return gas_adjustment


def check_gas_price_steps(low: float, average: float, high: float) -> None:
    """Validate gas price steps: ``0 < low <= average <= high``.

    Comparisons are written so that NaN fails every one of them.

    Raises:
        ValidationError: If any step is not positive or the steps are unordered
    """
    for name, value in (("low", low), ("average", average), ("high", high)):
        if not value > 0:
            raise ValidationError(f"gas price steps {name} must be positive")
    if not low <= average:
        raise ValidationError("gas price steps low must not exceed average")
    if not average <= high:
        raise ValidationError("gas price steps average must not exceed high")


def is_valid_gas_price_steps(low: float, average: float, high: float) -> bool:
    """Return True if the steps pass check_gas_price_steps."""
    return passes(check_gas_price_steps, low, average, high)


# ============================================================================
# DATA AVAILABILITY & CHAIN TYPE
# ============================================================================


def check_da(da: str, is_rollapp: bool) -> str:
    """Validate the data availability backend against the chain category.

    Raises:
        ValidationError: If DA is set on a non-RollApp chain, or missing
            or unknown on a RollApp chain
    """
    if not is_rollapp:
        if da:
            raise ValidationError("DA must be empty for non-RollApp chains")
        return da
    if not da:
        raise ValidationError("DA is required for RollApp chains")
    if da not in const.ALLOWED_DA:
        raise ValidationError(
            "DA must be one of: " + ", ".join(f"'{item}'" for item in const.ALLOWED_DA)
        )
    return da


def check_avail_address(avail_address: str, da: str) -> str:
    """Validate an Avail account address.

    Only chains using Avail for data availability may set one. Addresses
    are SS58 encoded with the generic substrate prefix, so they start with
    ``5`` and are 48 characters long.

    Raises:
        ValidationError: If address is set without Avail DA or is malformed
    """
    if da != const.DA_AVAIL:
        if avail_address:
            raise ValidationError("Avail address is only available if DA is Avail")
        return avail_address

    if not avail_address:
        return avail_address
    if " " in avail_address:
        raise ValidationError("Avail address must not contains space")
    if not avail_address.startswith("5"):
        raise ValidationError("Avail address must start with 5")
    if not const.AVAIL_ADDRESS.fullmatch(avail_address):
        raise ValidationError(
            "Avail address must starts with 5, followed by alphanumeric characters"
        )
    if len(avail_address) != const.AVAIL_ADDRESS_LENGTH:
        raise ValidationError(
            f"Avail address must be {const.AVAIL_ADDRESS_LENGTH} characters long"
        )
    return avail_address


def is_valid_avail_address(avail_address: str, da: str) -> bool:
    """Return True if address passes check_avail_address."""
    return passes(check_avail_address, avail_address, da)


def check_chain_type(chain_type: str, additional_types: Sequence[str] = ()) -> str:
    """Validate the chain category tag.

    Args:
        chain_type: Tag from the record
        additional_types: Extra tags accepted on top of the built-in list

    Raises:
        ValidationError: If tag is empty or not recognized
    """
    if not chain_type:
        raise ValidationError("Chain type is required")
    if chain_type in const.ALLOWED_CHAIN_TYPES or chain_type in additional_types:
        return chain_type
    raise ValidationError(
        f"Not recognized chain type: {chain_type} "
        "(consider provide into --addition-chain-types-allowed flag)"
    )


def is_valid_chain_type(chain_type: str, additional_types: Sequence[str] = ()) -> bool:
    """Return True if chain type passes check_chain_type."""
    return passes(check_chain_type, chain_type, additional_types)
