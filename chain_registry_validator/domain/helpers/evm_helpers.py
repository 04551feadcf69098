"""EVM chain id helpers.

Cosmos SDK EVM chains carry their EVM chain id twice: as the decimal
``N`` in ``<name>_<N>-<revision>`` and as the hex ``evm.chainId``. These
helpers parse both and check that they agree.
"""

from __future__ import annotations

from ... import const
from .validators import ValidationError


def parse_int64(text: str, base: int = 10) -> int:
    """Parse a signed 64-bit integer literal.

    Args:
        text: Literal to parse
        base: 10 for plain decimal, 0 to detect the base from a ``0x`` prefix

    Returns:
        Parsed integer

    Raises:
        ValidationError: If the literal is malformed or does not fit in 64 bits

    Examples:
        >>> parse_int64("1100")
        1100
        >>> parse_int64("0x44c", base=0)
        1100
    """
    if base == 10 and not const.DECIMAL_DIGITS.fullmatch(text):
        raise ValidationError(f"invalid decimal number {text!r}")
    if base == 0 and not const.EVM_HEX_CHAIN_ID.fullmatch(text):
        raise ValidationError(f"invalid hex number {text!r}")

    try:
        value = int(text, base)
    except ValueError as err:
        raise ValidationError(f"invalid number {text!r}: {err}") from err

    if not const.INT64_MIN <= value <= const.INT64_MAX:
        raise ValidationError(f"number {text!r} out of 64-bit range")
    return value


def chain_id_from_cosmos(chain_id: str) -> int:
    """Extract the EVM chain id embedded in a cosmos chain id.

    Example:
        >>> chain_id_from_cosmos("dym_1100-1")
        1100

    Raises:
        ValidationError: If chain id is not ``<name>_<number>-<number>``
    """
    parts = chain_id.split("_")
    if len(parts) != 2:
        raise ValidationError(
            "EVM RollApp chain id must have format <alphanumeric>_<number>-<number>"
        )
    return parse_int64(parts[1].split("-")[0])


def check_evm_chain_id(evm_chain_id: str, chain_id: str, cross_check: bool) -> int:
    """Validate a hex EVM chain id and optionally match it to the cosmos id.

    Args:
        evm_chain_id: Hex chain id from the ``evm`` block
        chain_id: Cosmos chain id of the record
        cross_check: Require both ids to encode the same number

    Returns:
        Numeric EVM chain id

    Raises:
        ValidationError: If the hex id is malformed or does not match
    """
    if not const.EVM_HEX_CHAIN_ID.fullmatch(evm_chain_id):
        raise ValidationError(
            "EVM hex chain id must be 0x followed by hexadecimal characters"
        )

    from_evm = parse_int64(evm_chain_id, base=0)
    if not cross_check:
        return from_evm

    from_cosmos = chain_id_from_cosmos(chain_id)
    if from_cosmos != from_evm:
        raise ValidationError(
            f"EVM hex chain id {from_evm} must match with the chain id "
            f"from cosmos chain id {from_cosmos}"
        )
    return from_evm


def needs_cosmos_cross_check(chain_id: str, is_rollapp: bool) -> bool:
    """Return True if the EVM id must be matched against the cosmos id."""
    return is_rollapp or bool(const.CHAIN_ID_EVM.fullmatch(chain_id))
