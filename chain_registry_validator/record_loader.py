"""Record loader for chain registry documents.

Decodes a chain's JSON document into a ChainRecord. The document shape is
described with voluptuous schemas; unknown keys are ignored and ``null``
decodes to the field's empty value. URL fields are kept as UrlSet so a
wrongly typed URL field is reported as a violation instead of failing
the whole record.
"""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any, Callable

import voluptuous as vol

from .const import INT64_MAX, INT64_MIN
from .domain.entities import ChainRecord, Currency, EvmRecord, GasPriceSteps, IbcRecord
from .domain.exceptions import RecordDecodeError
from .domain.value_objects import UrlSet

_LOGGER = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    """Refuse the non-standard NaN and Infinity literals."""
    raise RecordDecodeError(f"invalid JSON: unsupported literal {name}")


def _json_int(value: Any) -> int:
    """Accept signed 64-bit JSON integers only (no bools, floats or strings)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise vol.Invalid(f"expected integer, got {type(value).__name__}")
    if not INT64_MIN <= value <= INT64_MAX:
        raise vol.Invalid(f"integer {value} overflows int64")
    return value


def _json_float(value: Any) -> float:
    """Accept any finite JSON number and return it as float."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise vol.Invalid(f"expected number, got {type(value).__name__}")
    try:
        number = float(value)
    except OverflowError as err:
        raise vol.Invalid(f"number {value} out of range") from err
    if not math.isfinite(number):
        raise vol.Invalid(f"number {value} out of range")
    return number


def _nullable(validator: Any, default: Any) -> vol.All:
    """Allow ``null`` for a field and replace it with the field default."""

    def coalesce(value: Any) -> Any:
        return default if value is None else value

    return vol.All(vol.Any(None, validator), coalesce)


def _nullable_record(schema: vol.Schema) -> vol.All:
    """Allow ``null`` for a nested record and decode it as an empty one."""
    return vol.All(_nullable(dict, {}), schema)


def _field(key: str, validator: Any, default: Any) -> tuple[vol.Optional, vol.All]:
    return vol.Optional(key, default=default), _nullable(validator, default)


def _url_field(key: str) -> tuple[vol.Optional, Callable[[Any], UrlSet]]:
    return vol.Optional(key, default=None), UrlSet.parse


EVM_SCHEMA = vol.Schema(
    dict([_field("chainId", str, ""), _url_field("rpc")]),
    extra=vol.ALLOW_EXTRA,
)

CURRENCY_SCHEMA = vol.Schema(
    dict(
        [
            _field("displayDenom", str, ""),
            _field("baseDenom", str, ""),
            _field("ibcRepresentation", str, ""),
            _field("bridgeDenom", str, ""),
            _field("decimals", _json_int, 0),
            _field("logo", str, ""),
            _field("type", str, ""),
        ]
    ),
    extra=vol.ALLOW_EXTRA,
)

IBC_SCHEMA = vol.Schema(
    dict(
        [
            _field("timeout", _json_int, 0),
            _field("hubChannel", str, ""),
            _field("channel", str, ""),
            _field("allowedDenoms", [_nullable(str, "")], []),
        ]
    ),
    extra=vol.ALLOW_EXTRA,
)

GAS_PRICE_STEPS_SCHEMA = vol.Schema(
    dict(
        [
            _field("low", _json_float, 0.0),
            _field("average", _json_float, 0.0),
            _field("high", _json_float, 0.0),
        ]
    ),
    extra=vol.ALLOW_EXTRA,
)

CHAIN_RECORD_SCHEMA = vol.Schema(
    dict(
        [
            _field("chainId", str, ""),
            _field("chainName", str, ""),
            _url_field("rpc"),
            _url_field("rest"),
            _url_field("beRpc"),
            _field("bech32Prefix", str, ""),
            _field("website", str, ""),
            _field("da", str, ""),
            (vol.Optional("evm", default=None), vol.Any(None, EVM_SCHEMA)),
            _field("currencies", [_nullable_record(CURRENCY_SCHEMA)], []),
            _field("coinType", _json_int, 0),
            _field("gasAdjustment", _json_float, 0.0),
            _field("faucetUrl", str, ""),
            (vol.Optional("ibc", default=None), vol.Any(None, IBC_SCHEMA)),
            (
                vol.Optional("gasPriceSteps", default=None),
                vol.Any(None, GAS_PRICE_STEPS_SCHEMA),
            ),
            _field("logo", str, ""),
            _field("type", str, ""),
            _field("active", bool, False),
            _field("analytics", bool, False),
            _field("collectData", bool, False),
            _field("goldberg", bool, False),
            _field("availAddress", str, ""),
        ]
    ),
    extra=vol.ALLOW_EXTRA,
)


def _build_currency(data: dict[str, Any]) -> Currency:
    return Currency(
        display_denom=data["displayDenom"],
        base_denom=data["baseDenom"],
        ibc_representation=data["ibcRepresentation"],
        bridge_denom=data["bridgeDenom"],
        decimals=data["decimals"],
        logo=data["logo"],
        type=data["type"],
    )


def _build_record(data: dict[str, Any]) -> ChainRecord:
    evm = data["evm"]
    ibc = data["ibc"]
    steps = data["gasPriceSteps"]

    return ChainRecord(
        chain_id=data["chainId"],
        chain_name=data["chainName"],
        rpc=data["rpc"],
        rest=data["rest"],
        be_rpc=data["beRpc"],
        bech32_prefix=data["bech32Prefix"],
        website=data["website"],
        da=data["da"],
        evm=EvmRecord(chain_id=evm["chainId"], rpc=evm["rpc"]) if evm is not None else None,
        currencies=tuple(_build_currency(item) for item in data["currencies"]),
        coin_type=data["coinType"],
        gas_adjustment=data["gasAdjustment"],
        faucet_url=data["faucetUrl"],
        ibc=(
            IbcRecord(
                timeout=ibc["timeout"],
                hub_channel=ibc["hubChannel"],
                channel=ibc["channel"],
                allowed_denoms=tuple(ibc["allowedDenoms"]),
            )
            if ibc is not None
            else None
        ),
        gas_price_steps=(
            GasPriceSteps(low=steps["low"], average=steps["average"], high=steps["high"])
            if steps is not None
            else None
        ),
        logo=data["logo"],
        type=data["type"],
        active=data["active"],
        analytics=data["analytics"],
        collect_data=data["collectData"],
        goldberg=data["goldberg"],
        avail_address=data["availAddress"],
    )


def decode_chain_record(raw: bytes | str) -> ChainRecord:
    """Decode a chain record from its JSON text.

    Args:
        raw: JSON document as bytes or text

    Returns:
        Decoded ChainRecord

    Raises:
        RecordDecodeError: If the JSON is malformed or a field has the
            wrong type
    """
    try:
        payload = json.loads(raw, parse_constant=_reject_constant)
    except (json.JSONDecodeError, UnicodeDecodeError) as err:
        raise RecordDecodeError(f"invalid JSON: {err}") from err

    try:
        data = CHAIN_RECORD_SCHEMA(payload)
    except vol.Invalid as err:
        raise RecordDecodeError(str(err)) from err

    return _build_record(data)


def load_chain_record(path: Path) -> ChainRecord:
    """Read and decode a chain record file.

    Raises:
        OSError: If the file cannot be read
        RecordDecodeError: If the content cannot be decoded
    """
    raw = path.read_bytes()
    _LOGGER.debug("Decoding %s (%d bytes)", path, len(raw))
    return decode_chain_record(raw)
