"""IBC validation rule."""

from __future__ import annotations

from ..const import IBC_CHANNEL, IBC_CHANNEL_SENTINEL
from ..domain.entities import ChainRecord, IbcRecord
from ..domain.helpers import ValidationError, check_ibc_allowed_denom
from .validation_context import ValidationContext
from .validation_rule import CheckRule


def check_ibc(ibc: IbcRecord) -> IbcRecord:
    """Validate IBC channels, timeout and allowed denoms.

    ``channel`` may be ``-`` for chains connected to the hub without a
    channel of their own.

    Raises:
        ValidationError: On the first failing field
    """
    if ibc.channel and ibc.channel != IBC_CHANNEL_SENTINEL:
        if not IBC_CHANNEL.fullmatch(ibc.channel):
            raise ValidationError("IBC channel must match format channel-<number>")
    if ibc.hub_channel and not IBC_CHANNEL.fullmatch(ibc.hub_channel):
        raise ValidationError("IBC hub channel must match format channel-<number>")
    if ibc.hub_channel and not ibc.channel:
        raise ValidationError("IBC channel is required if hub channel is set")
    if ibc.timeout < 0:
        raise ValidationError("IBC timeout must not be negative")

    seen: set[str] = set()
    for denom in ibc.allowed_denoms:
        check_ibc_allowed_denom(denom)
        if denom in seen:
            raise ValidationError(f"Duplicated IBC allowed denom found: {denom}")
        seen.add(denom)
    return ibc


class IbcValidation(CheckRule):
    """Optional IBC block."""

    name = "ibc"
    label = "Bad IBC"

    def check(self, record: ChainRecord, context: ValidationContext) -> None:
        if record.ibc is not None:
            check_ibc(record.ibc)

    def describe(self, record: ChainRecord) -> object:
        return record.ibc
