"""Cross-field consistency rules.

Data availability, coin type, chain type, Goldberg and Avail address
rules depend on the chain category and on each other.
"""

from __future__ import annotations

from ..const import DA_AVAIL, EVM_COIN_TYPE
from ..domain.entities import ChainRecord
from ..domain.helpers import (
    ValidationError,
    check_avail_address,
    check_chain_type,
    check_coin_type,
    check_da,
    check_logo,
)
from .validation_context import ValidationContext
from .validation_result import ValidationResult
from .validation_rule import CheckRule, ValidationRule


class DaValidation(CheckRule):
    """DA backend is required on RollApps and forbidden elsewhere."""

    name = "da"
    label = "Bad DA"

    def check(self, record: ChainRecord, context: ValidationContext) -> None:
        check_da(record.da, record.is_rollapp)

    def describe(self, record: ChainRecord) -> object:
        return record.da


class CoinTypeValidation(CheckRule):
    """EVM RollApps use coin type 60; other chains stay within [0, 255]."""

    name = "coin_type"
    label = "Bad coin type"

    def check(self, record: ChainRecord, context: ValidationContext) -> None:
        if record.is_evm_rollapp:
            if record.coin_type != EVM_COIN_TYPE:
                raise ValidationError(
                    f"Coin type must be {EVM_COIN_TYPE} for EVM RollApp chains"
                )
            return
        check_coin_type(record.coin_type)

    def describe(self, record: ChainRecord) -> object:
        return record.coin_type


class ChainLogoValidation(CheckRule):
    """Optional chain logo must be an image next to the record."""

    name = "chain_logo"
    label = "Bad chain logo"

    def check(self, record: ChainRecord, context: ValidationContext) -> None:
        check_logo(record.logo, context.chain_dir)

    def describe(self, record: ChainRecord) -> object:
        return record.logo


class ChainTypeValidation(CheckRule):
    """Chain type is a built-in tag or one allowed by configuration."""

    name = "chain_type"
    label = "Bad chain type"

    def check(self, record: ChainRecord, context: ValidationContext) -> None:
        check_chain_type(record.type, context.additional_chain_types)

    def describe(self, record: ChainRecord) -> object:
        return record.type


class GoldbergValidation(ValidationRule):
    """Goldberg chains settle on Avail."""

    name = "goldberg"

    def validate(self, record: ChainRecord, context: ValidationContext) -> ValidationResult:
        if record.goldberg and record.da != DA_AVAIL:
            return ValidationResult.failure(f"Goldberg when set, DA must be {DA_AVAIL}")
        return ValidationResult(valid=True)


class AvailAddressValidation(CheckRule):
    """Avail address only with Avail DA, and well formed."""

    name = "avail_address"
    label = "Bad avail address"

    def check(self, record: ChainRecord, context: ValidationContext) -> None:
        check_avail_address(record.avail_address, record.da)

    def describe(self, record: ChainRecord) -> object:
        return record.avail_address
