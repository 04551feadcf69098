"""EVM validation rules.

Requires an ``evm`` block on EVM RollApps and cross-checks its hex chain
id against the cosmos chain id.
"""

from __future__ import annotations

from ..const import EVM_COIN_TYPE
from ..domain.entities import ChainRecord
from ..domain.helpers import check_evm_chain_id, needs_cosmos_cross_check
from .validation_context import ValidationContext
from .validation_result import ValidationResult
from .validation_rule import CheckRule, ValidationRule


class EvmRequiredValidation(ValidationRule):
    """RollApps using the Ethereum coin type must describe their EVM layer."""

    name = "evm_required"

    def validate(self, record: ChainRecord, context: ValidationContext) -> ValidationResult:
        if record.coin_type == EVM_COIN_TYPE and record.is_rollapp and record.evm is None:
            return ValidationResult.failure('"evm" is required for RollApp EVM chains')
        return ValidationResult(valid=True)


class EvmChainIdValidation(CheckRule):
    """Hex EVM chain id, matched to the cosmos chain id where it embeds one.

    Malformed or out of range numbers are reported like any other
    violation.
    """

    name = "evm_chain_id"
    label = "Bad EVM hex chain id"

    def check(self, record: ChainRecord, context: ValidationContext) -> None:
        if record.evm is None:
            return
        check_evm_chain_id(
            record.evm.chain_id,
            record.chain_id,
            cross_check=needs_cosmos_cross_check(record.chain_id, record.is_rollapp),
        )

    def describe(self, record: ChainRecord) -> object:
        return record.evm.chain_id if record.evm is not None else None
