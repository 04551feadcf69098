"""Validation Framework.

Runs the ordered rule battery against one chain record.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Sequence

from ..domain.entities import ChainRecord
from .consistency_validation import (
    AvailAddressValidation,
    ChainLogoValidation,
    ChainTypeValidation,
    CoinTypeValidation,
    DaValidation,
    GoldbergValidation,
)
from .currency_validation import CurrenciesValidation
from .evm_validation import EvmChainIdValidation, EvmRequiredValidation
from .gas_validation import GasAdjustmentValidation, GasPriceStepsValidation
from .ibc_validation import IbcValidation
from .identifier_validation import (
    Bech32PrefixValidation,
    Bech32RequiredValidation,
    ChainIdValidation,
    ChainNameValidation,
    DuplicateChainIdValidation,
)
from .url_validation import EndpointUrlsValidation, OptionalUrlValidation
from .validation_context import ValidationContext
from .validation_result import ValidationResult
from .validation_rule import ValidationRule

_LOGGER = logging.getLogger(__name__)


def default_rules() -> list[ValidationRule]:
    """Build the standard rule battery, in reporting order."""
    return [
        DuplicateChainIdValidation(),
        ChainIdValidation(),
        ChainNameValidation(),
        EndpointUrlsValidation("rpc_urls", "RPC", ChainRecord.get_rpc_urls),
        EndpointUrlsValidation("rest_urls", "REST", ChainRecord.get_rest_urls),
        EndpointUrlsValidation("be_rpc_urls", "Be RPC", ChainRecord.get_be_rpc_urls),
        Bech32RequiredValidation(),
        Bech32PrefixValidation(),
        OptionalUrlValidation("website", "Bad website url", lambda record: record.website),
        DaValidation(),
        EvmRequiredValidation(),
        EndpointUrlsValidation(
            "evm_rpc_urls",
            "EVM RPC",
            ChainRecord.get_evm_rpc_urls,
            applies=lambda record: record.evm is not None,
        ),
        EvmChainIdValidation(),
        CurrenciesValidation(),
        CoinTypeValidation(),
        GasAdjustmentValidation(),
        OptionalUrlValidation("faucet_url", "Bad faucet url", lambda record: record.faucet_url),
        IbcValidation(),
        GasPriceStepsValidation(),
        ChainLogoValidation(),
        ChainTypeValidation(),
        GoldbergValidation(),
        AvailAddressValidation(),
    ]


class ValidationFramework:
    """Main validation framework for chain records.

    This framework:
    - Holds an ordered list of rules
    - Runs every rule against each record (collect-all)
    - Stops a chain early only when a blocking rule fails
    - Turns unexpected rule exceptions into violations
    """

    def __init__(self, rules: Optional[Sequence[ValidationRule]] = None) -> None:
        """Initialize validation framework.

        Args:
            rules: Rules to run, in order (default: default_rules())
        """
        self._rules: list[ValidationRule] = list(rules) if rules is not None else default_rules()
        _LOGGER.debug("Registered %d validation rules", len(self._rules))

    @property
    def rules(self) -> list[ValidationRule]:
        """Registered rules in execution order."""
        return list(self._rules)

    def _run_rule(
        self, rule: ValidationRule, record: ChainRecord, context: ValidationContext
    ) -> ValidationResult:
        try:
            return rule.validate(record, context)
        except Exception as e:
            _LOGGER.exception(
                "Error executing validation rule '%s' for chain '%s': %s",
                rule.name,
                context.chain_dir_name,
                e,
            )
            return ValidationResult.failure(f"Validation error: {str(e)}")

    def iter_violations(
        self, record: ChainRecord, context: ValidationContext
    ) -> Iterator[str]:
        """Yield violation messages as rules fail.

        Lazy, so a consumer that stops on the first violation also stops
        running further rules.

        Args:
            record: Chain record to validate
            context: Validation context for the chain

        Yields:
            Human-readable violation messages, in rule order
        """
        for rule in self._rules:
            result = self._run_rule(rule, record, context)
            yield from result.errors

            if not result.valid and rule.blocking:
                _LOGGER.debug(
                    "Blocking rule '%s' failed for chain '%s', skipping remaining rules",
                    rule.name,
                    context.chain_dir_name,
                )
                return

    def validate(self, record: ChainRecord, context: ValidationContext) -> ValidationResult:
        """Validate a record against all rules.

        Args:
            record: Chain record to validate
            context: Validation context for the chain

        Returns:
            Aggregated ValidationResult
        """
        result = ValidationResult(valid=True)
        for message in self.iter_violations(record, context):
            result.merge(ValidationResult.failure(message))
        return result
