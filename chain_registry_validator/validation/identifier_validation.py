"""Identifier validation rules.

Chain id uniqueness and format, chain name, and bech32 prefix.
"""

from __future__ import annotations

import logging

from ..domain.entities import ChainRecord
from ..domain.helpers import (
    check_bech32_prefix,
    check_chain_id,
    check_chain_name,
)
from .validation_context import ValidationContext
from .validation_result import ValidationResult
from .validation_rule import CheckRule, ValidationRule

_LOGGER = logging.getLogger(__name__)


class DuplicateChainIdValidation(ValidationRule):
    """Reject a chain id already used by another chain of the same group.

    Blocking: the remaining checks are skipped for a duplicate, since
    every report would be attributed to an ambiguous chain id.
    """

    name = "duplicate_chain_id"
    blocking = True

    def validate(self, record: ChainRecord, context: ValidationContext) -> ValidationResult:
        """Register the chain id with the group tracker."""
        existing = context.tracker.register_chain_id(
            record.chain_id, context.chain_dir_name
        )
        if existing is None:
            return ValidationResult(valid=True)

        _LOGGER.debug(
            "Chain id %s of %s already seen in %s",
            record.chain_id,
            context.chain_dir_name,
            existing,
        )
        return ValidationResult.failure(
            f"Duplicated chain id found: {record.chain_id} in {existing} "
            f"and {context.chain_dir_name}"
        )


class ChainIdValidation(CheckRule):
    """Chain id format, which depends on the chain category."""

    name = "chain_id"
    label = "Bad chain id"

    def check(self, record: ChainRecord, context: ValidationContext) -> None:
        check_chain_id(record.chain_id, record.is_rollapp and record.evm is not None)

    def describe(self, record: ChainRecord) -> object:
        return record.chain_id


class ChainNameValidation(CheckRule):
    """Chain display name."""

    name = "chain_name"
    label = "Bad chain name"

    def check(self, record: ChainRecord, context: ValidationContext) -> None:
        check_chain_name(record.chain_name)

    def describe(self, record: ChainRecord) -> object:
        return record.chain_name


class Bech32RequiredValidation(ValidationRule):
    """RollApp chains must declare their bech32 prefix."""

    name = "bech32_required"

    def validate(self, record: ChainRecord, context: ValidationContext) -> ValidationResult:
        if record.is_rollapp and not record.bech32_prefix:
            return ValidationResult.failure("Bech32 prefix is required for RollApp chains")
        return ValidationResult(valid=True)


class Bech32PrefixValidation(CheckRule):
    """Bech32 prefix format, whenever one is declared."""

    name = "bech32_prefix"
    label = "Bad Bech32 prefix"

    def check(self, record: ChainRecord, context: ValidationContext) -> None:
        if record.bech32_prefix:
            check_bech32_prefix(record.bech32_prefix)

    def describe(self, record: ChainRecord) -> object:
        return record.bech32_prefix
