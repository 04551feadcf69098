"""Validation framework for chain registry records.

This module provides the rule engine applied to every chain record:
- Identifier validation (chain id uniqueness and format, name, bech32)
- URL validation (endpoint sets, optional website/faucet)
- EVM validation (required block, hex chain id cross-check)
- Currency validation (denoms, main currency, duplicates)
- IBC and gas validation
- Cross-field consistency (DA, coin type, chain type, Avail, logo)

Architecture:
- ValidationRule: Abstract base class for all validation rules
- CheckRule: Rule wrapping a single check_* helper
- ValidationResult: Result container with the error messages of a rule
- ValidationFramework: Runs the ordered rule battery
"""

from .validation_context import ValidationContext
from .validation_result import ValidationResult
from .validation_rule import CheckRule, ValidationRule
from .validation_framework import ValidationFramework, default_rules

__all__ = [
    "CheckRule",
    "ValidationContext",
    "ValidationFramework",
    "ValidationResult",
    "ValidationRule",
    "default_rules",
]
