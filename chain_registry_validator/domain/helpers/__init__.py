"""Domain helper functions."""

from .asset_helpers import check_logo, resolve_asset
from .denom_validators import (
    check_base_denom,
    check_bridge_denom,
    check_currency_type,
    check_decimals,
    check_display_denom,
    check_ibc_allowed_denom,
    check_ibc_representation,
    is_valid_ibc_representation,
)
from .evm_helpers import (
    chain_id_from_cosmos,
    check_evm_chain_id,
    needs_cosmos_cross_check,
    parse_int64,
)
from .validators import (
    ValidationError,
    check_avail_address,
    check_bech32_prefix,
    check_chain_id,
    check_chain_name,
    check_chain_type,
    check_coin_type,
    check_da,
    check_gas_adjustment,
    check_gas_price_steps,
    check_optional_url,
    check_url,
    check_urls,
    is_valid_avail_address,
    is_valid_bech32_prefix,
    is_valid_chain_id,
    is_valid_chain_name,
    is_valid_chain_type,
    is_valid_gas_price_steps,
    is_valid_optional_url,
    is_valid_urls,
)

__all__ = [
    # Asset helpers
    "check_logo",
    "resolve_asset",
    # Denoms
    "check_base_denom",
    "check_bridge_denom",
    "check_currency_type",
    "check_decimals",
    "check_display_denom",
    "check_ibc_allowed_denom",
    "check_ibc_representation",
    "is_valid_ibc_representation",
    # EVM
    "chain_id_from_cosmos",
    "check_evm_chain_id",
    "needs_cosmos_cross_check",
    "parse_int64",
    # Validators
    "ValidationError",
    "check_avail_address",
    "check_bech32_prefix",
    "check_chain_id",
    "check_chain_name",
    "check_chain_type",
    "check_coin_type",
    "check_da",
    "check_gas_adjustment",
    "check_gas_price_steps",
    "check_optional_url",
    "check_url",
    "check_urls",
    "is_valid_avail_address",
    "is_valid_bech32_prefix",
    "is_valid_chain_id",
    "is_valid_chain_name",
    "is_valid_chain_type",
    "is_valid_gas_price_steps",
    "is_valid_optional_url",
    "is_valid_urls",
]
