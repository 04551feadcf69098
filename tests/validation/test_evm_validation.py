"""Tests for EVM validation rules."""

from chain_registry_validator.validation.evm_validation import (
    EvmChainIdValidation,
    EvmRequiredValidation,
)
from tests.doubles import make_record, make_rollapp_data


class TestEvmRequiredValidation:
    """Test EvmRequiredValidation rule."""

    def test_rollapp_with_evm_coin_type_needs_evm(self, context):
        """Test RollApps on coin type 60 need an evm block."""
        record = make_record(make_rollapp_data(evm=None))
        result = EvmRequiredValidation().validate(record, context)
        assert result.errors == ['"evm" is required for RollApp EVM chains']

    def test_hub_does_not_need_evm(self, context):
        """Test non RollApps on coin type 60 do not need an evm block."""
        assert EvmRequiredValidation().validate(make_record(), context).valid


class TestEvmChainIdValidation:
    """Test EvmChainIdValidation rule."""

    def test_matching_hex(self, context):
        """Test dym_1100-1 with 0x44c passes."""
        record = make_record(
            make_rollapp_data(chainId="dym_1100-1", evm={"chainId": "0x44c"})
        )
        assert EvmChainIdValidation().validate(record, context).valid

    def test_mismatching_hex(self, context):
        """Test dym_1100-1 with 0x44d fails with a mismatch message."""
        record = make_record(
            make_rollapp_data(chainId="dym_1100-1", evm={"chainId": "0x44d"})
        )
        result = EvmChainIdValidation().validate(record, context)
        assert result.errors == [
            "Bad EVM hex chain id: 0x44d (EVM hex chain id 1101 must match with "
            "the chain id from cosmos chain id 1100)"
        ]

    def test_unparsable_cosmos_id_is_a_violation(self, context):
        """Test a numeric parse failure is reported, not raised."""
        record = make_record(
            make_rollapp_data(chainId="dym-1", evm={"chainId": "0x44c"})
        )
        result = EvmChainIdValidation().validate(record, context)
        assert not result.valid
        assert "must have format" in result.errors[0]

    def test_non_rollapp_with_cosmos_id_not_cross_checked(self, context):
        """Test only the hex format is checked for plain cosmos ids."""
        record = make_record(chainId="dymension-1", evm={"chainId": "0x1"})
        assert EvmChainIdValidation().validate(record, context).valid

    def test_skipped_without_evm(self, context):
        """Test records without evm pass."""
        assert EvmChainIdValidation().validate(make_record(), context).valid
