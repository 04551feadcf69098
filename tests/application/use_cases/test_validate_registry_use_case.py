"""Tests for ValidateRegistryUseCase."""

import io

import pytest

from chain_registry_validator.application.services import ErrorAggregator
from chain_registry_validator.application.use_cases import ValidateRegistryUseCase
from chain_registry_validator.config import ValidatorSettings
from chain_registry_validator.domain.exceptions import StopValidation, StructuralError
from chain_registry_validator.domain.value_objects import ValidateTarget
from tests.doubles import make_hub_data, make_rollapp_data


def _run(root, settings=None, stop_on_first=False):
    settings = settings or ValidatorSettings(stop_on_error=stop_on_first)
    out = io.StringIO()
    aggregator = ErrorAggregator(stop_on_first=settings.stop_on_error, stream=io.StringIO())
    use_case = ValidateRegistryUseCase(settings, aggregator, out=out)
    result = use_case.execute(root)
    return result, aggregator, out.getvalue()


def _messages(aggregator):
    return [violation.message for violation in aggregator.violations]


class TestValidateRegistryUseCase:
    """Test ValidateRegistryUseCase."""

    def test_valid_registry(self, registry):
        """Test a clean registry passes every group."""
        registry.add_all_tiers()
        registry.add_chain("mainnet", "dymension", make_hub_data())
        registry.add_chain("testnet", "rollappx", make_rollapp_data(), assets=("logo.png",))

        result, aggregator, out = _run(registry.root)

        assert result.success
        assert result.groups_validated == 4
        assert result.chains_validated == 2
        assert aggregator.count == 0
        assert out == (
            "Going to validate Mainnet Testnet Devnet Internal Devnet\n"
            "Validating group Mainnet ...\n"
            "Validating group Testnet ...\n"
            "Validating group Devnet ...\n"
            "Validating group Internal Devnet ...\n"
        )

    def test_selected_targets_only(self, registry):
        """Test only the selected tiers are walked."""
        registry.add_tier("testnet")
        settings = ValidatorSettings(targets=(ValidateTarget.TESTNET,))

        result, _, out = _run(registry.root, settings)

        assert result.success
        assert out == "Going to validate Testnet\nValidating group Testnet ...\n"

    def test_violation_context(self, registry):
        """Test violations carry group, chain and record file."""
        registry.add_all_tiers()
        chain_dir = registry.add_chain("devnet", "broken", make_hub_data(chainName=" Broken"))

        result, aggregator, _ = _run(registry.root)

        assert not result.success
        assert result.violation_count == 1
        violation = aggregator.violations[0]
        assert violation.group == "Devnet"
        assert violation.chain == "broken"
        assert violation.file == str(chain_dir / "broken.json")

    def test_duplicate_chain_id_within_group(self, registry):
        """Test a chain id may not repeat inside one tier."""
        registry.add_all_tiers()
        registry.add_chain("mainnet", "dymension", make_hub_data())
        registry.add_chain("mainnet", "dymension2", make_hub_data())

        _, aggregator, _ = _run(registry.root)

        assert _messages(aggregator) == [
            "Duplicated chain id found: dymension_1100-1 in dymension and dymension2"
        ]

    def test_duplicate_chain_id_across_groups(self, registry):
        """Test the same chain id may appear once in every tier."""
        registry.add_all_tiers()
        registry.add_chain("mainnet", "dymension", make_hub_data())
        registry.add_chain("testnet", "dymension", make_hub_data())

        result, _, _ = _run(registry.root)

        assert result.success

    def test_missing_record_skips_only_that_chain(self, registry):
        """Test a missing record file is reported and the walk moves on."""
        registry.add_all_tiers()
        (registry.root / "mainnet" / "aaa").mkdir()
        registry.add_chain("mainnet", "zzz", make_hub_data(chainId="Bad"))
        registry.add_chain("testnet", "other", make_hub_data(chainName=""))

        result, aggregator, _ = _run(registry.root)

        missing = registry.root / "mainnet" / "aaa" / "aaa.json"
        assert _messages(aggregator) == [
            f"Missing required file {missing}",
            "Bad chain id: Bad (chain id must be lowercase)",
            "Bad chain name:  (chain name can not be empty)",
        ]
        assert aggregator.violations[0].file is None
        assert aggregator.violations[1].chain == "zzz"
        assert result.groups_validated == 4
        assert result.chains_validated == 2

    def test_undecodable_record_skips_only_that_chain(self, registry, caplog):
        """Test a NaN literal is a decode failure and later chains are still checked."""
        registry.add_all_tiers()
        registry.add_chain("mainnet", "aaa", raw='{"gasAdjustment": NaN}')
        registry.add_chain("mainnet", "bbb", make_hub_data(chainName=""))

        with caplog.at_level("WARNING"):
            result, aggregator, _ = _run(registry.root)

        messages = _messages(aggregator)
        assert len(messages) == 2
        assert messages[0].startswith("Failed to unmarshal chain definition file:")
        assert messages[1] == "Bad chain name:  (chain name can not be empty)"
        assert result.chains_validated == 1
        assert "Skipping chain aaa of group Mainnet" in caplog.text

    def test_malformed_json(self, registry):
        """Test malformed JSON is reported against the record file."""
        registry.add_all_tiers()
        chain_dir = registry.add_chain("mainnet", "dymension", raw="{not json")

        _, aggregator, _ = _run(registry.root)

        violation = aggregator.violations[0]
        assert violation.message.startswith(
            "Failed to unmarshal chain definition file: invalid JSON:"
        )
        assert violation.file == str(chain_dir / "dymension.json")

    def test_wrong_json_types(self, registry):
        """Test wrongly typed fields are a decode failure."""
        registry.add_all_tiers()
        registry.add_chain("mainnet", "dymension", make_hub_data(coinType="60"))

        _, aggregator, _ = _run(registry.root)

        assert _messages(aggregator)[0].startswith("Failed to unmarshal chain definition file:")

    def test_unreadable_record(self, registry):
        """Test a record path that cannot be read is reported."""
        registry.add_all_tiers()
        (registry.root / "mainnet" / "dymension" / "dymension.json").mkdir(parents=True)

        _, aggregator, _ = _run(registry.root)

        assert _messages(aggregator)[0].startswith("Failed to read chain definition file:")

    def test_missing_tier_aborts(self, registry):
        """Test a missing tier directory ends the run."""
        registry.add_tier("mainnet")
        registry.add_tier("testnet")

        result, aggregator, out = _run(registry.root)

        assert result.aborted
        assert not result.success
        assert result.groups_validated == 2
        assert _messages(aggregator) == [
            f"Missing required directory devnet at {registry.root / 'devnet'}"
        ]
        assert "Validating group Internal Devnet" not in out

    def test_missing_repository(self, tmp_path):
        """Test a missing registry root raises."""
        with pytest.raises(StructuralError, match="does not exists"):
            _run(tmp_path / "missing")

    def test_stop_on_first(self, registry):
        """Test the run stops at the first violation."""
        registry.add_all_tiers()
        registry.add_chain("mainnet", "dymension", make_hub_data(chainId="Bad", chainName=""))

        with pytest.raises(StopValidation) as exc_info:
            _run(registry.root, stop_on_first=True)

        assert exc_info.value.violation.message == "Bad chain id: Bad (chain id must be lowercase)"

    def test_additional_chain_types(self, registry):
        """Test configured chain types reach the rules."""
        registry.add_all_tiers()
        registry.add_chain("mainnet", "custom", make_hub_data(type="Custom"))

        result, _, _ = _run(registry.root)
        assert not result.success

        settings = ValidatorSettings(additional_chain_types=("Custom",))
        result, _, _ = _run(registry.root, settings)
        assert result.success

    def test_logo_resolved_in_chain_directory(self, registry):
        """Test logos are looked up next to the record."""
        registry.add_all_tiers()
        registry.add_chain(
            "mainnet", "dymension", make_hub_data(logo="/assets/dym.svg"), assets=("assets/dym.svg",)
        )
        result, _, _ = _run(registry.root)
        assert result.success
