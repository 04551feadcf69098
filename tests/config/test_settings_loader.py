"""Tests for the settings loader."""

import pytest

from chain_registry_validator.config import (
    ValidatorSettings,
    build_settings,
    find_settings_file,
    load_settings,
    load_settings_file,
)
from chain_registry_validator.domain.exceptions import ConfigError
from chain_registry_validator.domain.value_objects import ValidateTarget


class TestFindSettingsFile:
    """Test find_settings_file function."""

    def test_default_file(self, tmp_path):
        """Test the checkout's settings file is found."""
        path = tmp_path / ".chain-registry-validator.yaml"
        path.write_text("stop_on_error: true\n")
        assert find_settings_file(tmp_path) == path

    def test_no_file(self, tmp_path):
        """Test no settings file is fine."""
        assert find_settings_file(tmp_path) is None

    def test_explicit_file_must_exist(self, tmp_path):
        """Test an explicit settings file is required to exist."""
        with pytest.raises(ConfigError, match="Settings file not found"):
            find_settings_file(tmp_path, tmp_path / "missing.yaml")


class TestLoadSettingsFile:
    """Test load_settings_file function."""

    def test_full_file(self, tmp_path):
        """Test every key is validated and coerced."""
        path = tmp_path / "settings.yaml"
        path.write_text(
            "targets: [testnet, mainnet]\n"
            "stop_on_error: true\n"
            "additional_chain_types: [Custom]\n"
        )
        data = load_settings_file(path)
        assert data["targets"] == [ValidateTarget.TESTNET, ValidateTarget.MAINNET]
        assert data["stop_on_error"] is True
        assert data["additional_chain_types"] == ["Custom"]

    def test_empty_file(self, tmp_path):
        """Test an empty file gives the defaults."""
        path = tmp_path / "settings.yaml"
        path.write_text("")
        assert load_settings_file(path) == {"stop_on_error": False, "additional_chain_types": []}

    @pytest.mark.parametrize(
        "content",
        [
            "targets: [moonnet]\n",
            "targets: []\n",
            "stop_on_error: maybe\n",
            "additional_chain_types: ['']\n",
            "unknown_key: 1\n",
        ],
    )
    def test_schema_errors(self, tmp_path, content):
        """Test schema violations raise ConfigError."""
        path = tmp_path / "settings.yaml"
        path.write_text(content)
        with pytest.raises(ConfigError, match="Invalid settings"):
            load_settings_file(path)

    def test_invalid_yaml(self, tmp_path):
        """Test malformed YAML raises ConfigError."""
        path = tmp_path / "settings.yaml"
        path.write_text("targets: [mainnet\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_settings_file(path)

    def test_not_a_mapping(self, tmp_path):
        """Test a YAML list is rejected."""
        path = tmp_path / "settings.yaml"
        path.write_text("- mainnet\n")
        with pytest.raises(ConfigError, match="must contain a mapping"):
            load_settings_file(path)


class TestBuildSettings:
    """Test merging file values with command line options."""

    def test_defaults(self):
        """Test all tiers, collect-all and no extra types by default."""
        assert build_settings() == ValidatorSettings(
            targets=(
                ValidateTarget.MAINNET,
                ValidateTarget.TESTNET,
                ValidateTarget.DEVNET,
                ValidateTarget.INTERNAL_DEVNET,
            ),
            stop_on_error=False,
            additional_chain_types=(),
        )

    def test_file_targets_in_registry_order(self):
        """Test targets always run in registry order."""
        settings = build_settings({"targets": [ValidateTarget.DEVNET, ValidateTarget.MAINNET]})
        assert settings.targets == (ValidateTarget.MAINNET, ValidateTarget.DEVNET)

    def test_command_line_targets_replace_file(self):
        """Test tier flags replace the file's targets."""
        settings = build_settings(
            {"targets": [ValidateTarget.MAINNET]}, targets=[ValidateTarget.TESTNET]
        )
        assert settings.targets == (ValidateTarget.TESTNET,)

    def test_stop_on_error_either_source(self):
        """Test stop on error is on when either source sets it."""
        assert build_settings({"stop_on_error": True}).stop_on_error
        assert build_settings({}, stop_on_error=True).stop_on_error
        assert not build_settings({"stop_on_error": False}).stop_on_error

    def test_chain_types_appended(self):
        """Test command line chain types extend the file's list."""
        settings = build_settings(
            {"additional_chain_types": ["A", "B"]}, additional_chain_types=["B", "C"]
        )
        assert settings.additional_chain_types == ("A", "B", "C")

    def test_describe_targets(self):
        """Test the announcement lists display names."""
        settings = ValidatorSettings(targets=(ValidateTarget.TESTNET, ValidateTarget.INTERNAL_DEVNET))
        assert settings.describe_targets() == "Testnet Internal Devnet"


class TestLoadSettings:
    """Test load_settings function."""

    def test_checkout_settings_used(self, tmp_path, caplog):
        """Test the checkout's settings file is picked up and logged."""
        (tmp_path / ".chain-registry-validator.yaml").write_text("targets: [devnet]\n")
        with caplog.at_level("INFO"):
            settings = load_settings(tmp_path)
        assert settings.targets == (ValidateTarget.DEVNET,)
        assert "Loaded settings from" in caplog.text

    def test_explicit_file_wins(self, tmp_path):
        """Test an explicit file is used instead of the checkout's."""
        (tmp_path / ".chain-registry-validator.yaml").write_text("targets: [devnet]\n")
        other = tmp_path / "other.yaml"
        other.write_text("targets: [testnet]\n")
        assert load_settings(tmp_path, config_path=other).targets == (ValidateTarget.TESTNET,)
