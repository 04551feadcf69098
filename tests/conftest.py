"""Pytest configuration and fixtures for chain registry validator tests."""

from __future__ import annotations

import sys
from pathlib import Path

# Add parent directory to Python path so we can import the package and tests.doubles
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from chain_registry_validator.application.services import GroupTracker
from chain_registry_validator.validation import ValidationContext
from tests.doubles import RegistryBuilder, make_hub_data, make_rollapp_data


@pytest.fixture
def hub_data() -> dict:
    """Return a valid Hub chain document."""
    return make_hub_data()


@pytest.fixture
def rollapp_data() -> dict:
    """Return a valid EVM RollApp chain document."""
    return make_rollapp_data()


@pytest.fixture
def chain_dir(tmp_path: Path) -> Path:
    """Return an empty chain directory."""
    directory = tmp_path / "mainnet" / "dymension"
    directory.mkdir(parents=True)
    return directory


@pytest.fixture
def tracker() -> GroupTracker:
    """Return a fresh group tracker."""
    return GroupTracker("Mainnet")


@pytest.fixture
def context(chain_dir: Path, tracker: GroupTracker) -> ValidationContext:
    """Return a validation context for the chain directory."""
    return ValidationContext(chain_dir=chain_dir, tracker=tracker)


@pytest.fixture
def registry(tmp_path: Path) -> RegistryBuilder:
    """Return a builder for an on-disk registry checkout."""
    return RegistryBuilder(tmp_path / "chain-registry")
