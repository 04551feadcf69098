"""Test doubles for unit testing.

Builders producing realistic chain documents and on-disk registry
checkouts, so tests exercise the real loader and walker instead of
mocks.

Example:
    >>> from tests.doubles import RegistryBuilder, make_hub_data
    >>> registry = RegistryBuilder(tmp_path / "chain-registry")
    >>> registry.add_chain("mainnet", "dymension", make_hub_data())
"""

from .record_factory import (
    RegistryBuilder,
    make_currency,
    make_hub_data,
    make_record,
    make_rollapp_data,
)

__all__ = [
    "RegistryBuilder",
    "make_currency",
    "make_hub_data",
    "make_record",
    "make_rollapp_data",
]
