"""Chain record entities.

A ChainRecord is one chain's registry document. Records are immutable
once decoded and live only while their chain is being validated.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional

from ... import const
from ..exceptions import UrlSetTypeError
from ..value_objects import UrlSet


@dataclass(frozen=True)
class EvmRecord:
    """EVM execution layer metadata.

    Attributes:
        chain_id: Hex chain id, e.g. ``0x44c``
        rpc: EVM JSON-RPC endpoints
    """

    chain_id: str = ""
    rpc: UrlSet = field(default_factory=lambda: UrlSet.parse(None))


@dataclass(frozen=True)
class Currency:
    """One currency of a chain."""

    display_denom: str = ""
    base_denom: str = ""
    ibc_representation: str = ""
    bridge_denom: str = ""
    decimals: int = 0
    logo: str = ""
    type: str = ""

    @property
    def is_main(self) -> bool:
        """Return True for the chain's native currency."""
        return self.type == const.CURRENCY_TYPE_MAIN

    def to_dict(self) -> dict[str, Any]:
        """Serialize with registry field names, omitting an empty logo."""
        data: dict[str, Any] = {
            "displayDenom": self.display_denom,
            "baseDenom": self.base_denom,
            "ibcRepresentation": self.ibc_representation,
            "bridgeDenom": self.bridge_denom,
            "decimals": self.decimals,
        }
        if self.logo:
            data["logo"] = self.logo
        data["type"] = self.type
        return data

    def describe(self) -> str:
        """Compact JSON form used to identify a bad currency in reports.

        Example:
            >>> Currency(display_denom="DYM", base_denom="adym", decimals=18, type="main").describe()
            '{"displayDenom":"DYM","baseDenom":"adym","ibcRepresentation":"","bridgeDenom":"","decimals":18,"type":"main"}'
        """
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)


@dataclass(frozen=True)
class IbcRecord:
    """IBC connection metadata."""

    timeout: int = 0
    hub_channel: str = ""
    channel: str = ""
    allowed_denoms: tuple[str, ...] = ()


@dataclass(frozen=True)
class GasPriceSteps:
    """Suggested gas prices for wallets."""

    low: float = 0.0
    average: float = 0.0
    high: float = 0.0


@dataclass(frozen=True)
class ChainRecord:
    """Domain entity representing one chain's registry record.

    Attributes mirror the JSON document; URL fields keep their source
    shape as UrlSet and are normalized by the get_*_urls() accessors.

    Example:
        >>> record = ChainRecord(chain_id="dym_1100-1", type="RollApp", da="Celestia")
        >>> record.is_rollapp
        True
    """

    chain_id: str = ""
    chain_name: str = ""
    rpc: UrlSet = field(default_factory=lambda: UrlSet.parse(None))
    rest: UrlSet = field(default_factory=lambda: UrlSet.parse(None))
    be_rpc: UrlSet = field(default_factory=lambda: UrlSet.parse(None))
    bech32_prefix: str = ""
    website: str = ""
    da: str = ""
    evm: Optional[EvmRecord] = None
    currencies: tuple[Currency, ...] = ()
    coin_type: int = 0
    gas_adjustment: float = 0.0
    faucet_url: str = ""
    ibc: Optional[IbcRecord] = None
    gas_price_steps: Optional[GasPriceSteps] = None
    logo: str = ""
    type: str = ""
    active: bool = False
    analytics: bool = False
    collect_data: bool = False
    goldberg: bool = False
    avail_address: str = ""

    @property
    def is_rollapp(self) -> bool:
        """RollApp chains are tagged as such, or untyped with a DA backend."""
        return self.type.lower() == const.CHAIN_TYPE_ROLLAPP.lower() or (
            bool(self.da) and not self.type
        )

    @property
    def is_evm_rollapp(self) -> bool:
        """RollApp chains with an EVM block or the Ethereum coin type."""
        return self.is_rollapp and (
            self.evm is not None or self.coin_type == const.EVM_COIN_TYPE
        )

    def get_rpc_urls(self) -> list[str]:
        """RPC endpoints in source order.

        Raises:
            UrlSetTypeError: If the field is not a string or list of strings
        """
        return self.rpc.as_list()

    def get_rest_urls(self) -> list[str]:
        """REST endpoints in source order."""
        return self.rest.as_list()

    def get_be_rpc_urls(self) -> list[str]:
        """Block explorer RPC endpoints in source order."""
        return self.be_rpc.as_list()

    def get_evm_rpc_urls(self) -> list[str]:
        """EVM JSON-RPC endpoints in source order.

        Raises:
            UrlSetTypeError: If there is no evm block or the field has the
                wrong type
        """
        if self.evm is None:
            raise UrlSetTypeError("EVM chain definition is not set")
        return self.evm.rpc.as_list()
