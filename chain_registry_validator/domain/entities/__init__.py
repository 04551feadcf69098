"""Domain entities for chain registry records."""

from .chain_record import ChainRecord, Currency, EvmRecord, GasPriceSteps, IbcRecord

__all__ = [
    "ChainRecord",
    "Currency",
    "EvmRecord",
    "GasPriceSteps",
    "IbcRecord",
]
