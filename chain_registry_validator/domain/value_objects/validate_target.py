"""Validation target (registry tier)."""

from enum import Enum


class ValidateTarget(str, Enum):
    """Top-level registry partition, validated as one group."""

    MAINNET = "mainnet"
    TESTNET = "testnet"
    DEVNET = "devnet"
    INTERNAL_DEVNET = "internal-devnet"

    @property
    def display_name(self) -> str:
        """Human-readable group name used in report lines.

        Example:
            >>> ValidateTarget.INTERNAL_DEVNET.display_name
            'Internal Devnet'
        """
        if self is ValidateTarget.INTERNAL_DEVNET:
            return "Internal Devnet"
        return self.value[0].upper() + self.value[1:]

    @property
    def sub_directory_name(self) -> str:
        """Directory holding this tier's chains inside the registry."""
        return self.value

    def __str__(self) -> str:
        return self.display_name
