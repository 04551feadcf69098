"""Constants for the chain registry validator.

Allow-lists, patterns and limits shared by the validators and rules.
"""

from __future__ import annotations

import re
from typing import Final

BINARY_NAME: Final = "chain-registry-validator"
SETTINGS_FILENAME: Final = ".chain-registry-validator.yaml"
RECORD_SUFFIX: Final = ".json"

# Chain categories
CHAIN_TYPE_ROLLAPP: Final = "RollApp"
ALLOWED_CHAIN_TYPES: Final = ("RollApp", "Regular", "EVM", "Hub", "Solana")

# Data availability backends
DA_AVAIL: Final = "Avail"
ALLOWED_DA: Final = ("Avail", "Celestia", "local")

# Currency types
CURRENCY_TYPE_MAIN: Final = "main"
ALLOWED_CURRENCY_TYPES: Final = ("main", "regular")

# Numeric limits
EVM_COIN_TYPE: Final = 60
MIN_COIN_TYPE: Final = 0
MAX_COIN_TYPE: Final = 255
MIN_DECIMALS: Final = 0
MAX_DECIMALS: Final = 18
MIN_GAS_ADJUSTMENT: Final = 1.0
MIN_CHAIN_ID_LENGTH: Final = 3
AVAIL_ADDRESS_LENGTH: Final = 48
INT64_MAX: Final = 2**63 - 1
INT64_MIN: Final = -(2**63)

LOGO_EXTENSIONS: Final = (".png", ".jpg", ".jpeg", ".svg")

IBC_CHANNEL_SENTINEL: Final = "-"

# ============================================================================
# PATTERNS
# ============================================================================

CHAIN_ID_ALPHANUMERIC = re.compile(r"^[a-z0-9]+$")
CHAIN_ID_COSMOS = re.compile(r"^[a-z0-9]+-[0-9]+$")
CHAIN_ID_EVM = re.compile(r"^[a-z0-9]+_[0-9]+-[0-9]+$")
CHAIN_ID_MULTI_DASH = re.compile(r"^[a-z0-9-]+-[a-z0-9]+$")

CHAIN_NAME_PROHIBITED = re.compile(r"[<>/\\%]")
BECH32_PREFIX = re.compile(r"^[a-z0-9]+$")

EVM_HEX_CHAIN_ID = re.compile(r"^0x[0-9a-fA-F]+$")
DECIMAL_DIGITS = re.compile(r"^[0-9]+$")

DISPLAY_DENOM = re.compile(r"^[a-zA-Z0-9\s_-]+$", re.ASCII)
BASE_DENOM = re.compile(r"^[a-zA-Z0-9\s_/-]+$", re.ASCII)
IBC_REPRESENTATION = re.compile(r"^ibc/[A-F0-9]{64}$")

IBC_CHANNEL = re.compile(r"^channel-[0-9]+$")
IBC_ALLOWED_DENOM = re.compile(r"^[a-zA-Z0-9_/-]+$")

AVAIL_ADDRESS = re.compile(r"^5[a-zA-Z0-9]+$")
