"""Validation context passed to every rule."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..application.services.group_tracker import GroupTracker


@dataclass
class ValidationContext:
    """Per-chain state shared by the rule battery.

    Attributes:
        chain_dir: Directory holding the chain record and its assets
        tracker: Uniqueness tracker of the group being walked
        additional_chain_types: Chain type tags accepted on top of the
            built-in list
    """

    chain_dir: Path
    tracker: GroupTracker
    additional_chain_types: tuple[str, ...] = field(default_factory=tuple)

    @property
    def chain_dir_name(self) -> str:
        """Directory name identifying the chain in reports."""
        return self.chain_dir.name
