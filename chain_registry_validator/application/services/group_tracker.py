"""Chain id uniqueness tracking for one validation group.

Chain ids must be unique within a group. A tracker is created per group
and dropped afterwards, so the same chain id may appear once in every tier.
"""

from __future__ import annotations

import logging
from typing import Optional

_LOGGER = logging.getLogger(__name__)


class GroupTracker:
    """Chain ids seen while walking one validation group."""

    def __init__(self, group: str) -> None:
        """Initialize tracker.

        Args:
            group: Group display name, used in logs
        """
        self.group = group
        self._chain_ids: dict[str, str] = {}

    def register_chain_id(self, chain_id: str, chain_dir_name: str) -> Optional[str]:
        """Record the chain directory using a chain id.

        Args:
            chain_id: Chain id from the record
            chain_dir_name: Directory name of the chain

        Returns:
            Directory name of the first chain that used this id, or None
            if the id is new to the group
        """
        existing = self._chain_ids.get(chain_id)
        if existing is not None:
            return existing
        self._chain_ids[chain_id] = chain_dir_name
        return None

    def __len__(self) -> int:
        """Number of distinct chain ids seen."""
        return len(self._chain_ids)

    def reset(self) -> None:
        """Forget every chain id (end of the group walk)."""
        _LOGGER.debug("Discarding %d chain ids of group %s", len(self._chain_ids), self.group)
        self._chain_ids.clear()
