"""ValidateRegistryResult DTO."""

from __future__ import annotations

from dataclasses import dataclass, field

from ...domain.value_objects import ValidateTarget


@dataclass
class ValidateRegistryResult:
    """Outcome of validating a registry checkout.

    Attributes:
        targets: Tiers that were requested
        groups_validated: Tiers whose walk finished
        chains_validated: Chain records that went through the rule battery
        violation_count: Violations reported during the run
        aborted: True when a missing tier directory ended the run early
    """

    targets: tuple[ValidateTarget, ...] = field(default_factory=tuple)
    groups_validated: int = 0
    chains_validated: int = 0
    violation_count: int = 0
    aborted: bool = False

    @property
    def success(self) -> bool:
        """Whether the registry passed."""
        return not self.aborted and self.violation_count == 0
