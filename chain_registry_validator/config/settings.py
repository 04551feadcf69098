"""Validator settings value."""

from __future__ import annotations

from dataclasses import dataclass

from ..domain.value_objects import ValidateTarget


@dataclass(frozen=True)
class ValidatorSettings:
    """Effective settings of one validation run.

    Attributes:
        targets: Tiers to validate, in canonical order
        stop_on_error: Stop the run at the first violation
        additional_chain_types: Chain type tags accepted on top of the
            built-in ones
    """

    targets: tuple[ValidateTarget, ...] = tuple(ValidateTarget)
    stop_on_error: bool = False
    additional_chain_types: tuple[str, ...] = ()

    def describe_targets(self) -> str:
        """Space separated group names, as announced before the run."""
        return " ".join(str(target) for target in self.targets)
