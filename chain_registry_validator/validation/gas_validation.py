"""Gas validation rules."""

from __future__ import annotations

from ..domain.entities import ChainRecord
from ..domain.helpers import check_gas_adjustment, check_gas_price_steps
from .validation_context import ValidationContext
from .validation_rule import CheckRule


class GasAdjustmentValidation(CheckRule):
    """Gas adjustment is unset (0) or at least 1.0."""

    name = "gas_adjustment"
    label = "Bad gas adjustment"

    def check(self, record: ChainRecord, context: ValidationContext) -> None:
        check_gas_adjustment(record.gas_adjustment)

    def describe(self, record: ChainRecord) -> object:
        return record.gas_adjustment


class GasPriceStepsValidation(CheckRule):
    """Optional gas price steps are positive and ordered."""

    name = "gas_price_steps"
    label = "Bad gas price steps"

    def check(self, record: ChainRecord, context: ValidationContext) -> None:
        steps = record.gas_price_steps
        if steps is not None:
            check_gas_price_steps(steps.low, steps.average, steps.high)

    def describe(self, record: ChainRecord) -> object:
        return record.gas_price_steps
