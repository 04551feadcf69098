"""Tests for gas validation rules."""

import dataclasses

import pytest

from chain_registry_validator.domain.entities import GasPriceSteps
from chain_registry_validator.domain.helpers import (
    ValidationError,
    check_gas_adjustment,
    check_gas_price_steps,
    is_valid_gas_price_steps,
)
from chain_registry_validator.validation.gas_validation import (
    GasAdjustmentValidation,
    GasPriceStepsValidation,
)
from tests.doubles import make_record


class TestGasAdjustmentValidation:
    """Test GasAdjustmentValidation rule."""

    def test_unset_passes(self, context):
        """Test zero means unset."""
        assert GasAdjustmentValidation().validate(make_record(gasAdjustment=0), context).valid

    def test_too_small(self, context):
        """Test values below 1.0 are reported."""
        result = GasAdjustmentValidation().validate(make_record(gasAdjustment=0.5), context)
        assert result.errors == ["Bad gas adjustment: 0.5 (gas adjustment must be at least 1.0)"]


class TestGasPriceStepsValidation:
    """Test GasPriceStepsValidation rule."""

    def test_absent_passes(self, context):
        """Test records without steps pass."""
        assert GasPriceStepsValidation().validate(make_record(), context).valid

    def test_ordered_passes(self, context):
        """Test ordered positive steps pass."""
        record = make_record(gasPriceSteps={"low": 1, "average": 1, "high": 2})
        assert GasPriceStepsValidation().validate(record, context).valid

    def test_unordered_reported(self, context):
        """Test unordered steps are reported."""
        record = make_record(gasPriceSteps={"low": 3, "average": 2, "high": 1})
        result = GasPriceStepsValidation().validate(record, context)
        assert result.errors == [
            "Bad gas price steps: GasPriceSteps(low=3.0, average=2.0, high=1.0) "
            "(gas price steps low must not exceed average)"
        ]

    def test_missing_step_reported(self, context):
        """Test a missing step decodes as zero and is rejected."""
        record = make_record(gasPriceSteps={"low": 1, "high": 2})
        result = GasPriceStepsValidation().validate(record, context)
        assert "average must be positive" in result.errors[0]


NAN = float("nan")
INF = float("inf")


class TestNonFiniteGasValues:
    """Test NaN and infinite gas values are never accepted."""

    @pytest.mark.parametrize("value", [NAN, INF, -INF])
    def test_gas_adjustment_rejected(self, value):
        """Test non-finite gas adjustments fail the check."""
        with pytest.raises(ValidationError, match="finite"):
            check_gas_adjustment(value)

    @pytest.mark.parametrize("value", [NAN, INF])
    def test_gas_adjustment_rule_reports(self, context, value):
        """Test the rule reports a non-finite gas adjustment."""
        record = dataclasses.replace(make_record(), gas_adjustment=value)
        result = GasAdjustmentValidation().validate(record, context)
        assert not result.valid
        assert result.errors[0].startswith("Bad gas adjustment:")

    @pytest.mark.parametrize(
        ("steps", "reason"),
        [
            ((NAN, NAN, NAN), "low must be positive"),
            ((1, NAN, 2), "average must be positive"),
            ((1, 2, NAN), "high must be positive"),
            ((-INF, 1, 2), "low must be positive"),
        ],
    )
    def test_gas_price_steps_rejected(self, steps, reason):
        """Test NaN steps fail the check whichever step carries it."""
        with pytest.raises(ValidationError, match=reason):
            check_gas_price_steps(*steps)
        assert not is_valid_gas_price_steps(*steps)

    def test_gas_price_steps_rule_reports_nan(self, context):
        """Test the rule reports NaN steps."""
        record = dataclasses.replace(
            make_record(), gas_price_steps=GasPriceSteps(low=NAN, average=NAN, high=NAN)
        )
        result = GasPriceStepsValidation().validate(record, context)
        assert not result.valid
        assert "low must be positive" in result.errors[0]
