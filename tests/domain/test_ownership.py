from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from car_costs.domain.ownership import (
    FinanceType,
    FuelType,
    RoadTaxBand,
    coerce_variant,
)


def test_coerce_variant_keeps_members():
    assert coerce_variant(FuelType, FuelType.ELECTRIC) is FuelType.ELECTRIC


def test_coerce_variant_resolves_raw_codes():
    assert coerce_variant(FinanceType, "pcp") is FinanceType.PCP
    assert coerce_variant(RoadTaxBand, "K") is RoadTaxBand.K


@pytest.mark.parametrize("value", ["lpg", "Petrol", "", None])
def test_coerce_variant_returns_none_for_unknown_codes(value):
    assert coerce_variant(FuelType, value) is None


def test_input_is_immutable(make_input):
    data = make_input()

    with pytest.raises(FrozenInstanceError):
        data.purchase_price = Decimal("1")  # type: ignore[misc]


def test_inflation_multiplier_is_flat(make_input):
    assert make_input(inflation_rate=Decimal("2.5")).inflation_multiplier == Decimal("1.025")
    assert make_input(inflation_rate=Decimal("0")).inflation_multiplier == 1
