from decimal import Decimal

import pytest

from car_costs.domain.calculators.break_even import (
    break_even_mileage,
    break_even_years,
    electric_cost_per_mile,
)
from car_costs.domain.calculators.fuel import petrol_cost_per_mile


def test_break_even_years_is_placeholder(make_input):
    assert break_even_years(make_input()) == Decimal("3.5")
    assert break_even_years(make_input(annual_mileage=0, purchase_price=Decimal("1"))) == Decimal("3.5")


def test_break_even_mileage_placeholder_when_electric_is_cheaper(make_input):
    """0.30 / 50 = 0.006 per mile vs petrol 0.15911 per mile."""
    assert break_even_mileage(make_input()) == Decimal("10000")


@pytest.mark.parametrize("efficiency", [Decimal("1"), Decimal("4"), Decimal("35"), Decimal("60")])
@pytest.mark.parametrize("fuel_price", [Decimal("0.01"), Decimal("0.05"), Decimal("1.50")])
@pytest.mark.parametrize("electricity_price", [Decimal("0.10"), Decimal("0.30"), Decimal("0.80")])
def test_never_breaks_even_when_electric_is_not_cheaper(
    make_input, efficiency, fuel_price, electricity_price
):
    data = make_input(
        fuel_efficiency=efficiency,
        fuel_price=fuel_price,
        electricity_price=electricity_price,
    )

    mileage = break_even_mileage(data)

    if electric_cost_per_mile(data) >= petrol_cost_per_mile(data):
        assert mileage.is_infinite()
        assert mileage > 0
    else:
        assert mileage == Decimal("10000")


def test_equal_cost_per_mile_never_breaks_even(make_input):
    """Electricity at exactly 4.546 * fuel price gives identical per-mile costs."""
    data = make_input(fuel_price=Decimal("0.10"), electricity_price=Decimal("0.4546"))

    assert break_even_mileage(data).is_infinite()
