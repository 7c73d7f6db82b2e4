from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable

import pytest

from car_costs.domain.ownership import (
    CarCondition,
    FinanceType,
    FuelType,
    OwnershipInput,
    RoadTaxBand,
)

# Calculator form defaults: a new petrol car bought outright.
DEFAULTS: dict[str, Any] = {
    "make": "Ford",
    "model": "Focus",
    "car_condition": CarCondition.NEW,
    "fuel_type": FuelType.PETROL,
    "purchase_price": Decimal("25000"),
    "finance_type": FinanceType.CASH,
    "deposit": Decimal("0"),
    "loan_term": 60,
    "interest_rate": Decimal("7.5"),
    "balloon_payment": Decimal("0"),
    "lease_term": 36,
    "lease_mileage": 10_000,
    "annual_mileage": 8_000,
    "ownership_years": 5,
    "driver_age": 30,
    "no_claims_years": 0,
    "postcode": "",
    "fuel_efficiency": Decimal("50"),
    "fuel_price": Decimal("1.75"),
    "electricity_price": Decimal("0.30"),
    "home_charging": True,
    "public_charging_frequency": Decimal("20"),
    "insurance_group": 25,
    "road_tax_band": RoadTaxBand.D,
    "annual_maintenance": Decimal("500"),
    "annual_parking": Decimal("0"),
    "congestion_zone": False,
    "mot_frequency": 1,
    "servicing_interval": 12_000,
    "tyre_replacement": 20_000,
    "breakdown_cover": True,
    "breakdown_cost": Decimal("150"),
    "warranty_length": 3,
    "depreciation_rate": Decimal("15"),
    "inflation_rate": Decimal("2.5"),
    "resale_value": Decimal("15000"),
}


def build_input(**overrides: Any) -> OwnershipInput:
    return OwnershipInput(**{**DEFAULTS, **overrides})


@pytest.fixture
def make_input() -> Callable[..., OwnershipInput]:
    """Factory for OwnershipInput with form defaults and per-test overrides."""
    return build_input
