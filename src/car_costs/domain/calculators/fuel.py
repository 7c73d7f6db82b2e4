from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, localcontext

from car_costs.domain.finance_math import ENGINE_CONTEXT
from car_costs.domain.ownership import FuelType, OwnershipInput, coerce_variant

LITRES_PER_UK_GALLON = Decimal("4.546")

# Charging rates relative to the quoted electricity price.
HOME_CHARGING_FACTOR = Decimal("0.8")
PUBLIC_CHARGING_FACTOR = Decimal("1.5")

# Hybrids: half the miles on each power source, with the electric share
# penalised by doubling the efficiency divisor.
HYBRID_ELECTRIC_SHARE = Decimal("0.5")
HYBRID_ELECTRIC_EFFICIENCY_PENALTY = 2


@dataclass(frozen=True, slots=True)
class FuelCosts:
    annual_fuel_cost: Decimal
    total_fuel_cost: Decimal


def petrol_cost_per_mile(data: OwnershipInput) -> Decimal:
    """Cost of one mile with efficiency read as miles per UK gallon."""
    with localcontext(ENGINE_CONTEXT):
        return (LITRES_PER_UK_GALLON / data.fuel_efficiency) * data.fuel_price


def _combustion(data: OwnershipInput) -> Decimal:
    with localcontext(ENGINE_CONTEXT):
        litres_per_mile = LITRES_PER_UK_GALLON / data.fuel_efficiency
        return data.annual_mileage * litres_per_mile * data.fuel_price


def _electric(data: OwnershipInput) -> Decimal:
    # home_charging is not read; public_charging_frequency alone sets the blend.
    with localcontext(ENGINE_CONTEXT):
        home_rate = data.electricity_price * HOME_CHARGING_FACTOR
        public_rate = data.electricity_price * PUBLIC_CHARGING_FACTOR
        public_portion = data.public_charging_frequency / 100
        home_portion = (100 - data.public_charging_frequency) / 100

        blended_rate = home_rate * home_portion + public_rate * public_portion
        return data.annual_mileage * blended_rate / data.fuel_efficiency


def _hybrid(data: OwnershipInput) -> Decimal:
    with localcontext(ENGINE_CONTEXT):
        electric_portion = data.annual_mileage * HYBRID_ELECTRIC_SHARE
        petrol_portion = data.annual_mileage * (1 - HYBRID_ELECTRIC_SHARE)

        petrol_litres = (LITRES_PER_UK_GALLON / data.fuel_efficiency) * petrol_portion
        petrol_cost = petrol_litres * data.fuel_price
        electric_cost = (electric_portion * data.electricity_price) / (
            data.fuel_efficiency * HYBRID_ELECTRIC_EFFICIENCY_PENALTY
        )

        return petrol_cost + electric_cost


def annual_fuel_cost(data: OwnershipInput) -> Decimal:
    fuel_type = coerce_variant(FuelType, data.fuel_type)

    if fuel_type in (FuelType.PETROL, FuelType.DIESEL):
        return _combustion(data)
    if fuel_type is FuelType.ELECTRIC:
        return _electric(data)
    if fuel_type is FuelType.HYBRID:
        return _hybrid(data)
    return Decimal("0")


def calculate_fuel_costs(data: OwnershipInput) -> FuelCosts:
    annual = annual_fuel_cost(data)

    with localcontext(ENGINE_CONTEXT):
        total = annual * data.ownership_years * data.inflation_multiplier

    return FuelCosts(annual_fuel_cost=annual, total_fuel_cost=total)
