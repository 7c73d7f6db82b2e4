"""
Reference records the input-collection boundary can use to pre-fill a scenario.

Nothing in this package fetches or stores these records; callers bring their
own catalogue, postcode or fuel-price data.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from decimal import Decimal
from enum import Enum

from car_costs.domain.calculators.fuel import HOME_CHARGING_FACTOR
from car_costs.domain.ownership import FuelType, OwnershipInput, RoadTaxBand, coerce_variant


class InsuranceRisk(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True, slots=True)
class UKCarModel:
    id: str
    make: str
    model: str
    year: int
    fuel_type: FuelType
    fuel_efficiency: Decimal
    insurance_group: int
    road_tax_band: RoadTaxBand
    co2_emissions: int
    average_price: Decimal


@dataclass(frozen=True, slots=True)
class PostcodeData:
    postcode: str
    region: str
    insurance_risk: InsuranceRisk
    congestion_zones: tuple[str, ...] = field(default_factory=tuple)
    average_insurance: Decimal = Decimal("0")


@dataclass(frozen=True, slots=True)
class FuelPriceData:
    """Pump prices per litre and electricity prices per kWh."""

    petrol: Decimal
    diesel: Decimal
    electricity_home: Decimal
    electricity_public: Decimal
    last_updated: date


def apply_vehicle(data: OwnershipInput, vehicle: UKCarModel) -> OwnershipInput:
    """Copy the catalogue attributes of a vehicle onto a scenario."""
    return replace(
        data,
        make=vehicle.make,
        model=vehicle.model,
        fuel_type=vehicle.fuel_type,
        fuel_efficiency=vehicle.fuel_efficiency,
        insurance_group=vehicle.insurance_group,
        road_tax_band=vehicle.road_tax_band,
        purchase_price=vehicle.average_price,
    )


def apply_fuel_prices(data: OwnershipInput, prices: FuelPriceData) -> OwnershipInput:
    """
    Set the scenario's fuel and electricity prices from a price snapshot.

    The engine derives home and public charging rates from a single
    electricity price (home = 0.8 x price), so the home tariff is scaled
    back up to that reference price. Diesel cars take the diesel pump price;
    everything else takes petrol.
    """
    fuel_type = coerce_variant(FuelType, data.fuel_type)
    fuel_price = prices.diesel if fuel_type is FuelType.DIESEL else prices.petrol

    return replace(
        data,
        fuel_price=fuel_price,
        electricity_price=prices.electricity_home / HOME_CHARGING_FACTOR,
    )


def apply_postcode(data: OwnershipInput, area: PostcodeData) -> OwnershipInput:
    """Record the postcode and whether the area sits inside a congestion zone."""
    return replace(
        data,
        postcode=area.postcode,
        congestion_zone=bool(area.congestion_zones),
    )
