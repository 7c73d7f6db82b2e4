from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import TypeVar


class CarCondition(str, Enum):
    NEW = "new"
    USED = "used"


class FuelType(str, Enum):
    PETROL = "petrol"
    DIESEL = "diesel"
    ELECTRIC = "electric"
    HYBRID = "hybrid"


class FinanceType(str, Enum):
    CASH = "cash"
    LOAN = "loan"
    PCP = "pcp"
    HP = "hp"
    LEASE = "lease"


class RoadTaxBand(str, Enum):
    """UK VED band letter, ordered from cleanest (A) to dirtiest (M)."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    I = "I"  # noqa: E741
    J = "J"
    K = "K"
    L = "L"
    M = "M"


E = TypeVar("E", bound=Enum)


def coerce_variant(enum_cls: type[E], value: E | str | None) -> E | None:
    """
    Resolve a raw code to a member of a closed variant set.

    Legacy or unknown codes resolve to None instead of raising, so each
    calculator can fall back to its own silent default.
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        return None


@dataclass(frozen=True, slots=True)
class OwnershipInput:
    """
    One car-ownership scenario, fully populated by the input-collection boundary.

    Monetary amounts and rates are Decimal. Rates (interest, inflation,
    depreciation, public charging frequency) are percentages, e.g. 7.5 for 7.5%.
    Variant fields accept a raw string so legacy codes can still reach the
    engine; unknown codes get the calculators' defaults.

    The engine does not validate anything here. See OwnershipMapper for the
    checks that run before a calculation.
    """

    # Identity
    make: str
    model: str
    car_condition: CarCondition | str
    fuel_type: FuelType | str

    # Acquisition
    purchase_price: Decimal
    finance_type: FinanceType | str
    deposit: Decimal
    loan_term: int
    interest_rate: Decimal
    balloon_payment: Decimal
    lease_term: int
    lease_mileage: int

    # Usage
    annual_mileage: int
    ownership_years: int
    driver_age: int
    no_claims_years: int
    postcode: str

    # Running costs
    fuel_efficiency: Decimal
    fuel_price: Decimal
    electricity_price: Decimal
    home_charging: bool
    public_charging_frequency: Decimal

    # Fixed costs
    insurance_group: int
    road_tax_band: RoadTaxBand | str
    annual_maintenance: Decimal
    annual_parking: Decimal
    congestion_zone: bool
    mot_frequency: int
    servicing_interval: int
    tyre_replacement: int
    breakdown_cover: bool
    breakdown_cost: Decimal
    warranty_length: int

    # Economic assumptions
    depreciation_rate: Decimal
    inflation_rate: Decimal
    resale_value: Decimal

    @property
    def inflation_multiplier(self) -> Decimal:
        """Flat uplift applied once across the whole ownership period."""
        return 1 + self.inflation_rate / 100


@dataclass(frozen=True, slots=True)
class CostResult:
    upfront_cost: Decimal
    monthly_payment: Decimal
    total_interest: Decimal
    annual_fuel_cost: Decimal
    total_fuel_cost: Decimal
    annual_insurance: Decimal
    total_insurance: Decimal
    annual_road_tax: Decimal
    total_road_tax: Decimal
    annual_mot: Decimal
    total_maintenance: Decimal
    depreciation_loss: Decimal
    total_cost_of_ownership: Decimal
    cost_per_mile: Decimal
    break_even_years: Decimal
    break_even_mileage: Decimal
    net_cost: Decimal
