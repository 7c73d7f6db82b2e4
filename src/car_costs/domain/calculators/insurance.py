from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, localcontext

from car_costs.domain.finance_math import ENGINE_CONTEXT
from car_costs.domain.ownership import OwnershipInput

BASE_PREMIUM = Decimal("600")

NO_CLAIMS_DISCOUNT_PER_YEAR = Decimal("0.10")
MAX_NO_CLAIMS_DISCOUNT = Decimal("0.70")

NEUTRAL_INSURANCE_GROUP = 25
GROUP_STEP = Decimal("0.05")

HIGH_MILEAGE = 12_000
LOW_MILEAGE = 6_000


@dataclass(frozen=True, slots=True)
class InsuranceCosts:
    annual_insurance: Decimal
    total_insurance: Decimal


def _age_multiplier(driver_age: int) -> Decimal:
    if driver_age < 25:
        return Decimal("2.5")
    if driver_age < 30:
        return Decimal("1.8")
    if driver_age > 60:
        return Decimal("1.2")
    return Decimal("1")


def _mileage_multiplier(annual_mileage: int) -> Decimal:
    if annual_mileage > HIGH_MILEAGE:
        return Decimal("1.2")
    if annual_mileage < LOW_MILEAGE:
        return Decimal("0.9")
    return Decimal("1")


def annual_premium(data: OwnershipInput) -> Decimal:
    """
    Simplified UK premium: a fixed base adjusted, in order, by driver age,
    no-claims discount, insurance group and annual mileage.
    """
    with localcontext(ENGINE_CONTEXT):
        premium = BASE_PREMIUM * _age_multiplier(data.driver_age)

        discount = min(data.no_claims_years * NO_CLAIMS_DISCOUNT_PER_YEAR, MAX_NO_CLAIMS_DISCOUNT)
        premium *= 1 - discount

        premium *= 1 + (data.insurance_group - NEUTRAL_INSURANCE_GROUP) * GROUP_STEP

        return premium * _mileage_multiplier(data.annual_mileage)


def calculate_insurance_costs(data: OwnershipInput) -> InsuranceCosts:
    annual = annual_premium(data)

    with localcontext(ENGINE_CONTEXT):
        total = annual * data.ownership_years * data.inflation_multiplier

    return InsuranceCosts(annual_insurance=annual, total_insurance=total)
