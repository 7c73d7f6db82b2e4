"""
Break-even estimates.

Both values are placeholders rather than derived from the amortized cost
trajectory. Only the mileage estimate looks at the input, to report that an
electric car never breaks even when its per-mile cost is not below petrol's.
"""

from __future__ import annotations

from decimal import Decimal, localcontext

from car_costs.domain.calculators.fuel import petrol_cost_per_mile
from car_costs.domain.finance_math import ENGINE_CONTEXT
from car_costs.domain.ownership import OwnershipInput

PLACEHOLDER_BREAK_EVEN_YEARS = Decimal("3.5")
PLACEHOLDER_BREAK_EVEN_MILEAGE = Decimal("10000")
NEVER = Decimal("Infinity")


def electric_cost_per_mile(data: OwnershipInput) -> Decimal:
    with localcontext(ENGINE_CONTEXT):
        return data.electricity_price / data.fuel_efficiency


def break_even_years(data: OwnershipInput) -> Decimal:
    return PLACEHOLDER_BREAK_EVEN_YEARS


def break_even_mileage(data: OwnershipInput) -> Decimal:
    with localcontext(ENGINE_CONTEXT):
        if electric_cost_per_mile(data) >= petrol_cost_per_mile(data):
            return NEVER

    return PLACEHOLDER_BREAK_EVEN_MILEAGE
