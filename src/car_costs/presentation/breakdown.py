from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, localcontext

from car_costs.domain.finance_math import ENGINE_CONTEXT
from car_costs.domain.ownership import CostResult, OwnershipInput


@dataclass(frozen=True, slots=True)
class BreakdownLine:
    label: str
    value: Decimal


def cost_breakdown(result: CostResult) -> list[BreakdownLine]:
    """
    Rows of the results table, in display order.

    Purchase/Finance shows upfront cost plus interest, so the rows do not
    sum to total_cost_of_ownership for financed purchases.
    """
    with localcontext(ENGINE_CONTEXT):
        purchase = result.upfront_cost + result.total_interest

    return [
        BreakdownLine("Purchase/Finance", purchase),
        BreakdownLine("Fuel/Energy", result.total_fuel_cost),
        BreakdownLine("Insurance", result.total_insurance),
        BreakdownLine("Road Tax", result.total_road_tax),
        BreakdownLine("Maintenance", result.total_maintenance),
        BreakdownLine("Depreciation", result.depreciation_loss),
    ]


def annual_running_costs(data: OwnershipInput, result: CostResult) -> Decimal:
    """Headline running-cost figure: annual fuel, insurance and road tax over ownership years."""
    with localcontext(ENGINE_CONTEXT):
        annual = result.annual_fuel_cost + result.annual_insurance + result.annual_road_tax
        return annual / data.ownership_years
