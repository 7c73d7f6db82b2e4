from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import localcontext

from car_costs.domain.calculators.break_even import break_even_mileage, break_even_years
from car_costs.domain.calculators.financing import calculate_financing_costs
from car_costs.domain.calculators.fuel import calculate_fuel_costs
from car_costs.domain.calculators.insurance import calculate_insurance_costs
from car_costs.domain.calculators.maintenance import calculate_maintenance_costs
from car_costs.domain.calculators.road_tax import calculate_road_tax_costs
from car_costs.domain.finance_math import ENGINE_CONTEXT
from car_costs.domain.ownership import CostResult, OwnershipInput

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CalculateCarCosts:
    """
    Estimate the total cost of owning a car over the ownership period.

    Each sub-calculation reads the input only; their outputs are combined here.

    Aggregation policy (reproduced as-is, not corrected):
    - Depreciation is flat: purchase_price - resale_value
    - Cost per mile divides by annual_mileage * ownership_years, so zero miles
      yields Infinity (or NaN when the total is also zero)
    - net_cost subtracts resale_value again, on top of the depreciation
      already inside total_cost_of_ownership
    - Break-even values are placeholders

    No validation is performed and nothing is raised. Callers must check
    their input before executing (see OwnershipMapper).
    """

    def execute(self, data: OwnershipInput) -> CostResult:
        financing = calculate_financing_costs(data)
        fuel = calculate_fuel_costs(data)
        insurance = calculate_insurance_costs(data)
        road_tax = calculate_road_tax_costs(data)
        maintenance = calculate_maintenance_costs(data)

        with localcontext(ENGINE_CONTEXT):
            depreciation_loss = data.purchase_price - data.resale_value

            total_cost_of_ownership = (
                financing.upfront_cost
                + fuel.total_fuel_cost
                + insurance.total_insurance
                + road_tax.total_road_tax
                + maintenance.total_maintenance
                + depreciation_loss
            )

            total_miles = data.annual_mileage * data.ownership_years
            cost_per_mile = total_cost_of_ownership / total_miles

            net_cost = total_cost_of_ownership - data.resale_value

        result = CostResult(
            upfront_cost=financing.upfront_cost,
            monthly_payment=financing.monthly_payment,
            total_interest=financing.total_interest,
            annual_fuel_cost=fuel.annual_fuel_cost,
            total_fuel_cost=fuel.total_fuel_cost,
            annual_insurance=insurance.annual_insurance,
            total_insurance=insurance.total_insurance,
            annual_road_tax=road_tax.annual_road_tax,
            total_road_tax=road_tax.total_road_tax,
            annual_mot=maintenance.annual_mot,
            total_maintenance=maintenance.total_maintenance,
            depreciation_loss=depreciation_loss,
            total_cost_of_ownership=total_cost_of_ownership,
            cost_per_mile=cost_per_mile,
            break_even_years=break_even_years(data),
            break_even_mileage=break_even_mileage(data),
            net_cost=net_cost,
        )

        logger.debug(
            "Calculated car costs",
            extra={
                "finance_type": data.finance_type,
                "fuel_type": data.fuel_type,
                "ownership_years": data.ownership_years,
                "total_cost_of_ownership": str(total_cost_of_ownership),
            },
        )

        return result


def calculate_car_costs(data: OwnershipInput) -> CostResult:
    """Functional entry point for callers that do not need a use-case object."""
    return CalculateCarCosts().execute(data)
