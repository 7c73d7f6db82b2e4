"""UK car ownership cost calculator."""

from car_costs.domain.ownership import CostResult, OwnershipInput
from car_costs.use_cases.calculate_car_costs import CalculateCarCosts, calculate_car_costs

__all__ = [
    "CalculateCarCosts",
    "CostResult",
    "OwnershipInput",
    "calculate_car_costs",
]
