from fastapi import APIRouter, Depends

from car_costs.entrypoints.http.dependencies import (
    get_calculate_car_costs_use_case,
    get_format_settings,
)
from car_costs.entrypoints.http.dtos.costs import CostResponseDTO, OwnershipRequestDTO
from car_costs.entrypoints.http.error_responses import ErrorResponse
from car_costs.entrypoints.http.mappers.ownership_mapper import OwnershipMapper
from car_costs.presentation.formatting import FormatSettings
from car_costs.use_cases.calculate_car_costs import CalculateCarCosts

router = APIRouter(tags=["Costs"])


@router.post(
    "/costs/calculate",
    response_model=CostResponseDTO,
    summary="Calculate total cost of ownership",
    description="""
    Estimate what owning a car costs over the ownership period.

    ## Monetary Values
    - Amounts and rates are strings (e.g., "25000.00", "7.5")
    - Rates are percentages: "7.5" means 7.5%
    - Responses are rounded to 2 decimal places; zero total mileage yields
      "Infinity" or "NaN" for cost_per_mile

    ## Calculation
    - Financing: cash, loan, hp (amortized), pcp (amortized with balloon), lease (flat approximation)
    - Fuel: petrol/diesel by MPG (UK gallons), electric by miles/kWh with a home/public blend, hybrid 50/50
    - Insurance: 600 base adjusted by age, no-claims, group and mileage
    - Road tax: VED band lookup (A-M)
    - Maintenance: budget + MOT + servicing + breakdown cover
    - Inflation is applied once as a flat multiplier to fuel, insurance and maintenance
    - total_cost_of_ownership = upfront + fuel + insurance + road tax + maintenance + (price - resale)
    - net_cost = total_cost_of_ownership - resale_value
    - break_even_years and break_even_mileage are placeholder estimates
    """,
    responses={
        422: {"model": ErrorResponse, "description": "Validation error"},
    },
)
def calculate_costs(
    payload: OwnershipRequestDTO,
    use_case: CalculateCarCosts = Depends(get_calculate_car_costs_use_case),
    settings: FormatSettings = Depends(get_format_settings),
) -> CostResponseDTO:
    """
    Calculate costs endpoint.

    Follows the parse → validate → execute → map pattern.
    """
    # 1. Map to domain input (validates everything the engine does not)
    data = OwnershipMapper.to_domain_input(payload)

    # 2. Execute use case
    result = use_case.execute(data)

    # 3. Map to response (Decimal → string, plus display strings)
    return OwnershipMapper.to_response(data, result, settings)
