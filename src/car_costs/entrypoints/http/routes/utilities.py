from fastapi import APIRouter, Depends, Query

from car_costs.domain.postcode import format_postcode, validate_postcode
from car_costs.entrypoints.http.dependencies import (
    get_calculate_payment_plan_use_case,
    get_project_depreciation_use_case,
)
from car_costs.entrypoints.http.dtos.costs import MONEY_PATTERN, RATE_PATTERN
from car_costs.entrypoints.http.dtos.utilities import (
    DepreciationScheduleResponseDTO,
    PaymentPlanRequestDTO,
    PaymentPlanResponseDTO,
    PostcodeCheckResponseDTO,
)
from car_costs.entrypoints.http.error_responses import ErrorResponse
from car_costs.entrypoints.http.mappers.utilities_mapper import (
    DepreciationMapper,
    PaymentPlanMapper,
)
from car_costs.use_cases.calculate_payment_plan import CalculatePaymentPlan
from car_costs.use_cases.project_depreciation import ProjectDepreciation

router = APIRouter(tags=["Utilities"])


@router.post(
    "/financing/payment",
    response_model=PaymentPlanResponseDTO,
    summary="Quote an amortized monthly payment",
    description="""
    Monthly payment for a loan at a fixed annual rate.

    - monthly rate = annual_rate / 100 / 12
    - payment = rate × principal × (1+rate)^n / ((1+rate)^n − 1), or principal / n at 0%
    - Monthly payment is rounded to pence; totals are computed from the rounded payment
    """,
    responses={422: {"model": ErrorResponse, "description": "Validation error"}},
)
def quote_payment(
    payload: PaymentPlanRequestDTO,
    use_case: CalculatePaymentPlan = Depends(get_calculate_payment_plan_use_case),
) -> PaymentPlanResponseDTO:
    request = PaymentPlanMapper.to_domain_request(payload)
    plan = use_case.execute(request)
    return PaymentPlanMapper.to_response(plan)


@router.get(
    "/depreciation/schedule",
    response_model=DepreciationScheduleResponseDTO,
    summary="Project compound depreciation",
    description="""
    Value at the end of each year, compounding `depreciation_rate` percent per year.
    Year 0 is the purchase price.
    """,
    responses={422: {"model": ErrorResponse, "description": "Validation error"}},
)
def depreciation_schedule(
    purchase_price: str = Query(examples=["25000.00"], pattern=MONEY_PATTERN),
    depreciation_rate: str = Query(default="15", examples=["15"], pattern=RATE_PATTERN),
    years: int = Query(default=5, ge=1),
    use_case: ProjectDepreciation = Depends(get_project_depreciation_use_case),
) -> DepreciationScheduleResponseDTO:
    request = DepreciationMapper.to_domain_request(purchase_price, depreciation_rate, years)
    points = use_case.execute(request)
    return DepreciationMapper.to_response(request, points)


@router.get(
    "/postcodes/{postcode}",
    response_model=PostcodeCheckResponseDTO,
    summary="Check a UK postcode",
    description="Checks the shape of a UK postcode. Does not check that it exists.",
)
def check_postcode(postcode: str) -> PostcodeCheckResponseDTO:
    return PostcodeCheckResponseDTO(
        postcode=postcode,
        valid=validate_postcode(postcode),
        formatted=format_postcode(postcode),
    )
