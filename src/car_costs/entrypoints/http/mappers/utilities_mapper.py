from __future__ import annotations

from decimal import Decimal, InvalidOperation

from car_costs.domain.depreciation import DepreciationPoint, DepreciationRequest
from car_costs.domain.errors import ValidationError
from car_costs.domain.payment_plan import PaymentPlan, PaymentPlanRequest
from car_costs.entrypoints.http.dtos.utilities import (
    DepreciationPointDTO,
    DepreciationScheduleResponseDTO,
    PaymentPlanRequestDTO,
    PaymentPlanResponseDTO,
)
from car_costs.entrypoints.http.mappers.ownership_mapper import decimal_to_str


def _parse_decimal(field: str, raw: str, errors: list[dict[str, str]]) -> Decimal:
    try:
        return Decimal(raw)
    except (InvalidOperation, ValueError):
        errors.append(
            {
                "field": field,
                "message": f"Must be a valid decimal: {raw}",
                "code": "INVALID_DECIMAL",
            }
        )
        return Decimal("0")  # Placeholder to continue validation


class PaymentPlanMapper:
    """Maps between REST DTOs and domain models for repayment quotes."""

    @staticmethod
    def to_domain_request(dto: PaymentPlanRequestDTO) -> PaymentPlanRequest:
        """
        Raises:
            ValidationError: If string values cannot be converted to valid Decimals
        """
        errors: list[dict[str, str]] = []
        principal = _parse_decimal("principal", dto.principal, errors)
        annual_rate = _parse_decimal("annual_rate", dto.annual_rate, errors)

        if errors:
            raise ValidationError(errors=errors)

        return PaymentPlanRequest(
            principal=principal,
            annual_rate=annual_rate,
            term_months=dto.term_months,
        )

    @staticmethod
    def to_response(plan: PaymentPlan) -> PaymentPlanResponseDTO:
        return PaymentPlanResponseDTO(
            principal=str(plan.principal),
            annual_rate=str(plan.annual_rate),
            term_months=plan.term_months,
            monthly_payment=str(plan.monthly_payment),
            total_paid=str(plan.total_paid),
            total_interest=str(plan.total_interest),
        )


class DepreciationMapper:
    @staticmethod
    def to_domain_request(purchase_price: str, depreciation_rate: str, years: int) -> DepreciationRequest:
        errors: list[dict[str, str]] = []
        price = _parse_decimal("purchase_price", purchase_price, errors)
        rate = _parse_decimal("depreciation_rate", depreciation_rate, errors)

        if errors:
            raise ValidationError(errors=errors)

        return DepreciationRequest(purchase_price=price, depreciation_rate=rate, years=years)

    @staticmethod
    def to_response(
        req: DepreciationRequest, points: list[DepreciationPoint]
    ) -> DepreciationScheduleResponseDTO:
        return DepreciationScheduleResponseDTO(
            purchase_price=str(req.purchase_price),
            depreciation_rate=str(req.depreciation_rate),
            points=[
                DepreciationPointDTO(
                    year=point.year,
                    value=decimal_to_str(point.value),
                    loss=decimal_to_str(point.loss),
                )
                for point in points
            ],
        )
