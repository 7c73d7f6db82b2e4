from __future__ import annotations

from dataclasses import replace
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from car_costs.domain.errors import ValidationError
from car_costs.domain.finance_math import ENGINE_CONTEXT
from car_costs.domain.ownership import CostResult, FinanceType, OwnershipInput
from car_costs.domain.postcode import format_postcode, validate_postcode
from car_costs.entrypoints.http.dtos.costs import (
    BreakdownLineDTO,
    CostResponseDTO,
    FormattedCostsDTO,
    OwnershipRequestDTO,
)
from car_costs.presentation.breakdown import annual_running_costs, cost_breakdown
from car_costs.presentation.formatting import FormatSettings, format_currency, format_number

DECIMAL_FIELDS = (
    "purchase_price",
    "deposit",
    "interest_rate",
    "balloon_payment",
    "fuel_efficiency",
    "fuel_price",
    "electricity_price",
    "public_charging_frequency",
    "annual_maintenance",
    "annual_parking",
    "breakdown_cost",
    "depreciation_rate",
    "inflation_rate",
    "resale_value",
)


def decimal_to_str(value: Decimal) -> str:
    """Decimal -> string rounded to pence. Non-finite values keep their names."""
    if not value.is_finite():
        return str(value)

    with localcontext(ENGINE_CONTEXT):
        return str(value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def _field_error(field: str, message: str, code: str = "INVALID_VALUE") -> dict[str, str]:
    return {"field": field, "message": message, "code": code}


class OwnershipMapper:
    """
    Maps between REST DTOs and the cost engine's records.

    This is the input-collection boundary: the engine silently computes
    degenerate results, so every check it skips happens here.
    """

    @staticmethod
    def to_domain_input(dto: OwnershipRequestDTO) -> OwnershipInput:
        """
        Converts request DTO to a fully populated OwnershipInput.

        Args:
            dto: Request DTO with string monetary values

        Returns:
            OwnershipInput with Decimal monetary values

        Raises:
            ValidationError: With one entry per failing field
        """
        errors: list[dict[str, str]] = []
        amounts: dict[str, Decimal] = {}

        for field in DECIMAL_FIELDS:
            raw = getattr(dto, field)
            try:
                amounts[field] = Decimal(raw)
            except (InvalidOperation, ValueError):
                errors.append(
                    _field_error(field, f"Must be a valid decimal: {raw}", "INVALID_DECIMAL")
                )
                amounts[field] = Decimal("0")  # Placeholder to continue validation

        if errors:
            raise ValidationError(errors=errors)

        price = amounts["purchase_price"]

        if not dto.make.strip():
            errors.append(_field_error("make", "Must not be blank"))
        if not dto.model.strip():
            errors.append(_field_error("model", "Must not be blank"))
        if price <= 0:
            errors.append(_field_error("purchase_price", "Must be greater than 0"))
        if amounts["deposit"] > price:
            errors.append(_field_error("deposit", "Must not exceed purchase_price"))
        if amounts["resale_value"] > price:
            errors.append(_field_error("resale_value", "Must not exceed purchase_price"))
        if (
            dto.finance_type is FinanceType.PCP
            and amounts["balloon_payment"] > price - amounts["deposit"]
        ):
            errors.append(
                _field_error("balloon_payment", "Must not exceed purchase_price - deposit")
            )
        if amounts["fuel_efficiency"] <= 0:
            errors.append(_field_error("fuel_efficiency", "Must be greater than 0"))
        if amounts["public_charging_frequency"] > 100:
            errors.append(_field_error("public_charging_frequency", "Must be between 0 and 100"))
        if dto.postcode.strip() and not validate_postcode(dto.postcode):
            errors.append(
                _field_error("postcode", f"Not a valid UK postcode: {dto.postcode}", "INVALID_FORMAT")
            )

        if errors:
            raise ValidationError(errors=errors)

        return OwnershipInput(
            make=dto.make.strip(),
            model=dto.model.strip(),
            car_condition=dto.car_condition,
            fuel_type=dto.fuel_type,
            finance_type=dto.finance_type,
            loan_term=dto.loan_term,
            lease_term=dto.lease_term,
            lease_mileage=dto.lease_mileage,
            annual_mileage=dto.annual_mileage,
            ownership_years=dto.ownership_years,
            driver_age=dto.driver_age,
            no_claims_years=dto.no_claims_years,
            postcode=format_postcode(dto.postcode) if dto.postcode.strip() else "",
            home_charging=dto.home_charging,
            insurance_group=dto.insurance_group,
            road_tax_band=dto.road_tax_band,
            congestion_zone=dto.congestion_zone,
            mot_frequency=dto.mot_frequency,
            servicing_interval=dto.servicing_interval,
            tyre_replacement=dto.tyre_replacement,
            breakdown_cover=dto.breakdown_cover,
            warranty_length=dto.warranty_length,
            **amounts,
        )

    @staticmethod
    def to_response(
        data: OwnershipInput, result: CostResult, settings: FormatSettings
    ) -> CostResponseDTO:
        """
        Converts a CostResult to the response DTO.

        Handles Decimal → string conversion at the boundary and adds the
        display strings for the configured locale and currency.
        """
        pence = replace(settings, currency_decimals=2)

        return CostResponseDTO(
            upfront_cost=decimal_to_str(result.upfront_cost),
            monthly_payment=decimal_to_str(result.monthly_payment),
            total_interest=decimal_to_str(result.total_interest),
            annual_fuel_cost=decimal_to_str(result.annual_fuel_cost),
            total_fuel_cost=decimal_to_str(result.total_fuel_cost),
            annual_insurance=decimal_to_str(result.annual_insurance),
            total_insurance=decimal_to_str(result.total_insurance),
            annual_road_tax=decimal_to_str(result.annual_road_tax),
            total_road_tax=decimal_to_str(result.total_road_tax),
            annual_mot=decimal_to_str(result.annual_mot),
            total_maintenance=decimal_to_str(result.total_maintenance),
            depreciation_loss=decimal_to_str(result.depreciation_loss),
            total_cost_of_ownership=decimal_to_str(result.total_cost_of_ownership),
            cost_per_mile=decimal_to_str(result.cost_per_mile),
            break_even_years=decimal_to_str(result.break_even_years),
            break_even_mileage=decimal_to_str(result.break_even_mileage),
            net_cost=decimal_to_str(result.net_cost),
            breakdown=[
                BreakdownLineDTO(
                    label=line.label,
                    value=decimal_to_str(line.value),
                    formatted=format_currency(line.value, settings),
                )
                for line in cost_breakdown(result)
            ],
            formatted=FormattedCostsDTO(
                total_cost_of_ownership=format_currency(result.total_cost_of_ownership, settings),
                monthly_payment=format_currency(result.monthly_payment, settings),
                annual_running_costs=format_currency(annual_running_costs(data, result), settings),
                cost_per_mile=format_currency(result.cost_per_mile, pence),
                net_cost=format_currency(result.net_cost, settings),
                annual_mileage=format_number(data.annual_mileage, settings=settings),
            ),
        )
