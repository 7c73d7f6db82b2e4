from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from car_costs.domain.errors import ValidationError


class InvalidPaymentPlanInput(ValidationError):
    pass


MAX_TERM_MONTHS = 120


@dataclass(frozen=True, slots=True)
class PaymentPlanRequest:
    principal: Decimal
    annual_rate: Decimal  # percent, e.g. 7.5
    term_months: int

    def validate(self) -> None:
        if self.principal <= 0:
            raise InvalidPaymentPlanInput("principal must be > 0")
        if self.annual_rate < 0:
            raise InvalidPaymentPlanInput("annual_rate must be >= 0")
        if not 1 <= self.term_months <= MAX_TERM_MONTHS:
            raise InvalidPaymentPlanInput(f"term_months must be between 1 and {MAX_TERM_MONTHS}")


@dataclass(frozen=True, slots=True)
class PaymentPlan:
    principal: Decimal
    annual_rate: Decimal
    term_months: int
    monthly_payment: Decimal
    total_paid: Decimal
    total_interest: Decimal
