from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from car_costs.domain.finance_math import amortized_payment
from car_costs.domain.payment_plan import PaymentPlan, PaymentPlanRequest


@dataclass(frozen=True, slots=True)
class CalculatePaymentPlan:
    """
    Standalone repayment plan for presentation code (e.g. a finance quote panel).

    Unlike the cost engine, this rejects invalid input and rounds.

    Rounding policy:
    - The monthly payment is computed at full precision, then rounded to
      2 decimal places (pence) using ROUND_HALF_UP
    - Totals are computed from the rounded monthly payment (not re-rounded),
      so total_paid = monthly_payment * term_months exactly
    """

    def execute(self, req: PaymentPlanRequest) -> PaymentPlan:
        req.validate()

        monthly_rate = req.annual_rate / 100 / 12
        monthly_payment_precise = amortized_payment(monthly_rate, req.term_months, req.principal)
        monthly_payment = monthly_payment_precise.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)

        total_paid = monthly_payment * req.term_months
        total_interest = total_paid - req.principal

        return PaymentPlan(
            principal=req.principal,
            annual_rate=req.annual_rate,
            term_months=req.term_months,
            monthly_payment=monthly_payment,
            total_paid=total_paid,
            total_interest=total_interest,
        )
