from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import Callable

from car_costs.domain.finance_math import ENGINE_CONTEXT, amortized_payment
from car_costs.domain.ownership import FinanceType, OwnershipInput, coerce_variant

# Lease approximation: a flat share of the price plus a per-mile allowance charge.
LEASE_PRICE_SHARE = Decimal("0.02")
LEASE_MILEAGE_CHARGE = Decimal("0.0001")


@dataclass(frozen=True, slots=True)
class FinancingCosts:
    upfront_cost: Decimal
    monthly_payment: Decimal
    total_interest: Decimal


NO_FINANCING = FinancingCosts(
    upfront_cost=Decimal("0"),
    monthly_payment=Decimal("0"),
    total_interest=Decimal("0"),
)


def _monthly_rate(data: OwnershipInput) -> Decimal:
    return data.interest_rate / 100 / 12


def _cash(data: OwnershipInput) -> FinancingCosts:
    return FinancingCosts(
        upfront_cost=data.purchase_price,
        monthly_payment=Decimal("0"),
        total_interest=Decimal("0"),
    )


def _amortized_loan(data: OwnershipInput) -> FinancingCosts:
    """Loan and HP: the whole amount after the deposit is amortized."""
    principal = data.purchase_price - data.deposit
    monthly_payment = amortized_payment(_monthly_rate(data), data.loan_term, principal)

    return FinancingCosts(
        upfront_cost=data.deposit,
        monthly_payment=monthly_payment,
        total_interest=monthly_payment * data.loan_term - principal,
    )


def _pcp(data: OwnershipInput) -> FinancingCosts:
    """PCP: the balloon is deferred to the end and excluded from the monthly amortization."""
    principal = data.purchase_price - data.deposit - data.balloon_payment
    monthly_payment = amortized_payment(_monthly_rate(data), data.loan_term, principal)
    total_paid = monthly_payment * data.loan_term + data.balloon_payment

    return FinancingCosts(
        upfront_cost=data.deposit,
        monthly_payment=monthly_payment,
        total_interest=total_paid - (data.purchase_price - data.deposit),
    )


def _lease(data: OwnershipInput) -> FinancingCosts:
    # Flat approximation, not amortized. Leases carry no interest line.
    return FinancingCosts(
        upfront_cost=data.deposit,
        monthly_payment=data.purchase_price * LEASE_PRICE_SHARE
        + data.lease_mileage * LEASE_MILEAGE_CHARGE,
        total_interest=Decimal("0"),
    )


_CALCULATORS: dict[FinanceType, Callable[[OwnershipInput], FinancingCosts]] = {
    FinanceType.CASH: _cash,
    FinanceType.LOAN: _amortized_loan,
    FinanceType.HP: _amortized_loan,
    FinanceType.PCP: _pcp,
    FinanceType.LEASE: _lease,
}


def calculate_financing_costs(data: OwnershipInput) -> FinancingCosts:
    """Upfront cost, monthly payment and total interest for the chosen finance type."""
    finance_type = coerce_variant(FinanceType, data.finance_type)
    if finance_type is None:
        return NO_FINANCING

    with localcontext(ENGINE_CONTEXT):
        return _CALCULATORS[finance_type](data)
