"""
Numeric building blocks shared by the cost engine and presentation code.

All functions here are total: they evaluate in ENGINE_CONTEXT, where every
decimal trap is disabled, so degenerate inputs yield Infinity or NaN rather
than raising. A zero-month term, for instance, produces an infinite payment.
"""

from __future__ import annotations

from decimal import Context, Decimal, localcontext

# Signals still set their flags but never raise:
# - DivisionByZero -> +/-Infinity
# - InvalidOperation (0/0, Infinity - Infinity) -> NaN
# - Overflow -> +/-Infinity
ENGINE_CONTEXT = Context(prec=28, traps=[])

DEFAULT_DEPRECIATION_RATE = Decimal("0.15")


def amortized_payment(rate: Decimal, term: int | Decimal, principal: Decimal) -> Decimal:
    """
    Level payment that repays `principal` over `term` periods at `rate` per period.

    Standard amortized loan payment:
    payment = rate * principal * (1+rate)^term / ((1+rate)^term - 1)

    A zero rate is handled separately (principal / term) to avoid dividing
    by zero.
    """
    with localcontext(ENGINE_CONTEXT):
        if rate == 0:
            return principal / term

        factor = (1 + rate) ** term
        return (rate * principal * factor) / (factor - 1)


def compound_depreciation(
    purchase_price: Decimal,
    current_year: int,
    total_years: int,
    depreciation_rate: Decimal = DEFAULT_DEPRECIATION_RATE,
) -> Decimal:
    """
    Value of the car after `current_year` years of compounding depreciation.

    `depreciation_rate` is a fraction (0.15 = 15% per year). `total_years`
    is accepted for call-site symmetry with schedules and has no effect.

    The cost engine's aggregation uses flat depreciation
    (purchase price - resale value), not this helper.
    """
    with localcontext(ENGINE_CONTEXT):
        return purchase_price * (1 - depreciation_rate) ** current_year


def depreciation_schedule(
    purchase_price: Decimal,
    total_years: int,
    depreciation_rate: Decimal = DEFAULT_DEPRECIATION_RATE,
) -> list[Decimal]:
    """Values at the end of each year 0..total_years, inclusive."""
    return [
        compound_depreciation(purchase_price, year, total_years, depreciation_rate)
        for year in range(total_years + 1)
    ]
