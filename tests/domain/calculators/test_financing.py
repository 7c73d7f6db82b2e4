from decimal import Decimal

import pytest

from car_costs.domain.calculators.financing import calculate_financing_costs
from car_costs.domain.finance_math import amortized_payment
from car_costs.domain.ownership import FinanceType


# ============================================================================
# CASH
# ============================================================================


@pytest.mark.parametrize("price", [Decimal("1"), Decimal("8999.99"), Decimal("25000"), Decimal("120000")])
def test_cash_pays_everything_upfront(make_input, price):
    """Cash purchases: no monthly payment, no interest, upfront = price."""
    costs = calculate_financing_costs(
        make_input(finance_type=FinanceType.CASH, purchase_price=price, deposit=Decimal("5000"))
    )

    assert costs.upfront_cost == price
    assert costs.monthly_payment == 0
    assert costs.total_interest == 0


# ============================================================================
# LOAN / HP
# ============================================================================


@pytest.mark.parametrize("finance_type", [FinanceType.LOAN, FinanceType.HP])
def test_zero_rate_payment_is_principal_over_term(make_input, finance_type):
    costs = calculate_financing_costs(
        make_input(
            finance_type=finance_type,
            purchase_price=Decimal("120000"),
            deposit=Decimal("20000"),
            interest_rate=Decimal("0"),
            loan_term=48,
        )
    )

    assert costs.monthly_payment == Decimal("100000") / 48
    assert costs.upfront_cost == Decimal("20000")


@pytest.mark.parametrize("finance_type", [FinanceType.LOAN, FinanceType.HP])
def test_amortized_loan_interest(make_input, finance_type):
    """Interest = payment * term - (price - deposit)."""
    data = make_input(
        finance_type=finance_type,
        purchase_price=Decimal("25000"),
        deposit=Decimal("5000"),
        interest_rate=Decimal("7.5"),
        loan_term=60,
    )

    costs = calculate_financing_costs(data)

    assert 400 < costs.monthly_payment < 401  # ~400.76
    assert costs.total_interest == costs.monthly_payment * 60 - Decimal("20000")
    assert costs.total_interest > 0
    assert costs.upfront_cost == Decimal("5000")


def test_loan_and_hp_are_identical(make_input):
    loan = calculate_financing_costs(make_input(finance_type=FinanceType.LOAN))
    hp = calculate_financing_costs(make_input(finance_type=FinanceType.HP))

    assert loan == hp


# ============================================================================
# PCP
# ============================================================================


def test_pcp_excludes_balloon_from_amortization(make_input):
    data = make_input(
        finance_type=FinanceType.PCP,
        purchase_price=Decimal("30000"),
        deposit=Decimal("3000"),
        balloon_payment=Decimal("12000"),
        interest_rate=Decimal("6"),
        loan_term=36,
    )

    costs = calculate_financing_costs(data)

    expected_payment = amortized_payment(Decimal("6") / 100 / 12, 36, Decimal("15000"))
    assert costs.monthly_payment == expected_payment
    assert costs.total_interest == expected_payment * 36 + Decimal("12000") - Decimal("27000")
    assert costs.upfront_cost == Decimal("3000")


def test_pcp_payment_is_lower_than_loan(make_input):
    pcp = calculate_financing_costs(
        make_input(finance_type=FinanceType.PCP, balloon_payment=Decimal("10000"))
    )
    loan = calculate_financing_costs(make_input(finance_type=FinanceType.LOAN))

    assert pcp.monthly_payment < loan.monthly_payment


def test_pcp_without_balloon_matches_loan(make_input):
    pcp = calculate_financing_costs(make_input(finance_type=FinanceType.PCP))
    loan = calculate_financing_costs(make_input(finance_type=FinanceType.LOAN))

    assert pcp.monthly_payment == loan.monthly_payment
    assert pcp.total_interest == loan.total_interest


# ============================================================================
# LEASE
# ============================================================================


def test_lease_is_flat_share_of_price_plus_mileage_charge(make_input):
    """2% of price + 0.0001 per allowance mile: 500 + 1 = 501."""
    costs = calculate_financing_costs(
        make_input(
            finance_type=FinanceType.LEASE,
            purchase_price=Decimal("25000"),
            lease_mileage=10_000,
            deposit=Decimal("2500"),
        )
    )

    assert costs.monthly_payment == Decimal("501")
    assert costs.upfront_cost == Decimal("2500")
    assert costs.total_interest == 0


def test_lease_ignores_interest_rate(make_input):
    low = calculate_financing_costs(
        make_input(finance_type=FinanceType.LEASE, interest_rate=Decimal("1"))
    )
    high = calculate_financing_costs(
        make_input(finance_type=FinanceType.LEASE, interest_rate=Decimal("20"))
    )

    assert low == high


# ============================================================================
# UNKNOWN
# ============================================================================


@pytest.mark.parametrize("finance_type", ["rent", "", "CASH"])
def test_unknown_finance_type_yields_zeros(make_input, finance_type):
    """Unknown codes are a silent default, not an error."""
    costs = calculate_financing_costs(make_input(finance_type=finance_type))

    assert costs.upfront_cost == 0
    assert costs.monthly_payment == 0
    assert costs.total_interest == 0


def test_raw_string_code_is_dispatched_like_enum(make_input):
    raw = calculate_financing_costs(make_input(finance_type="loan"))
    member = calculate_financing_costs(make_input(finance_type=FinanceType.LOAN))

    assert raw == member


def test_zero_loan_term_does_not_raise(make_input):
    costs = calculate_financing_costs(
        make_input(finance_type=FinanceType.LOAN, loan_term=0, interest_rate=Decimal("0"))
    )

    assert costs.monthly_payment.is_infinite()
