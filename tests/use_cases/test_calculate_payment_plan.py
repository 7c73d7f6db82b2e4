from decimal import Decimal

import pytest

from car_costs.domain.errors import ValidationError
from car_costs.domain.payment_plan import InvalidPaymentPlanInput, PaymentPlanRequest
from car_costs.use_cases.calculate_payment_plan import CalculatePaymentPlan


# ============================================================================
# VALIDATION TESTS
# ============================================================================


def test_rejects_zero_principal():
    """Principal must be greater than zero."""
    uc = CalculatePaymentPlan()
    req = PaymentPlanRequest(principal=Decimal("0"), annual_rate=Decimal("5"), term_months=36)

    with pytest.raises(InvalidPaymentPlanInput, match="principal must be > 0"):
        uc.execute(req)


def test_rejects_negative_rate():
    uc = CalculatePaymentPlan()
    req = PaymentPlanRequest(principal=Decimal("10000"), annual_rate=Decimal("-1"), term_months=36)

    with pytest.raises(InvalidPaymentPlanInput, match="annual_rate must be >= 0"):
        uc.execute(req)


@pytest.mark.parametrize("term", [0, -12, 121])
def test_rejects_out_of_range_terms(term):
    uc = CalculatePaymentPlan()
    req = PaymentPlanRequest(principal=Decimal("10000"), annual_rate=Decimal("5"), term_months=term)

    with pytest.raises(InvalidPaymentPlanInput, match="term_months must be between 1 and 120"):
        uc.execute(req)


def test_invalid_input_is_a_validation_error():
    """Rejections surface as 422 through the domain error handler."""
    assert issubclass(InvalidPaymentPlanInput, ValidationError)


# ============================================================================
# CALCULATION TESTS
# ============================================================================


def test_calculates_known_monthly_payment():
    """20,000 over 60 months at 7.5% is 400.76 a month."""
    plan = CalculatePaymentPlan().execute(
        PaymentPlanRequest(principal=Decimal("20000.00"), annual_rate=Decimal("7.5"), term_months=60)
    )

    assert plan.monthly_payment == Decimal("400.76")
    assert plan.total_paid == Decimal("24045.60")
    assert plan.total_interest == Decimal("4045.60")


def test_zero_rate_splits_principal_evenly():
    plan = CalculatePaymentPlan().execute(
        PaymentPlanRequest(principal=Decimal("100000"), annual_rate=Decimal("0"), term_months=48)
    )

    assert plan.monthly_payment == Decimal("2083.33")
    assert abs(plan.total_interest) < Decimal("0.50")


def test_monthly_payment_is_rounded_to_pence():
    plan = CalculatePaymentPlan().execute(
        PaymentPlanRequest(principal=Decimal("12345.67"), annual_rate=Decimal("9.9"), term_months=37)
    )

    assert plan.monthly_payment == plan.monthly_payment.quantize(Decimal("0.01"))


def test_totals_are_computed_from_rounded_payment():
    plan = CalculatePaymentPlan().execute(
        PaymentPlanRequest(principal=Decimal("12345.67"), annual_rate=Decimal("9.9"), term_months=37)
    )

    assert plan.total_paid == plan.monthly_payment * 37
    assert plan.total_interest == plan.total_paid - plan.principal


def test_longer_term_means_lower_payment_but_more_interest():
    uc = CalculatePaymentPlan()
    short = uc.execute(PaymentPlanRequest(Decimal("20000"), Decimal("7.5"), 24))
    long = uc.execute(PaymentPlanRequest(Decimal("20000"), Decimal("7.5"), 84))

    assert long.monthly_payment < short.monthly_payment
    assert long.total_interest > short.total_interest


def test_echoes_request_terms():
    plan = CalculatePaymentPlan().execute(
        PaymentPlanRequest(principal=Decimal("5000"), annual_rate=Decimal("3.25"), term_months=12)
    )

    assert plan.principal == Decimal("5000")
    assert plan.annual_rate == Decimal("3.25")
    assert plan.term_months == 12
