from decimal import Decimal

from car_costs.domain.ownership import FinanceType
from car_costs.presentation.breakdown import annual_running_costs, cost_breakdown
from car_costs.use_cases.calculate_car_costs import calculate_car_costs


def test_breakdown_rows_in_display_order(make_input):
    result = calculate_car_costs(make_input())

    labels = [line.label for line in cost_breakdown(result)]

    assert labels == [
        "Purchase/Finance",
        "Fuel/Energy",
        "Insurance",
        "Road Tax",
        "Maintenance",
        "Depreciation",
    ]


def test_purchase_row_adds_interest_to_upfront(make_input):
    result = calculate_car_costs(make_input(finance_type=FinanceType.LOAN, deposit=Decimal("5000")))

    purchase = cost_breakdown(result)[0]

    assert purchase.value == Decimal("5000") + result.total_interest


def test_rows_match_result_totals(make_input):
    result = calculate_car_costs(make_input())

    values = {line.label: line.value for line in cost_breakdown(result)}

    assert values["Fuel/Energy"] == result.total_fuel_cost
    assert values["Insurance"] == result.total_insurance
    assert values["Road Tax"] == result.total_road_tax
    assert values["Maintenance"] == result.total_maintenance
    assert values["Depreciation"] == result.depreciation_loss


def test_annual_running_costs_divides_by_ownership_years(make_input):
    """(1272.88 fuel + 600 insurance + 150 road tax) / 5 years = 404.576."""
    data = make_input()

    assert annual_running_costs(data, calculate_car_costs(data)) == Decimal("404.576")
