"""
Dependency injection for FastAPI routes.

Use cases are stateless and cheap, so each request builds its own.
Display settings are read from the environment per request, which lets
tests override them with dependency_overrides.
"""

from __future__ import annotations

from car_costs.infra.config import format_settings
from car_costs.presentation.formatting import FormatSettings
from car_costs.use_cases.calculate_car_costs import CalculateCarCosts
from car_costs.use_cases.calculate_payment_plan import CalculatePaymentPlan
from car_costs.use_cases.project_depreciation import ProjectDepreciation


def get_calculate_car_costs_use_case() -> CalculateCarCosts:
    return CalculateCarCosts()


def get_calculate_payment_plan_use_case() -> CalculatePaymentPlan:
    return CalculatePaymentPlan()


def get_project_depreciation_use_case() -> ProjectDepreciation:
    return ProjectDepreciation()


def get_format_settings() -> FormatSettings:
    """
    Locale and currency used for the formatted display strings.

    Raises:
        ValueError: If CAR_COSTS_LOCALE is not a supported locale
    """
    return format_settings()
