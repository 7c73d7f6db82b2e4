from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, localcontext

from car_costs.domain.finance_math import ENGINE_CONTEXT
from car_costs.domain.ownership import OwnershipInput

MOT_FEE = Decimal("54.85")
SERVICE_COST = Decimal("300")


@dataclass(frozen=True, slots=True)
class MaintenanceCosts:
    annual_mot: Decimal
    total_maintenance: Decimal


def annual_servicing_cost(data: OwnershipInput) -> Decimal:
    """Servicing scales with the number of service intervals covered each year."""
    with localcontext(ENGINE_CONTEXT):
        return (Decimal(data.annual_mileage) / data.servicing_interval) * SERVICE_COST


def calculate_maintenance_costs(data: OwnershipInput) -> MaintenanceCosts:
    breakdown = data.breakdown_cost if data.breakdown_cover else Decimal("0")

    with localcontext(ENGINE_CONTEXT):
        annual_total = data.annual_maintenance + MOT_FEE + annual_servicing_cost(data) + breakdown
        total = annual_total * data.ownership_years * data.inflation_multiplier

    return MaintenanceCosts(annual_mot=MOT_FEE, total_maintenance=total)
