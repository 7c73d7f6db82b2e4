from __future__ import annotations

from dataclasses import dataclass

from car_costs.domain.depreciation import DepreciationPoint, DepreciationRequest
from car_costs.domain.errors import ValidationError
from car_costs.domain.finance_math import depreciation_schedule

MAX_PROJECTION_YEARS = 30


@dataclass(frozen=True, slots=True)
class ProjectDepreciation:
    """Year-by-year compound depreciation curve, starting at year 0 (purchase)."""

    def execute(self, req: DepreciationRequest) -> list[DepreciationPoint]:
        if req.purchase_price <= 0:
            raise ValidationError("purchase_price must be > 0")
        if not 0 <= req.depreciation_rate <= 100:
            raise ValidationError("depreciation_rate must be between 0 and 100")
        if not 1 <= req.years <= MAX_PROJECTION_YEARS:
            raise ValidationError(f"years must be between 1 and {MAX_PROJECTION_YEARS}")

        values = depreciation_schedule(req.purchase_price, req.years, req.depreciation_rate / 100)

        return [
            DepreciationPoint(year=year, value=value, loss=req.purchase_price - value)
            for year, value in enumerate(values)
        ]
