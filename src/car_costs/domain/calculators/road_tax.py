from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, localcontext

from car_costs.domain.finance_math import ENGINE_CONTEXT
from car_costs.domain.ownership import OwnershipInput, RoadTaxBand, coerce_variant

# Simplified annual VED rates by band (2023/24 schedule).
VED_RATES: dict[RoadTaxBand, Decimal] = {
    RoadTaxBand.A: Decimal("0"),
    RoadTaxBand.B: Decimal("25"),
    RoadTaxBand.C: Decimal("110"),
    RoadTaxBand.D: Decimal("150"),
    RoadTaxBand.E: Decimal("180"),
    RoadTaxBand.F: Decimal("200"),
    RoadTaxBand.G: Decimal("240"),
    RoadTaxBand.H: Decimal("290"),
    RoadTaxBand.I: Decimal("320"),
    RoadTaxBand.J: Decimal("365"),
    RoadTaxBand.K: Decimal("400"),
    RoadTaxBand.L: Decimal("470"),
    RoadTaxBand.M: Decimal("520"),
}

DEFAULT_BAND = RoadTaxBand.E


@dataclass(frozen=True, slots=True)
class RoadTaxCosts:
    annual_road_tax: Decimal
    total_road_tax: Decimal


def annual_road_tax(band: RoadTaxBand | str | None) -> Decimal:
    """Annual VED for a band letter. Unknown or missing bands pay band E."""
    resolved = coerce_variant(RoadTaxBand, band)
    return VED_RATES[resolved if resolved is not None else DEFAULT_BAND]


def calculate_road_tax_costs(data: OwnershipInput) -> RoadTaxCosts:
    annual = annual_road_tax(data.road_tax_band)

    # Tax is a fixed-policy lookup, so no inflation uplift.
    with localcontext(ENGINE_CONTEXT):
        total = annual * data.ownership_years

    return RoadTaxCosts(annual_road_tax=annual, total_road_tax=total)
