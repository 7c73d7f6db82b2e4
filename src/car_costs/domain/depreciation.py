from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class DepreciationRequest:
    purchase_price: Decimal
    depreciation_rate: Decimal  # percent per year
    years: int


@dataclass(frozen=True, slots=True)
class DepreciationPoint:
    year: int
    value: Decimal
    loss: Decimal
