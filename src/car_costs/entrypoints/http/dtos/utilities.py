from pydantic import BaseModel, ConfigDict, Field

from car_costs.entrypoints.http.dtos.costs import MONEY_PATTERN, RATE_PATTERN


class PaymentPlanRequestDTO(BaseModel):
    """Request payload for a standalone repayment quote."""

    principal: str = Field(
        description="Amount borrowed as decimal string",
        examples=["20000.00"],
        pattern=MONEY_PATTERN,
    )
    annual_rate: str = Field(
        description="Annual interest rate in percent (e.g. '7.5' = 7.5%)",
        examples=["7.5"],
        pattern=RATE_PATTERN,
    )
    term_months: int = Field(description="Repayment term in months", examples=[60], ge=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "principal": "20000.00",
                "annual_rate": "7.5",
                "term_months": 60,
            }
        }
    )


class PaymentPlanResponseDTO(BaseModel):
    principal: str = Field(examples=["20000.00"])
    annual_rate: str = Field(examples=["7.5"])
    term_months: int = Field(examples=[60])
    monthly_payment: str = Field(examples=["400.76"])
    total_paid: str = Field(examples=["24045.60"])
    total_interest: str = Field(examples=["4045.60"])


class DepreciationPointDTO(BaseModel):
    year: int
    value: str
    loss: str


class DepreciationScheduleResponseDTO(BaseModel):
    purchase_price: str
    depreciation_rate: str
    points: list[DepreciationPointDTO]


class PostcodeCheckResponseDTO(BaseModel):
    postcode: str = Field(description="Postcode as submitted", examples=["sw1a1aa"])
    valid: bool = Field(description="Whether the postcode has a UK shape")
    formatted: str = Field(description="Normalised display form", examples=["SW1A 1AA"])
