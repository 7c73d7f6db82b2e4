from pydantic import BaseModel, ConfigDict, Field

from car_costs.domain.ownership import CarCondition, FinanceType, FuelType, RoadTaxBand

MONEY_PATTERN = r"^\d+(\.\d{1,2})?$"
RATE_PATTERN = r"^\d+(\.\d{1,4})?$"


class OwnershipRequestDTO(BaseModel):
    """
    Request payload describing one ownership scenario.

    Every field except make and model has the calculator form's default.
    Monetary values and rates are decimal strings; rates are percentages.
    """

    # Identity
    make: str = Field(description="Vehicle make", examples=["Tesla"], min_length=1)
    model: str = Field(description="Vehicle model", examples=["Model 3"], min_length=1)
    car_condition: CarCondition = Field(default=CarCondition.NEW, description="new or used")
    fuel_type: FuelType = Field(default=FuelType.PETROL, description="Fuel or energy source")

    # Acquisition
    purchase_price: str = Field(
        default="25000",
        description="Purchase price as decimal string",
        examples=["25000.00"],
        pattern=MONEY_PATTERN,
    )
    finance_type: FinanceType = Field(default=FinanceType.CASH, description="How the car is paid for")
    deposit: str = Field(default="0", description="Deposit as decimal string", pattern=MONEY_PATTERN)
    loan_term: int = Field(default=60, description="Loan/PCP/HP term in months", ge=1)
    interest_rate: str = Field(
        default="7.5",
        description="Annual interest rate in percent (e.g. '7.5' = 7.5%)",
        pattern=RATE_PATTERN,
    )
    balloon_payment: str = Field(
        default="0",
        description="PCP optional final payment as decimal string",
        pattern=MONEY_PATTERN,
    )
    lease_term: int = Field(default=36, description="Lease term in months", ge=1)
    lease_mileage: int = Field(default=10_000, description="Annual lease mileage allowance", ge=0)

    # Usage
    annual_mileage: int = Field(default=8_000, description="Miles driven per year", ge=0)
    ownership_years: int = Field(default=5, description="Years of ownership", ge=1, le=50)
    driver_age: int = Field(default=30, description="Main driver's age", ge=17, le=100)
    no_claims_years: int = Field(default=0, description="Years without an insurance claim", ge=0)
    postcode: str = Field(default="", description="UK postcode (optional)", examples=["SW1A 1AA"])

    # Running costs
    fuel_efficiency: str = Field(
        default="50",
        description="Miles per UK gallon, or miles per kWh for electric cars",
        pattern=RATE_PATTERN,
    )
    fuel_price: str = Field(default="1.75", description="Fuel price per litre", pattern=RATE_PATTERN)
    electricity_price: str = Field(
        default="0.30",
        description="Electricity price per kWh",
        pattern=RATE_PATTERN,
    )
    home_charging: bool = Field(default=True, description="Home charging available")
    public_charging_frequency: str = Field(
        default="20",
        description="Share of charging done at public chargers, in percent",
        pattern=RATE_PATTERN,
    )

    # Fixed costs
    insurance_group: int = Field(default=25, description="Insurance group 1-50", ge=1, le=50)
    road_tax_band: RoadTaxBand = Field(default=RoadTaxBand.D, description="VED band letter A-M")
    annual_maintenance: str = Field(
        default="500",
        description="Annual maintenance budget as decimal string",
        pattern=MONEY_PATTERN,
    )
    annual_parking: str = Field(default="0", description="Annual parking cost", pattern=MONEY_PATTERN)
    congestion_zone: bool = Field(default=False, description="Regularly drives in a congestion zone")
    mot_frequency: int = Field(default=1, description="MOTs per year", ge=0)
    servicing_interval: int = Field(default=12_000, description="Miles between services", ge=1)
    tyre_replacement: int = Field(default=20_000, description="Miles between tyre changes", ge=0)
    breakdown_cover: bool = Field(default=True, description="Has breakdown cover")
    breakdown_cost: str = Field(
        default="150",
        description="Annual breakdown cover cost",
        pattern=MONEY_PATTERN,
    )
    warranty_length: int = Field(default=3, description="Warranty length in years", ge=0)

    # Economic assumptions
    depreciation_rate: str = Field(
        default="15",
        description="Annual depreciation in percent",
        pattern=RATE_PATTERN,
    )
    inflation_rate: str = Field(
        default="2.5",
        description="Annual inflation in percent",
        pattern=RATE_PATTERN,
    )
    resale_value: str = Field(
        default="15000",
        description="Expected resale value as decimal string",
        pattern=MONEY_PATTERN,
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "make": "Ford",
                "model": "Focus",
                "purchase_price": "25000.00",
                "finance_type": "loan",
                "deposit": "5000.00",
                "loan_term": 60,
                "interest_rate": "7.5",
                "annual_mileage": 8000,
                "postcode": "SW1A 1AA",
            }
        }
    )


class BreakdownLineDTO(BaseModel):
    label: str
    value: str
    formatted: str


class FormattedCostsDTO(BaseModel):
    """Display strings in the configured locale and currency."""

    total_cost_of_ownership: str
    monthly_payment: str
    annual_running_costs: str
    cost_per_mile: str
    net_cost: str
    annual_mileage: str


class CostResponseDTO(BaseModel):
    """
    Calculated ownership costs.

    Amounts are decimal strings rounded to 2 places. Degenerate inputs
    (e.g. zero annual mileage) can produce "Infinity", "-Infinity" or "NaN".
    """

    upfront_cost: str = Field(examples=["25000.00"])
    monthly_payment: str = Field(examples=["0.00"])
    total_interest: str = Field(examples=["0.00"])
    annual_fuel_cost: str = Field(examples=["1272.88"])
    total_fuel_cost: str = Field(examples=["6523.51"])
    annual_insurance: str = Field(examples=["600.00"])
    total_insurance: str = Field(examples=["3075.00"])
    annual_road_tax: str = Field(examples=["150.00"])
    total_road_tax: str = Field(examples=["750.00"])
    annual_mot: str = Field(examples=["54.85"])
    total_maintenance: str = Field(examples=["4637.36"])
    depreciation_loss: str = Field(examples=["10000.00"])
    total_cost_of_ownership: str = Field(examples=["49985.87"])
    cost_per_mile: str = Field(examples=["1.25"])
    break_even_years: str = Field(examples=["3.50"])
    break_even_mileage: str = Field(
        description="Placeholder estimate, or 'Infinity' when electric never breaks even",
        examples=["10000.00", "Infinity"],
    )
    net_cost: str = Field(examples=["34985.87"])
    breakdown: list[BreakdownLineDTO]
    formatted: FormattedCostsDTO
