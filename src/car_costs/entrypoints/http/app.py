import logging

from fastapi import FastAPI

from car_costs.entrypoints.http.exception_handlers import register_exception_handlers
from car_costs.entrypoints.http.routes.costs import router as costs_router
from car_costs.entrypoints.http.routes.health import router as health_router
from car_costs.entrypoints.http.routes.utilities import router as utilities_router
from car_costs.infra.config import log_level


def build_app() -> FastAPI:
    logging.getLogger("car_costs").setLevel(log_level())

    app = FastAPI(
        title="Car Costs API",
        description="""
        UK car ownership cost calculator.

        ## Features
        - Total cost of ownership across finance, fuel, insurance, road tax and maintenance
        - Amortized repayment quotes
        - Compound depreciation projections
        - UK postcode checks

        ## Accuracy
        Formulas are deliberate simplifications (flat inflation, placeholder
        break-even estimates). Results are for comparing scenarios, not quotes.

        ## Error Handling
        All errors return structured JSON responses with error codes.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        license_info={
            "name": "Proprietary",
        },
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(costs_router, prefix="/v1")
    app.include_router(utilities_router, prefix="/v1")

    return app


app = build_app()
