"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level error: which input failed and why."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "resale_value",
                "message": "Must not exceed purchase_price",
                "code": "INVALID_VALUE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "principal must be > 0",
                "code": "VALIDATION_ERROR"
            }

        Validation error with multiple fields:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "deposit",
                        "message": "Must not exceed purchase_price",
                        "code": "INVALID_VALUE"
                    }
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "principal must be > 0", "code": "VALIDATION_ERROR"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "deposit",
                            "message": "Must not exceed purchase_price",
                            "code": "INVALID_VALUE",
                        },
                        {
                            "field": "postcode",
                            "message": "Not a valid UK postcode: 12345",
                            "code": "INVALID_FORMAT",
                        },
                    ],
                },
            ]
        }
    )
