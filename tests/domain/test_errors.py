from car_costs.domain.errors import DomainError, ValidationError


def test_domain_error_to_dict_includes_context():
    error = DomainError("Something failed", field="deposit")

    assert error.to_dict() == {
        "message": "Something failed",
        "code": "DOMAIN_ERROR",
        "field": "deposit",
    }


def test_validation_error_defaults_message():
    assert ValidationError().message == "Validation error"


def test_validation_error_with_field_errors():
    errors = [{"field": "resale_value", "message": "Must not exceed purchase_price"}]

    error = ValidationError(errors=errors)

    assert error.message == "Validation failed"
    assert error.to_dict() == {
        "message": "Validation failed",
        "code": "VALIDATION_ERROR",
        "errors": errors,
    }


def test_validation_error_without_field_errors_uses_base_format():
    error = ValidationError("principal must be > 0")

    assert error.errors is None
    assert error.to_dict() == {"message": "principal must be > 0", "code": "VALIDATION_ERROR"}


def test_validation_error_is_domain_error():
    assert isinstance(ValidationError("x"), DomainError)
