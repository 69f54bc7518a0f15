"""Tests for domain error classes."""

from gift_certificates.domain.errors import (
    ConflictError,
    DomainError,
    NotFoundError,
    StorageError,
    ValidationError,
)


class TestDomainError:
    def test_creates_error_with_message(self) -> None:
        error = DomainError("Something went wrong")

        assert error.message == "Something went wrong"
        assert error.context == {}
        assert str(error) == "Something went wrong"

    def test_creates_error_with_context(self) -> None:
        error = DomainError("Something went wrong", certificate_id=7)

        assert error.context == {"certificate_id": 7}

    def test_to_dict_includes_message_code_and_context(self) -> None:
        error = DomainError("Something went wrong", certificate_id=7)

        assert error.to_dict() == {
            "message": "Something went wrong",
            "code": "DOMAIN_ERROR",
            "certificate_id": 7,
        }


class TestValidationError:
    def test_default_message_without_errors(self) -> None:
        error = ValidationError()

        assert error.message == "Validation error"
        assert error.errors is None
        assert error.error_code == "VALIDATION_ERROR"

    def test_default_message_with_field_errors(self) -> None:
        errors = [{"field": "price", "message": "Must be > 0", "code": "INVALID_VALUE"}]
        error = ValidationError(errors=errors)

        assert error.message == "Validation failed"
        assert error.errors == errors

    def test_to_dict_includes_field_errors(self) -> None:
        errors = [{"field": "name", "message": "Must not be blank", "code": "BLANK"}]
        error = ValidationError(errors=errors)

        assert error.to_dict() == {
            "message": "Validation failed",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }

    def test_to_dict_without_field_errors(self) -> None:
        error = ValidationError("page must be >= 1")

        assert error.to_dict() == {"message": "page must be >= 1", "code": "VALIDATION_ERROR"}

    def test_is_a_domain_error(self) -> None:
        assert isinstance(ValidationError(), DomainError)


class TestNotFoundError:
    def test_message_with_identifier(self) -> None:
        error = NotFoundError("Certificate", 7)

        assert error.message == "Certificate with identifier '7' not found"
        assert error.context == {"resource": "Certificate", "identifier": 7}
        assert error.error_code == "NOT_FOUND"

    def test_message_without_identifier(self) -> None:
        error = NotFoundError("Tag")

        assert error.message == "Tag not found"

    def test_zero_identifier_is_still_reported(self) -> None:
        error = NotFoundError("Order", 0)

        assert error.message == "Order with identifier '0' not found"


class TestConflictAndStorageErrors:
    def test_conflict_error_code(self) -> None:
        error = ConflictError("Tag with name 'spa' already exists", name="spa")

        assert error.error_code == "CONFLICT"
        assert error.to_dict()["name"] == "spa"

    def test_storage_error_code(self) -> None:
        error = StorageError("Unable to save certificate: disk full")

        assert error.error_code == "STORAGE_ERROR"
        assert error.message == "Unable to save certificate: disk full"
