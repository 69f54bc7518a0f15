"""Tests for FastAPI exception handlers."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from gift_certificates.domain.errors import (
    ConflictError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from gift_certificates.entrypoints.http.exception_handlers import register_exception_handlers


@pytest.fixture
def app() -> FastAPI:
    """Create a minimal FastAPI app with exception handlers registered."""
    test_app = FastAPI()
    register_exception_handlers(test_app)

    # Add test routes that raise different errors
    @test_app.get("/validation-error")
    def raise_validation_error() -> None:
        raise ValidationError("page must be >= 1")

    @test_app.get("/validation-error-with-fields")
    def raise_validation_error_with_fields() -> None:
        raise ValidationError(
            errors=[
                {"field": "name", "message": "Must not be blank", "code": "BLANK"},
                {"field": "price", "message": "Must be > 0", "code": "INVALID_VALUE"},
            ]
        )

    @test_app.get("/not-found-error")
    def raise_not_found_error() -> None:
        raise NotFoundError("Certificate", 123)

    @test_app.get("/conflict-error")
    def raise_conflict_error() -> None:
        raise ConflictError("Tag with name 'spa' already exists", name="spa")

    @test_app.get("/storage-error")
    def raise_storage_error() -> None:
        raise StorageError("Unable to get a list of certificates: connection refused")

    @test_app.get("/misconfigured")
    def read_misconfigured_setting() -> dict:
        return {"pool_size": int("not-a-number")}

    @test_app.get("/unexpected-error")
    def raise_unexpected_error() -> dict:
        raise RuntimeError("Something went wrong")

    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a test client."""
    return TestClient(app, raise_server_exceptions=False)


class TestValidationErrorHandler:
    def test_simple_validation_error_returns_400(self, client: TestClient) -> None:
        response = client.get("/validation-error")

        assert response.status_code == 400
        assert response.json() == {
            "detail": "page must be >= 1",
            "code": "VALIDATION_ERROR",
        }

    def test_validation_error_with_field_errors_returns_400(self, client: TestClient) -> None:
        response = client.get("/validation-error-with-fields")

        assert response.status_code == 400
        data = response.json()

        assert data["detail"] == "Validation failed"
        assert data["code"] == "VALIDATION_ERROR"
        assert data["errors"] == [
            {"field": "name", "message": "Must not be blank", "code": "BLANK"},
            {"field": "price", "message": "Must be > 0", "code": "INVALID_VALUE"},
        ]


class TestNotFoundErrorHandler:
    def test_not_found_error_returns_404(self, client: TestClient) -> None:
        response = client.get("/not-found-error")

        assert response.status_code == 404
        assert response.json() == {
            "detail": "Certificate with identifier '123' not found",
            "code": "NOT_FOUND",
        }


class TestConflictErrorHandler:
    def test_conflict_error_returns_409(self, client: TestClient) -> None:
        response = client.get("/conflict-error")

        assert response.status_code == 409
        assert response.json() == {
            "detail": "Tag with name 'spa' already exists",
            "code": "CONFLICT",
        }


class TestStorageErrorHandler:
    def test_storage_error_returns_500_without_internals(self, client: TestClient) -> None:
        response = client.get("/storage-error")

        assert response.status_code == 500
        assert response.json() == {
            "detail": "A storage error occurred",
            "code": "STORAGE_ERROR",
        }


class TestUnexpectedErrorHandler:
    def test_unexpected_error_returns_500(self, client: TestClient) -> None:
        response = client.get("/unexpected-error")

        assert response.status_code == 500
        assert response.json() == {
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }

    def test_value_error_is_a_server_fault(self, client: TestClient) -> None:
        response = client.get("/misconfigured")

        assert response.status_code == 500
        assert response.json()["code"] == "INTERNAL_ERROR"


class TestPydanticValidationErrors:
    def test_query_constraint_violation_returns_422(self) -> None:
        from fastapi import Query

        app = FastAPI()
        register_exception_handlers(app)

        @app.get("/test")
        def test_route(page_size: int = Query(default=20, ge=1, le=200)) -> dict:
            return {"page_size": page_size}

        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/test?page_size=500")

        assert response.status_code == 422
        data = response.json()

        assert data["detail"] == "Invalid request parameters"
        assert data["code"] == "VALIDATION_ERROR"
        assert data["errors"][0]["field"] == "page_size"

    def test_missing_required_field_returns_422(self) -> None:
        from pydantic import BaseModel

        app = FastAPI()
        register_exception_handlers(app)

        class RequestBody(BaseModel):
            name: str

        @app.post("/test")
        def test_route(body: RequestBody) -> dict:
            return {"name": body.name}

        client = TestClient(app, raise_server_exceptions=False)

        response = client.post("/test", json={})

        assert response.status_code == 422
        data = response.json()

        assert data["code"] == "VALIDATION_ERROR"
        assert data["errors"][0]["field"] == "name"


class TestErrorResponseFormat:
    def test_all_errors_have_detail_and_code(self, client: TestClient) -> None:
        endpoints = [
            "/validation-error",
            "/not-found-error",
            "/conflict-error",
            "/storage-error",
            "/misconfigured",
            "/unexpected-error",
        ]

        for endpoint in endpoints:
            response = client.get(endpoint)
            data = response.json()

            assert "detail" in data, f"{endpoint} missing 'detail'"
            assert "code" in data, f"{endpoint} missing 'code'"
            assert isinstance(data["detail"], str)
            assert isinstance(data["code"], str)
