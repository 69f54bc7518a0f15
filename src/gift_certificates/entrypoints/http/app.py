from __future__ import annotations

import os

from fastapi import FastAPI
from sqlalchemy.orm import Session, sessionmaker

from gift_certificates.entrypoints.http.exception_handlers import register_exception_handlers
from gift_certificates.entrypoints.http.routes.certificates import router as certificates_router
from gift_certificates.entrypoints.http.routes.health import router as health_router
from gift_certificates.entrypoints.http.routes.tags import router as tags_router
from gift_certificates.entrypoints.http.routes.users import router as users_router
from gift_certificates.infra.config import Settings
from gift_certificates.infra.logging_config import configure_logging

API_PREFIX = "/gift-certificates"


def build_app(
    settings: Settings | None = None,
    session_factory: sessionmaker[Session] | None = None,
) -> FastAPI:
    """
    Build the application.

    Settings and the session factory are optional: when omitted they are
    created from the environment on the first request that needs them.
    """
    configure_logging(settings.log_level if settings else os.getenv("LOG_LEVEL", "INFO"))

    app = FastAPI(
        title="Gift Certificates API",
        description="""
        Gift certificate catalogue with tags, users and orders.

        ## Features
        - Search certificates by name, description and tags, sorted and paged
        - Create, patch and delete certificates
        - Manage tags
        - Buy certificates on behalf of users and browse their orders

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
    )

    # Explicit handles; dependencies fill them in lazily when None
    app.state.settings = settings
    app.state.session_factory = session_factory

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(certificates_router, prefix=API_PREFIX)
    app.include_router(tags_router, prefix=API_PREFIX)
    app.include_router(users_router)

    return app


app = build_app()
