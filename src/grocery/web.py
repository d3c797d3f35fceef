"""FastAPI application factory.

Routers are mounted under ``/api/v1``. Every request runs inside a pushed
domain context. Errors are mapped in three layers: `GroceryError` subclasses
carry their own status, Protean's own exceptions go through
`protean.integrations.fastapi`, and anything else becomes an opaque 500.
"""

from datetime import UTC, datetime
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from grocery.domain import grocery
from grocery.errors import AuthenticationFailed, GroceryError
from grocery.settings import get_settings
from grocery.utils.logging import add_context, clear_context

logger = structlog.get_logger(__name__)

API_PREFIX = "/api/v1"


async def _grocery_error_handler(request: Request, exc: GroceryError) -> JSONResponse:
    log = logger.warning if exc.http_status < 500 else logger.error
    log(
        "request_failed",
        path=request.url.path,
        method=request.method,
        code=exc.code,
        status=exc.http_status,
        message=exc.message,
    )
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationFailed) else None
    return JSONResponse(status_code=exc.http_status, content=exc.to_response(), headers=headers)


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error", path=request.url.path, method=request.method)
    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
                "timestamp": datetime.now(UTC).isoformat(),
            }
        },
    )


def register_error_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)
    app.add_exception_handler(GroceryError, _grocery_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)


def create_app(domain=grocery) -> FastAPI:
    """Build the API around an already initialized domain."""
    from grocery.catalogue.api import category_router, product_router
    from grocery.identity.api import router as customer_router
    from grocery.ordering.api import router as order_router

    settings = get_settings()
    app = FastAPI(
        title="Grocery Back-Office API",
        description="Customers, catalogue and order management for a grocery store",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        # Browsers reject credentialed responses for a wildcard origin
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Accept", "Authorization", "Content-Type"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the Protean domain context and bind request details to the log context."""
        request_id = request.headers.get("X-Request-ID") or uuid4().hex
        add_context(request_id=request_id, method=request.method, path=request.url.path)
        try:
            with domain.domain_context():
                response = await call_next(request)
        finally:
            clear_context()
        response.headers["X-Request-ID"] = request_id
        return response

    app.include_router(customer_router, prefix=API_PREFIX)
    app.include_router(product_router, prefix=API_PREFIX)
    app.include_router(category_router, prefix=API_PREFIX)
    app.include_router(order_router, prefix=API_PREFIX)

    register_error_handlers(app)

    @app.get("/health")
    async def health():
        return JSONResponse(
            content={
                "status": "healthy",
                "domain": domain.name,
                "time": datetime.now(UTC).isoformat(),
            }
        )

    return app
