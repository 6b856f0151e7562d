"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.exceptions import HTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from src.product_api.api.http.app_data import ApplicationDependencies
from src.product_api.api.http.routers.health import router as health_router
from src.product_api.api.http.routers.service.product import router as product_router
from src.product_api.api.utils.app_startup import configure_logging
from src.product_api.core.services import DbSessionService, create_all
from src.product_api.runtime.context import get_config

__all__ = ["app", "create_app"]


# --- Security middleware ---
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault(
            "Referrer-Policy", "strict-origin-when-cross-origin"
        )
        response.headers.setdefault(
            "Permissions-Policy", "geolocation=(), microphone=()"
        )
        # HSTS only in prod
        if get_config().app.environment == "production":
            response.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )
        return response


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", None) or request.headers.get(
        "X-Request-ID", "-"
    )


# --- Lifecycle ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    config = get_config()
    logger.info("Starting up application in {} environment", config.app.environment)

    # A database service placed on app.state before startup is used as-is
    # and stays owned by whoever created it.
    preset: DbSessionService | None = getattr(app.state, "database_service", None)
    try:
        database_service = preset or DbSessionService()
        create_all(database_service.engine)
    except Exception:
        logger.opt(exception=True).critical("Application startup failed")
        await logger.complete()
        raise

    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service
    )
    try:
        yield
    finally:
        logger.info("Shutting down application")
        if preset is None:
            database_service.dispose()


def create_app() -> FastAPI:
    """Build the HTTP application with middleware, error handlers and routers."""
    config = get_config()
    configure_logging()

    is_production = config.app.environment == "production"
    app = FastAPI(
        title=config.app.name,
        lifespan=lifespan,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
        openapi_url=None if is_production else "/openapi.json",
    )

    app.add_middleware(SecurityHeadersMiddleware)

    # --- CORS configuration ---
    if is_production and "*" in config.app.cors.origins:
        raise RuntimeError(
            "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.app.cors.origins,
        allow_credentials=config.app.cors.allow_credentials,
        allow_methods=config.app.cors.allow_methods,
        allow_headers=config.app.cors.allow_headers,
    )

    # --- Request logging middleware ---
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        # Correlation / tracing
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        xff = request.headers.get("x-forwarded-for")
        client_ip = (
            xff.split(",")[0].strip()
            if xff
            else request.client.host
            if request.client
            else "unknown"
        )

        base_ctx = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "client_ip": client_ip,
            "user_agent": request.headers.get("user-agent", "unknown"),
            "http_version": request.scope.get("http_version", "1.1"),
        }

        start = time.perf_counter()

        # Everything that logs within this block inherits base_ctx
        with logger.contextualize(**base_ctx):
            try:
                logger.info("request.start")
                response = await call_next(request)

                duration_ms = (time.perf_counter() - start) * 1000
                logger.bind(
                    status_code=response.status_code,
                    duration_ms=round(duration_ms, 1),
                ).info("request.end")

                response.headers.setdefault("X-Request-ID", request_id)
                return response

            except Exception as exc:
                duration_ms = (time.perf_counter() - start) * 1000
                logger.bind(
                    status_code=500,
                    duration_ms=round(duration_ms, 1),
                    error_type=type(exc).__name__,
                ).exception("request.error")
                return JSONResponse(
                    status_code=500,
                    content={"detail": "Internal Server Error", "request_id": request_id},
                    headers={"X-Request-ID": request_id},
                )

    # --- Error handlers ---
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = jsonable_encoder(exc.errors())
        logger.bind(status_code=400, errors=errors).warning("request.validation_error")
        return JSONResponse(
            status_code=400,
            content={"detail": errors, "request_id": _request_id(request)},
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(
        request: Request, exc: HTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail, "request_id": _request_id(request)},
            headers=exc.headers,
        )

    # --- Router registration ---
    app.include_router(health_router)
    app.include_router(product_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    # Let uvicorn use its default logging, but our InterceptHandler will:
    # - Keep INFO/WARNING logs (startup, shutdown, connection issues)
    # - Drop ERROR logs (duplicate exceptions)
    # - Drop access logs (we handle in middleware)
    config = get_config()
    uvicorn.run(
        app,
        host=config.app.host,
        port=config.app.port,
        access_log=False,
    )
