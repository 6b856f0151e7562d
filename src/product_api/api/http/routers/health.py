"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Request
from loguru import logger
from starlette.responses import JSONResponse

from src.product_api.api.http.app_data import ApplicationDependencies
from src.product_api.runtime.context import get_config

router = APIRouter(prefix="/health", tags=["health"])


def _database_type() -> str:
    return "sqlite" if get_config().database.is_sqlite else "postgresql"


@router.get("")
def health() -> dict[str, str]:
    """Liveness check: 200 OK as long as the process is serving requests.

    It does not check dependencies.
    """
    return {"status": "healthy", "service": get_config().app.name}


@router.get("/ready", response_model=None)
def readiness(request: Request) -> dict[str, Any] | JSONResponse:
    """Readiness check: 200 if the database is reachable, 503 otherwise."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    config = get_config()

    checks: dict[str, Any] = {}
    db_healthy = app_deps.database_service.health_check()
    checks["database"] = {
        "status": "healthy" if db_healthy else "unhealthy",
        "type": _database_type(),
    }

    response = {
        "status": "ready" if db_healthy else "not_ready",
        "environment": config.app.environment,
        "checks": checks,
    }

    if not db_healthy:
        logger.warning("Readiness check failed", checks=checks)
        return JSONResponse(status_code=503, content=response)

    return response


@router.get("/database", response_model=None)
def health_database(request: Request) -> dict[str, Any] | JSONResponse:
    """Database-specific health check with connection pool status."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies

    healthy = app_deps.database_service.health_check()
    result = {
        "status": "healthy" if healthy else "unhealthy",
        "type": _database_type(),
        "pool": app_deps.database_service.get_pool_status(),
    }
    if not healthy:
        return JSONResponse(status_code=503, content=result)
    return result
