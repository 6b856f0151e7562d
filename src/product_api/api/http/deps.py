"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request

from src.product_api.api.http.app_data import ApplicationDependencies
from src.product_api.core.services import DbSessionService, ProductService, UnitOfWork


def get_database_service(request: Request) -> DbSessionService:
    """Get the database session service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_unit_of_work(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[UnitOfWork]:
    """Provide a unit of work scoped to the current request.

    The session is released when the request finishes, whether it succeeded,
    failed, or was abandoned by the client.
    """
    with UnitOfWork(database_service.get_session()) as uow:
        yield uow


def get_product_service(uow: UnitOfWork = Depends(get_unit_of_work)) -> ProductService:
    """Get a product service bound to the request's unit of work."""
    return ProductService(uow.products, uow)
