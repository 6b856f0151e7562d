"""Core services exports."""

from .database.db_manage import create_all
from .database.db_session import DbSessionService
from .database.unit_of_work import UnitOfWork
from .product.product_service import ProductService
from .tracing import LogTracer, Tracer

__all__ = [
    # Database
    "DbSessionService",
    "UnitOfWork",
    "create_all",
    # Product
    "ProductService",
    # Tracing
    "LogTracer",
    "Tracer",
]
