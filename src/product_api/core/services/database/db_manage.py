"""Schema management for the application's tables."""

from loguru import logger
from sqlalchemy import Engine
from sqlmodel import SQLModel


def create_all(engine: Engine) -> None:
    """Create all database tables that do not exist yet."""
    from src.product_api.entities.service.product import ProductTable  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.info("Database initialized with tables: {}", sorted(SQLModel.metadata.tables))
