"""Database engine and session factory used across the application."""

from typing import Any

from loguru import logger
from sqlalchemy import Engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from src.product_api.runtime.config.config_data import ConfigData
from src.product_api.runtime.context import get_config


class DbSessionService:
    def __init__(self, engine: Engine | None = None):
        """Initialize the shared database engine and session factory.

        An already built ``engine`` may be supplied (tests share an in-memory
        SQLite engine this way); otherwise one is created from the current config.
        """
        self._engine = engine if engine is not None else self._create_engine(get_config())

    @property
    def engine(self) -> Engine:
        return self._engine

    def _create_engine(self, main_config: ConfigData) -> Engine:
        logger.info("Setting up database engine and session factory")
        db_config = main_config.database

        logger.info(
            "Configuring database engine for environment: {}",
            main_config.app.environment,
        )
        engine_kwargs: dict[str, Any] = {
            "echo": db_config.echo,
            "echo_pool": False,
            "pool_pre_ping": True,  # Validate connections before use
            "pool_reset_on_return": "rollback",
            "connect_args": self._get_connect_args(main_config),
        }

        if db_config.is_sqlite:
            if ":memory:" in db_config.url or db_config.url.rstrip("/").endswith("sqlite:"):
                # Every session must see the same in-memory database
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs.update(
                {
                    "pool_size": db_config.pool_size,
                    "max_overflow": db_config.max_overflow,
                    "pool_timeout": db_config.pool_timeout,
                    "pool_recycle": db_config.pool_recycle,
                }
            )

        engine = create_engine(db_config.connection_string, **engine_kwargs)

        if main_config.app.environment == "production":
            logger.info(
                "Database engine initialized",
                pool_size=db_config.pool_size,
                max_overflow=db_config.max_overflow,
                pool_timeout=db_config.pool_timeout,
                pool_recycle=db_config.pool_recycle,
            )
        return engine

    def _get_connect_args(self, config: ConfigData) -> dict:
        """Get database-specific connection arguments."""
        connect_args: dict[str, Any] = {}

        if config.database.url.startswith("postgresql"):
            connect_args.update(
                {
                    # Application name for connection tracking
                    "application_name": f"{config.app.name}_{config.app.environment}",
                    "connect_timeout": 30,
                }
            )

        elif config.database.is_sqlite:
            connect_args.update(
                {
                    "check_same_thread": False,  # Sessions hop threads in the worker pool
                    "timeout": 20,  # Lock timeout
                }
            )

            if config.app.environment == "production":
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider PostgreSQL for better performance and reliability."
                )

        return connect_args

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,  # Prevent lazy loading issues
            autoflush=True,
        )

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except SQLAlchemyError as e:
            logger.error(
                "Database health check failed",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return False

    def get_pool_status(self) -> dict:
        """Get current connection pool status for monitoring."""
        pool = self._engine.pool
        return {
            "size": getattr(pool, "size", lambda: 0)(),
            "checked_in": getattr(pool, "checkedin", lambda: 0)(),
            "checked_out": getattr(pool, "checkedout", lambda: 0)(),
            "overflow": getattr(pool, "overflow", lambda: 0)(),
        }

    def dispose(self) -> None:
        """Close every pooled connection."""
        self._engine.dispose()
        logger.info("Database engine disposed")
