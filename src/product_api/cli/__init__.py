"""Command line entry point for running and administering the product API."""

import typer
from loguru import logger
from rich.console import Console

from src.product_api.api.utils.app_startup import configure_logging
from src.product_api.core.services import DbSessionService, create_all
from src.product_api.runtime.context import get_config

console = Console()

app = typer.Typer(
    help="Product API - catalog service commands",
    no_args_is_help=True,
)


def _prepare_database() -> None:
    """Create missing tables and verify the database answers."""
    database_service = DbSessionService()
    try:
        create_all(database_service.engine)
        if not database_service.health_check():
            raise RuntimeError("Database is not reachable")
    finally:
        database_service.dispose()


@app.command()
def serve(
    host: str | None = typer.Option(None, help="Host to bind (defaults to config)"),
    port: int | None = typer.Option(None, help="Port to bind (defaults to config)"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """
    Start the HTTP server.

    The database is checked before the server binds; if that fails the
    error is logged and the command exits with status 1.
    """
    import uvicorn

    configure_logging()
    config = get_config()
    host = host or config.app.host
    port = port or config.app.port

    try:
        _prepare_database()
    except Exception:
        logger.opt(exception=True).critical("Application terminated unexpectedly")
        logger.complete()
        raise typer.Exit(code=1) from None

    console.print(f"[blue]Server will be available at:[/blue] http://{host}:{port}")
    uvicorn.run(
        "src.product_api.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        access_log=False,  # We handle access logging in middleware
    )


@app.command(name="init-db")
def init_db() -> None:
    """Create the database tables and exit."""
    configure_logging()
    try:
        _prepare_database()
    except Exception:
        logger.opt(exception=True).critical("Database initialization failed")
        logger.complete()
        raise typer.Exit(code=1) from None
    console.print("[green]Database initialized[/green]")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
