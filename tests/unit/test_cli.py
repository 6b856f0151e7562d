"""Tests for the product-api command line."""

from typer.testing import CliRunner

from src.product_api.cli import app
from src.product_api.core.services import DbSessionService

runner = CliRunner()


class TestInitDb:
    def test_init_db_succeeds(self):
        result = runner.invoke(app, ["init-db"])

        assert result.exit_code == 0, result.output
        assert "Database initialized" in result.output

    def test_init_db_exits_with_1_when_database_is_unreachable(self, monkeypatch):
        monkeypatch.setattr(DbSessionService, "health_check", lambda self: False)

        result = runner.invoke(app, ["init-db"])

        assert result.exit_code == 1


class TestServe:
    def test_serve_exits_with_1_before_binding_when_startup_fails(self, monkeypatch):
        started: list[dict] = []
        monkeypatch.setattr("uvicorn.run", lambda *args, **kwargs: started.append(kwargs))
        monkeypatch.setattr(DbSessionService, "health_check", lambda self: False)

        result = runner.invoke(app, ["serve"])

        assert result.exit_code == 1
        assert started == []

    def test_serve_uses_configured_host_and_port(self, monkeypatch):
        started: list[dict] = []
        monkeypatch.setattr("uvicorn.run", lambda *args, **kwargs: started.append(kwargs))

        result = runner.invoke(app, ["serve", "--port", "9123"])

        assert result.exit_code == 0, result.output
        assert started[0]["port"] == 9123
        assert started[0]["host"] == "localhost"
        assert started[0]["reload"] is False
