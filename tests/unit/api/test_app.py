"""Tests for the application factory and its cross-cutting behaviour."""

import pytest
from fastapi.testclient import TestClient

from src.product_api.api.http.app import create_app
from src.product_api.core.services import DbSessionService
from src.product_api.runtime.config.config_data import ConfigData
from src.product_api.runtime.context import with_context


def _production_override(origins: list[str]) -> ConfigData:
    override = ConfigData()
    override.app.environment = "production"
    override.app.cors.origins = origins
    return override


class TestCreateApp:
    def test_docs_enabled_outside_production(self):
        client = TestClient(create_app())

        assert client.get("/docs").status_code == 200
        assert client.get("/openapi.json").status_code == 200

    def test_docs_disabled_in_production(self):
        with with_context(_production_override(["https://shop.example.com"])):
            app = create_app()

        client = TestClient(app)
        assert client.get("/docs").status_code == 404
        assert client.get("/openapi.json").status_code == 404

    def test_wildcard_cors_rejected_in_production(self):
        with with_context(_production_override(["*"])):
            with pytest.raises(RuntimeError, match="CORS misconfigured"):
                create_app()

    def test_unhandled_error_returns_json_500(self):
        app = create_app()

        @app.get("/boom")
        def boom():
            raise RuntimeError("kaboom")

        client = TestClient(app)
        response = client.get("/boom", headers={"X-Request-ID": "req-500"})

        assert response.status_code == 500
        assert response.json() == {
            "detail": "Internal Server Error",
            "request_id": "req-500",
        }
        assert response.headers["X-Request-ID"] == "req-500"

    def test_unknown_route_is_json_404(self):
        response = TestClient(create_app()).get("/nowhere")

        assert response.status_code == 404
        assert "request_id" in response.json()


class TestLifespan:
    def test_preset_database_service_is_used_and_kept_open(self, engine):
        app = create_app()
        database_service = DbSessionService(engine=engine)
        app.state.database_service = database_service

        with TestClient(app) as client:
            assert client.app.state.app_dependencies.database_service is database_service
            assert client.get("/products").status_code == 200

        # The engine still works after shutdown because the test owns it
        assert database_service.health_check() is True

    def test_own_database_service_is_created_and_disposed(self, monkeypatch):
        disposed: list[bool] = []
        monkeypatch.setattr(
            DbSessionService, "dispose", lambda self: disposed.append(True)
        )

        app = create_app()
        with TestClient(app) as client:
            assert client.get("/health/ready").status_code == 200

        assert disposed == [True]
