"""Tests for application assembly and lifecycle."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from task_api.api.app import create_app
from task_api.auth import TokenVerifier
from task_api.database import Database


class TestApp:

    def test_lifespan_attaches_database_and_verifier(self, app):
        with TestClient(app):
            assert isinstance(app.state.database, Database)
            assert isinstance(app.state.token_verifier, TokenVerifier)

    def test_lifespan_releases_resources_on_shutdown(self, app):
        with TestClient(app):
            pass

        assert not hasattr(app.state, "database")
        assert not hasattr(app.state, "token_verifier")

    def test_engine_disposed_on_shutdown(self, settings):
        with patch("task_api.database.Engine.dispose", autospec=True) as dispose:
            app = create_app(settings)
            with TestClient(app):
                pass

        dispose.assert_called_once()

    def test_cors_allows_any_origin(self, client: TestClient):
        response = client.get("/", headers={"Origin": "https://example.org"})

        assert response.headers["access-control-allow-origin"] == "*"

    def test_cors_preflight_for_create(self, client: TestClient):
        response = client.options(
            "/create",
            headers={
                "Origin": "https://example.org",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "authorization, content-type",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"

    def test_health_check(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_health_check_reports_unreachable_store(self, client: TestClient):
        with patch("task_api.api.app.check_db_connection", return_value=False):
            response = client.get("/health")

        assert response.status_code == 503
        assert response.json() == {"status": "unhealthy"}
