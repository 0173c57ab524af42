"""
Tests for application wiring: lifespan, middleware, and the module-level app.
"""

import re
from unittest.mock import AsyncMock, patch

from fastapi import FastAPI
from fastapi.testclient import TestClient

import main
from main import create_app


class TestRequestTimer:
    def test_header_on_success(self, client):
        r = client.get("/api/health")
        assert r.status_code == 200
        assert re.fullmatch(r"\d+\.\d{4}", r.headers["X-Process-Time"])

    def test_header_on_rejected_request(self, client):
        r = client.get("/api/expenses")
        assert r.status_code == 401
        assert "X-Process-Time" in r.headers


class TestLifespan:
    def test_startup_creates_tables_and_shutdown_disposes(self, settings):
        app = create_app(settings)
        ctx = app.state.context
        with patch.object(ctx, "shutdown", new_callable=AsyncMock, wraps=ctx.shutdown) as mock_shutdown:
            with TestClient(app) as client:
                r = client.post("/api/signup", json={"email": "l@example.com", "password": "pw-life", "name": "L"})
                assert r.status_code == 201
                mock_shutdown.assert_not_called()
            mock_shutdown.assert_awaited_once()

    def test_table_creation_can_be_skipped(self, settings):
        settings.create_tables = False
        app = create_app(settings)
        with patch("core.context.create_tables", new_callable=AsyncMock) as mock_create:
            with TestClient(app):
                pass
        mock_create.assert_not_called()


def test_module_level_app_for_uvicorn():
    assert isinstance(main.app, FastAPI)
    assert main.app.state.context.settings is main.config
