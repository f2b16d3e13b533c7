import asyncio
import logging

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from fastapi.testclient import TestClient

import app.main as main_module
from app.core.config import settings
from app.middleware.security_headers import SecurityHeadersMiddleware
from app.utils.errors import ApiError, api_error, error_response


def test_healthz(client):
    res = client.get("/healthz")
    assert res.status_code == 200
    assert res.json()["status"] == "ok"


def test_security_headers_present(client):
    res = client.get("/healthz")
    assert res.headers["X-Frame-Options"] == "DENY"
    assert res.headers["X-Content-Type-Options"] == "nosniff"
    assert res.headers["Referrer-Policy"] == "same-origin"
    assert "frame-ancestors 'none'" in res.headers["Content-Security-Policy"]
    assert "Strict-Transport-Security" not in res.headers


def test_security_headers_keep_route_values_and_optional_hsts():
    app = FastAPI()
    app.add_middleware(SecurityHeadersMiddleware, hsts=True)

    @app.get("/framed")
    def framed():
        return PlainTextResponse("ok", headers={"X-Frame-Options": "SAMEORIGIN"})

    res = TestClient(app).get("/framed")
    assert res.headers["X-Frame-Options"] == "SAMEORIGIN"
    assert res.headers["Strict-Transport-Security"].startswith("max-age=")


def test_validation_errors_are_json(client):
    res = client.patch("/api/v1/admin/bookings/B1/status", params={"businessId": "biz-1"}, json={})
    assert res.status_code == 422
    detail = res.json()["detail"]
    assert detail[0]["loc"][-1] == "status"


def test_error_response_shape_and_logging(caplog):
    caplog.set_level(logging.WARNING, logger="app.utils.errors")
    exc = error_response("Booking not found", {"booking_id": "not_found"}, 404)
    assert exc.status_code == 404
    assert exc.detail == {"message": "Booking not found", "field_errors": {"booking_id": "not_found"}}
    assert caplog.records[-1].levelno == logging.WARNING

    exc = error_response("boom", code=500)
    assert exc.detail["field_errors"] == {}
    assert caplog.records[-1].levelno == logging.ERROR


def test_api_error_body():
    assert api_error("Name is required").body() == {"error": "Name is required"}
    exc = ApiError("Validation error", details=[{"path": ["name"]}])
    assert exc.status_code == 400
    assert exc.body() == {"error": "Validation error", "details": [{"path": ["name"]}]}


def test_lifespan_starts_and_stops_maintenance_loop(monkeypatch):
    events = []

    async def fake_loop(interval_s):
        events.append(("started", interval_s))
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            events.append("cancelled")
            raise

    monkeypatch.setattr(settings, "AUTO_COMPLETE_INTERVAL_SECONDS", 3600)
    monkeypatch.setattr(main_module, "ops_maintenance_loop", fake_loop)

    with TestClient(main_module.app) as c:
        assert c.get("/healthz").status_code == 200
        assert events == [("started", 3600)]
    assert events == [("started", 3600), "cancelled"]


def test_lifespan_skips_loop_when_interval_disabled(monkeypatch):
    started = []

    async def fake_loop(interval_s):
        started.append(interval_s)

    monkeypatch.setattr(settings, "AUTO_COMPLETE_INTERVAL_SECONDS", 0)
    monkeypatch.setattr(main_module, "ops_maintenance_loop", fake_loop)

    with TestClient(main_module.app) as c:
        assert c.get("/healthz").status_code == 200
    assert started == []
