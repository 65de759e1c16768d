"""Tests for app error handlers, security headers, and health checks."""

import pytest

from app import create_app
from services.session_helper import _BOARDS


@pytest.fixture
def app():
    return create_app({"TESTING": True})


@pytest.fixture
def client(app):
    return app.test_client()


def test_404_error_handler(client):
    """Test custom 404 page."""
    response = client.get("/nonexistent-page")
    assert response.status_code == 404
    assert b"404" in response.data


def test_500_error_handler(app):
    @app.route("/trigger-500")
    def trigger_500():
        raise Exception("Intentional error for testing")

    # Disable propagation so the error handler is triggered
    app.config["PROPAGATE_EXCEPTIONS"] = False
    app.config["TESTING"] = False

    response = app.test_client().get("/trigger-500")
    assert response.status_code == 500
    assert b"Something went wrong" in response.data


def test_csrf_error_handler():
    """POST without a CSRF token is bounced back with a flash message."""
    prod_app = create_app({"SECRET_KEY": "test-secret"})
    client = prod_app.test_client()

    response = client.post("/start")
    assert response.status_code == 302
    assert _BOARDS == {}

    page = client.get("/")
    assert b"session expired" in page.data


def test_healthz(client):
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}


def test_security_headers(client):
    response = client.get("/")
    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert "default-src 'self'" in response.headers["Content-Security-Policy"]


def test_forwarded_proto_respected(client):
    response = client.get("/board", headers={"X-Forwarded-Proto": "https"})
    assert response.status_code == 302
    assert response.headers["Location"] in ("/", "https://localhost/")


def test_static_url_helper(app):
    with app.test_request_context("/"):
        ctx = {}
        for processor in app.template_context_processors[None]:
            ctx.update(processor())
        url = ctx["static_url"]("js/jeopardy.js")
    assert url.startswith("/static/js/jeopardy.js?v=")
