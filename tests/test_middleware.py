"""Interceptor chain: request logging, CORS and preflight handling."""

import logging

import pytest
from fastapi import FastAPI, Request, Response
from fastapi.testclient import TestClient

from users_api.app.core.config import Settings
from users_api.app.core.middleware import CorsInterceptor, ErrorInterceptor, InterceptorChain, LoggingInterceptor
from users_api.app.core.store import UserStore
from users_api.app.main import create_app

CORS_HEADERS = {
    "access-control-allow-origin": "*",
    "access-control-allow-methods": "GET, POST, PUT, DELETE, OPTIONS",
    "access-control-allow-headers": "Content-Type",
}


class CountingStore(UserStore):
    """Seeded store that records every read."""

    def __init__(self):
        super().__init__()
        self.reads = 0

    def list_users(self):
        self.reads += 1
        return super().list_users()

    def get_user(self, user_id):
        self.reads += 1
        return super().get_user(user_id)


def assert_cors(response):
    for name, value in CORS_HEADERS.items():
        assert response.headers[name] == value


@pytest.mark.parametrize("path", ["/health", "/api/users", "/api/users/1", "/api/users/abc"])
def test_cors_headers_on_every_response(client, path):
    assert_cors(client.get(path))


def test_cors_headers_on_error_envelope(client):
    response = client.delete("/api/users/404")
    assert response.status_code == 404
    assert_cors(response)


@pytest.mark.parametrize("path", ["/health", "/api/users", "/api/users/1"])
def test_preflight_short_circuits(path):
    store = CountingStore()
    store.add_user("Juan Pérez", "juan@example.com")
    store.reads = 0
    app = create_app(settings=Settings(), store=store)
    with TestClient(app) as client:
        response = client.options(path)
    assert response.status_code == 200
    assert response.content == b""
    assert_cors(response)
    assert store.reads == 0


def test_preflight_does_not_mutate(client, store):
    response = client.options("/api/users/1", headers={"Access-Control-Request-Method": "DELETE"})
    assert response.status_code == 200
    assert 1 in store


def test_configured_origin_is_used():
    app = create_app(settings=Settings(cors_allow_origin="https://example.org"))
    with TestClient(app) as client:
        response = client.get("/health")
    assert response.headers["access-control-allow-origin"] == "https://example.org"


def test_requests_are_logged_with_duration(client, caplog):
    caplog.set_level(logging.INFO, logger="users_api.app.core.middleware")
    client.get("/api/users/1")
    messages = [record.getMessage() for record in caplog.records if record.name == "users_api.app.core.middleware"]
    assert messages[0] == "Started GET /api/users/1"
    assert messages[1].startswith("Completed GET /api/users/1 in ")


def _build_app(interceptors):
    app = FastAPI()
    app.add_middleware(InterceptorChain, interceptors=interceptors)

    @app.get("/ping")
    async def ping():
        return {"pong": True}

    return app


def test_interceptors_run_in_list_order():
    calls = []

    def recorder(name):
        async def interceptor(request: Request, call_next):
            calls.append(f"{name}:before")
            response = await call_next(request)
            calls.append(f"{name}:after")
            return response

        return interceptor

    with TestClient(_build_app([recorder("outer"), recorder("inner")])) as client:
        assert client.get("/ping").json() == {"pong": True}
    assert calls == ["outer:before", "inner:before", "inner:after", "outer:after"]


def test_short_circuit_skips_later_interceptors():
    calls = []

    async def blocker(request: Request, call_next):
        return Response(status_code=418)

    async def never(request: Request, call_next):
        calls.append("never")
        return await call_next(request)

    with TestClient(_build_app([blocker, never])) as client:
        assert client.get("/ping").status_code == 418
    assert calls == []


def test_logging_interceptor_times_failures(caplog):
    caplog.set_level(logging.INFO, logger="test.requests")
    app = FastAPI()
    app.add_middleware(InterceptorChain, interceptors=[LoggingInterceptor(logging.getLogger("test.requests"))])

    @app.get("/boom")
    async def boom():
        raise RuntimeError("boom")

    with TestClient(app, raise_server_exceptions=False) as client:
        assert client.get("/boom").status_code == 500
    messages = [record.getMessage() for record in caplog.records if record.name == "test.requests"]
    assert messages[0] == "Started GET /boom"
    assert messages[-1].startswith("Completed GET /boom in ")


def test_cors_interceptor_custom_lists():
    interceptor = CorsInterceptor(allow_origin="*", allow_methods=["GET"], allow_headers=["X-A", "X-B"])
    assert interceptor.headers["Access-Control-Allow-Methods"] == "GET"
    assert interceptor.headers["Access-Control-Allow-Headers"] == "X-A, X-B"


def test_error_interceptor_answers_for_failing_route():
    app = FastAPI()
    app.add_middleware(
        InterceptorChain,
        interceptors=[CorsInterceptor(allow_origin="https://example.org"), ErrorInterceptor()],
    )

    @app.get("/boom")
    async def boom():
        raise ValueError("boom")

    with TestClient(app) as client:
        response = client.get("/boom")
    assert response.status_code == 500
    assert response.json() == {"status": "error", "message": "Internal server error"}
    assert response.headers["access-control-allow-origin"] == "https://example.org"
