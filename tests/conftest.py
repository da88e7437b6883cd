"""
Pytest fixtures for TON inspector tests. TonAPI is replaced by httpx.MockTransport.
"""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from ton_inspector.config import Settings
from ton_inspector.tonapi import TonApiClient

BASE_URL = "https://tonapi.test/v2"
WALLET_ADDRESS = "EQDtFpEwcFAEcRe5mLVh2N6C0x-_hJEM7W61_JLnSF74p4q2"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        tonapi_base_url=BASE_URL,
        tonapi_api_key=None,
        request_timeout_sec=5.0,
        explorer_url_template="https://tonviewer.com/{address}",
        strict_balance=True,
        api_host="127.0.0.1",
        api_port=8000,
        log_level="info",
    )


@pytest.fixture
def make_client(settings) -> Callable[..., TonApiClient]:
    """
    Build a TonApiClient whose transport answers with `payload` and `status_code`,
    or calls `handler(request)` when given. Requests are recorded on `client.requests`.
    """

    def _make(
        payload: Any = None,
        status_code: int = 200,
        handler: Callable[[httpx.Request], httpx.Response] | None = None,
    ) -> TonApiClient:
        seen: list[httpx.Request] = []

        def _handle(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if handler is not None:
                return handler(request)
            return httpx.Response(status_code, json=payload if payload is not None else {})

        http_client = httpx.Client(transport=httpx.MockTransport(_handle))
        client = TonApiClient(settings=settings, http_client=http_client)
        client.requests = seen
        return client

    return _make


@pytest.fixture
def api_client(settings, make_client):
    """
    FastAPI TestClient. Returns (test_client, set_upstream) where set_upstream(payload, status_code)
    or set_upstream(handler=...) controls what TonAPI answers.
    """
    from fastapi.testclient import TestClient

    from ton_inspector.api_server.server import app, get_app_settings, get_tonapi_client

    upstream: dict[str, Any] = {"payload": {}, "status_code": 200, "handler": None}

    def set_upstream(payload: Any = None, status_code: int = 200, handler=None) -> None:
        upstream.update(payload=payload, status_code=status_code, handler=handler)

    def _client_override():
        yield make_client(upstream["payload"], upstream["status_code"], upstream["handler"])

    app.dependency_overrides[get_app_settings] = lambda: settings
    app.dependency_overrides[get_tonapi_client] = _client_override
    try:
        yield TestClient(app), set_upstream
    finally:
        app.dependency_overrides.clear()
