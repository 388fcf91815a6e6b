"""
Shared fixtures: a FastAPI app wired to a fake Vimeo upstream.

The upstream is an httpx.MockTransport, so every outbound request is recorded
in `upstream.requests` and answered by `upstream.respond`.
"""

from __future__ import annotations

from contextlib import ExitStack
from typing import Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from server import create_app
from vimeo_proxy.config import load_settings

BASE_ENV = {
    "VIMEO_TOKEN": "service-token",
    "API_SECRET": "T1",
    "VIMEO_ALBUM_ID": "albumA",
    "API_SECRET_1": "T2",
    "VIMEO_ALBUM_ID_1": "",
    "VIMEO_USER_ID": "user9",
    "VIMEO_PROJECT_ID": "proj7",
}


class FakeUpstream:
    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.respond: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json={"data": [{"uri": "/videos/1"}], "page": 1}
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.respond(request)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "upstream was never called"
        return self.requests[-1]


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def make_client(upstream):
    stack = ExitStack()

    def _make(env: dict | None = None) -> TestClient:
        settings = load_settings(BASE_ENV if env is None else env)
        app = create_app(settings, transport=httpx.MockTransport(upstream.handler))
        return stack.enter_context(TestClient(app))

    with stack:
        yield _make


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()


@pytest.fixture
def base_env() -> dict:
    return dict(BASE_ENV)
