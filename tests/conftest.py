"""Shared pytest fixtures for relay tests."""

import json
from typing import Any, Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from app import create_app
from core.config import Config


class RecordingLogger:
    """In-memory RequestLogger."""

    def __init__(self):
        self.relayed: list[dict[str, Any]] = []
        self.errors: list[tuple[str, int, str]] = []

    def log_relay(self, model, body, credential, *, path):
        self.relayed.append({"model": model, "body": body, "credential": credential, "path": path})

    def log_error(self, route, status, message):
        self.errors.append((route, status, message))


class FakeUpstream:
    """Simulated messages API; records every request it receives."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json={"id": "msg_1", "content": []}
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_body(self) -> dict[str, Any]:
        return json.loads(self.last_request.content)


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def logger():
    return RecordingLogger()


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def app(config, logger, upstream):
    return create_app(config, logger, transport=httpx.MockTransport(upstream.handler))


@pytest.fixture
def client(app):
    # Context manager runs the lifespan that builds the upstream client
    with TestClient(app) as client:
        yield client
