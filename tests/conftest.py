"""Shared fixtures: settings, a fake Anthropic API and a relay test client."""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, List

import httpx
import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from config.settings import Settings
from relay.models import Business


class FakeUpstream:
    """Records every outbound request and answers with a canned response."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json={"content": [{"type": "text", "text": "Happy to help!"}]}
        )

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def last_payload(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)

    def respond_with(self, status_code: int = 200, **kwargs: Any) -> None:
        self.handler = lambda request: httpx.Response(status_code, **kwargs)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)


@pytest.fixture
def settings() -> Settings:
    return Settings(app_env="test", anthropic_api_key="test-key", request_timeout=5.0)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def make_client(upstream) -> Callable[[Settings], TestClient]:
    def _make(s: Settings) -> TestClient:
        return TestClient(create_app(s, transport=httpx.MockTransport(upstream)))

    return _make


@pytest.fixture
def client(make_client, settings) -> TestClient:
    return make_client(settings)


@pytest.fixture
def sample_businesses() -> List[Business]:
    return [
        Business(
            name="Buckhead Senior Rides",
            description="Rides to appointments",
            phone="404-555-0187",
            email="rides@example.com",
        ),
        Business(
            name="Midtown Handyman Services",
            description="Grab bars and small repairs",
            phone="404-555-0119",
            email="service@example.com",
        ),
    ]
