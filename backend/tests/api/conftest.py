"""API test fixtures — FastAPI test client with a fake Gemini upstream.

Invariants:
    - Every test gets fresh Settings (no .env, fake key, fixed model)
    - get_upstream_transport overridden with httpx.MockTransport: no network IO
    - FakeUpstream records every outbound request for assertions
"""

import json

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from app.config import Settings, get_settings
from app.infrastructure.gemini_client import get_upstream_transport
from app.main import app

GENERATED_TEXT = (
    "Para modificar el artículo en el siguiente sentido:\n"
    "a) Reemplázase, en el inciso primero, la expresión \"no podrá exceder\" "
    "por \"corresponderá a\"."
)


def candidate_body(text: str) -> dict:
    """Minimal generateContent success body."""
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


class FakeUpstream:
    """Configurable stand-in for generateContent."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: object = candidate_body(GENERATED_TEXT)
        self.error: Exception | None = None

    def respond_with_text(self, text: str) -> None:
        self.status_code = 200
        self.body = candidate_body(text)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, (bytes, str)):
            return httpx.Response(self.status_code, content=self.body)
        return httpx.Response(self.status_code, json=self.body)

    def sent_payload(self, index: int = -1) -> dict:
        return json.loads(self.requests[index].content)

    def sent_prompt(self, index: int = -1) -> str:
        return self.sent_payload(index)["contents"][0]["parts"][0]["text"]


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        gemini_api_key="test-key",
        gemini_model="gemini-test-model",
    )


@pytest.fixture
async def client(settings, upstream):
    """FastAPI test client with settings and upstream transport overridden."""
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_upstream_transport] = (
        lambda: httpx.MockTransport(upstream.handler)
    )

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
