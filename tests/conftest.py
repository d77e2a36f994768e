from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from config.settings import Settings
from relay.gemini import GeminiClient


def gemini_reply(text: str) -> Dict[str, Any]:
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


class FakeGemini:
    """Records outbound requests and answers with a canned status and body."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.body: Any = gemini_reply("Hello from Gemini")
        self.error: Optional[Callable[[httpx.Request], Exception]] = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error(request)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_payload(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        app_env="test",
        gemini_api_key="test-key",
        gemini_model="gemini-1.5-flash",
        gemini_api_base="https://gemini.test/v1beta",
        upstream_timeout=5.0,
        log_level="INFO",
    )


@pytest.fixture
def fake_gemini() -> FakeGemini:
    return FakeGemini()


@pytest.fixture
def gemini_client(settings: Settings, fake_gemini: FakeGemini) -> GeminiClient:
    return GeminiClient.from_settings(settings, transport=httpx.MockTransport(fake_gemini))


@pytest.fixture
def client(settings: Settings, gemini_client: GeminiClient) -> TestClient:
    return TestClient(create_app(settings=settings, client=gemini_client))
