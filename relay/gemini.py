from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from config.settings import Settings
from relay.errors import UpstreamError


logger = logging.getLogger(__name__)

GENERATION_CONFIG: Dict[str, Any] = {
    "temperature": 0.3,
    "topK": 40,
    "topP": 0.9,
    "maxOutputTokens": 500,
}

FALLBACK_REPLY = "I'm having trouble responding right now. Please try again."


class GeminiClient:
    """Thin wrapper around the Gemini ``generateContent`` REST endpoint.

    One request per call, no retries. ``transport`` lets tests swap the
    network for an ``httpx.MockTransport``.
    """

    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        api_base: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._api_key = api_key
        self.model = model
        self.api_base = api_base.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "GeminiClient":
        return cls(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            api_base=settings.gemini_api_base,
            timeout=settings.upstream_timeout,
            transport=transport,
        )

    @property
    def endpoint(self) -> str:
        return f"{self.api_base}/models/{self.model}:generateContent"

    @staticmethod
    def build_payload(system_prompt: str, contents: List[Dict]) -> Dict[str, Any]:
        return {
            "systemInstruction": {"parts": [{"text": system_prompt}]},
            "contents": contents,
            "generationConfig": dict(GENERATION_CONFIG),
        }

    async def generate(self, system_prompt: str, contents: List[Dict]) -> Dict[str, Any]:
        if not self._api_key:
            raise UpstreamError(
                "GEMINI_API_KEY not set. Please configure it in environment or .env"
            )

        payload = self.build_payload(system_prompt, contents)
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            response = await client.post(
                self.endpoint,
                headers={"x-goog-api-key": self._api_key},
                json=payload,
            )

        logger.info(
            "Gemini responded: model=%s status=%s turns=%s",
            self.model,
            response.status_code,
            len(contents),
        )
        if not response.is_success:
            raise UpstreamError(
                "Gemini API request failed", upstream_status=response.status_code
            )
        return response.json()


def extract_reply_text(data: Any) -> str:
    """Return the first candidate's first text part, or the fallback reply."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return FALLBACK_REPLY
    if not isinstance(text, str) or not text:
        return FALLBACK_REPLY
    return text
