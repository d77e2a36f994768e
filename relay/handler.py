from __future__ import annotations

import json
import logging
from typing import Any, Dict

from fastapi import Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from relay.core.history import MAX_HISTORY_TURNS, to_gemini_contents
from relay.errors import InvalidRequestError, MethodNotAllowedError
from relay.gemini import GeminiClient, extract_reply_text
from relay.models import ChatRequest, ChatResponse, ErrorResponse


logger = logging.getLogger(__name__)

ALLOW_ORIGIN = {"Access-Control-Allow-Origin": "*"}
PREFLIGHT_HEADERS = {
    **ALLOW_ORIGIN,
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


class RelayHandler:
    """Forwards a chat message plus recent history to Gemini.

    Every failure is turned into a response here; nothing propagates to the
    web framework.
    """

    def __init__(self, client: GeminiClient, system_prompt: str) -> None:
        self._client = client
        self._system_prompt = system_prompt

    async def handle(self, request: Request) -> Response:
        method = request.method.upper()
        if method == "OPTIONS":
            return self.preflight()
        if method != "POST":
            return self.reject(MethodNotAllowedError(method))
        return await self.relay(request)

    def preflight(self) -> Response:
        return Response(status_code=204, headers=PREFLIGHT_HEADERS)

    def reject(self, exc: MethodNotAllowedError) -> Response:
        logger.info("Rejected request: %s", exc)
        # No CORS header on this path, matching the deployed worker
        return PlainTextResponse("Method not allowed", status_code=exc.status_code)

    async def relay(self, request: Request) -> Response:
        try:
            payload = await request.json()
            req = self._parse(payload)

            logger.info(
                "Incoming chat: history_turns=%s message_len=%s",
                len(req.history),
                len(req.message),
            )
            contents = to_gemini_contents(req.history, req.message)
            data = await self._client.generate(self._system_prompt, contents)
            reply = extract_reply_text(data)

            logger.info("Relayed reply: %s chars", len(reply))
            return JSONResponse(
                ChatResponse(response=reply).model_dump(), headers=ALLOW_ORIGIN
            )
        except InvalidRequestError as exc:
            return JSONResponse(
                {"error": str(exc)}, status_code=exc.status_code, headers=ALLOW_ORIGIN
            )
        except Exception as exc:
            # Callers only ever see the uniform failure body; the cause stays in the logs
            logger.exception("Chat relay failed: %s", exc)
            body = ErrorResponse(error="Failed to get response", fallback=True)
            return JSONResponse(body.model_dump(), status_code=500, headers=ALLOW_ORIGIN)

    @staticmethod
    def _parse(payload: Any) -> ChatRequest:
        message = payload.get("message") if isinstance(payload, dict) else None
        if not message:
            raise InvalidRequestError("Message is required")
        data: Dict[str, Any] = dict(payload)
        if isinstance(message, (int, float)):
            # Numbers and booleans are relayed as their JSON text
            data["message"] = json.dumps(message)
        history = data.get("history")
        if history is None:
            data["history"] = []
        elif isinstance(history, list):
            # Turns outside the window are never looked at
            data["history"] = history[-MAX_HISTORY_TURNS:]
        return ChatRequest.model_validate(data)
