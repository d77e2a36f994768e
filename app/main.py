from __future__ import annotations

import logging
import os
from typing import Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import Response

from config.settings import Settings, get_settings
from relay.core.prompt import SYSTEM_PROMPT
from relay.gemini import GeminiClient
from relay.handler import RelayHandler


logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="[%(asctime)s] %(levelname)s - %(message)s",
)
logger = logging.getLogger("portfolio_relay")
# httpx logs full request URLs at INFO
logging.getLogger("httpx").setLevel(logging.WARNING)

RELAY_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def create_app(
    settings: Optional[Settings] = None,
    client: Optional[GeminiClient] = None,
) -> FastAPI:
    settings = settings or get_settings()
    client = client or GeminiClient.from_settings(settings)
    handler = RelayHandler(client=client, system_prompt=SYSTEM_PROMPT)

    logger.info(
        "Config: env=%s model=%s key_set=%s",
        settings.app_env,
        client.model,
        bool(settings.gemini_api_key),
    )
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set; chat requests will fail until it is configured")

    app = FastAPI(title="Portfolio Chat Relay", version="1.0.0")

    @app.api_route("/", methods=RELAY_METHODS)
    async def relay(request: Request) -> Response:
        return await handler.handle(request)

    @app.get("/health")
    def health() -> Dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        log_level="info",
    )
