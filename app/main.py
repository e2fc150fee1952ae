from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

import httpx
import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config.settings import Settings, get_settings
from relay.models import ChatRequest, RelayFailure
from relay.service import relay_chat


logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s - %(message)s")
logger = logging.getLogger("senior_concierge")


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_upstream_client(request: Request) -> httpx.Client:
    return request.app.state.http_client


def create_app(
    settings: Settings,
    transport: Optional[httpx.BaseTransport] = None,
) -> FastAPI:
    """Build the relay app around an explicit ``Settings``.

    ``transport`` replaces the network for the outbound httpx client.
    """
    http_client = httpx.Client(transport=transport)

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        logger.info("Server running on port %s", settings.port)
        try:
            yield
        finally:
            http_client.close()

    app = FastAPI(title="Senior Concierge Chat Relay", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.http_client = http_client

    # CORS: allow the local widget during development
    if settings.is_development:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error(_request: Request, exc: RequestValidationError) -> JSONResponse:
        detail = "; ".join(
            f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg')}"
            for err in exc.errors()
        )
        logger.warning("Rejected chat request: %s", detail)
        return JSONResponse(status_code=422, content={"error": detail or "Invalid request"})

    @app.get("/api/health")
    def health() -> Dict[str, str]:
        return {"status": "OK"}

    @app.post("/api/chat")
    def chat(
        req: ChatRequest,
        app_settings: Settings = Depends(get_app_settings),
        client: httpx.Client = Depends(get_upstream_client),
    ) -> Any:
        result = relay_chat(app_settings, req, client)
        if isinstance(result, RelayFailure):
            return JSONResponse(status_code=500, content={"error": result.message})
        return {"text": result.text}

    return app


app = create_app(get_settings())


def main() -> None:
    settings = get_settings()
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
