from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any, Optional

from fastapi import APIRouter, Body, FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.cors import CORSMiddleware

from workshop_gateway import __version__
from workshop_gateway.config import Settings, load_settings
from workshop_gateway.rendering import render_markdown
from workshop_gateway.summarizer import LocalPipelineSummarizer, Summarizer, build_summarizer
from workshop_gateway.upstream import UpstreamClient
from workshop_gateway.utils.logging import setup_logging


logger = logging.getLogger("workshop_gateway.api")


class TextRequest(BaseModel):
    text: Optional[str] = None


class SummarizeResponse(BaseModel):
    original_text: str
    summary: str


class RenderResponse(BaseModel):
    html: str
    rendered: bool


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _build_router() -> APIRouter:
    router = APIRouter(prefix="/api")

    @router.get("/")
    async def root() -> dict[str, str]:
        return {"message": "Workshop Gateway API"}

    @router.post("/chat")
    async def chat(request: Request, payload: Any = Body(None)) -> Any:
        # Any JSON body is accepted; `messages` is relayed as-is and the upstream owns its validation.
        messages = payload.get("messages") if isinstance(payload, dict) else None
        upstream: UpstreamClient = request.app.state.upstream
        try:
            return await upstream.chat_completion(messages)
        except Exception as e:
            logger.error("Upstream chat error: %s", e)
            return _error(500, "Failed to process request")

    @router.post("/cookbook-example", response_model=SummarizeResponse)
    async def cookbook_example(req: TextRequest, request: Request) -> Any:
        if not req.text:
            return _error(400, "Text is required")

        summarizer: Summarizer = request.app.state.summarizer
        try:
            summary = await summarizer.summarize(req.text)
        except Exception:
            logger.exception("Cookbook example error")
            return _error(500, "Failed to process text")

        return SummarizeResponse(original_text=req.text, summary=summary)

    @router.post("/render-markdown", response_model=RenderResponse)
    async def render(req: TextRequest) -> Any:
        if not req.text:
            return _error(400, "Text is required")
        res = render_markdown(req.text)
        return RenderResponse(html=res.html, rendered=res.rendered)

    return router


def _mount_static_fallback(app: FastAPI, static_dir: str) -> None:
    """Serve the bundled frontend for GETs that no route matched.

    Hooked on 404s instead of a catch-all route so unmatched non-GET requests
    keep their plain 404.
    """
    static_root = Path(static_dir).resolve()
    index_file = static_root / "index.html"
    if not index_file.is_file():
        logger.warning("Static dir %s has no index.html; frontend fallback disabled", static_root)
        return

    @app.exception_handler(StarletteHTTPException)
    async def _spa_fallback(request: Request, exc: StarletteHTTPException) -> Any:
        if exc.status_code != 404 or request.method != "GET":
            return await http_exception_handler(request, exc)

        full_path = request.url.path.lstrip("/")
        if full_path:
            candidate = (static_root / full_path).resolve()
            if candidate.is_file() and candidate.is_relative_to(static_root):
                return FileResponse(candidate)
        return FileResponse(index_file)


def _start_warmup(summarizer: Summarizer) -> None:
    if not isinstance(summarizer, LocalPipelineSummarizer):
        return

    def _do() -> None:
        try:
            summarizer.load()
            logger.info("Summarizer warmup complete")
        except Exception as e:
            logger.exception("Summarizer warmup failed: %s", e)

    t = threading.Thread(target=_do, daemon=True)
    t.start()


def create_app(
    settings: Optional[Settings] = None,
    *,
    summarizer: Optional[Summarizer] = None,
    upstream: Optional[UpstreamClient] = None,
) -> FastAPI:
    """Build the gateway app. Collaborators are created from settings unless injected."""
    settings = settings or load_settings()
    upstream = upstream or UpstreamClient.from_settings(settings.upstream)
    summarizer = summarizer or build_summarizer(settings, upstream)

    app = FastAPI(title="Workshop Gateway", version=__version__)
    app.state.settings = settings
    app.state.upstream = upstream
    app.state.summarizer = summarizer

    @app.exception_handler(RequestValidationError)
    async def _invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("Invalid request body for %s: %s", request.url.path, exc.errors())
        return _error(400, "Invalid request body")

    @app.on_event("startup")
    def _startup() -> None:
        if not settings.upstream.api_key:
            logger.warning("OPENROUTER_API_KEY is not set; upstream calls will be rejected")
        if settings.summarizer.warmup:
            _start_warmup(summarizer)

    app.include_router(_build_router())

    if settings.server.static_dir:
        _mount_static_fallback(app, settings.server.static_dir)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return app


# Built at import time so `uvicorn workshop_gateway.api.app:app` works.
settings = load_settings()
setup_logging(Path(settings.logging.log_dir), settings.logging.level)
app: FastAPI = create_app(settings)
