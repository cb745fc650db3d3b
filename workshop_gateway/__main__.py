from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from workshop_gateway.config import Settings, load_settings
from workshop_gateway.summarizer import build_summarizer
from workshop_gateway.upstream import UpstreamClient
from workshop_gateway.utils.logging import setup_logging


logger = logging.getLogger("workshop_gateway.cli")

SMOKE_PROMPT = "Hello! Who are you?"
SMOKE_TEXT = (
    "Meta AI is developing advanced artificial intelligence technologies. "
    "Our research spans multiple areas including natural language processing, "
    "computer vision, and reinforcement learning. We aim to build AI systems "
    "that can understand, learn, and interact with humans in natural ways."
)


def _serve(settings: Settings) -> int:
    import uvicorn

    from workshop_gateway.api.app import create_app

    app = create_app(settings)
    logger.info("Server running on %s:%d", settings.server.host, settings.server.port)
    uvicorn.run(app, host=settings.server.host, port=settings.server.port, log_config=None)
    return 0


async def _smoke(settings: Settings) -> int:
    upstream = UpstreamClient.from_settings(settings.upstream)
    failures = 0

    print("Testing upstream chat API...")
    try:
        data = await upstream.chat_completion([{"role": "user", "content": SMOKE_PROMPT}])
        print("API Response:", data["choices"][0]["message"]["content"])
        print("Upstream chat test successful!")
    except Exception as e:
        failures += 1
        print("API Test Error:", e)
        print("Make sure OPENROUTER_API_KEY is set in the environment or .env file")

    print(f"Testing summarization ({settings.summarizer.backend})...")
    try:
        summary = await build_summarizer(settings, upstream).summarize(SMOKE_TEXT)
        print("Original Text:", SMOKE_TEXT)
        print("Summary:", summary)
        print("Summarization test successful!")
    except Exception as e:
        failures += 1
        print("Summarization Test Error:", e)

    return 1 if failures else 0


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="workshop_gateway", description="LLM chat/summarization gateway")
    ap.add_argument("--config", default=None, help="Path to a YAML config file")
    sub = ap.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the HTTP server")
    serve.add_argument("--port", type=int, default=None)
    serve.add_argument("--bind-all", action="store_true", help="Listen on 0.0.0.0")

    sub.add_parser("smoke", help="Call the upstream API and the summarizer once")

    args = ap.parse_args(argv)
    settings = load_settings(args.config)
    setup_logging(Path(settings.logging.log_dir), settings.logging.level)

    if args.command == "serve":
        if args.port is not None:
            settings.server.port = args.port
        if args.bind_all:
            settings.server.bind_all = True
        return _serve(settings)
    return asyncio.run(_smoke(settings))


if __name__ == "__main__":
    sys.exit(main())
