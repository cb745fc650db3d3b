from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import httpx
import pytest


def pytest_configure():
    # Make the package importable from a plain checkout (no `pip install -e .`).
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root))


class FakeSummarizer:
    def __init__(self, summary: str = "fake summary", error: Exception | None = None) -> None:
        self.summary = summary
        self.error = error
        self.calls: list[str] = []

    async def summarize(self, text: str) -> str:
        self.calls.append(text)
        if self.error is not None:
            raise self.error
        return self.summary


@pytest.fixture
def fake_summarizer() -> FakeSummarizer:
    return FakeSummarizer()


@pytest.fixture
def make_upstream() -> Callable:
    """Build an UpstreamClient whose HTTP traffic is served by ``handler``."""
    from workshop_gateway.upstream import UpstreamClient

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> UpstreamClient:
        return UpstreamClient(
            "https://upstream.test/v1/chat/completions",
            "test-key",
            "test/model",
            transport=httpx.MockTransport(handler),
        )

    return _make


@pytest.fixture
def failing_summarizer() -> FakeSummarizer:
    from workshop_gateway.errors import AdapterError

    return FakeSummarizer(error=AdapterError("model exploded"))
