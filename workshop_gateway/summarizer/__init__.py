"""Summarizer adapters.

Both variants expose ``async summarize(text) -> str`` and raise
``AdapterError`` on failure; ``build_summarizer`` picks one from settings.
"""

from __future__ import annotations

from ..config import Settings
from ..upstream import UpstreamClient
from .base import Summarizer
from .formatting import format_summary
from .local import LocalPipelineSummarizer
from .remote import RemoteSummarizer


def build_summarizer(settings: Settings, upstream: UpstreamClient) -> Summarizer:
    cfg = settings.summarizer
    if cfg.backend == "remote":
        return RemoteSummarizer(upstream)
    return LocalPipelineSummarizer(
        cfg.model_name,
        min_length=cfg.min_length,
        max_length=cfg.max_length,
        format_markdown=cfg.format_markdown,
    )


__all__ = [
    "LocalPipelineSummarizer",
    "RemoteSummarizer",
    "Summarizer",
    "build_summarizer",
    "format_summary",
]
