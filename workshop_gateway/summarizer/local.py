from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Optional

from starlette.concurrency import run_in_threadpool

from ..config import DEFAULT_SUMMARIZER_MODEL
from ..errors import AdapterError
from .formatting import format_summary


logger = logging.getLogger("workshop_gateway.summarizer.local")

PipelineFactory = Callable[[str], Any]


def _transformers_pipeline(model_name: str) -> Any:
    # Heavy import deferred until the first summarization.
    from transformers import pipeline

    return pipeline("summarization", model=model_name)


class LocalPipelineSummarizer:
    """Summarizes with an in-process ``transformers`` pipeline.

    The pipeline is built on first use and reused for the lifetime of this
    object. Construction is lock-guarded since calls run on the threadpool.
    """

    def __init__(
        self,
        model_name: str = DEFAULT_SUMMARIZER_MODEL,
        *,
        min_length: int = 30,
        max_length: int = 100,
        format_markdown: bool = True,
        pipeline_factory: Optional[PipelineFactory] = None,
    ) -> None:
        if min_length > max_length:
            raise ValueError(f"min_length ({min_length}) must be <= max_length ({max_length})")
        self.model_name = model_name
        self.min_length = min_length
        self.max_length = max_length
        self.format_markdown = format_markdown
        self._factory = pipeline_factory or _transformers_pipeline
        self._pipeline: Any = None
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._pipeline is not None

    def load(self) -> Any:
        if self._pipeline is not None:
            return self._pipeline
        with self._lock:
            if self._pipeline is None:
                logger.info("Loading summarization pipeline: %s", self.model_name)
                self._pipeline = self._factory(self.model_name)
        return self._pipeline

    def _summarize_sync(self, text: str) -> str:
        summarizer = self.load()
        result = summarizer(text, max_length=self.max_length, min_length=self.min_length)
        summary = result[0]["summary_text"]
        if self.format_markdown:
            summary = format_summary(summary)
        return summary

    async def summarize(self, text: str) -> str:
        try:
            return await run_in_threadpool(self._summarize_sync, text)
        except Exception as e:
            logger.exception("Local summarization failed")
            raise AdapterError(f"local summarization failed: {e}") from e


__all__ = ["LocalPipelineSummarizer"]
