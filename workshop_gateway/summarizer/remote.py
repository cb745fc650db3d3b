from __future__ import annotations

import logging

from ..errors import AdapterError
from ..upstream import UpstreamClient


logger = logging.getLogger("workshop_gateway.summarizer.remote")

PROMPT_TEMPLATE = "Summarize the following text concisely:\n\n{text}"


def build_messages(text: str) -> list[dict[str, str]]:
    return [{"role": "user", "content": PROMPT_TEMPLATE.format(text=text)}]


class RemoteSummarizer:
    """Asks the upstream chat model for a summary and returns its reply verbatim."""

    def __init__(self, upstream: UpstreamClient) -> None:
        self.upstream = upstream

    async def summarize(self, text: str) -> str:
        try:
            result = await self.upstream.chat_completion(build_messages(text))
            return result["choices"][0]["message"]["content"]
        except Exception as e:
            logger.error("Remote summarization failed: %s", e)
            raise AdapterError(f"remote summarization failed: {e}") from e


__all__ = ["RemoteSummarizer", "build_messages", "PROMPT_TEMPLATE"]
