from __future__ import annotations

from typing import Protocol


class Summarizer(Protocol):
    async def summarize(self, text: str) -> str:
        """Return a summary of ``text`` or raise ``AdapterError``."""
        ...
