from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from .config import UpstreamSettings
from .errors import UpstreamError


logger = logging.getLogger("workshop_gateway.upstream")


class UpstreamClient:
    """Single-shot client for an OpenAI-compatible chat-completions endpoint.

    One HTTP call per request, no retries. ``transport`` lets tests swap in an
    ``httpx.MockTransport``.
    """

    def __init__(
        self,
        api_url: str,
        api_key: str,
        model: str,
        *,
        timeout_seconds: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_url = api_url
        self.api_key = api_key
        self.model = model
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    @classmethod
    def from_settings(
        cls, cfg: UpstreamSettings, *, transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "UpstreamClient":
        return cls(cfg.api_url, cfg.api_key, cfg.model, timeout_seconds=cfg.timeout_seconds, transport=transport)

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    async def chat_completion(self, messages: Any) -> dict[str, Any]:
        """POST ``messages`` with the configured model and return the decoded JSON body."""
        payload = {"model": self.model, "messages": messages}
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout_seconds) as client:
                response = await client.post(self.api_url, headers=self._headers(), json=payload)
        except httpx.HTTPError as e:
            raise UpstreamError(f"error contacting upstream: {e}") from e

        if not response.is_success:
            raise UpstreamError(response.text, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(f"upstream returned non-JSON body: {response.text[:200]}") from e


__all__ = ["UpstreamClient"]
