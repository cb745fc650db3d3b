from __future__ import annotations

from typing import Optional


class GatewayError(Exception):
    """Base class for failures the routes turn into generic 500 responses."""


class UpstreamError(GatewayError):
    def __init__(self, detail: str, status_code: Optional[int] = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is None:
            return self.detail
        return f"upstream returned {self.status_code}: {self.detail}"


class AdapterError(GatewayError):
    """Raised by summarizers; the underlying cause is chained via ``__cause__``."""
