from __future__ import annotations

import logging
from dataclasses import dataclass

import markdown


logger = logging.getLogger("workshop_gateway.rendering")


@dataclass(frozen=True)
class RenderResult:
    html: str
    # False when conversion failed and ``html`` holds the original text.
    rendered: bool


def render_markdown(text: str) -> RenderResult:
    """Convert markdown to HTML, falling back to the raw text on any error."""
    try:
        return RenderResult(html=markdown.markdown(text), rendered=True)
    except Exception as e:
        logger.error("Error rendering markdown: %s", e)
        return RenderResult(html=text, rendered=False)
