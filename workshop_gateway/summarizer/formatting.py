from __future__ import annotations

import re


_ASTERISK_RE = re.compile(r"\*")
_NUMBERED_RE = re.compile(r"(\d+\.)")
_LABEL_RE = re.compile(r"([A-Z][a-z]+:)")


def format_summary(text: str) -> str:
    """Cosmetic markdown for model output.

    - ``*`` becomes a bullet character
    - numbered markers (``1.``) start a new line
    - ``Label:`` words get their own bold line
    """
    text = _ASTERISK_RE.sub("•", text)
    text = _NUMBERED_RE.sub(r"\n\1", text)
    text = _LABEL_RE.sub(r"\n**\1**\n", text)
    return text
