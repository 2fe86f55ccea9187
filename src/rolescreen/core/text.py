"""Text normalization shared by extraction and scoring."""

from __future__ import annotations

import re

_NON_ALNUM = re.compile(r"[^a-z0-9]+")

SNIPPET_CONTEXT = 40


def normalize(text: str | None) -> str:
    """Lowercase ``text`` and collapse everything outside ``[a-z0-9]`` to single spaces.

    The result is idempotent: ``normalize(normalize(x)) == normalize(x)``.
    """
    if not text:
        return ""
    return _NON_ALNUM.sub(" ", text.lower()).strip()


def extract_snippet(text: str, start: int, length: int, context: int = SNIPPET_CONTEXT) -> str:
    """Return ``context`` characters either side of ``text[start:start+length]``, trimmed."""
    snippet_start = max(0, start - context)
    snippet_end = min(len(text), start + length + context)
    return text[snippet_start:snippet_end].strip()
