"""Normalized substring keyword matching with original-text evidence."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

from ..text import SNIPPET_CONTEXT, extract_snippet, normalize


@dataclass(frozen=True, slots=True)
class KeywordHit:
    keyword: str
    snippet: str


class KeywordMatcher:
    """Match keywords against a résumé after normalizing both sides."""

    def __init__(self, *, snippet_context: int = SNIPPET_CONTEXT) -> None:
        self._snippet_context = snippet_context

    def match(
        self,
        text: str,
        keywords: Sequence[str],
        *,
        normalized_text: str | None = None,
    ) -> list[KeywordHit]:
        """Return one hit per matched keyword, in keyword order.

        ``normalized_text`` may be supplied when the caller already holds
        ``normalize(text)``.
        """
        haystack = normalize(text) if normalized_text is None else normalized_text
        hits: list[KeywordHit] = []
        for keyword in keywords:
            needle = normalize(keyword)
            if not needle:
                continue
            index = haystack.find(needle)
            if index < 0:
                continue
            hits.append(KeywordHit(keyword=keyword, snippet=self._snippet(text, needle, haystack, index)))
        return hits

    def _snippet(self, text: str, needle: str, haystack: str, index: int) -> str:
        located = _locate(text, needle)
        if located is not None:
            start, end = located
            return extract_snippet(text, start, end - start, self._snippet_context)
        # A multi-character lowercase split the match; use normalized offsets.
        return extract_snippet(haystack, index, len(needle), self._snippet_context)


def _locate(text: str, needle: str) -> tuple[int, int] | None:
    """Find the first span of ``text`` whose normalized form contains ``needle``."""
    tokens = needle.split(" ")
    pattern = r"[^a-z0-9]+".join(re.escape(token) for token in tokens)
    # Lowercase per character so offsets still index the original text.
    lowered = "".join(char.lower()[:1] for char in text)
    match = re.search(pattern, lowered)
    if match is None:
        return None
    return match.span()
