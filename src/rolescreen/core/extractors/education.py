"""Highest education level detection."""

from __future__ import annotations

import re
from dataclasses import dataclass

from ...schemas import EducationLevel
from ..text import SNIPPET_CONTEXT, extract_snippet

_BOUNDARY_START = r"(?<![A-Za-z0-9])"
_BOUNDARY_END = r"(?![A-Za-z0-9])"


def _level_pattern(words: str, abbreviations: str) -> re.Pattern[str]:
    # Full words are case-insensitive; bare abbreviations must be upper case so
    # everyday words such as "as" or "ma" are not read as degrees.
    return re.compile(
        _BOUNDARY_START + rf"(?:(?i:{words})|{abbreviations})" + _BOUNDARY_END
    )


# Highest level first: the first pattern that matches wins.
EDUCATION_PATTERNS: tuple[tuple[EducationLevel, re.Pattern[str]], ...] = (
    (
        EducationLevel.PHD,
        _level_pattern(r"phd|ph\.\s?d\.?|doctorate|doctor(?:al)?", r"DPhil"),
    ),
    (
        EducationLevel.MASTER,
        _level_pattern(r"master(?:'?s)?|m\.s\.|m\.a\.|m\.sc\.", r"MS|MA|MSc|MBA"),
    ),
    (
        EducationLevel.BACHELOR,
        _level_pattern(r"bachelor(?:'?s)?|b\.s\.|b\.a\.|b\.sc\.", r"BS|BA|BSc"),
    ),
    (
        EducationLevel.ASSOCIATE,
        _level_pattern(r"associate(?:'?s)?|a\.s\.|a\.a\.", r"AS|AA"),
    ),
    (
        EducationLevel.HS,
        _level_pattern(r"high\s+school|h\.s\.", r"HS"),
    ),
)


@dataclass(frozen=True, slots=True)
class EducationMatch:
    level: EducationLevel
    token: str
    snippet: str


class EducationDetector:
    """Scan résumé text for the strongest education qualification."""

    def __init__(self, *, snippet_context: int = SNIPPET_CONTEXT) -> None:
        self._snippet_context = snippet_context

    def detect(self, text: str) -> EducationMatch | None:
        if not text:
            return None
        for level, pattern in EDUCATION_PATTERNS:
            match = pattern.search(text)
            if match is None:
                continue
            start, end = match.span()
            return EducationMatch(
                level=level,
                token=match.group(0),
                snippet=extract_snippet(text, start, end - start, self._snippet_context),
            )
        return None
