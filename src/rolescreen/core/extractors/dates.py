"""Employment date-range detection and merging."""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping

import pendulum
import structlog

from ..text import SNIPPET_CONTEXT, extract_snippet

MONTHS: Mapping[str, int] = MappingProxyType(
    {
        "january": 1, "jan": 1,
        "february": 2, "feb": 2,
        "march": 3, "mar": 3,
        "april": 4, "apr": 4,
        "may": 5,
        "june": 6, "jun": 6,
        "july": 7, "jul": 7,
        "august": 8, "aug": 8,
        "september": 9, "sep": 9, "sept": 9,
        "october": 10, "oct": 10,
        "november": 11, "nov": 11,
        "december": 12, "dec": 12,
    }
)

MIN_YEAR = 1900
MAX_YEAR = 2100

_DASH = r"\s*[-–—]\s*"
_END = r"(\d{4}|present|current)(?![0-9a-z])"

TEXTUAL_MONTH_RANGE = re.compile(
    r"\b([a-z]{3,9})\s+(\d{4})" + _DASH + r"(?:([a-z]{3,9})\s*)?" + _END,
    re.IGNORECASE,
)
NUMERIC_MONTH_RANGE = re.compile(
    r"(?<!\d)(\d{1,2})/(\d{4})" + _DASH + r"(?:(\d{1,2})\s*/\s*)?" + _END,
    re.IGNORECASE,
)
YEAR_RANGE = re.compile(r"(?<!\d)(\d{4})" + _DASH + _END, re.IGNORECASE)
REFERENCE_DATE = re.compile(r"\d{4}-\d{2}(?:-\d{2}(?:[T ].*)?)?$")

_OPEN_ENDED = frozenset({"present", "current"})


class MalformedDateError(ValueError):
    """A matched fragment that does not describe a usable date range."""


@dataclass(frozen=True, slots=True)
class DateRange:
    """Transient span used to estimate cumulative experience."""

    start: pendulum.Date
    end: pendulum.Date
    snippet: str

    @property
    def months(self) -> int:
        """Calendar months covered, counting both endpoint months."""
        return months_between(self.start, self.end) + 1

    def describe(self) -> str:
        return f"{self.start.isoformat()} to {self.end.isoformat()}"


def months_between(start: pendulum.Date, end: pendulum.Date) -> int:
    return (end.year - start.year) * 12 + (end.month - start.month)


def merge_ranges(ranges: Iterable[DateRange]) -> list[DateRange]:
    """Coalesce overlapping or touching ranges.

    Ranges are ordered by start date; a merged range keeps the earliest start,
    the latest end and the snippet of the first range in its chain.
    """
    ordered = sorted(ranges, key=lambda item: item.start)
    if not ordered:
        return []

    merged: list[DateRange] = []
    current = ordered[0]
    for candidate in ordered[1:]:
        if current.end >= candidate.start:
            if candidate.end > current.end:
                current = DateRange(current.start, candidate.end, current.snippet)
        else:
            merged.append(current)
            current = candidate
    merged.append(current)
    return merged


def total_months(ranges: Iterable[DateRange]) -> int:
    return sum(item.months for item in ranges)


def to_date(value: Any) -> pendulum.Date:
    """Coerce a ``date``/``datetime`` (stdlib or pendulum) to a pendulum ``Date``."""
    return pendulum.date(value.year, value.month, value.day)


def parse_reference_date(value: str) -> pendulum.Date:
    """Parse ``YYYY-MM`` or an ISO 8601 date used to resolve "Present".

    Input must start with a calendar date; a bare time is rejected rather
    than resolved against today.
    """
    text = value.strip()
    if not REFERENCE_DATE.match(text):
        raise ValueError(f"Invalid reference date: {value!r}")
    try:
        if len(text) == 7:
            return pendulum.date(int(text[:4]), int(text[5:7]), 1)
        parsed = pendulum.parse(text)
    except ValueError as exc:
        raise ValueError(f"Invalid reference date: {value!r}") from exc
    return to_date(parsed)


def _year(value: str) -> int:
    year = int(value)
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise MalformedDateError(f"year {year} out of range")
    return year


def _month_from_name(name: str) -> int:
    try:
        return MONTHS[name.lower()]
    except KeyError as exc:
        raise MalformedDateError(f"unknown month {name!r}") from exc


def _month_from_number(value: str) -> int:
    month = int(value)
    if not 1 <= month <= 12:
        raise MalformedDateError(f"month {month} out of range")
    return month


def _is_open_ended(token: str) -> bool:
    return token.lower() in _OPEN_ENDED


def _textual_bounds(match: re.Match[str], as_of: pendulum.Date) -> tuple[pendulum.Date, pendulum.Date]:
    start_month, start_year, end_month, end_token = match.groups()
    start = pendulum.date(_year(start_year), _month_from_name(start_month), 1)
    if _is_open_ended(end_token):
        return start, as_of
    if end_month:
        return start, pendulum.date(_year(end_token), _month_from_name(end_month), 1)
    return start, pendulum.date(_year(end_token), 12, 31)


def _numeric_bounds(match: re.Match[str], as_of: pendulum.Date) -> tuple[pendulum.Date, pendulum.Date]:
    start_month, start_year, end_month, end_token = match.groups()
    start = pendulum.date(_year(start_year), _month_from_number(start_month), 1)
    if _is_open_ended(end_token):
        return start, as_of
    month = _month_from_number(end_month) if end_month else 12
    return start, pendulum.date(_year(end_token), month, 1).end_of("month")


def _year_bounds(match: re.Match[str], as_of: pendulum.Date) -> tuple[pendulum.Date, pendulum.Date]:
    start_year, end_token = match.groups()
    start = pendulum.date(_year(start_year), 1, 1)
    if _is_open_ended(end_token):
        return start, as_of
    return start, pendulum.date(_year(end_token), 12, 31)


BoundsParser = Callable[[re.Match[str], pendulum.Date], tuple[pendulum.Date, pendulum.Date]]

# Most specific first; later families skip spans an earlier one already parsed.
PATTERN_FAMILIES: tuple[tuple[str, re.Pattern[str], BoundsParser], ...] = (
    ("textual_month", TEXTUAL_MONTH_RANGE, _textual_bounds),
    ("numeric_month", NUMERIC_MONTH_RANGE, _numeric_bounds),
    ("year_only", YEAR_RANGE, _year_bounds),
)


class DateRangeParser:
    """Find employment date ranges in case-preserving résumé text."""

    def __init__(self, *, snippet_context: int = SNIPPET_CONTEXT, logger: Any | None = None) -> None:
        self._snippet_context = snippet_context
        self._logger = logger or structlog.get_logger(__name__)

    def find_ranges(self, text: str, as_of: pendulum.Date) -> list[DateRange]:
        """Return every parseable range in ``text``; malformed matches are skipped."""
        if not text:
            return []

        ranges: list[DateRange] = []
        claimed: list[tuple[int, int]] = []

        for family, pattern, parse_bounds in PATTERN_FAMILIES:
            for match in pattern.finditer(text):
                span = match.span()
                if any(span[0] < end and start < span[1] for start, end in claimed):
                    continue
                try:
                    start, end = parse_bounds(match, as_of)
                    if end < start:
                        raise MalformedDateError("range ends before it starts")
                except ValueError as exc:
                    self._logger.debug(
                        "date_range.discarded",
                        family=family,
                        fragment=match.group(0),
                        reason=str(exc),
                    )
                    continue
                claimed.append(span)
                snippet = extract_snippet(
                    text, span[0], span[1] - span[0], self._snippet_context
                )
                ranges.append(DateRange(start=start, end=end, snippet=snippet))

        return ranges
