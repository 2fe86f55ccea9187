"""Pattern-based extractors feeding the signal extractor."""

from .dates import DateRange, DateRangeParser, merge_ranges, months_between, total_months
from .education import EducationDetector, EducationMatch
from .keywords import KeywordHit, KeywordMatcher

__all__ = [
    "DateRange",
    "DateRangeParser",
    "EducationDetector",
    "EducationMatch",
    "KeywordHit",
    "KeywordMatcher",
    "merge_ranges",
    "months_between",
    "total_months",
]
