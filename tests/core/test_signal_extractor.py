from __future__ import annotations

import pendulum

from rolescreen.core import ExtractorConfig, SignalExtractor
from rolescreen.schemas import Confidence, SignalType


def build_extractor(**config) -> SignalExtractor:
    return SignalExtractor(
        config=ExtractorConfig(**config),
        now_provider=lambda: pendulum.datetime(2023, 1, 1),
    )


def test_extract_orders_experience_before_education():
    text = "Platform Engineer, Jan 2020 - Present\nB.S. Computer Science"

    signals = build_extractor().extract(text)

    assert [signal.type for signal in signals] == [
        SignalType.EXPERIENCE_YEARS_ESTIMATE,
        SignalType.DATE_RANGE,
        SignalType.EDUCATION_LEVEL_ESTIMATE,
    ]
    assert signals[-1].value == "BACHELOR"


def test_extract_is_deterministic():
    text = "Analyst 2016 - 2018; Consultant Mar 2019 - Present. MBA."
    extractor = build_extractor()

    first = [signal.model_dump() for signal in extractor.extract(text)]
    second = [signal.model_dump() for signal in extractor.extract(text)]

    assert first == second


def test_extract_handles_missing_text():
    signals = build_extractor().extract(None)

    assert [signal.value for signal in signals] == ["0", "UNKNOWN"]


def test_keyword_matches_carry_original_text_snippets():
    text = "Senior Java developer building Spring-Boot services."

    signals = build_extractor().extract_keyword_matches(
        text, ["java", "Spring Boot", "Kubernetes", "++"]
    )

    assert [signal.value for signal in signals] == ["java", "Spring Boot"]
    assert all(signal.type == SignalType.KEYWORD_MATCH for signal in signals)
    assert all(signal.confidence == Confidence.HIGH for signal in signals)
    assert "Java" in signals[0].evidence_snippet
    assert "Spring-Boot" in signals[1].evidence_snippet


def test_snippet_context_limits_evidence_window():
    text = "x" * 30 + "  Jan 2020 - Dec 2020  " + "y" * 30

    signals = build_extractor(snippet_context=2).extract_experience(text)

    date_range = next(s for s in signals if s.type == SignalType.DATE_RANGE)
    assert date_range.evidence_snippet == "Jan 2020 - Dec 2020"


def test_keyword_snippet_stays_in_original_text_when_lowercasing_expands():
    text = "Lived in İstanbul, expert in Java and Spring"

    signals = build_extractor().extract_keyword_matches(text, ["Java", "Spring"])

    assert [signal.value for signal in signals] == ["Java", "Spring"]
    assert "İstanbul" in signals[0].evidence_snippet
    assert "Java and Spring" in signals[0].evidence_snippet
    assert signals[1].evidence_snippet.endswith("Java and Spring")
