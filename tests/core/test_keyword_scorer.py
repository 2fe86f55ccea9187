from __future__ import annotations

import pytest

from rolescreen.core import build_criterion
from rolescreen.core.context import ScoringContext
from rolescreen.core.scorers import KeywordCoverageScorer, KeywordScorerConfig
from rolescreen.schemas import CriterionType, ResumeDocument

SPRING_RESUME = "I have extensive Java experience with Spring framework"


def build_keyword_criterion(keywords, *, match_mode="ANY", criterion_type="KEYWORD_SKILL", weight=50):
    key = "requiredKeywords" if criterion_type == "KEYWORD_SKILL" else "keywords"
    return build_criterion(
        {
            "id": "skills",
            "name": "Backend skills",
            "weight": weight,
            "type": criterion_type,
            "config": {key: keywords, "matchMode": match_mode},
        }
    )


def build_context(text: str) -> ScoringContext:
    return ScoringContext(ResumeDocument(resume_id="R-1", text=text))


def test_partial_coverage_is_fraction_of_keywords():
    criterion = build_keyword_criterion(["Java", "Spring", "Hibernate"])

    result = KeywordCoverageScorer().score(criterion, build_context(SPRING_RESUME))

    assert result.score == pytest.approx(2 / 3)
    assert result.criterion_id == "skills"
    assert result.criterion_name == "Backend skills"
    assert result.criterion_type == CriterionType.KEYWORD_SKILL
    assert len(result.evidence) == 2
    assert result.evidence[0].startswith("Matched keyword 'Java': ")
    assert "Java experience" in result.evidence[0]
    assert result.evidence[1].startswith("Matched keyword 'Spring': ")


def test_all_mode_is_scored_as_fractional_coverage():
    criterion = build_keyword_criterion(["Java", "Spring", "Hibernate"], match_mode="ALL")

    result = KeywordCoverageScorer().score(criterion, build_context(SPRING_RESUME))

    assert result.score == pytest.approx(2 / 3)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Python, Django and PostgreSQL", 1.0),
        ("Rust and Haskell", 0.0),
        ("", 0.0),
    ],
)
def test_coverage_bounds(text, expected):
    criterion = build_keyword_criterion(["python", "Django", "PostgreSQL"])

    result = KeywordCoverageScorer().score(criterion, build_context(text))

    assert result.score == pytest.approx(expected)
    assert 0.0 <= result.score <= 1.0


def test_matching_ignores_case_and_punctuation():
    criterion = build_keyword_criterion(["spring boot", "CI/CD"])

    result = KeywordCoverageScorer().score(
        criterion, build_context("Shipped SPRING-BOOT apps with ci cd pipelines")
    )

    assert result.score == pytest.approx(1.0)


def test_keyword_normalizing_to_empty_never_matches():
    criterion = build_keyword_criterion(["C++", "Java"])

    result = KeywordCoverageScorer().score(criterion, build_context("C++ and Java"))

    # "C++" normalizes to "c", which is contained in the text.
    assert result.score == pytest.approx(1.0)

    symbols = build_keyword_criterion(["++", "Java"])
    result = KeywordCoverageScorer().score(symbols, build_context("C++ and Java"))
    assert result.score == pytest.approx(0.5)


def test_custom_keywords_use_the_same_coverage():
    criterion = build_keyword_criterion(
        ["ISO 27001", "SOC 2"], criterion_type="CUSTOM_KEYWORDS"
    )

    result = KeywordCoverageScorer().score(
        criterion, build_context("Led the ISO-27001 certification effort")
    )

    assert result.criterion_type == CriterionType.CUSTOM_KEYWORDS
    assert result.score == pytest.approx(0.5)


def test_evidence_is_capped():
    criterion = build_keyword_criterion(["a1", "b2", "c3", "d4", "e5"])
    context = build_context("a1 b2 c3 d4 e5")

    default = KeywordCoverageScorer().score(criterion, context)
    narrow = KeywordCoverageScorer(config=KeywordScorerConfig(max_evidence=1)).score(criterion, context)

    assert default.score == pytest.approx(1.0)
    assert len(default.evidence) == 3
    assert len(narrow.evidence) == 1
