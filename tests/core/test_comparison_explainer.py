from __future__ import annotations

import pytest

from rolescreen.core import BreakdownMismatchError, ComparisonExplainer, ExplainerConfig, ScoreAggregator
from rolescreen.core.explanation import EQUAL_SCORES, MINIMAL_DIFFERENCES
from rolescreen.schemas import CriterionScoreResult, CriterionType

CRITERIA = (
    ("skills", "Skills", CriterionType.KEYWORD_SKILL, 50),
    ("experience", "Experience", CriterionType.EXPERIENCE_YEARS, 30),
    ("education", "Education", CriterionType.EDUCATION_LEVEL, 20),
)


def build_breakdown(*scores: float):
    results = [
        CriterionScoreResult(
            criterion_id=criterion_id,
            criterion_name=name,
            criterion_type=criterion_type,
            score=score,
            weight=weight,
        )
        for (criterion_id, name, criterion_type, weight), score in zip(CRITERIA, scores)
    ]
    return ScoreAggregator().aggregate(results)


def test_explains_top_two_differences_for_leader():
    left = build_breakdown(1.0, 0.5, 1.0)
    right = build_breakdown(0.0, 0.5, 0.5)

    explanation = ComparisonExplainer().explain(left, right)

    assert explanation == (
        "Resume A scored higher due to: "
        "Skills (A: 1.00, B: 0.00, delta: 1.00); "
        "Education (A: 1.00, B: 0.50, delta: 0.50)"
    )


def test_swapping_arguments_flips_leader_and_sign():
    left = build_breakdown(1.0, 0.5, 1.0)
    right = build_breakdown(0.0, 0.5, 0.5)

    explanation = ComparisonExplainer().explain(right, left)

    assert explanation == (
        "Resume B scored higher due to: "
        "Skills (A: 0.00, B: 1.00, delta: -1.00); "
        "Education (A: 0.50, B: 1.00, delta: -0.50)"
    )


def test_equal_totals_short_circuit():
    left = build_breakdown(1.0, 0.0, 0.5)
    right = build_breakdown(1.0, 0.0, 0.5)

    assert ComparisonExplainer().explain(left, right) == EQUAL_SCORES


def test_insignificant_deltas_report_minimal_differences():
    left = build_breakdown(0.5005, 0.5, 0.5)
    right = build_breakdown(0.5, 0.5, 0.5)

    explanation = ComparisonExplainer().explain(left, right)

    assert explanation == "Resume A scored higher due to: " + MINIMAL_DIFFERENCES


def test_top_n_is_configurable():
    left = build_breakdown(1.0, 0.5, 1.0)
    right = build_breakdown(0.0, 0.5, 0.5)

    explanation = ComparisonExplainer(config=ExplainerConfig(top_n=1)).explain(left, right)

    assert explanation == "Resume A scored higher due to: Skills (A: 1.00, B: 0.00, delta: 1.00)"


def test_deltas_sorted_by_magnitude():
    deltas = ComparisonExplainer().deltas(build_breakdown(0.2, 1.0, 0.6), build_breakdown(0.5, 0.0, 0.6))

    assert [item.name for item in deltas] == ["Experience", "Skills", "Education"]
    assert deltas[1].delta == pytest.approx(-0.3)


def test_mismatched_breakdowns_are_rejected():
    left = build_breakdown(1.0, 0.5, 1.0)
    shorter = build_breakdown(1.0, 0.5)

    with pytest.raises(BreakdownMismatchError):
        ComparisonExplainer().explain(left, shorter)

    reordered = ScoreAggregator().aggregate(list(reversed(left.criterion_scores)))
    with pytest.raises(BreakdownMismatchError):
        ComparisonExplainer().explain(left, reordered)
