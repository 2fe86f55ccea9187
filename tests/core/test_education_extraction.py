from __future__ import annotations

import pytest

from rolescreen.core import SignalExtractor
from rolescreen.core.extractors import EducationDetector
from rolescreen.core.signals import NO_EDUCATION
from rolescreen.schemas import Confidence, EducationLevel, SignalType


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Ph.D. in Physics, M.S. in Mathematics, B.S. in Chemistry", EducationLevel.PHD),
        ("DPhil, University of Oxford", EducationLevel.PHD),
        ("Master of Science in Computer Science; Bachelor of Arts", EducationLevel.MASTER),
        ("MBA from a state university", EducationLevel.MASTER),
        ("B.S. Computer Science, 2012", EducationLevel.BACHELOR),
        ("Bachelor's degree in Economics", EducationLevel.BACHELOR),
        ("Associate degree in Nursing", EducationLevel.ASSOCIATE),
        ("High School Diploma, Lincoln High", EducationLevel.HS),
    ],
)
def test_detector_reports_highest_level(text, expected):
    match = EducationDetector().detect(text)

    assert match is not None
    assert match.level == expected
    assert match.token in match.snippet


def test_highest_level_wins_regardless_of_position():
    text = "Bachelor of Science (2015); currently completing a Master's program"

    match = EducationDetector().detect(text)

    assert match.level == EducationLevel.MASTER


@pytest.mark.parametrize(
    "text",
    [
        "I worked as a developer on ma and pa projects",
        "Served jobs as ms office trainer",
        "",
    ],
)
def test_lowercase_abbreviations_are_not_degrees(text):
    assert EducationDetector().detect(text) is None


def test_extractor_emits_unknown_when_nothing_detected():
    signal = SignalExtractor().extract_education("Self-taught engineer with open source work")

    assert signal.type == SignalType.EDUCATION_LEVEL_ESTIMATE
    assert signal.value == EducationLevel.UNKNOWN.value
    assert signal.confidence == Confidence.LOW
    assert signal.evidence_snippet == NO_EDUCATION


def test_extractor_emits_high_confidence_level_with_snippet():
    signal = SignalExtractor().extract_education("Education: B.S. Computer Science, State University")

    assert signal.value == EducationLevel.BACHELOR.value
    assert signal.confidence == Confidence.HIGH
    assert "B.S." in signal.evidence_snippet
