"""
Scorer Module
=============
Weighted-sum triage classifier. Aggregates the Likert answers into a
percentage of the maximum possible score and buckets that percentage
into one of four urgency tiers.

The scorer is a pure function of (answers, catalog). It never raises:
answers that are missing or not numeric contribute nothing, and
unanswered questions still count toward the maximum, so skipping
questions lowers the percentage.
"""

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from typing import Mapping

from medtriage.catalog import DEFAULT_CATALOG, QuestionCatalog

logger = logging.getLogger(__name__)

# Urgency tiers
URGENCY_RED = "red"
URGENCY_BLACK = "black"
URGENCY_YELLOW = "yellow"
URGENCY_GREEN = "green"

# Presentation-only icon tags, resolved to glyphs in medtriage.guidance
ICON_AMBULANCE = "ambulance"
ICON_ALERT_TRIANGLE = "alert_triangle"
ICON_CLOCK = "clock"
ICON_ALERT_CIRCLE = "alert_circle"


@dataclass(frozen=True)
class TriageTier:
    threshold: float
    urgency: str
    message: str
    icon_key: str


# Evaluated top-down; the first tier whose threshold is <= percentage wins.
TRIAGE_TIERS: tuple[TriageTier, ...] = (
    TriageTier(
        70,
        URGENCY_RED,
        "Seek immediate medical attention or call emergency services.",
        ICON_AMBULANCE,
    ),
    TriageTier(
        50,
        URGENCY_BLACK,
        "Visit urgent care or schedule a same-day appointment with your doctor.",
        ICON_ALERT_TRIANGLE,
    ),
    TriageTier(
        30,
        URGENCY_YELLOW,
        "Schedule an appointment with your healthcare provider within the next few days.",
        ICON_CLOCK,
    ),
    TriageTier(
        0,
        URGENCY_GREEN,
        "Monitor your symptoms and schedule a routine check-up if needed.",
        ICON_ALERT_CIRCLE,
    ),
)

URGENCY_LEVELS: tuple[str, ...] = tuple(tier.urgency for tier in TRIAGE_TIERS)


@dataclass(frozen=True)
class ScoreBreakdown:
    """Raw arithmetic behind a triage decision."""

    total_score: float
    max_possible_score: int
    percentage: float


@dataclass(frozen=True)
class TriageResult:
    """Outcome of one assessment run.

    Attributes:
        urgency: One of ``URGENCY_LEVELS``.
        message: Recommendation shown to the patient.
        icon_key: Presentation tag, see ``medtriage.guidance.ICON_GLYPHS``.
        score: The breakdown the urgency was derived from.
    """

    urgency: str
    message: str
    icon_key: str
    score: ScoreBreakdown

    @property
    def percentage(self) -> float:
        return self.score.percentage

    def to_dict(self) -> dict:
        return {
            "urgency": self.urgency,
            "message": self.message,
            "icon_key": self.icon_key,
            "total_score": self.score.total_score,
            "max_possible_score": self.score.max_possible_score,
            "percentage": self.score.percentage,
        }


def _answer_points(question_id: str, value: object) -> float:
    """Numeric value of an answer, or 0 when it cannot be scored."""
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        logger.warning(
            "Ignoring non-numeric answer for '%s' (%s).", question_id, type(value).__name__
        )
        return 0
    return value


def compute_score(
    answers: Mapping[str, object],
    catalog: QuestionCatalog = DEFAULT_CATALOG,
) -> ScoreBreakdown:
    """Sum the weighted answers and express them as a percentage.

    Args:
        answers: Question id to answer value. Ids missing from the mapping
            are unanswered; ids not in the catalog are ignored.
        catalog: Questionnaire to score against.

    Returns:
        ScoreBreakdown with total, maximum and percentage.
    """
    total = 0
    for question in catalog.all_questions():
        if question.id in answers:
            total += _answer_points(question.id, answers[question.id]) * question.weight

    max_score = catalog.max_possible_score
    # Multiply first so integer totals landing exactly on a threshold stay exact.
    percentage = (total * 100) / max_score
    return ScoreBreakdown(total_score=total, max_possible_score=max_score, percentage=percentage)


def classify(percentage: float) -> TriageTier:
    """Map a percentage onto its urgency tier.

    Thresholds are closed below: exactly 70.0 is red, exactly 50.0 is
    black, exactly 30.0 is yellow. Anything under 30 (including negative
    values from out-of-range raw input) is green.
    """
    for tier in TRIAGE_TIERS:
        if percentage >= tier.threshold:
            return tier
    return TRIAGE_TIERS[-1]


def score(
    answers: Mapping[str, object],
    catalog: QuestionCatalog = DEFAULT_CATALOG,
) -> TriageResult:
    """Score a completed questionnaire and return the triage recommendation.

    Args:
        answers: An ``AnswerSet`` or any mapping of question id to value.
            Plain mappings are not range-checked; values are scored as given.
        catalog: Questionnaire to score against.

    Returns:
        TriageResult for the matched tier.
    """
    breakdown = compute_score(answers, catalog)
    tier = classify(breakdown.percentage)
    logger.debug(
        "Scored %s/%s (%.2f%%) -> %s",
        breakdown.total_score,
        breakdown.max_possible_score,
        breakdown.percentage,
        tier.urgency,
    )
    return TriageResult(
        urgency=tier.urgency,
        message=tier.message,
        icon_key=tier.icon_key,
        score=breakdown,
    )
