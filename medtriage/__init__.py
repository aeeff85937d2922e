"""MedTriage: Likert symptom questionnaire and weighted triage scorer."""

from medtriage.answers import AnswerSet, InvalidAnswerError
from medtriage.catalog import DEFAULT_CATALOG, CatalogError, Category, Question, QuestionCatalog
from medtriage.scorer import (
    URGENCY_BLACK,
    URGENCY_GREEN,
    URGENCY_RED,
    URGENCY_YELLOW,
    ScoreBreakdown,
    TriageResult,
    classify,
    compute_score,
    score,
)
from medtriage.session import AssessmentSession, InvalidTransitionError

__version__ = "1.0.0"

__all__ = [
    "AnswerSet",
    "AssessmentSession",
    "CatalogError",
    "Category",
    "DEFAULT_CATALOG",
    "InvalidAnswerError",
    "InvalidTransitionError",
    "Question",
    "QuestionCatalog",
    "ScoreBreakdown",
    "TriageResult",
    "URGENCY_BLACK",
    "URGENCY_GREEN",
    "URGENCY_RED",
    "URGENCY_YELLOW",
    "classify",
    "compute_score",
    "score",
]
