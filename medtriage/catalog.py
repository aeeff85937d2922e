"""
Question Catalog Module
=======================
Static symptom questionnaire. Questions are grouped into ordered
categories, each question carrying an integer weight that the scorer
multiplies with the patient's 1-5 Likert answer.

The catalog is built once at import time and never mutated. Callers that
need a different questionnaire build their own ``QuestionCatalog`` and
pass it to the scorer instead of patching the default one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Sequence

logger = logging.getLogger(__name__)

# Likert scale bounds shared by the catalog, the answer set and the UI
LIKERT_MIN = 1
LIKERT_MAX = 5


class CatalogError(ValueError):
    """Raised when a catalog definition is malformed."""


@dataclass(frozen=True)
class Question:
    """A single weighted symptom question.

    Attributes:
        id: Identifier, unique within a catalog.
        text: Prompt shown to the patient.
        weight: Positive multiplier applied to the answer value.
    """

    id: str
    text: str
    weight: int

    @property
    def max_points(self) -> int:
        """Points contributed when answered at the top of the scale."""
        return self.weight * LIKERT_MAX


@dataclass(frozen=True)
class Category:
    """A named, ordered group of questions."""

    name: str
    questions: tuple[Question, ...]

    @property
    def title(self) -> str:
        """Display title, e.g. ``urgent_symptoms`` -> ``Urgent Symptoms``."""
        return self.name.replace("_", " ").title()


class QuestionCatalog:
    """Ordered, read-only mapping of category name to questions.

    Args:
        categories: Mapping of category name to its ordered questions.
            Insertion order defines the order categories are presented in.

    Raises:
        CatalogError: If a category is empty, a weight is not a positive
            integer, or a question id appears more than once.
    """

    def __init__(self, categories: Mapping[str, Sequence[Question]]) -> None:
        built: dict[str, Category] = {}
        by_id: dict[str, Question] = {}

        for name, questions in categories.items():
            if not questions:
                raise CatalogError(f"Category '{name}' has no questions")
            for q in questions:
                if isinstance(q.weight, bool) or not isinstance(q.weight, int) or q.weight <= 0:
                    raise CatalogError(
                        f"Question '{q.id}' must have a positive integer weight, got {q.weight!r}"
                    )
                if q.id in by_id:
                    raise CatalogError(f"Duplicate question id '{q.id}'")
                by_id[q.id] = q
            built[name] = Category(name=name, questions=tuple(questions))

        if not built:
            raise CatalogError("Catalog must contain at least one category")

        self._categories = MappingProxyType(built)
        self._by_id = MappingProxyType(by_id)
        self._max_possible_score = sum(q.max_points for q in by_id.values())

    # ------------------------------------------------------------------
    # Enumeration
    # ------------------------------------------------------------------

    @property
    def category_names(self) -> tuple[str, ...]:
        return tuple(self._categories)

    @property
    def categories(self) -> tuple[Category, ...]:
        return tuple(self._categories.values())

    def category(self, name: str) -> Category:
        return self._categories[name]

    def questions(self, category: str) -> tuple[Question, ...]:
        """Return the ordered questions of a category.

        Raises:
            KeyError: If the category does not exist.
        """
        return self._categories[category].questions

    def all_questions(self) -> Iterator[Question]:
        """Yield every question, category by category, in catalog order."""
        for cat in self._categories.values():
            yield from cat.questions

    def get(self, question_id: str) -> Optional[Question]:
        return self._by_id.get(question_id)

    def __contains__(self, question_id: object) -> bool:
        return question_id in self._by_id

    def __len__(self) -> int:
        return len(self._by_id)

    @property
    def max_possible_score(self) -> int:
        """Sum of ``weight * 5`` over all questions, answered or not."""
        return self._max_possible_score

    def to_dict(self) -> dict:
        """Serialize the catalog for the HTTP API."""
        return {
            "categories": [
                {
                    "name": cat.name,
                    "title": cat.title,
                    "questions": [
                        {"id": q.id, "text": q.text, "weight": q.weight}
                        for q in cat.questions
                    ],
                }
                for cat in self._categories.values()
            ],
            "scale": {"min": LIKERT_MIN, "max": LIKERT_MAX},
            "max_possible_score": self._max_possible_score,
        }


# ---------------------------------------------------------------------------
# Default questionnaire (max possible score 110)
# ---------------------------------------------------------------------------
DEFAULT_CATALOG = QuestionCatalog(
    {
        "urgent_symptoms": (
            Question("chest_pain", "Are you experiencing chest pain or pressure?", 5),
            Question("breathing", "Do you have severe difficulty breathing?", 5),
            Question("consciousness", "Have you experienced any loss of consciousness?", 5),
        ),
        "general_symptoms": (
            Question("fever", "Do you have a fever above 38°C (100.4°F)?", 3),
            Question("fatigue", "Are you experiencing unusual fatigue or weakness?", 2),
            Question("appetite", "Have you noticed significant changes in appetite?", 2),
        ),
    }
)
