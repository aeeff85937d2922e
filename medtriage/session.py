"""
Assessment Session Module
=========================
Drives one run of the questionnaire through its phases:

    home -> collecting(0) -> collecting(1) -> ... -> scored

Answers are gathered category by category. Advancing past the last
category scores the run exactly once and hands the result back to the
caller. A new run always starts from the first category with an empty
answer set.
"""

from __future__ import annotations

import logging
from typing import Optional

from medtriage.answers import AnswerSet, InvalidAnswerError
from medtriage.catalog import DEFAULT_CATALOG, Category, QuestionCatalog
from medtriage.scorer import TriageResult, score

logger = logging.getLogger(__name__)

PHASE_HOME = "home"
PHASE_COLLECTING = "collecting"
PHASE_SCORED = "scored"


class InvalidTransitionError(RuntimeError):
    """Raised when an operation is not allowed in the session's current phase."""


class AssessmentSession:
    """State machine for a single questionnaire run.

    Attributes:
        catalog: Questionnaire being answered.
        phase: One of PHASE_HOME, PHASE_COLLECTING, PHASE_SCORED.
        category_index: Index of the category on screen while collecting.
        answers: Answers recorded in the current run.
    """

    def __init__(self, catalog: QuestionCatalog = DEFAULT_CATALOG) -> None:
        self.catalog = catalog
        self.phase: str = PHASE_HOME
        self.category_index: int = 0
        self.answers = AnswerSet(catalog=catalog)
        self._result: Optional[TriageResult] = None

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def category_count(self) -> int:
        return len(self.catalog.category_names)

    @property
    def current_category(self) -> Category:
        """Category on screen.

        Raises:
            InvalidTransitionError: If the session is not collecting.
        """
        self._require(PHASE_COLLECTING, "view a category")
        return self.catalog.categories[self.category_index]

    @property
    def is_last_category(self) -> bool:
        return self.category_index == self.category_count - 1

    @property
    def progress(self) -> float:
        """Fraction of sections reached, (index + 1) / count while collecting."""
        if self.phase == PHASE_HOME:
            return 0.0
        if self.phase == PHASE_SCORED:
            return 1.0
        return (self.category_index + 1) / self.category_count

    @property
    def result(self) -> Optional[TriageResult]:
        """The triage result, only available once the run is scored."""
        return self._result

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Begin a fresh run at the first category, discarding any previous one."""
        self.phase = PHASE_COLLECTING
        self.category_index = 0
        self.answers = AnswerSet(catalog=self.catalog)
        self._result = None
        logger.info("Assessment started (%d sections).", self.category_count)

    def record_answer(self, question_id: str, value: int) -> None:
        """Record an answer for a question in the current category.

        Raises:
            InvalidTransitionError: If the session is not collecting.
            InvalidAnswerError: If the question is not in the current
                category or the value is off the scale.
        """
        category = self.current_category
        if question_id not in {q.id for q in category.questions}:
            raise InvalidAnswerError(
                f"Question '{question_id}' is not part of section '{category.name}'"
            )
        self.answers.record(question_id, value)

    def advance(self) -> Optional[TriageResult]:
        """Move to the next section, or score the run after the last one.

        Returns:
            The TriageResult when this call completed the run, else None.

        Raises:
            InvalidTransitionError: If the session is not collecting.
        """
        self._require(PHASE_COLLECTING, "advance")

        if not self.is_last_category:
            self.category_index += 1
            logger.info(
                "Moved to section %d of %d.", self.category_index + 1, self.category_count
            )
            return None

        self._result = score(self.answers, self.catalog)
        self.phase = PHASE_SCORED
        logger.info(
            "Assessment scored: %s (%.1f%%, %d unanswered).",
            self._result.urgency,
            self._result.percentage,
            len(self.answers.unanswered()),
        )
        return self._result

    def back(self) -> None:
        """Return to the previous section, keeping recorded answers.

        Raises:
            InvalidTransitionError: If not collecting or already on the first section.
        """
        self._require(PHASE_COLLECTING, "go back")
        if self.category_index == 0:
            raise InvalidTransitionError("Already on the first section")
        self.category_index -= 1
        logger.info(
            "Back to section %d of %d.", self.category_index + 1, self.category_count
        )

    def reset(self) -> None:
        """Return to the home phase with nothing recorded."""
        self.phase = PHASE_HOME
        self.category_index = 0
        self.answers = AnswerSet(catalog=self.catalog)
        self._result = None
        logger.info("Assessment reset to home.")

    def _require(self, phase: str, action: str) -> None:
        if self.phase != phase:
            raise InvalidTransitionError(f"Cannot {action} while session is '{self.phase}'")
