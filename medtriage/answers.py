"""
Answer Set Module
=================
Collects the patient's Likert answers for one assessment run.

Each catalog question is either answered with an integer in [1, 5] or
absent. There is no zero sentinel: a question the patient skipped is
simply not in the set.
"""

from __future__ import annotations

import logging
from typing import Iterator, Mapping, Optional

from medtriage.catalog import DEFAULT_CATALOG, LIKERT_MAX, LIKERT_MIN, QuestionCatalog

logger = logging.getLogger(__name__)


class InvalidAnswerError(ValueError):
    """Raised when an answer is outside the Likert scale or targets an unknown question."""


def validate_answer(question_id: str, value: object, catalog: QuestionCatalog) -> int:
    """Check a single answer against the catalog and the 1-5 scale.

    Args:
        question_id: Catalog question id.
        value: Proposed answer value.
        catalog: Catalog the answer belongs to.

    Returns:
        The value as an int.

    Raises:
        InvalidAnswerError: If the id is unknown or the value is not an
            integer in [LIKERT_MIN, LIKERT_MAX].
    """
    if question_id not in catalog:
        raise InvalidAnswerError(f"Unknown question id '{question_id}'")
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidAnswerError(
            f"Answer to '{question_id}' must be an integer, got {type(value).__name__}"
        )
    if not LIKERT_MIN <= value <= LIKERT_MAX:
        raise InvalidAnswerError(
            f"Answer to '{question_id}' must be between {LIKERT_MIN} and {LIKERT_MAX}, got {value}"
        )
    return value


class AnswerSet(Mapping[str, int]):
    """Validated mapping of question id to answer value.

    Behaves as a read-only ``Mapping`` for the scorer; changes go through
    ``record`` and ``clear`` so every stored value has been validated.

    Attributes:
        catalog: Catalog the answers are checked against.
    """

    def __init__(
        self,
        answers: Optional[Mapping[str, object]] = None,
        catalog: QuestionCatalog = DEFAULT_CATALOG,
    ) -> None:
        self.catalog = catalog
        self._values: dict[str, int] = {}
        for question_id, value in (answers or {}).items():
            self.record(question_id, value)

    def record(self, question_id: str, value: object) -> None:
        """Store or overwrite the answer to a question.

        Raises:
            InvalidAnswerError: If the answer fails validation.
        """
        self._values[question_id] = validate_answer(question_id, value, self.catalog)
        logger.debug("Recorded answer %s=%s", question_id, value)

    def clear(self, question_id: str) -> None:
        """Mark a question as unanswered again."""
        self._values.pop(question_id, None)

    def is_answered(self, question_id: str) -> bool:
        return question_id in self._values

    def unanswered(self) -> list[str]:
        """Ids of catalog questions that have no answer, in catalog order."""
        return [q.id for q in self.catalog.all_questions() if q.id not in self._values]

    def __getitem__(self, question_id: str) -> int:
        return self._values[question_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"AnswerSet({self._values!r})"
