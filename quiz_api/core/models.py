"""Domain models for the quiz API."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class Question:
    """Multiple-choice question owned by a quiz.

    ``correct_option`` is an index into ``options`` but is never bounds-checked.
    """

    id: str
    text: str
    options: list[str]
    correct_option: int


@dataclass(slots=True)
class Quiz:
    """A titled, ordered set of questions. Immutable once stored."""

    id: str
    title: str
    questions: list[Question]

    def find_question(self, question_id: str) -> Question | None:
        return next((q for q in self.questions if q.id == question_id), None)


@dataclass(slots=True)
class Answer:
    """One user's choice for one question, graded at submission time."""

    question_id: str
    selected_option: int
    is_correct: bool


@dataclass(slots=True)
class Result:
    """Aggregated answers and score of a single user for a single quiz."""

    quiz_id: str
    user_id: str
    score: int = 0
    answers: list[Answer] = field(default_factory=list)


@dataclass(slots=True)
class SubmissionFeedback:
    """Returned to the caller after an answer is recorded."""

    is_correct: bool
    correct_option: int
