"""In-memory storage for quizzes and their per-user results."""

from __future__ import annotations

from quiz_api.core.models import Quiz, Result


class QuizStore:
    """Keeps quizzes by ID and result lists by quiz ID for the process lifetime.

    The store does no locking of its own; the quiz service serializes access.
    """

    def __init__(self) -> None:
        self._quizzes: dict[str, Quiz] = {}
        self._results: dict[str, list[Result]] = {}

    # Quizzes

    def create_quiz(self, quiz: Quiz) -> Quiz:
        """Store ``quiz`` under its ID, replacing any quiz with the same ID."""
        self._quizzes[quiz.id] = quiz
        return quiz

    def get_quiz(self, quiz_id: str) -> Quiz | None:
        return self._quizzes.get(quiz_id)

    def get_all_quizzes(self) -> list[Quiz]:
        return list(self._quizzes.values())

    # Results

    def save_results(self, quiz_id: str, results: list[Result]) -> None:
        """Replace the whole result list kept for ``quiz_id``."""
        self._results[quiz_id] = results

    def get_results(self, quiz_id: str) -> list[Result] | None:
        return self._results.get(quiz_id)
