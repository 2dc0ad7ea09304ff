"""Business logic for creating quizzes, grading answers and reading results."""

from __future__ import annotations

from dataclasses import replace
import logging
from threading import Lock
from typing import Any, Mapping, Sequence
from uuid import uuid4

from quiz_api.constants.api_constants import (
    QUESTION_NOT_FOUND_MESSAGE,
    QUIZ_NOT_FOUND_MESSAGE,
)
from quiz_api.core.errors import QuizNotFoundError
from quiz_api.core.models import Answer, Question, Quiz, Result, SubmissionFeedback
from quiz_api.core.schemas import CreateQuizInput, SubmitAnswerInput, validate_input
from quiz_api.core.services.quiz_store import QuizStore
from quiz_api.core.services.scoreboard import record_answer

logger = logging.getLogger(__name__)


def _snapshot(result: Result) -> Result:
    return replace(result, answers=[replace(answer) for answer in result.answers])


def _new_id() -> str:
    return str(uuid4())


class QuizService:
    """Facade over the store and scoreboard used by the HTTP layer.

    Every public method validates its inputs before touching the store and
    raises ``QuizValidationError`` or ``QuizNotFoundError`` instead of
    returning partial data. Store access is serialized by a single lock so
    concurrent submissions for the same quiz cannot lose updates.
    """

    def __init__(self, store: QuizStore) -> None:
        self._lock = Lock()
        self._store = store

    # --- Quizzes ---

    def create_quiz(self, title: str, questions: Sequence[Mapping[str, Any]]) -> Quiz:
        """Validate a new quiz, assign IDs to it and its questions, and store it."""
        payload = validate_input(CreateQuizInput, {"title": title, "questions": questions})
        quiz = Quiz(
            id=_new_id(),
            title=payload.title,
            questions=[
                Question(
                    id=_new_id(),
                    text=question.text,
                    options=list(question.options),
                    correct_option=question.correct_option,
                )
                for question in payload.questions
            ],
        )
        with self._lock:
            stored = self._store.create_quiz(quiz)
        logger.info("Created quiz %s with %d question(s)", stored.id, len(stored.questions))
        return stored

    def get_quiz_by_id(self, quiz_id: str) -> Quiz:
        """Return the full quiz, correct options included."""
        with self._lock:
            return self._fetch_quiz_or_raise(quiz_id)

    def list_quizzes(self) -> list[Quiz]:
        with self._lock:
            return self._store.get_all_quizzes()

    # --- Answers & results ---

    def submit_answer(
        self,
        quiz_id: str,
        user_id: str,
        question_id: str,
        selected_option: int,
    ) -> SubmissionFeedback:
        """Grade one answer and fold it into the user's result for the quiz.

        ``selected_option`` is only compared with the question's correct
        option; it is not checked against the number of options.
        """
        payload = validate_input(
            SubmitAnswerInput,
            {
                "quizId": quiz_id,
                "userId": user_id,
                "questionId": question_id,
                "selectedOption": selected_option,
            },
        )
        with self._lock:
            quiz = self._fetch_quiz_or_raise(payload.quiz_id)
            question = self._fetch_question_or_raise(quiz, payload.question_id)

            is_correct = payload.selected_option == question.correct_option
            results = self._store.get_results(quiz.id) or []
            result = record_answer(
                results,
                quiz_id=quiz.id,
                user_id=payload.user_id,
                answer=Answer(
                    question_id=question.id,
                    selected_option=payload.selected_option,
                    is_correct=is_correct,
                ),
            )
            self._store.save_results(quiz.id, results)

        logger.info(
            "User %s answered question %s of quiz %s (correct=%s, score=%d)",
            result.user_id,
            question.id,
            quiz.id,
            is_correct,
            result.score,
        )
        return SubmissionFeedback(is_correct=is_correct, correct_option=question.correct_option)

    def get_results(self, quiz_id: str) -> list[Result]:
        """Return a snapshot of every user's result, empty if nobody answered yet.

        The results are copies, so later submissions do not change them.
        """
        with self._lock:
            quiz = self._fetch_quiz_or_raise(quiz_id)
            return [_snapshot(result) for result in self._store.get_results(quiz.id) or []]

    # --- Lookups ---

    def _fetch_quiz_or_raise(self, quiz_id: str) -> Quiz:
        quiz = self._store.get_quiz(quiz_id)
        if quiz is None:
            logger.debug("Quiz %s not found", quiz_id)
            raise QuizNotFoundError(QUIZ_NOT_FOUND_MESSAGE)
        return quiz

    @staticmethod
    def _fetch_question_or_raise(quiz: Quiz, question_id: str) -> Question:
        question = quiz.find_question(question_id)
        if question is None:
            logger.debug("Question %s not found in quiz %s", question_id, quiz.id)
            raise QuizNotFoundError(QUESTION_NOT_FOUND_MESSAGE)
        return question
